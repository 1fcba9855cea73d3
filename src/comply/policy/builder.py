"""
Policy set builder.

``define_policies`` accepts three shapes and always hands back something with
``.policy(name)`` once every varying input has been supplied:

- a list of policies gives a PolicySet;
- ``define(context)`` returning a list gives ``build(context) -> PolicySet``;
- ``define(context)`` returning ``keyed(*keys) -> list`` gives
  ``build(context) -> (*keys) -> PolicySet``, with a fresh set per call.
"""

from collections import abc
from typing import Any, Callable, Iterable, Union

from ..errors import InvalidPolicyError
from .model import Policy
from .registry import PolicySet

PolicyList = Iterable[Policy]
PolicyListFactory = Callable[..., PolicyList]
PolicySetFactory = Callable[..., PolicySet]


def _keyed_policy_sets(factory: PolicyListFactory) -> PolicySetFactory:
    def build(*args: Any, **kwargs: Any) -> PolicySet:
        return PolicySet(factory(*args, **kwargs))

    return build


def define_policies(
    policies_or_define: Union[PolicyList, Callable[..., Union[PolicyList, PolicyListFactory]]],
) -> Union[PolicySet, Callable[..., Union[PolicySet, PolicySetFactory]]]:
    """
    Define a policy set.

    Args:
        policies_or_define: Policies, or a function taking the context and
            returning policies or a further policies-producing function

    Returns:
        A PolicySet for a list, otherwise a function of the context

    Raises:
        InvalidPolicyError: If the input is neither iterable nor callable
    """
    if callable(policies_or_define):
        define = policies_or_define

        def build(*context: Any) -> Union[PolicySet, PolicySetFactory]:
            policies_or_factory = define(*context)

            if callable(policies_or_factory):
                return _keyed_policy_sets(policies_or_factory)

            return PolicySet(policies_or_factory)

        return build

    if isinstance(policies_or_define, (str, bytes)) or not isinstance(policies_or_define, abc.Iterable):
        raise InvalidPolicyError(
            f"define_policies expects policies or a function, got {type(policies_or_define).__name__}"
        )

    return PolicySet(policies_or_define)
