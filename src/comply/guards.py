"""
Evaluation guards.

``check`` and ``assert_`` accept either a built policy or an inline
``name, condition`` pair:

    check(policy, arg)
    check("has items", lambda items: len(items) > 0, arg)

Inline policies use the default error factory and are never registered.
"""

from typing import Any, Dict, Iterable, NamedTuple, Tuple

from .errors import InvalidPolicyError
from .logging_config import get_logger
from .policy.model import Policy, define_policy
from .utils.sentinel import MISSING

logger = get_logger(__name__)


class PolicyCall(NamedTuple):
    """A policy and the argument it is evaluated against."""
    policy: Policy
    arg: Any = MISSING


def resolve_call(target: Any, args: Tuple[Any, ...]) -> PolicyCall:
    """
    Resolve a guard call shape into a PolicyCall.

    Args:
        target: A Policy, or the name of an inline policy
        args: ``(arg?)`` after a Policy, ``(condition, arg?)`` after a name

    Returns:
        PolicyCall

    Raises:
        TypeError: If the call shape is not recognised
    """
    if isinstance(target, Policy):
        if len(args) > 1:
            raise TypeError(f"Expected at most one argument for policy {target.name!r}, got {len(args)}")
        return PolicyCall(target, *args)

    if isinstance(target, str):
        if not 1 <= len(args) <= 2:
            raise TypeError(
                f"Inline policy {target!r} expects a condition and an optional argument"
            )
        condition, *rest = args
        return PolicyCall(define_policy(target, condition), *rest)

    raise TypeError(f"Expected a Policy or a policy name, got {type(target).__name__}")


def check(target: Any, *args: Any) -> bool:
    """
    Evaluate a policy without raising on rejection.

    Args:
        target: A Policy, or the name of an inline policy
        *args: ``arg?`` for a Policy, ``condition, arg?`` for a name

    Returns:
        True if the policy is met
    """
    policy, arg = resolve_call(target, args)
    return policy.check(arg)


def assert_(target: Any, *args: Any) -> None:
    """
    Evaluate a policy and raise its error on rejection.

    Args:
        target: A Policy, or the name of an inline policy
        *args: ``arg?`` for a Policy, ``condition, arg?`` for a name

    Raises:
        The exception built by the policy's error factory
    """
    policy, arg = resolve_call(target, args)

    if policy.check(arg):
        return

    logger.debug("policy_rejected", policy=policy.name)
    raise policy.reject(arg)


def check_all_settle(entries: Iterable[Tuple[Any, ...]]) -> Dict[str, bool]:
    """
    Evaluate every policy and collect the results.

    Unlike chained checks, a rejection does not stop evaluation of the
    remaining entries.

    Args:
        entries: Tuples of ``(name, condition[, arg])`` or ``(policy[, arg])``

    Returns:
        Mapping of policy name to result, in input order
    """
    results: Dict[str, bool] = {}

    for entry in entries:
        if not isinstance(entry, tuple) or not entry:
            raise InvalidPolicyError(f"Expected a non-empty tuple, got {entry!r}")

        policy, arg = resolve_call(entry[0], entry[1:])
        results[policy.name] = policy.check(arg)

    logger.debug(
        "policies_settled",
        total=len(results),
        rejected=[name for name, met in results.items() if not met],
    )
    return results
