"""
Policy set: an immutable, name-indexed collection of policies.
"""

from collections import abc
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List

from ..errors import InvalidPolicyError, PolicyNotFoundError
from ..logging_config import get_logger
from .model import Policy

logger = get_logger(__name__)


class PolicySet:
    """
    Name-indexed lookup over a finite list of policies.

    A later policy with an already registered name replaces the earlier one.
    """

    __slots__ = ('_registry',)

    def __init__(self, policies: Iterable[Policy]):
        """
        Initialize policy set.

        Args:
            policies: Policies to register, in precedence order

        Raises:
            InvalidPolicyError: If policies is not iterable or an item is not a Policy
        """
        if isinstance(policies, (str, bytes)) or not isinstance(policies, abc.Iterable):
            raise InvalidPolicyError(
                f"Policy sets are built from an iterable of policies, got {type(policies).__name__}"
            )

        registry: Dict[str, Policy] = {}

        for policy in policies:
            if not isinstance(policy, Policy):
                raise InvalidPolicyError(
                    f"Policy sets only hold Policy objects, got {type(policy).__name__}"
                )
            if policy.name in registry:
                logger.debug("policy_overwritten", policy=policy.name)
            registry[policy.name] = policy

        object.__setattr__(self, '_registry', MappingProxyType(registry))

    def __setattr__(self, key, value):
        raise AttributeError("PolicySet is immutable")

    def __delattr__(self, key):
        raise AttributeError("PolicySet is immutable")

    def policy(self, name: str) -> Policy:
        """
        Retrieve a policy by name.

        Args:
            name: Policy name

        Returns:
            Policy object

        Raises:
            PolicyNotFoundError: If no policy is registered under name
        """
        try:
            return self._registry[name]
        except KeyError:
            raise PolicyNotFoundError(name) from None

    def names(self) -> List[str]:
        """List registered policy names."""
        return list(self._registry)

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __iter__(self) -> Iterator[Policy]:
        return iter(self._registry.values())

    def __len__(self) -> int:
        return len(self._registry)

    def __repr__(self) -> str:
        return f"PolicySet({self.names()!r})"
