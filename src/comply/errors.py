"""
Domain-specific exceptions for comply.
All exceptions are explicit and carry meaningful context.
"""

from typing import Any

from .config import POLICY_REJECTION_PREFIX
from .utils.sentinel import MISSING


class ComplyError(Exception):
    """Base exception for all comply errors."""
    pass


class PolicyError(ComplyError):
    """Base exception for policy definition and lookup errors."""
    pass


class InvalidPolicyError(PolicyError):
    """Raised when a policy or policy set is malformed."""
    pass


class PolicyNotFoundError(PolicyError, LookupError):
    """Raised when a policy set has no policy under the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Policy {name!r} is not defined in this policy set")
        self.policy_name = name


def rejection_tag(policy_name: str) -> str:
    """Build the identifying tag of a rejection, e.g. ``PolicyRejection: [has items]``."""
    return f"{POLICY_REJECTION_PREFIX}: [{policy_name}]"


class PolicyRejection(ComplyError):
    """
    Raised when a policy is not met.

    Attributes:
        message: Human-readable rejection message
        name: Identifying tag combining the rejection prefix and the policy name
        policy_name: Name of the rejected policy
        argument: The rejected argument, or MISSING when none was given
    """

    def __init__(self, message: str, policy_name: str, argument: Any = MISSING):
        super().__init__(message)
        self.message = message
        self.policy_name = policy_name
        self.argument = argument
        self.name = rejection_tag(policy_name)
