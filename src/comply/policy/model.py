"""
Policy model.
A policy is a named condition plus a factory for the error raised when it is not met.
"""

from typing import Any, Callable, Optional, Union

from ..config import DEFAULT_MESSAGE_TEMPLATE
from ..errors import InvalidPolicyError, PolicyRejection
from ..utils.formatting import describe_argument
from ..utils.sentinel import MISSING
from .conditions import ConditionKind, call_with_optional_arg, classify_condition

Condition = Union[bool, Callable[[], Any], Callable[[Any], Any]]
ErrorFactory = Callable[..., BaseException]


def default_error_factory(name: str, message: Optional[str] = None) -> ErrorFactory:
    """
    Build the error factory used when a policy has no explicit one.

    Args:
        name: Policy name
        message: Fixed message; when None, a message naming the policy and
            the rejected argument is generated

    Returns:
        Factory producing a PolicyRejection for a given argument
    """
    def factory(arg: Any = MISSING) -> PolicyRejection:
        if message is not None:
            return PolicyRejection(message, name, arg)
        return PolicyRejection(
            DEFAULT_MESSAGE_TEMPLATE.format(name=name, argument=describe_argument(arg)),
            name,
            arg,
        )

    return factory


class Policy:
    """
    Represents a named, immutable policy.
    """

    __slots__ = ('_name', '_condition', '_error_factory', '_kind', '_factory_kind')

    def __init__(self, name: str, condition: Condition, error_factory: ErrorFactory):
        """
        Initialize policy.

        Args:
            name: Non-empty identifying name
            condition: Literal bool, zero-argument or single-argument predicate
            error_factory: Callable building the error for a rejected argument
        """
        if not isinstance(name, str) or not name:
            raise InvalidPolicyError(f"Policy name must be a non-empty string, got {name!r}")

        if not callable(error_factory):
            raise InvalidPolicyError(f"Error factory of policy {name!r} must be callable")

        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_condition', condition)
        object.__setattr__(self, '_error_factory', error_factory)
        object.__setattr__(self, '_kind', classify_condition(condition))
        object.__setattr__(self, '_factory_kind', classify_condition(error_factory))

    def __setattr__(self, key, value):
        raise AttributeError(f"Policy {self._name!r} is immutable")

    def __delattr__(self, key):
        raise AttributeError(f"Policy {self._name!r} is immutable")

    def __repr__(self) -> str:
        return f"Policy(name={self._name!r}, kind={self._kind.value})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def condition(self) -> Condition:
        return self._condition

    @property
    def error_factory(self) -> ErrorFactory:
        return self._error_factory

    @property
    def kind(self) -> ConditionKind:
        return self._kind

    def check(self, arg: Any = MISSING) -> bool:
        """
        Evaluate the condition.

        Exceptions raised by the condition propagate unchanged.

        Args:
            arg: Value under test; omitted for zero-argument conditions

        Returns:
            True if the policy is met
        """
        if self._kind is ConditionKind.CONSTANT:
            return self._condition
        return bool(call_with_optional_arg(self._condition, self._kind, arg))

    def reject(self, arg: Any = MISSING) -> BaseException:
        """Build the error for a rejected argument."""
        return call_with_optional_arg(self._error_factory, self._factory_kind, arg)


def define_policy(
    name: str,
    condition: Condition,
    error_factory_or_message: Optional[Union[ErrorFactory, str]] = None,
) -> Policy:
    """
    Define a policy.

    Args:
        name: Policy name
        condition: Literal bool, zero-argument or single-argument predicate
        error_factory_or_message: Callable used verbatim as the error factory,
            a fixed rejection message, or None for the default message

    Returns:
        Policy object
    """
    if callable(error_factory_or_message):
        error_factory = error_factory_or_message
    elif error_factory_or_message is None or isinstance(error_factory_or_message, str):
        error_factory = default_error_factory(name, error_factory_or_message)
    else:
        raise InvalidPolicyError(
            f"Error factory of policy {name!r} must be a callable or a message string"
        )

    return Policy(name, condition, error_factory)
