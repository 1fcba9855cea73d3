"""
Policy condition classification and ready-made conditions.
Conditions are pure functions with no side effects.
"""

import enum
import inspect
from typing import Any, Callable, Optional, TypeVar, TypeGuard

from pydantic import TypeAdapter, ValidationError

from ..errors import InvalidPolicyError
from ..utils.sentinel import MISSING

T = TypeVar("T")


class ConditionKind(enum.Enum):
    """How a condition is invoked at evaluation time."""
    CONSTANT = "constant"
    NO_ARG = "no_arg"
    VALUE = "value"


def _positional_params(func: Callable) -> Optional[list]:
    """Positional parameters of a callable, or None when it has no signature."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return None

    return [
        p for p in signature.parameters.values()
        if p.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.VAR_POSITIONAL,
        )
    ]


def classify_condition(condition: Any) -> ConditionKind:
    """
    Decide how a condition will be called.

    Args:
        condition: Literal bool, zero-argument callable or single-argument callable

    Returns:
        The condition kind

    Raises:
        InvalidPolicyError: If condition is neither a bool nor callable
    """
    if isinstance(condition, bool):
        return ConditionKind.CONSTANT

    if not callable(condition):
        raise InvalidPolicyError(
            f"Condition must be a bool or a callable, got {type(condition).__name__}"
        )

    params = _positional_params(condition)
    if params is None:
        return ConditionKind.VALUE
    if not params:
        return ConditionKind.NO_ARG
    return ConditionKind.VALUE


def _accepts_no_argument(func: Callable) -> bool:
    params = _positional_params(func)
    if params is None:
        return False
    return all(
        p.default is not inspect.Parameter.empty or p.kind is inspect.Parameter.VAR_POSITIONAL
        for p in params
    )


def call_with_optional_arg(func: Callable, kind: ConditionKind, arg: Any = MISSING) -> Any:
    """
    Call a zero- or single-argument function according to its kind.

    A VALUE function called without an argument receives None, unless every
    positional parameter has a default, in which case it is called bare.
    """
    if kind is ConditionKind.NO_ARG:
        return func()

    if arg is MISSING:
        if _accepts_no_argument(func):
            return func()
        return func(None)

    return func(arg)


def not_null(value: Optional[T]) -> TypeGuard[T]:
    """Condition met by any value other than None."""
    return value is not None


def match_schema(schema: Any) -> Callable[[Any], bool]:
    """
    Wrap a pydantic schema into a single-argument condition.

    Args:
        schema: A pydantic model class, a TypeAdapter, or any type annotation
            pydantic can validate (e.g. ``list[int]``)

    Returns:
        Condition returning True when the value validates against the schema
    """
    adapter = schema if isinstance(schema, TypeAdapter) else TypeAdapter(schema)

    def condition(value: Any) -> bool:
        try:
            adapter.validate_python(value)
        except ValidationError:
            return False
        return True

    condition.__name__ = f"match_schema[{getattr(schema, '__name__', repr(schema))}]"
    return condition
