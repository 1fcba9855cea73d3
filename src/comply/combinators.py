"""
Short-circuiting logical combinators.

Operands are literal booleans or zero-argument callables, so a condition can
compose other policies lazily:

    define_policy("can edit", lambda post: or_(
        lambda: post.user_id == user_id,
        lambda: check(admin.policy("has admin role")),
    ))
"""

from typing import Any, Callable, Union

Operand = Union[bool, Callable[[], Any]]


def _evaluate(operand: Operand) -> bool:
    if callable(operand):
        return bool(operand())
    return bool(operand)


def and_(*operands: Operand) -> bool:
    """True if every operand is true; stops at the first false one."""
    return all(_evaluate(operand) for operand in operands)


def or_(*operands: Operand) -> bool:
    """True if any operand is true; stops at the first true one."""
    return any(_evaluate(operand) for operand in operands)
