"""
Sentinel for arguments that were not supplied.
``None`` is a legitimate argument to a condition, so absence needs its own marker.
"""

from typing import Any


class _Missing:
    """Singleton marker type for an omitted argument."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()
