"""
Compact JSON rendering of rejected arguments.
Used to build default rejection messages; never raises.
"""

import json
from typing import Any

from pydantic_core import to_jsonable_python

from ..config import (
    JSON_SEPARATORS,
    JSON_SORT_KEYS,
    JSON_ENSURE_ASCII,
    NO_VALUE_PLACEHOLDER,
    UNSERIALIZABLE_PLACEHOLDER,
)
from .sentinel import MISSING


def to_compact_json(obj: Any) -> str:
    """
    Serialize an object to compact JSON.

    Pydantic models, dataclasses, sets, datetimes and similar values are first
    converted to plain JSON types.

    Args:
        obj: Python object to serialize

    Returns:
        Compact JSON string

    Raises:
        TypeError: If object is not JSON-serializable
    """
    try:
        return json.dumps(
            to_jsonable_python(obj),
            separators=JSON_SEPARATORS,
            sort_keys=JSON_SORT_KEYS,
            ensure_ascii=JSON_ENSURE_ASCII,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise TypeError(f"Object not JSON-serializable: {e}")


def describe_argument(arg: Any = MISSING) -> str:
    """
    Render an argument for a rejection message.

    Args:
        arg: The evaluated argument, or MISSING

    Returns:
        ``<no value>`` for a missing or None argument, ``<unserializable>``
        for values with no JSON form (functions, cyclic structures),
        compact JSON otherwise
    """
    if arg is MISSING or arg is None:
        return NO_VALUE_PLACEHOLDER

    try:
        return to_compact_json(arg)
    except TypeError:
        return UNSERIALIZABLE_PLACEHOLDER
