"""JSON value classification.

Classifies Python runtime values into the seven JSON types, independent
of any schema, and provides the JSON-flavoured comparisons and renderings
the validators need:

- ``UNDEFINED``: the absent value (distinct from ``None``, which is JSON null)
- ``json_type_of()``: runtime type name used in type-guard messages
- ``is_falsy()``: JSON-script truthiness (empty containers are truthy)
- ``json_equal()``: structural equality where booleans never equal numbers
- ``render()`` / ``render_json()``: value interpolation for violation reasons
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Final


class _Undefined:
    """Singleton marker for a value that is absent, not null."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Undefined:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


class JsonType(StrEnum):
    """The JSON types a schema's ``type`` keyword may name."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"
    OBJECT = "object"
    ARRAY = "array"

    @classmethod
    def parse(cls, value: Any) -> JsonType | None:
        """Return the matching member, or None for anything unrecognised."""
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                return None
        return None


# =============================================================================
# TYPE GUARD
# =============================================================================


def is_number(value: Any) -> bool:
    """True for int/float values; booleans are not numbers."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def json_type_of(value: Any) -> str:
    """Return the JSON type name of a runtime value.

    Examples:
        json_type_of(None) -> "null"
        json_type_of([1]) -> "array"
        json_type_of(1.5) -> "number"
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if is_array(value):
        return "array"
    if is_object(value):
        return "object"
    return type(value).__name__


def type_mismatch(value: Any, expected: JsonType) -> str | None:
    """Check a value against one JSON type.

    Returns:
        The violation reason when the value is of another type, else None.
    """
    actual = json_type_of(value)
    if actual == expected:
        return None
    return f"Value should have been a {expected} but was of type {actual}"


# =============================================================================
# COMPARISON
# =============================================================================


def is_falsy(value: Any) -> bool:
    """JSON-script falsiness: undefined, null, false, 0, NaN and "".

    Empty objects and arrays are truthy.
    """
    if value is UNDEFINED or value is None:
        return True
    if isinstance(value, bool):
        return not value
    if is_number(value):
        return value == 0 or math.isnan(value)
    if isinstance(value, str):
        return value == ""
    return False


def json_equal(left: Any, right: Any) -> bool:
    """Structural equality over JSON values."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if is_number(left) and is_number(right):
        return left == right
    if is_object(left) and is_object(right):
        if left.keys() != right.keys():
            return False
        return all(json_equal(left[key], right[key]) for key in left)
    if is_array(left) and is_array(right):
        return len(left) == len(right) and all(map(json_equal, left, right))
    if json_type_of(left) != json_type_of(right):
        return False
    return bool(left == right)


def json_contains(candidates: Any, value: Any) -> bool:
    """Membership test using ``json_equal``."""
    return any(json_equal(candidate, value) for candidate in candidates)


# =============================================================================
# RENDERING
# =============================================================================


def _render_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def render(value: Any) -> str:
    """Render a value the way string interpolation in reasons expects.

    Numbers drop a trailing ``.0``, booleans and null are lowercase and
    arrays join their rendered items with ``,``.
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return _render_number(value)
    if isinstance(value, str):
        return value
    if is_array(value):
        return ",".join("" if item is None else render(item) for item in value)
    if is_object(value):
        return "[object Object]"
    return str(value)


def _normalise(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if is_object(value):
        return {str(key): _normalise(item) for key, item in value.items()}
    if is_array(value):
        return [_normalise(item) for item in value]
    return value


def render_json(value: Any) -> str:
    """Compact JSON text for a value (no whitespace between tokens)."""
    return json.dumps(_normalise(value), separators=(",", ":"), ensure_ascii=False, default=str)
