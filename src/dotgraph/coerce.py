"""Attribute value coercion.

Raw attribute tokens are interpreted in a fixed order: float (only when
the text contains a '.'), integer, boolean, and finally plain text.
"""

from __future__ import annotations

import math
import re

from dotgraph.errors import CoercionError
from dotgraph.types import AttributeValue, Bool, Float, Int, Text

_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INT_RE = re.compile(r"[+-]?[0-9]+")

_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _parse_float(raw: str) -> float | None:
    if not _FLOAT_RE.fullmatch(raw):
        return None
    value = float(raw)
    if math.isinf(value):
        return None
    return value


def _parse_int(raw: str) -> int | None:
    if not _INT_RE.fullmatch(raw):
        return None
    value = int(raw)
    if value < _INT_MIN or value > _INT_MAX:
        return None
    return value


def _parse_bool(raw: str) -> bool | None:
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    return None


def coerce(raw: str) -> AttributeValue:
    """Convert a raw attribute token into a typed value.

    "1.0" -> Float(1.0), "3" -> Int(3), "true" -> Bool(True); anything
    else, including malformed numbers such as "1.2.3", becomes Text.
    """
    if "." in raw:
        number = _parse_float(raw)
        if number is not None:
            return Float(number)
    else:
        integer = _parse_int(raw)
        if integer is not None:
            return Int(integer)
    flag = _parse_bool(raw)
    if flag is not None:
        return Bool(flag)
    return Text(raw)


def to_number(value: AttributeValue) -> float:
    """Return the numeric value of a Float or Int attribute.

    Raises:
        CoercionError: If the value is a Bool or Text.
    """
    if isinstance(value, (Float, Int)):
        return float(value.value)
    raise CoercionError(f"attribute value {value!s} is not numeric")
