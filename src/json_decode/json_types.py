"""
json-decode - untyped JSON value model

File: src/json_decode/json_types.py
Last updated: 2026-10-18

Purpose
- Name the untyped tree produced by ``json.loads`` / ``yaml.safe_load`` and
  answer the kind and numeric queries decoders need.

What should be included in this file
- Type aliases for JSON values.
- Kind predicates (null, boolean, number, string, array, object).
- Integral checks and exact-width integer conversion with a distinguishable
  overflow condition.
- Pretty writer with a configurable indentation width.

Non-functional requirements
- Never mutate the value tree.
"""

from __future__ import annotations

import json
import math
import struct
from collections.abc import Mapping
from decimal import Decimal
from typing import Final, TypeAlias

JSONScalar: TypeAlias = str | int | float | Decimal | bool | None
JSONValue: TypeAlias = (
    JSONScalar | list["JSONValue"] | tuple["JSONValue", ...] | Mapping[str, "JSONValue"]
)
JSONArray: TypeAlias = list[JSONValue] | tuple[JSONValue, ...]
JSONObject: TypeAlias = Mapping[str, JSONValue]

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


class NumberOverflowError(ArithmeticError):
    """Raised when an integral number does not fit the requested width."""


def is_null(value: object) -> bool:
    return value is None


def is_boolean(value: object) -> bool:
    return isinstance(value, bool)


def is_number(value: object) -> bool:
    # bool is an int subclass but a distinct JSON kind.
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, Decimal))


def is_string(value: object) -> bool:
    return isinstance(value, str)


def is_array(value: object) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: object) -> bool:
    return isinstance(value, Mapping)


def is_integral(number: int | float | Decimal) -> bool:
    """Return whether a JSON number is finite and has no fractional part."""

    if isinstance(number, int):
        return True
    if isinstance(number, float):
        return math.isfinite(number) and number.is_integer()
    if not number.is_finite():
        return False
    return number == number.to_integral_value()


def exact_int(number: int | float | Decimal, *, minimum: int, maximum: int) -> int:
    """Convert an integral number to ``int``, raising when it leaves ``[minimum, maximum]``.

    The range check runs on the number as given, before any conversion.
    """

    if not is_integral(number):
        raise ValueError(f"{number!r} has a fractional part")
    if number < minimum or number > maximum:
        raise NumberOverflowError(f"value is outside [{minimum}, {maximum}]")
    return int(number)


def to_double(number: int | float | Decimal) -> float:
    """Narrow a JSON number to binary64; magnitudes past the range become infinities."""

    try:
        return float(number)
    except OverflowError:
        return math.inf if number > 0 else -math.inf


def to_single(number: int | float | Decimal) -> float:
    """Narrow a JSON number to binary32 precision, returned as a Python float."""

    double = to_double(number)
    try:
        return float(struct.unpack("<f", struct.pack("<f", double))[0])
    except OverflowError:
        return math.copysign(math.inf, double)


def write_json(value: JSONValue, *, indent: int = 4, ensure_ascii: bool = False) -> str:
    """Pretty-print a JSON value with ``indent`` spaces per nesting level.

    The layout matches ``json.dumps``. ``Decimal`` numbers are written from their
    own text so no digits are lost and no integer conversion happens.
    """

    return _write(value, indent, 0, ensure_ascii)


def _write(value: object, indent: int, depth: int, ensure_ascii: bool) -> str:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Mapping):
        members = [
            f"{json.dumps(str(key), ensure_ascii=ensure_ascii)}: "
            f"{_write(item, indent, depth + 1, ensure_ascii)}"
            for key, item in value.items()
        ]
        return _container("{", members, "}", indent, depth)
    if isinstance(value, (list, tuple)):
        elements = [_write(item, indent, depth + 1, ensure_ascii) for item in value]
        return _container("[", elements, "]", indent, depth)
    if value is None or isinstance(value, (str, int, float)):
        return json.dumps(value, ensure_ascii=ensure_ascii, allow_nan=True)
    return json.dumps(repr(value), ensure_ascii=ensure_ascii)


def _container(opening: str, items: list[str], closing: str, indent: int, depth: int) -> str:
    if not items:
        return opening + closing
    if indent <= 0:
        return opening + ", ".join(items) + closing
    inner = "\n" + " " * (indent * (depth + 1))
    outer = "\n" + " " * (indent * depth)
    return opening + inner + ("," + inner).join(items) + outer + closing


__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "JSONArray",
    "JSONObject",
    "JSONScalar",
    "JSONValue",
    "NumberOverflowError",
    "exact_int",
    "is_array",
    "is_boolean",
    "is_integral",
    "is_null",
    "is_number",
    "is_object",
    "is_string",
    "to_double",
    "to_single",
    "write_json",
]
