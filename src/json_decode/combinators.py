"""
json-decode - structural combinators

File: src/json_decode/combinators.py
Last updated: 2026-10-18

Purpose
- Navigate arrays and objects, delegate to inner decoders, and annotate any
  inner failure with the field name or array index it happened at.

What should be included in this file
- ``array``, ``object_``, ``field``, ``optional_field``,
  ``optional_nullable_field``, ``index``.

Functional requirements
- Every inner failure is re-wrapped with exactly one path segment; nothing is
  swallowed.
- Results are immutable (tuples and read-only mappings) and detached from the
  input tree.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final, TypeVar

from json_decode.alternation import nullable
from json_decode.decoder import Decoder, DecoderLike
from json_decode.errors import at_field, at_index, failure
from json_decode.json_types import JSONValue, is_array, is_object
from json_decode.result import Err, Ok, Result

T = TypeVar("T")


class _SameAsMissing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<same as when_missing>"


_SAME_AS_MISSING: Final = _SameAsMissing()


def array(item_decoder: DecoderLike[T]) -> Decoder[tuple[T, ...]]:
    """Decode every element in order; stop at the first element that fails."""

    items_decoder = Decoder.of(item_decoder)

    def step(json: JSONValue) -> Result[tuple[T, ...]]:
        if not is_array(json):
            return Err(failure("expected an array", json))
        items: list[T] = []
        for position, item in enumerate(json):
            result = items_decoder.run(item)
            if isinstance(result, Err):
                return Err(at_index(position, result.error))
            items.append(result.value)
        return Ok(tuple(items))

    return Decoder(step, name=f"array({items_decoder.name})")


def object_(value_decoder: DecoderLike[T]) -> Decoder[Mapping[str, T]]:
    """Decode every value of an object, keeping the object's key order."""

    values_decoder = Decoder.of(value_decoder)

    def step(json: JSONValue) -> Result[Mapping[str, T]]:
        if not is_object(json):
            return Err(failure("expected an object", json))
        decoded: dict[str, T] = {}
        for key, value in json.items():
            result = values_decoder.run(value)
            if isinstance(result, Err):
                return Err(at_field(str(key), result.error))
            decoded[key] = result.value
        return Ok(MappingProxyType(decoded))

    return Decoder(step, name=f"object_({values_decoder.name})")


def field(name: str, value_decoder: DecoderLike[T]) -> Decoder[T]:
    """Decode the value under ``name``; a missing key is a failure."""

    inner = Decoder.of(value_decoder)

    def step(json: JSONValue) -> Result[T]:
        if not is_object(json):
            return Err(failure("expected an object", json))
        if name not in json:
            return Err(at_field(name, failure("no value for field", json)))
        return _within_field(name, inner.run(json[name]))

    return Decoder(step, name=f"field({name!r}, {inner.name})")


def optional_field(
    name: str,
    value_decoder: DecoderLike[T],
    default: T | None = None,
) -> Decoder[T | None]:
    """Decode the value under ``name``, or return ``default`` when the key is absent.

    A present key whose value does not decode still fails.
    """

    inner = Decoder.of(value_decoder)

    def step(json: JSONValue) -> Result[T | None]:
        if not is_object(json):
            return Err(failure("expected an object", json))
        if name not in json:
            return Ok(default)
        return _within_field(name, inner.run(json[name]))

    return Decoder(step, name=f"optional_field({name!r}, {inner.name})")


def optional_nullable_field(
    name: str,
    value_decoder: DecoderLike[T],
    when_missing: T | None = None,
    when_null: object = _SAME_AS_MISSING,
) -> Decoder[T | None]:
    """Tell apart a missing field, an explicit null, and a present value.

    ``when_null`` defaults to ``when_missing``; pass it to give explicit null
    its own outcome.
    """

    null_value = when_missing if when_null is _SAME_AS_MISSING else when_null
    return optional_field(name, nullable(value_decoder, null_value), when_missing)


def index(position: int, value_decoder: DecoderLike[T]) -> Decoder[T]:
    """Decode the element at ``position``; out-of-range positions fail."""

    inner = Decoder.of(value_decoder)

    def step(json: JSONValue) -> Result[T]:
        if not is_array(json):
            return Err(failure("expected an array", json))
        if position < 0 or position >= len(json):
            return Err(at_index(position, failure("expected array index to be in bounds", json)))
        result = inner.run(json[position])
        if isinstance(result, Err):
            return Err(at_index(position, result.error))
        return result

    return Decoder(step, name=f"index({position}, {inner.name})")


def _within_field(name: str, result: Result[T]) -> Result[T]:
    if isinstance(result, Err):
        return Err(at_field(name, result.error))
    return result


__all__ = [
    "array",
    "field",
    "index",
    "object_",
    "optional_field",
    "optional_nullable_field",
]
