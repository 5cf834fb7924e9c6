"""
json-decode - decoder core and primitive decoders

File: src/json_decode/decoder.py
Last updated: 2026-10-18

Purpose
- Define ``Decoder``: an immutable wrapper around a function from an untyped
  JSON value to ``Ok`` or ``Err``.
- Provide the primitive decoders every schema is built from.

Functional requirements
- ``Decoder.run`` is total. ``JsonDecodingError`` raised by wrapped code is
  unwrapped into ``Err``; any other exception becomes a ``Failure`` holding the
  exception and the JSON node being decoded.
- ``Decoder.map`` never intercepts an ``Err``.

Non-functional requirements
- Decoders hold no mutable state and can be shared across threads.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial
from typing import Generic, TypeVar

from json_decode.constants import LOGGER_NAME
from json_decode.errors import JsonDecodingError, failure
from json_decode.json_types import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    JSONArray,
    JSONObject,
    JSONValue,
    NumberOverflowError,
    exact_int,
    is_array,
    is_boolean,
    is_integral,
    is_null,
    is_number,
    is_object,
    is_string,
    to_double,
    to_single,
)
from json_decode.result import Err, Ok, Result

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
R = TypeVar("R")

_LOGGER = logging.getLogger(f"{LOGGER_NAME}.decoder")


class Decoder(Generic[T_co]):
    """Attempt to turn an untyped JSON value into a ``T_co``.

    Build decoders from the primitives in this module and the combinators in
    ``json_decode.combinators`` / ``json_decode.alternation``, then apply them
    with :meth:`decode` (raises) or :meth:`run` (returns ``Ok``/``Err``).
    """

    __slots__ = ("_name", "_step")

    def __init__(
        self,
        step: Callable[[JSONValue], Result[T_co]],
        *,
        name: str = "decoder",
    ) -> None:
        self._step = step
        self._name = name

    def __repr__(self) -> str:
        return f"Decoder({self._name})"

    @property
    def name(self) -> str:
        return self._name

    def run(self, json: JSONValue) -> Result[T_co]:
        try:
            return self._step(json)
        except JsonDecodingError as exc:
            return Err(exc.error)
        except Exception as exc:
            _LOGGER.debug(
                "%r raised %s; recorded as a decoding failure",
                self,
                type(exc).__name__,
                exc_info=True,
            )
            return Err(failure(exc, json))

    def decode(self, json: JSONValue) -> T_co:
        """Return the decoded value or raise ``JsonDecodingError``."""

        result = self.run(json)
        if isinstance(result, Err):
            raise JsonDecodingError(result.error)
        return result.value

    def __call__(self, json: JSONValue) -> T_co:
        return self.decode(json)

    def map(self, func: Callable[[T_co], R]) -> Decoder[R]:
        """Return a decoder applying ``func`` to every successfully decoded value."""

        source = self

        def step(json: JSONValue) -> Result[R]:
            return source.run(json).map(func)

        return Decoder(step, name=f"{self._name}.map({_callable_name(func)})")

    @staticmethod
    def of(decoder: DecoderLike[T]) -> Decoder[T]:
        """Use ``decoder`` where a decoder of a wider type is expected.

        Plain callables are lifted; they may signal failure by raising
        ``JsonDecodingError``.
        """

        if isinstance(decoder, Decoder):
            return decoder
        return Decoder.from_callable(decoder)

    @staticmethod
    def from_callable(func: Callable[[JSONValue], T]) -> Decoder[T]:
        def step(json: JSONValue) -> Result[T]:
            return Ok(func(json))

        return Decoder(step, name=_callable_name(func))


DecoderLike = Decoder[T] | Callable[[JSONValue], T]


def _callable_name(func: Callable[..., object]) -> str:
    return getattr(func, "__qualname__", None) or type(func).__name__


def _decode_string(json: JSONValue) -> Result[str]:
    if not is_string(json):
        return Err(failure("expected a string", json))
    return Ok(json)


def _decode_boolean(json: JSONValue) -> Result[bool]:
    if not is_boolean(json):
        return Err(failure("expected a boolean", json))
    return Ok(json)


def _decode_integer(json: JSONValue, *, minimum: int, maximum: int, target: str) -> Result[int]:
    if not is_number(json):
        return Err(failure("expected a number", json))
    if not is_integral(json):
        return Err(failure("expected a number with no decimal part", json))
    try:
        return Ok(exact_int(json, minimum=minimum, maximum=maximum))
    except NumberOverflowError:
        return Err(failure(f"expected a number which could be converted to {target}", json))


def _decode_float(json: JSONValue) -> Result[float]:
    if not is_number(json):
        return Err(failure("expected a number", json))
    return Ok(to_single(json))


def _decode_double(json: JSONValue) -> Result[float]:
    if not is_number(json):
        return Err(failure("expected a number", json))
    return Ok(to_double(json))


def _decode_null(json: JSONValue) -> Result[None]:
    if not is_null(json):
        return Err(failure("expected null", json))
    return Ok(None)


def _decode_json_array(json: JSONValue) -> Result[JSONArray]:
    if not is_array(json):
        return Err(failure("expected an array", json))
    return Ok(json)


def _decode_json_object(json: JSONValue) -> Result[JSONObject]:
    if not is_object(json):
        return Err(failure("expected an object", json))
    return Ok(json)


string: Decoder[str] = Decoder(_decode_string, name="string")
boolean: Decoder[bool] = Decoder(_decode_boolean, name="boolean")
int_: Decoder[int] = Decoder(
    partial(_decode_integer, minimum=INT32_MIN, maximum=INT32_MAX, target="an int"),
    name="int_",
)
long_: Decoder[int] = Decoder(
    partial(_decode_integer, minimum=INT64_MIN, maximum=INT64_MAX, target="a long"),
    name="long_",
)
float_: Decoder[float] = Decoder(_decode_float, name="float_")
double_: Decoder[float] = Decoder(_decode_double, name="double_")
null_: Decoder[None] = Decoder(_decode_null, name="null_")

# Raw node access, for callers that inspect containers themselves.
json_array: Decoder[JSONArray] = Decoder(_decode_json_array, name="json_array")
json_object: Decoder[JSONObject] = Decoder(_decode_json_object, name="json_object")
json_value: Decoder[JSONValue] = Decoder(Ok, name="json_value")

__all__ = [
    "Decoder",
    "DecoderLike",
    "boolean",
    "double_",
    "float_",
    "int_",
    "json_array",
    "json_object",
    "json_value",
    "long_",
    "null_",
    "string",
]
