"""
json-decode - unit tests for the decoder core and primitive decoders

File: tests/unit/decoding/test_primitives.py
Last updated: 2026-10-18

Purpose
- Validate kind checks, integer width checks, float narrowing, and the
  ``run``/``decode``/``map``/``of`` contract of ``Decoder``.

Functional requirements
- Offline and deterministic.
"""

from __future__ import annotations

import math
from decimal import Decimal

import pytest

from json_decode.decoder import (
    Decoder,
    boolean,
    double_,
    float_,
    int_,
    json_array,
    json_object,
    json_value,
    long_,
    null_,
    string,
)
from json_decode.errors import Failure, JsonDecodingError, failure
from json_decode.result import Err, Ok


def test_string_accepts_text_and_rejects_numbers() -> None:
    assert string.decode("abc") == "abc"
    assert string.run(5) == Err(Failure("expected a string", 5))


def test_boolean_is_not_a_number_and_number_is_not_boolean() -> None:
    assert boolean.decode(True) is True
    assert boolean.run(1) == Err(Failure("expected a boolean", 1))
    assert int_.run(True) == Err(Failure("expected a number", True))


def test_int_checks_type_then_integral_then_width() -> None:
    assert int_.run("7") == Err(Failure("expected a number", "7"))
    assert int_.run(3.5) == Err(Failure("expected a number with no decimal part", 3.5))
    assert int_.decode(2.0) == 2
    assert int_.decode(Decimal("2.000")) == 2
    assert int_.decode(-(2**31)) == -(2**31)
    assert int_.run(2**31) == Err(
        Failure("expected a number which could be converted to an int", 2**31)
    )


def test_int_rejects_non_finite_numbers_as_fractional() -> None:
    assert int_.run(math.inf) == Err(Failure("expected a number with no decimal part", math.inf))


def test_long_uses_sixty_four_bit_range() -> None:
    assert long_.decode(2**31) == 2**31
    assert long_.decode(2**63 - 1) == 2**63 - 1
    assert long_.run(2**63) == Err(
        Failure("expected a number which could be converted to a long", 2**63)
    )
    assert long_.run(Decimal("1.5")) == Err(
        Failure("expected a number with no decimal part", Decimal("1.5"))
    )


def test_width_check_runs_before_integer_conversion() -> None:
    huge = Decimal("1e200000000")

    assert long_.run(huge) == Err(
        Failure("expected a number which could be converted to a long", huge)
    )
    assert int_.run(-huge) == Err(
        Failure("expected a number which could be converted to an int", -huge)
    )


def test_float_narrows_to_single_precision_without_range_check() -> None:
    narrowed = float_.decode(0.1)
    assert narrowed != 0.1
    assert narrowed == pytest.approx(0.1, rel=1e-7)
    assert float_.decode(1e39) == math.inf
    assert float_.decode(-1e39) == -math.inf
    assert float_.run("0.1") == Err(Failure("expected a number", "0.1"))


def test_double_accepts_any_number() -> None:
    assert double_.decode(3) == 3.0
    assert double_.decode(Decimal("0.5")) == 0.5
    assert double_.decode(10**400) == math.inf
    assert double_.run(None) == Err(Failure("expected a number", None))


def test_null_produces_none_only_for_null() -> None:
    assert null_.run(None) == Ok(None)
    assert null_.run(0) == Err(Failure("expected null", 0))


def test_raw_node_decoders_return_the_node_itself() -> None:
    items = [1, 2]
    mapping = {"a": 1}
    assert json_array.decode(items) is items
    assert json_object.decode(mapping) is mapping
    assert json_value.decode(mapping) is mapping
    assert json_array.run({}) == Err(Failure("expected an array", {}))
    assert json_object.run([]) == Err(Failure("expected an object", []))


def test_decode_raises_structured_exception() -> None:
    with pytest.raises(JsonDecodingError) as excinfo:
        string.decode(5)

    assert excinfo.value.error == Failure("expected a string", 5)
    assert str(excinfo.value) == "Problem with the given value:\n\n5\n\nexpected a string"


def test_map_applies_only_on_success() -> None:
    calls: list[int] = []

    def record(value: int) -> int:
        calls.append(value)
        return value * 10

    doubled = int_.map(record)

    assert doubled.decode(4) == 40
    assert doubled.run("x") == Err(Failure("expected a number", "x"))
    assert calls == [4]


def test_map_passes_error_through_unchanged() -> None:
    unmapped = int_.run(1.5)
    mapped = int_.map(str).map(len).run(1.5)

    assert mapped == unmapped


def test_of_is_identity_for_decoders_and_lifts_callables() -> None:
    assert Decoder.of(string) is string

    def upper(value: object) -> str:
        if not isinstance(value, str):
            raise JsonDecodingError(failure("expected text", value))
        return value.upper()

    lifted = Decoder.of(upper)
    assert lifted.decode("abc") == "ABC"
    assert lifted.run(1) == Err(Failure("expected text", 1))


def test_unstructured_fault_becomes_failure_with_the_examined_value() -> None:
    def explode(value: object) -> int:
        raise RuntimeError("boom")

    result = Decoder.from_callable(explode).run({"k": 1})

    assert isinstance(result, Err)
    assert isinstance(result.error, Failure)
    assert isinstance(result.error.reason, RuntimeError)
    assert result.error.value == {"k": 1}
    assert result.error.reason_text == "RuntimeError: boom"


def test_fault_inside_map_is_reported_against_the_mapped_input() -> None:
    def explode(value: int) -> int:
        raise KeyError("missing")

    result = int_.map(explode).run(3)

    assert isinstance(result, Err)
    assert isinstance(result.error, Failure)
    assert isinstance(result.error.reason, KeyError)
    assert result.error.value == 3


def test_decoder_is_callable_like_decode() -> None:
    assert string("x") == "x"
    with pytest.raises(JsonDecodingError):
        string(None)
