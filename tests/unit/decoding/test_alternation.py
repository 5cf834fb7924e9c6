"""
json-decode - unit tests for one_of and nullable

File: tests/unit/decoding/test_alternation.py
Last updated: 2026-10-18

Purpose
- Validate left-to-right evaluation, short-circuiting, and flat aggregation of
  failed alternatives.

Functional requirements
- Offline and deterministic.
"""

from __future__ import annotations

from json_decode.alternation import nullable, one_of
from json_decode.combinators import field
from json_decode.decoder import Decoder, boolean, int_, string
from json_decode.errors import Failure, FieldError, OneOfError, multiple
from json_decode.result import Err, Ok


def test_one_of_returns_first_success() -> None:
    decoder = one_of(int_, string)

    assert decoder.decode(3) == 3
    assert decoder.decode("x") == "x"


def test_one_of_collects_every_failure_in_order() -> None:
    result = one_of(int_, string).run(True)

    assert result == Err(
        OneOfError((Failure("expected a number", True), Failure("expected a string", True)))
    )


def test_one_of_short_circuits_after_success() -> None:
    attempts: list[str] = []

    def tracked(label: str, decoder: Decoder[object]) -> Decoder[object]:
        def step(value: object) -> object:
            attempts.append(label)
            return decoder.decode(value)

        return Decoder.from_callable(step)

    decoder = one_of(tracked("int", int_), tracked("string", string), tracked("bool", boolean))

    assert decoder.decode("x") == "x"
    assert attempts == ["int", "string"]


def test_one_of_flattens_nested_alternatives() -> None:
    result = one_of(one_of(int_, string), boolean).run(None)

    assert result == Err(
        OneOfError(
            (
                Failure("expected a number", None),
                Failure("expected a string", None),
                Failure("expected a boolean", None),
            )
        )
    )


def test_one_of_keeps_path_wrapped_errors_as_leaves() -> None:
    result = one_of(field("a", int_), field("b", string)).run({"a": "x", "b": 1})

    assert result == Err(
        OneOfError(
            (
                FieldError("a", Failure("expected a number", "x")),
                FieldError("b", Failure("expected a string", 1)),
            )
        )
    )


def test_single_alternative_failure_is_a_one_element_one_of() -> None:
    assert one_of(int_).run("x") == Err(OneOfError((Failure("expected a number", "x"),)))


def test_multiple_flattens_and_preserves_order() -> None:
    first = Failure("one", 1)
    second = Failure("two", 2)
    third = Failure("three", 3)

    merged = multiple([OneOfError((first, second)), third])

    assert merged == OneOfError((first, second, third))
    assert multiple([]) == OneOfError(())


def test_nullable_maps_null_to_none_and_keeps_values() -> None:
    decoder = nullable(int_)

    assert decoder.run(None) == Ok(None)
    assert decoder.run(7) == Ok(7)


def test_nullable_reports_both_leaves_for_wrong_type() -> None:
    assert nullable(int_).run("x") == Err(
        OneOfError((Failure("expected a number", "x"), Failure("expected null", "x")))
    )


def test_nullable_with_default_substitutes_null_only() -> None:
    decoder = nullable(string, "n/a")

    assert decoder.decode(None) == "n/a"
    assert decoder.decode("v") == "v"
    assert isinstance(decoder.run(1), Err)
