"""
json-decode - unit tests for document entry points

File: tests/unit/decoding/test_documents.py
Last updated: 2026-10-18

Purpose
- Validate JSON/YAML parsing, suffix dispatch, and the separation between
  load errors and decoding errors.

Functional requirements
- Uses only ``tmp_path``; no network.
"""

from __future__ import annotations

import time
from decimal import Decimal
from pathlib import Path

import pytest

from json_decode.combinators import array, field, optional_field
from json_decode.config.schema import DecodeSettings
from json_decode.decoder import double_, int_, json_value, string
from json_decode.documents import (
    DocumentLoadError,
    decode_file,
    decode_json_text,
    decode_yaml_text,
    parse_json_text,
)
from json_decode.errors import JsonDecodingError

_SERVICE = field("name", string)


def test_json_floats_are_exact_by_default() -> None:
    assert parse_json_text("[0.1]") == [Decimal("0.1")]
    assert parse_json_text("[0.1]", settings=DecodeSettings(exact_numbers=False)) == [0.1]


def test_decode_json_text_accepts_integral_decimals() -> None:
    assert decode_json_text('{"port": 8080.0}', field("port", int_)) == 8080
    assert decode_json_text(b'{"ratio": 0.5}', field("ratio", double_)) == 0.5


def test_decode_json_text_surfaces_decoding_errors() -> None:
    with pytest.raises(JsonDecodingError) as excinfo:
        decode_json_text('{"port": 3.5}', field("port", int_))

    assert str(excinfo.value) == (
        "Problem with the value at json.port:\n\n    3.5\n\nexpected a number with no decimal part"
    )


def test_invalid_json_is_a_load_error() -> None:
    with pytest.raises(DocumentLoadError, match="invalid JSON"):
        decode_json_text("{", json_value)


def test_decode_yaml_text() -> None:
    decoder = field("ports", array(int_))

    assert decode_yaml_text("ports: [80, 443]\n", decoder) == (80, 443)


def test_invalid_yaml_is_a_load_error() -> None:
    with pytest.raises(DocumentLoadError, match="invalid YAML"):
        decode_yaml_text("a: [1, 2", json_value)


def test_decode_file_dispatches_on_suffix(tmp_path: Path) -> None:
    json_path = tmp_path / "service.json"
    yaml_path = tmp_path / "service.yml"
    json_path.write_text('{"name": "api"}', encoding="utf-8")
    yaml_path.write_text("name: worker\n", encoding="utf-8")

    assert decode_file(json_path, _SERVICE) == "api"
    assert decode_file(yaml_path, _SERVICE) == "worker"


def test_decode_file_rejects_unknown_suffix_and_missing_files(tmp_path: Path) -> None:
    text_path = tmp_path / "service.txt"
    text_path.write_text("{}", encoding="utf-8")

    with pytest.raises(DocumentLoadError, match="unsupported document type"):
        decode_file(text_path, json_value)
    with pytest.raises(DocumentLoadError, match="unable to read document"):
        decode_file(tmp_path / "absent.json", json_value)


def test_decode_file_propagates_decoding_errors(tmp_path: Path) -> None:
    path = tmp_path / "service.yaml"
    path.write_text("replicas: many\n", encoding="utf-8")

    with pytest.raises(JsonDecodingError) as excinfo:
        decode_file(path, optional_field("replicas", int_, 1))

    assert "json.replicas" in str(excinfo.value)


def test_huge_integral_exponent_renders_without_integer_conversion() -> None:
    with pytest.raises(JsonDecodingError) as excinfo:
        decode_json_text("1e5000", string)

    assert str(excinfo.value) == "Problem with the given value:\n\n1E+5000\n\nexpected a string"


def test_out_of_range_exponent_fails_fast_for_integers() -> None:
    started = time.monotonic()
    with pytest.raises(JsonDecodingError) as excinfo:
        decode_json_text("1e1000000", int_)
    elapsed = time.monotonic() - started

    assert elapsed < 5.0
    assert str(excinfo.value) == (
        "Problem with the given value:\n\n1E+1000000\n\n"
        "expected a number which could be converted to an int"
    )


def test_precise_decimals_keep_every_digit_in_messages() -> None:
    error = string.run(parse_json_text("0.10000000000000000000001"))

    assert not error.ok
    assert error.error.message == (
        "Problem with the given value:\n\n0.10000000000000000000001\n\nexpected a string"
    )
