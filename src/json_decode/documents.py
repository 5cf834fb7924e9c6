"""
json-decode - document entry points

File: src/json_decode/documents.py
Last updated: 2026-10-18

Purpose
- Parse JSON or YAML text into an untyped tree with existing parsers and run a
  decoder over it in one call.

Functional requirements
- Parse and read failures raise ``DocumentLoadError``; decoding failures raise
  ``JsonDecodingError`` unchanged.
- JSON floats are parsed as ``Decimal`` when ``exact_numbers`` is enabled so
  integral checks see the literal the document contained.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import TypeVar

import yaml

from json_decode.config.schema import DecodeSettings
from json_decode.constants import JSON_SUFFIXES, LOGGER_NAME, YAML_SUFFIXES
from json_decode.decoder import Decoder, DecoderLike
from json_decode.json_types import JSONValue

T = TypeVar("T")

_LOGGER = logging.getLogger(f"{LOGGER_NAME}.documents")


class DocumentLoadError(ValueError):
    """Raised when a document cannot be read or parsed."""


def parse_json_text(text: str | bytes, *, settings: DecodeSettings | None = None) -> JSONValue:
    effective = settings or DecodeSettings()
    try:
        if effective.exact_numbers:
            return json.loads(text, parse_float=Decimal)
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"invalid JSON: {exc}") from exc


def parse_yaml_text(text: str | bytes) -> JSONValue:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentLoadError(f"invalid YAML: {exc}") from exc


def decode_json_text(
    text: str | bytes,
    decoder: DecoderLike[T],
    *,
    settings: DecodeSettings | None = None,
) -> T:
    """Parse ``text`` as JSON and decode it."""

    return Decoder.of(decoder).decode(parse_json_text(text, settings=settings))


def decode_yaml_text(text: str | bytes, decoder: DecoderLike[T]) -> T:
    """Parse ``text`` as YAML (safe loader) and decode it."""

    return Decoder.of(decoder).decode(parse_yaml_text(text))


def decode_file(
    path: str | Path,
    decoder: DecoderLike[T],
    *,
    settings: DecodeSettings | None = None,
) -> T:
    """Read ``path``, choose the parser from its suffix, and decode the content."""

    resolved = Path(path).expanduser()
    suffix = resolved.suffix.lower()
    if suffix not in JSON_SUFFIXES and suffix not in YAML_SUFFIXES:
        raise DocumentLoadError(f"unsupported document type {suffix or '<none>'!r}: {resolved}")

    try:
        raw = resolved.read_bytes()
    except OSError as exc:
        raise DocumentLoadError(f"unable to read document {resolved}: {exc}") from exc

    _LOGGER.debug("decoding %s with %r", resolved, decoder)
    if suffix in JSON_SUFFIXES:
        return decode_json_text(raw, decoder, settings=settings)
    return decode_yaml_text(raw, decoder)


__all__ = [
    "DocumentLoadError",
    "decode_file",
    "decode_json_text",
    "decode_yaml_text",
    "parse_json_text",
    "parse_yaml_text",
]
