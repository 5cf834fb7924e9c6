"""
json-decode config package public API.

File: src/json_decode/config/__init__.py
Last updated: 2026-10-18

Purpose
- Export settings loading/validation entrypoints and public error types.

Functional requirements
- Support loading from ``json_decode.toml`` / ``pyproject.toml`` +
  ``JSON_DECODE_`` env overrides.
- Fail fast with clear structured validation/load errors.
"""

from json_decode.config.loader import SettingsLoadError, dump_settings, load_settings
from json_decode.config.schema import (
    DEFAULT_SETTINGS_PAYLOAD,
    DecodeSettings,
    SettingsValidationError,
    SettingsValidationIssue,
    SettingsValidationResult,
    assert_valid_settings,
    default_settings_payload,
    merge_settings,
    validate_settings,
)

__all__ = [
    "DEFAULT_SETTINGS_PAYLOAD",
    "DecodeSettings",
    "SettingsLoadError",
    "SettingsValidationError",
    "SettingsValidationIssue",
    "SettingsValidationResult",
    "assert_valid_settings",
    "default_settings_payload",
    "dump_settings",
    "load_settings",
    "merge_settings",
    "validate_settings",
]
