"""
json-decode - settings schema and validation

File: src/json_decode/config/schema.py
Last updated: 2026-10-18

Purpose
- Define the settings defaults and strict validation rules.

What should be included in this file
- Validation rules for known sections, types, enums, and numeric ranges.
- Deterministic deep-merge helper used by the loader.

Functional requirements
- Validate settings payloads and return structured issues (dotted path + message).

Non-functional requirements
- Keep rules deterministic and easy to audit.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final, TypedDict

from json_decode.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_RENDER_INDENT,
    LOG_LEVELS,
    MAX_RENDER_INDENT,
)


class RenderSection(TypedDict):
    indent: int
    ensure_ascii: bool


class DocumentsSection(TypedDict):
    exact_numbers: bool


class LoggingSection(TypedDict):
    level: str


class SettingsPayload(TypedDict):
    render: RenderSection
    documents: DocumentsSection
    logging: LoggingSection


DEFAULT_SETTINGS_PAYLOAD: Final[SettingsPayload] = {
    "render": {"indent": DEFAULT_RENDER_INDENT, "ensure_ascii": False},
    "documents": {"exact_numbers": True},
    "logging": {"level": DEFAULT_LOG_LEVEL},
}


@dataclass(frozen=True, slots=True)
class DecodeSettings:
    """Effective settings for rendering, document parsing and logging."""

    indent: int = DEFAULT_RENDER_INDENT
    ensure_ascii: bool = False
    exact_numbers: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    def to_payload(self) -> dict[str, Any]:
        return {
            "render": {"indent": self.indent, "ensure_ascii": self.ensure_ascii},
            "documents": {"exact_numbers": self.exact_numbers},
            "logging": {"level": self.log_level},
        }


@dataclass(frozen=True, slots=True)
class SettingsValidationIssue:
    """Single structured validation failure."""

    path: str
    message: str


@dataclass(frozen=True, slots=True)
class SettingsValidationResult:
    """Validation result with settings when no issues were found."""

    settings: DecodeSettings | None
    issues: tuple[SettingsValidationIssue, ...]

    @property
    def is_valid(self) -> bool:
        return self.settings is not None and not self.issues


class SettingsValidationError(ValueError):
    """Raised when strict settings validation fails."""

    def __init__(self, issues: Sequence[SettingsValidationIssue]) -> None:
        self.issues = tuple(issues)
        if not self.issues:
            rendered = "unknown validation failure"
        else:
            rendered = "\n".join(f"- {item.path}: {item.message}" for item in self.issues)
        super().__init__(f"invalid settings:\n{rendered}")


class _IssueCollector:
    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[SettingsValidationIssue] = []

    def add(self, path: str, message: str) -> None:
        self._items.append(SettingsValidationIssue(path=path, message=message))

    def items(self) -> tuple[SettingsValidationIssue, ...]:
        return tuple(self._items)

    @property
    def has_issues(self) -> bool:
        return bool(self._items)


def default_settings_payload() -> dict[str, Any]:
    """Return a deep copy of the built-in defaults."""

    return copy.deepcopy(dict(DEFAULT_SETTINGS_PAYLOAD))


def merge_settings(base: Mapping[str, object], overlay: Mapping[str, object]) -> dict[str, Any]:
    """Deterministically deep-merge ``overlay`` onto ``base``."""

    merged: dict[str, Any] = copy.deepcopy(dict(base))
    _merge_into(merged, overlay)
    return merged


def validate_settings(payload: Mapping[str, object] | object) -> SettingsValidationResult:
    """Validate a settings payload; missing keys fall back to defaults."""

    issues = _IssueCollector()
    root = _as_object(payload, "<root>", issues)
    if root is None:
        return SettingsValidationResult(settings=None, issues=issues.items())

    _reject_unknown_keys(root, set(DEFAULT_SETTINGS_PAYLOAD), "", issues)
    effective = merge_settings(default_settings_payload(), root)

    render = _as_object(effective["render"], "render", issues)
    documents = _as_object(effective["documents"], "documents", issues)
    logging_section = _as_object(effective["logging"], "logging", issues)
    if render is None or documents is None or logging_section is None:
        return SettingsValidationResult(settings=None, issues=issues.items())

    _reject_unknown_keys(render, {"indent", "ensure_ascii"}, "render", issues)
    _reject_unknown_keys(documents, {"exact_numbers"}, "documents", issues)
    _reject_unknown_keys(logging_section, {"level"}, "logging", issues)

    indent = _as_int(
        render["indent"], "render.indent", issues, minimum=0, maximum=MAX_RENDER_INDENT
    )
    ensure_ascii = _as_bool(render["ensure_ascii"], "render.ensure_ascii", issues)
    exact_numbers = _as_bool(documents["exact_numbers"], "documents.exact_numbers", issues)
    level = _as_choice(logging_section["level"], "logging.level", issues, choices=LOG_LEVELS)

    if issues.has_issues:
        return SettingsValidationResult(settings=None, issues=issues.items())

    settings = DecodeSettings(
        indent=indent,
        ensure_ascii=ensure_ascii,
        exact_numbers=exact_numbers,
        log_level=level,
    )
    return SettingsValidationResult(settings=settings, issues=())


def assert_valid_settings(payload: Mapping[str, object] | object) -> DecodeSettings:
    """Validate settings and raise ``SettingsValidationError`` on failure."""

    result = validate_settings(payload)
    if result.settings is None:
        raise SettingsValidationError(result.issues)
    return result.settings


def _as_object(value: object, path: str, issues: _IssueCollector) -> dict[str, object] | None:
    if not isinstance(value, Mapping):
        issues.add(path, f"expected object, got {type(value).__name__}")
        return None
    out: dict[str, object] = {}
    for key, item in value.items():
        if not isinstance(key, str):
            issues.add(path, f"object key must be string, got {type(key).__name__}")
            continue
        out[key] = item
    return out


def _as_int(
    value: object,
    path: str,
    issues: _IssueCollector,
    *,
    minimum: int,
    maximum: int,
) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        issues.add(path, f"expected integer, got {type(value).__name__}")
        return minimum
    if value < minimum:
        issues.add(path, f"must be >= {minimum}")
    elif value > maximum:
        issues.add(path, f"must be <= {maximum}")
    return value


def _as_bool(value: object, path: str, issues: _IssueCollector) -> bool:
    if not isinstance(value, bool):
        issues.add(path, f"expected boolean, got {type(value).__name__}")
        return False
    return value


def _as_choice(
    value: object,
    path: str,
    issues: _IssueCollector,
    *,
    choices: Sequence[str],
) -> str:
    if not isinstance(value, str):
        issues.add(path, f"expected string, got {type(value).__name__}")
        return ""
    normalized = value.strip().upper()
    if normalized not in choices:
        issues.add(path, f"must be one of {', '.join(choices)}")
    return normalized


def _reject_unknown_keys(
    payload: Mapping[str, object],
    allowed: set[str],
    path: str,
    issues: _IssueCollector,
) -> None:
    for key in sorted(payload):
        if key not in allowed:
            issues.add(_join(path, key), "unknown field")


def _join(path: str, key: str) -> str:
    if not path:
        return key
    return f"{path}.{key}"


def _merge_into(target: dict[str, Any], overlay: Mapping[str, object]) -> None:
    for key in sorted(overlay):
        value = overlay[key]
        existing = target.get(key)
        if isinstance(value, Mapping) and isinstance(existing, dict):
            _merge_into(existing, value)
        else:
            target[key] = copy.deepcopy(value)


__all__ = [
    "DEFAULT_SETTINGS_PAYLOAD",
    "DecodeSettings",
    "SettingsValidationError",
    "SettingsValidationIssue",
    "SettingsValidationResult",
    "assert_valid_settings",
    "default_settings_payload",
    "merge_settings",
    "validate_settings",
]
