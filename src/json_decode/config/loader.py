"""
json-decode - settings loader

File: src/json_decode/config/loader.py
Last updated: 2026-10-18

Purpose
- Load effective settings from defaults, a TOML file, env vars, and explicit
  overrides.

What should be included in this file
- Precedence logic: overrides > env (JSON_DECODE_) > file > defaults.
- TOML loading via ``tomllib`` from ``json_decode.toml`` or the
  ``[tool.json_decode]`` table of ``pyproject.toml``.
- Deterministic environment variable mapping and coercion.

Functional requirements
- Reject invalid settings via schema validation.
"""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from json_decode.config.schema import (
    DecodeSettings,
    assert_valid_settings,
    default_settings_payload,
    merge_settings,
)
from json_decode.constants import (
    DEFAULT_SETTINGS_FILE,
    ENV_PREFIX,
    PYPROJECT_FILE,
    PYPROJECT_TOOL_TABLE,
)

_BOOLEAN_TRUE = frozenset({"1", "true", "t", "yes", "y", "on"})
_BOOLEAN_FALSE = frozenset({"0", "false", "f", "no", "n", "off"})


@dataclass(frozen=True, slots=True)
class _Binding:
    path: tuple[str, ...]
    value_type: Literal["str", "int", "bool"]


class SettingsLoadError(ValueError):
    """Raised when settings cannot be loaded or overrides cannot be coerced."""


def load_settings(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    overrides: Mapping[str, object] | None = None,
    search_dir: str | Path | None = None,
) -> DecodeSettings:
    """Load effective settings with precedence: overrides > env > file > defaults.

    Parameters
    ----------
    config_path:
        Explicit settings file. A ``pyproject.toml`` is read from its
        ``[tool.json_decode]`` table; any other file is read whole. A missing
        explicit file is an error.
    environ:
        Environment mapping; defaults to ``os.environ``.
    overrides:
        Dotted-key overrides such as ``{"render.indent": 2}``.
    search_dir:
        Directory searched when ``config_path`` is omitted; defaults to the
        current working directory.
    """

    env_map = dict(os.environ if environ is None else environ)
    file_payload = _load_file_payload(config_path, search_dir)

    merged = merge_settings(default_settings_payload(), file_payload)
    assert_valid_settings(merged)

    merged = merge_settings(merged, _collect_env_overrides(merged, env_map))
    merged = merge_settings(merged, _materialize_overrides(overrides or {}))
    return assert_valid_settings(merged)


def dump_settings(settings: DecodeSettings) -> str:
    """Return a deterministic JSON dump of ``settings``."""

    return json.dumps(
        settings.to_payload(), sort_keys=True, separators=(",", ":"), ensure_ascii=False
    )


def _load_file_payload(
    config_path: str | Path | None,
    search_dir: str | Path | None,
) -> dict[str, Any]:
    if config_path is not None:
        path = Path(config_path).expanduser().resolve()
        return _payload_from_file(path, required=True)

    base = Path.cwd() if search_dir is None else Path(search_dir)
    dedicated = (base / DEFAULT_SETTINGS_FILE).resolve()
    if dedicated.exists():
        return _payload_from_file(dedicated, required=True)
    return _payload_from_file((base / PYPROJECT_FILE).resolve(), required=False)


def _payload_from_file(path: Path, *, required: bool) -> dict[str, Any]:
    parsed = _load_toml_file(path, required=required)
    if path.name != PYPROJECT_FILE:
        return parsed

    table: object = parsed
    for part in PYPROJECT_TOOL_TABLE:
        if not isinstance(table, Mapping):
            return {}
        table = table.get(part, {})
    if not isinstance(table, Mapping):
        raise SettingsLoadError(f"[{'.'.join(PYPROJECT_TOOL_TABLE)}] must be a table: {path}")
    return dict(table)


def _load_toml_file(path: Path, *, required: bool) -> dict[str, Any]:
    if not path.exists():
        if required:
            raise SettingsLoadError(f"settings file not found: {path}")
        return {}

    try:
        with path.open("rb") as handle:
            parsed = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise SettingsLoadError(f"invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise SettingsLoadError(f"unable to read settings file {path}: {exc}") from exc

    return parsed


def _collect_env_overrides(
    payload: Mapping[str, object], environ: Mapping[str, str]
) -> dict[str, Any]:
    bindings = _build_bindings(payload)
    overrides: dict[str, Any] = {}
    for env_name in sorted(bindings):
        raw = environ.get(env_name)
        if raw is None:
            continue
        binding = bindings[env_name]
        value = _coerce_env(raw, binding.value_type, env_name, binding.path)
        _set_nested(overrides, binding.path, value)
    return overrides


def _build_bindings(payload: Mapping[str, object]) -> dict[str, _Binding]:
    bindings: dict[str, _Binding] = {}
    for path, value in _iter_scalar_paths(payload):
        kind = _kind_for_value(value)
        if kind is None:
            continue
        bindings[_env_name_for_path(path)] = _Binding(path=path, value_type=kind)
    return bindings


def _iter_scalar_paths(
    payload: Mapping[str, object],
    prefix: tuple[str, ...] = (),
) -> list[tuple[tuple[str, ...], object]]:
    pairs: list[tuple[tuple[str, ...], object]] = []
    for key in sorted(payload):
        value = payload[key]
        path = (*prefix, key)
        if isinstance(value, Mapping):
            pairs.extend(_iter_scalar_paths(value, path))
        else:
            pairs.append((path, value))
    return pairs


def _kind_for_value(value: object) -> Literal["str", "int", "bool"] | None:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, str):
        return "str"
    return None


def _coerce_env(
    raw: str,
    value_type: Literal["str", "int", "bool"],
    env_name: str,
    path: tuple[str, ...],
) -> object:
    value = raw.strip()
    if value_type == "str":
        return value
    if value_type == "int":
        try:
            return int(value)
        except ValueError as exc:
            raise SettingsLoadError(f"{env_name} -> {'.'.join(path)} must be an integer") from exc

    lowered = value.lower()
    if lowered in _BOOLEAN_TRUE:
        return True
    if lowered in _BOOLEAN_FALSE:
        return False
    raise SettingsLoadError(
        f"{env_name} -> {'.'.join(path)} must be a boolean (true/false/1/0/yes/no/on/off)"
    )


def _materialize_overrides(overrides: Mapping[str, object]) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    for key in sorted(overrides):
        path = tuple(part for part in key.split(".") if part)
        if not path:
            raise SettingsLoadError(f"invalid override key {key!r}")
        _set_nested(payload, path, overrides[key])
    return payload


def _set_nested(target: dict[str, Any], path: tuple[str, ...], value: object) -> None:
    cursor = target
    for part in path[:-1]:
        next_node = cursor.get(part)
        if not isinstance(next_node, dict):
            next_node = {}
            cursor[part] = next_node
        cursor = next_node
    cursor[path[-1]] = value


def _env_name_for_path(path: tuple[str, ...]) -> str:
    return ENV_PREFIX + "_".join(part.upper() for part in path)


__all__ = [
    "SettingsLoadError",
    "dump_settings",
    "load_settings",
]
