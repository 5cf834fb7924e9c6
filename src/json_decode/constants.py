"""Stable constants shared across json-decode modules."""

from __future__ import annotations

from typing import Final

# Rendering.
DEFAULT_RENDER_INDENT: Final[int] = 4
MAX_RENDER_INDENT: Final[int] = 16

# Logging.
LOGGER_NAME: Final[str] = "json_decode"
LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

# Settings discovery.
DEFAULT_SETTINGS_FILE: Final[str] = "json_decode.toml"
PYPROJECT_FILE: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_TABLE: Final[tuple[str, str]] = ("tool", "json_decode")
ENV_PREFIX: Final[str] = "JSON_DECODE_"

# Document suffixes accepted by ``decode_file``.
JSON_SUFFIXES: Final[frozenset[str]] = frozenset({".json"})
YAML_SUFFIXES: Final[frozenset[str]] = frozenset({".yaml", ".yml"})

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_RENDER_INDENT",
    "DEFAULT_SETTINGS_FILE",
    "ENV_PREFIX",
    "JSON_SUFFIXES",
    "LOGGER_NAME",
    "LOG_LEVELS",
    "MAX_RENDER_INDENT",
    "PYPROJECT_FILE",
    "PYPROJECT_TOOL_TABLE",
    "YAML_SUFFIXES",
]
