"""Deterministic breadcrumb rendering for decoding errors.

File: src/json_decode/render.py
Last updated: 2026-10-18

Purpose
- Turn a ``DecodingError`` tree into the diagnostic text users read.

Functional requirements
- Output is a pure function of the error tree and the indentation width; the
  exact layout is relied on by callers and tests.
"""

from __future__ import annotations

from typing import Final

from json_decode.constants import DEFAULT_RENDER_INDENT
from json_decode.errors import (
    ArrayIndexError,
    DecodingError,
    Failure,
    FieldError,
    OneOfError,
)
from json_decode.json_types import write_json

_NESTED_INDENT: Final[str] = "\n    "


def render(
    error: DecodingError,
    *,
    indent: int = DEFAULT_RENDER_INDENT,
    ensure_ascii: bool = False,
) -> str:
    """Render ``error`` as a breadcrumb-style message.

    Parameters
    ----------
    error:
        Root of the failure tree.
    indent:
        Width used when pretty-printing the offending JSON value.
    ensure_ascii:
        Escape non-ASCII characters in the printed value.
    """

    return _render(error, (), indent=indent, ensure_ascii=ensure_ascii)


def breadcrumb(error: DecodingError) -> str:
    """Return the ``json``-relative path of the first non-path node, e.g. ``.a[2]``."""

    crumbs: list[str] = []
    current = error
    while isinstance(current, (FieldError, ArrayIndexError)):
        if isinstance(current, FieldError):
            crumbs.append(_field_crumb(current.field_name))
        else:
            crumbs.append(f"[{current.index}]")
        current = current.inner
    return "".join(crumbs)


def _render(
    error: DecodingError,
    context: tuple[str, ...],
    *,
    indent: int,
    ensure_ascii: bool,
) -> str:
    if isinstance(error, FieldError):
        return _render(
            error.inner,
            (*context, _field_crumb(error.field_name)),
            indent=indent,
            ensure_ascii=ensure_ascii,
        )

    if isinstance(error, ArrayIndexError):
        return _render(
            error.inner,
            (*context, f"[{error.index}]"),
            indent=indent,
            ensure_ascii=ensure_ascii,
        )

    if isinstance(error, OneOfError):
        return _render_one_of(error, context, indent=indent, ensure_ascii=ensure_ascii)

    if isinstance(error, Failure):
        if context:
            introduction = f"Problem with the value at json{''.join(context)}:\n\n    "
        else:
            introduction = "Problem with the given value:\n\n"
        printed = write_json(error.value, indent=indent, ensure_ascii=ensure_ascii)
        return f"{introduction}{_indent(printed)}\n\n{error.reason_text}"

    raise TypeError(f"not a decoding error: {type(error).__name__}")


def _render_one_of(
    error: OneOfError,
    context: tuple[str, ...],
    *,
    indent: int,
    ensure_ascii: bool,
) -> str:
    location = f" at json{''.join(context)}" if context else ""
    if not error.errors:
        return f"Ran into oneOf with no possibilities{location or '!'}"
    if len(error.errors) == 1:
        return _render(error.errors[0], context, indent=indent, ensure_ascii=ensure_ascii)

    count = len(error.errors)
    parts = [f"oneOf{location} failed in the following {count} ways:", "\n\n"]
    for position, alternative in enumerate(error.errors, start=1):
        # Each alternative is rendered on its own, without the outer breadcrumb.
        rendered = _render(alternative, (), indent=indent, ensure_ascii=ensure_ascii)
        parts.append(f"\n\n({position}) {_indent(rendered)}")
        if position != count:
            parts.append("\n\n")
    return "".join(parts)


def _field_crumb(field_name: str) -> str:
    if field_name and all(char.isalpha() or char.isdecimal() for char in field_name):
        return f".{field_name}"
    return f"[{field_name}]"


def _indent(text: str) -> str:
    lines = text.split("\n")
    while len(lines) > 1 and not lines[-1]:
        lines.pop()
    return _NESTED_INDENT.join(lines)


__all__ = ["breadcrumb", "render"]
