"""
json-decode - decoding error model

File: src/json_decode/errors.py
Last updated: 2026-10-18

Purpose
- Define the closed set of decoding failures and the exception raised at the
  ``Decoder.decode`` boundary.

What should be included in this file
- Four frozen variants: FieldError, ArrayIndexError, OneOfError, Failure.
- Factory helpers mirroring how combinators build the tree.
- ``JsonDecodingError`` carrying the failure tree and its rendered message.

Functional requirements
- Path wrappers always hold exactly one inner error; outermost wrapper is the
  outermost container visited.
- ``OneOfError`` is flat: it never holds another ``OneOfError``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from json_decode.json_types import JSONValue

if TYPE_CHECKING:
    from json_decode.config.schema import DecodeSettings

PathSegment: TypeAlias = str | int


@dataclass(frozen=True, slots=True)
class FieldError:
    """Decoding failed while processing object key ``field_name``."""

    field_name: str
    inner: DecodingError

    @property
    def path(self) -> tuple[PathSegment, ...]:
        return (self.field_name, *self.inner.path)

    @property
    def message(self) -> str:
        from json_decode.render import render

        return render(self)


@dataclass(frozen=True, slots=True)
class ArrayIndexError:
    """Decoding failed while processing array position ``index``."""

    index: int
    inner: DecodingError

    @property
    def path(self) -> tuple[PathSegment, ...]:
        return (self.index, *self.inner.path)

    @property
    def message(self) -> str:
        from json_decode.render import render

        return render(self)


@dataclass(frozen=True, slots=True)
class OneOfError:
    """Every alternative failed; ``errors`` keeps them in attempt order."""

    errors: tuple[DecodingError, ...]

    @property
    def path(self) -> tuple[PathSegment, ...]:
        return ()

    @property
    def message(self) -> str:
        from json_decode.render import render

        return render(self)


@dataclass(frozen=True, slots=True)
class Failure:
    """Terminal failure: ``value`` did not meet the expectation in ``reason``.

    ``reason`` is either a message or the exception a user-supplied decoder
    raised while looking at ``value``.
    """

    reason: str | BaseException
    value: JSONValue

    @property
    def path(self) -> tuple[PathSegment, ...]:
        return ()

    @property
    def reason_text(self) -> str:
        return describe_reason(self.reason)

    @property
    def message(self) -> str:
        from json_decode.render import render

        return render(self)


DecodingError: TypeAlias = FieldError | ArrayIndexError | OneOfError | Failure


class JsonDecodingError(ValueError):
    """Raised by ``Decoder.decode`` when a value cannot be decoded."""

    def __init__(self, error: DecodingError) -> None:
        from json_decode.render import render

        self.error = error
        super().__init__(render(error))

    def render(self, settings: DecodeSettings | None = None) -> str:
        """Render the failure tree using ``settings`` for the value printout."""

        if settings is None:
            return str(self)

        from json_decode.render import render

        return render(self.error, indent=settings.indent, ensure_ascii=settings.ensure_ascii)


def at_field(field_name: str, error: DecodingError) -> FieldError:
    return FieldError(field_name=field_name, inner=error)


def at_index(index: int, error: DecodingError) -> ArrayIndexError:
    return ArrayIndexError(index=index, inner=error)


def multiple(errors: Iterable[DecodingError]) -> OneOfError:
    """Build a flattened ``OneOfError`` from ``errors`` in order."""

    flattened: list[DecodingError] = []
    for error in errors:
        if isinstance(error, OneOfError):
            flattened.extend(error.errors)
        else:
            flattened.append(error)
    return OneOfError(errors=tuple(flattened))


def failure(reason: str | BaseException, value: JSONValue) -> Failure:
    return Failure(reason=reason, value=value)


def describe_reason(reason: str | BaseException) -> str:
    if isinstance(reason, str):
        return reason
    detail = str(reason)
    name = type(reason).__name__
    return f"{name}: {detail}" if detail else name


__all__ = [
    "ArrayIndexError",
    "DecodingError",
    "Failure",
    "FieldError",
    "JsonDecodingError",
    "OneOfError",
    "PathSegment",
    "at_field",
    "at_index",
    "describe_reason",
    "failure",
    "multiple",
]
