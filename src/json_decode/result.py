"""Success/failure values threaded through every decoder."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from json_decode.errors import DecodingError

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Decoded value."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def map(self, func: Callable[[T], R]) -> Ok[R]:
        return Ok(func(self.value))


@dataclass(frozen=True, slots=True)
class Err:
    """Structured decoding failure."""

    error: DecodingError

    @property
    def ok(self) -> bool:
        return False

    def map(self, func: Callable[[object], object]) -> Err:
        return self


Result = Ok[T] | Err

__all__ = ["Err", "Ok", "Result"]
