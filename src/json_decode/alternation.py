"""Alternation combinators: ``one_of`` and ``nullable``.

``one_of`` is the only place where a failure is turned back into data instead
of being propagated: every alternative is tried left to right and, if none
succeeds, their errors are merged into one flat ``OneOfError``.
"""

from __future__ import annotations

from typing import TypeVar

from json_decode.decoder import Decoder, DecoderLike, null_
from json_decode.errors import DecodingError, multiple
from json_decode.json_types import JSONValue
from json_decode.result import Err, Ok, Result

T = TypeVar("T")


def one_of(first: DecoderLike[T], *rest: DecoderLike[T]) -> Decoder[T]:
    """Return the first alternative's success, or every failure in attempt order."""

    alternatives = tuple(Decoder.of(candidate) for candidate in (first, *rest))

    def step(json: JSONValue) -> Result[T]:
        errors: list[DecodingError] = []
        for alternative in alternatives:
            result = alternative.run(json)
            if isinstance(result, Ok):
                return result
            errors.append(result.error)
        return Err(multiple(errors))

    names = ", ".join(alternative.name for alternative in alternatives)
    return Decoder(step, name=f"one_of({names})")


def nullable(decoder: DecoderLike[T], default: T | None = None) -> Decoder[T | None]:
    """Accept whatever ``decoder`` accepts, or JSON null mapped to ``default``."""

    inner = Decoder.of(decoder)
    return one_of(inner, null_.map(lambda _: default))


__all__ = ["nullable", "one_of"]
