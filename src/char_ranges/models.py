"""Shared domain models used across char-ranges."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, NamedTuple


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open ``[start, end)`` byte range into a UTF-8 buffer."""

    start: int
    end: int

    def length(self) -> int:
        return self.end - self.start

    def as_slice(self) -> slice:
        return slice(self.start, self.end)

    def shift(self, offset: int) -> "Span":
        return Span(self.start + offset, self.end + offset)

    def __iter__(self) -> Iterator[int]:
        yield self.start
        yield self.end


class CharRange(NamedTuple):
    """A decoded character together with the bytes it occupies."""

    span: Span
    char: str

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end

    def to_dict(self) -> Dict[str, object]:
        return {"start": self.span.start, "end": self.span.end, "char": self.char}


__all__ = ["Span", "CharRange"]
