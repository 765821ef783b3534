"""Per-character UTF-8 decoding from either end of a buffer."""
from __future__ import annotations

from typing import Optional, Tuple

from .utils.text import CONTINUATION_BYTES, is_continuation, to_text, utf8_width


class CharIndices:
    """Cursor yielding ``(start, char)`` pairs from a UTF-8 buffer.

    The buffer is shared, never copied; the cursor state is the pair of
    boundaries ``front`` and ``back`` delimiting the bytes not yet consumed.
    Both boundaries always sit on character boundaries and ``front <= back``.
    """

    __slots__ = ("_buffer", "_front", "_back")

    def __init__(self, buffer: bytes, front: int = 0, back: Optional[int] = None) -> None:
        self._buffer = buffer
        self._front = front
        self._back = len(buffer) if back is None else back

    @property
    def front(self) -> int:
        return self._front

    @property
    def back(self) -> int:
        return self._back

    def next(self) -> Optional[Tuple[int, str]]:
        start = self._front
        if start >= self._back:
            return None
        end = start + utf8_width(self._buffer[start])
        self._front = end
        return start, to_text(self._buffer[start:end])

    def next_back(self) -> Optional[Tuple[int, str]]:
        end = self._back
        if end <= self._front:
            return None
        start = self._step_back(end)
        self._back = start
        return start, to_text(self._buffer[start:end])

    def nth(self, n: int) -> Optional[Tuple[int, str]]:
        """Skip ``n`` characters from the front, then decode the next one."""
        buffer = self._buffer
        position = self._front
        for _ in range(n):
            if position >= self._back:
                break
            position += utf8_width(buffer[position])
        self._front = min(position, self._back)
        return self.next()

    def nth_back(self, n: int) -> Optional[Tuple[int, str]]:
        """Skip ``n`` characters from the back, then decode the previous one."""
        position = self._back
        for _ in range(n):
            if position <= self._front:
                break
            position = self._step_back(position)
        self._back = max(position, self._front)
        return self.next_back()

    def count(self) -> int:
        """Count the remaining characters and exhaust the cursor."""
        remaining = self._buffer[self._front : self._back]
        self._front = self._back
        return len(remaining.translate(None, CONTINUATION_BYTES))

    def size_hint(self) -> Tuple[int, Optional[int]]:
        remaining = self._back - self._front
        return (remaining + 3) // 4, remaining

    def as_bytes(self) -> bytes:
        return self._buffer[self._front : self._back]

    def as_str(self) -> str:
        return to_text(self.as_bytes())

    def copy(self) -> "CharIndices":
        return CharIndices(self._buffer, self._front, self._back)

    __copy__ = copy

    def _step_back(self, end: int) -> int:
        start = end - 1
        while start > self._front and is_continuation(self._buffer[start]):
            start -= 1
        return start


__all__ = ["CharIndices"]
