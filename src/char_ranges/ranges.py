"""Iterators over characters and their UTF-8 byte ranges.

Similar to enumerating a string's character indices, but every item carries
both the start and the end byte position. Mapping a start index ``i`` to
``i..i + 1`` is not valid in general since a UTF-8 character occupies up to
four bytes:

=====  =====  =====
Char   Bytes  Span
=====  =====  =====
``O``  1      0..1
``Ø``  2      0..2
``∈``  3      0..3
``🌏`` 4      0..4
=====  =====  =====

Example
-------
>>> chars = char_ranges("Hello 🗻∈🌏")
>>> next(chars)
CharRange(span=Span(start=0, end=1), char='H')
>>> chars.nth(4)
CharRange(span=Span(start=5, end=6), char=' ')
>>> chars.as_str()
'🗻∈🌏'
>>> chars.next_back()
CharRange(span=Span(start=13, end=17), char='🌏')

``nth``, ``nth_back``, ``last`` and ``count`` skip characters without
building their spans.
"""
from __future__ import annotations

from typing import Iterator, Optional, Tuple

from .decoder import CharIndices
from .models import CharRange, Span
from .utils.text import len_utf8, to_bytes

Text = str | bytes | bytearray | memoryview


def _to_range(item: Optional[Tuple[int, str]]) -> Optional[CharRange]:
    if item is None:
        return None
    start, char = item
    return CharRange(Span(start, start + len_utf8(char)), char)


def _check_skip(n: int) -> int:
    if n < 0:
        raise ValueError(f"Cannot skip a negative number of characters: {n}")
    return n


class CharRanges:
    """Iterator over characters and their start and end byte positions.

    Iterates from the front with ``next()`` and from the back with
    ``next_back()``; both ends may be mixed freely. Copying is cheap and
    shares the encoded buffer.
    """

    __slots__ = ("_iter",)

    def __init__(self, text: Text) -> None:
        self._iter = CharIndices(to_bytes(text))

    @classmethod
    def _from_indices(cls, indices: CharIndices) -> "CharRanges":
        instance = cls.__new__(cls)
        instance._iter = indices
        return instance

    def __iter__(self) -> "CharRanges":
        return self

    def __next__(self) -> CharRange:
        item = _to_range(self._iter.next())
        if item is None:
            raise StopIteration
        return item

    def next_back(self) -> Optional[CharRange]:
        return _to_range(self._iter.next_back())

    def nth(self, n: int) -> Optional[CharRange]:
        """Return the ``n``-th remaining character counting from zero.

        The ``n`` characters before it are consumed. When fewer than ``n + 1``
        characters remain the iterator is exhausted and ``None`` is returned.
        """
        return _to_range(self._iter.nth(_check_skip(n)))

    def nth_back(self, n: int) -> Optional[CharRange]:
        return _to_range(self._iter.nth_back(_check_skip(n)))

    def last(self) -> Optional[CharRange]:
        return self.next_back()

    def count(self) -> int:
        """Return the number of remaining characters, consuming them."""
        return self._iter.count()

    def size_hint(self) -> Tuple[int, Optional[int]]:
        return self._iter.size_hint()

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    def __reversed__(self) -> Iterator[CharRange]:
        return iter(self.next_back, None)

    def as_str(self) -> str:
        """Return the remaining substring.

        >>> chars = char_ranges("ABCDE")
        >>> next(chars).char, chars.next_back().char
        ('A', 'E')
        >>> chars.as_str()
        'BCD'
        """
        return self._iter.as_str()

    def as_bytes(self) -> bytes:
        return self._iter.as_bytes()

    def offset(self, offset: int) -> "CharRangesOffset":
        """Return an iterator over the remaining characters with ``offset``
        added to every position.

        The returned iterator drives this one: advancing either advances both.
        Wrap ``self.copy()`` to keep an independent cursor.
        """
        return CharRangesOffset._wrap(self, offset)

    def copy(self) -> "CharRanges":
        return CharRanges._from_indices(self._iter.copy())

    __copy__ = copy

    def __repr__(self) -> str:
        return f"CharRanges({list(self.copy())!r})"


class CharRangesOffset:
    """Iterator over characters and their byte positions shifted by ``offset``.

    Useful when the text being iterated is a slice of a larger original and
    positions are wanted in the coordinates of the original.

    >>> text = "Hello 👋 World 🌏".encode()
    >>> chars = char_ranges_offset(text[11:], 11)
    >>> next(chars)
    CharRange(span=Span(start=11, end=12), char='W')
    >>> chars.next_back()
    CharRange(span=Span(start=17, end=21), char='🌏')
    >>> chars.as_str()
    'orld '
    """

    __slots__ = ("_iter", "_offset")

    def __init__(self, offset: int, text: Text) -> None:
        self._iter = CharRanges(text)
        self._offset = _check_offset(offset)

    @classmethod
    def _wrap(cls, ranges: CharRanges, offset: int) -> "CharRangesOffset":
        instance = cls.__new__(cls)
        instance._iter = ranges
        instance._offset = _check_offset(offset)
        return instance

    @property
    def offset(self) -> int:
        """The offset this iterator was created with; it never changes."""
        return self._offset

    def _shift(self, item: Optional[CharRange]) -> Optional[CharRange]:
        if item is None:
            return None
        return CharRange(item.span.shift(self._offset), item.char)

    def __iter__(self) -> "CharRangesOffset":
        return self

    def __next__(self) -> CharRange:
        span, char = next(self._iter)
        return CharRange(span.shift(self._offset), char)

    def next_back(self) -> Optional[CharRange]:
        return self._shift(self._iter.next_back())

    def nth(self, n: int) -> Optional[CharRange]:
        return self._shift(self._iter.nth(n))

    def nth_back(self, n: int) -> Optional[CharRange]:
        return self._shift(self._iter.nth_back(n))

    def last(self) -> Optional[CharRange]:
        return self.next_back()

    def count(self) -> int:
        return self._iter.count()

    def size_hint(self) -> Tuple[int, Optional[int]]:
        return self._iter.size_hint()

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    def __reversed__(self) -> Iterator[CharRange]:
        return iter(self.next_back, None)

    def as_str(self) -> str:
        return self._iter.as_str()

    def as_bytes(self) -> bytes:
        return self._iter.as_bytes()

    def copy(self) -> "CharRangesOffset":
        return CharRangesOffset._wrap(self._iter.copy(), self._offset)

    __copy__ = copy

    def __repr__(self) -> str:
        return f"CharRangesOffset({list(self.copy())!r})"


def _check_offset(offset: int) -> int:
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise TypeError(f"Offset must be an integer, got {type(offset).__name__}")
    if offset < 0:
        raise ValueError(f"Offset must not be negative: {offset}")
    return offset


def char_ranges(text: Text) -> CharRanges:
    """Return an iterator over the characters of ``text`` and their byte spans."""
    return CharRanges(text)


def char_ranges_offset(text: Text, offset: int) -> CharRangesOffset:
    """Return an iterator like :func:`char_ranges` with ``offset`` added to all
    positions."""
    return CharRanges(text).offset(offset)


__all__ = ["CharRanges", "CharRangesOffset", "char_ranges", "char_ranges_offset"]
