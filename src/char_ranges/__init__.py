"""Iterate characters of UTF-8 text together with their byte ranges."""
from .models import CharRange, Span
from .ranges import CharRanges, CharRangesOffset, char_ranges, char_ranges_offset
from .version import __version__

__all__ = [
    "CharRange",
    "CharRanges",
    "CharRangesOffset",
    "Span",
    "char_ranges",
    "char_ranges_offset",
    "__version__",
]
