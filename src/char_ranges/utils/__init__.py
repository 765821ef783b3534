"""Utility exports."""
from .text import (
    is_char_boundary,
    is_continuation,
    len_utf8,
    split_at,
    to_bytes,
    to_text,
    utf8_width,
)

__all__ = [
    "is_char_boundary",
    "is_continuation",
    "len_utf8",
    "split_at",
    "to_bytes",
    "to_text",
    "utf8_width",
]
