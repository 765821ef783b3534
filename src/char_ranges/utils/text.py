"""Encoding helpers shared across modules."""
from __future__ import annotations

from typing import Tuple

# Bytes 0x80..0xBF never start a character.
CONTINUATION_BYTES = bytes(range(0x80, 0xC0))


def to_bytes(data: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8", errors="surrogatepass")
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Expected str or bytes-like object, got {type(data).__name__}")


def to_text(data: str | bytes) -> str:
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="surrogatepass")
    return data


def is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


def utf8_width(lead: int) -> int:
    """Return the encoded length announced by the lead byte ``lead``."""
    if lead < 0x80:
        return 1
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


def len_utf8(char: str) -> int:
    """Return how many bytes ``char`` occupies once encoded as UTF-8."""
    code = ord(char)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


def is_char_boundary(data: bytes, index: int) -> bool:
    if index == 0 or index == len(data):
        return True
    if index < 0 or index > len(data):
        return False
    return not is_continuation(data[index])


def split_at(data: str | bytes, index: int) -> Tuple[bytes, bytes]:
    """Split the encoded ``data`` at byte ``index``.

    Raises
    ------
    ValueError
        If ``index`` falls inside a character or outside the buffer.
    """

    encoded = to_bytes(data)
    if not is_char_boundary(encoded, index):
        raise ValueError(f"Byte offset {index} does not align to UTF-8 boundary")
    return encoded[:index], encoded[index:]


__all__ = [
    "CONTINUATION_BYTES",
    "to_bytes",
    "to_text",
    "is_continuation",
    "utf8_width",
    "len_utf8",
    "is_char_boundary",
    "split_at",
]
