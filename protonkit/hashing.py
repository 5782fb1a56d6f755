"""FNV-1a string hashes (32- and 64-bit)."""

from __future__ import annotations

from collections.abc import Iterator

FNV32_OFFSET = 0x811C9DC5
FNV32_PRIME = 0x01000193
FNV64_OFFSET = 0xCBF29CE484222325
FNV64_PRIME = 0x100000001B3

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _signed_chars(text: str | bytes) -> Iterator[int]:
    """Yield the bytes of text up to the first NUL, as signed characters."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    data = data.split(b"\0", 1)[0]
    for byte in data:
        yield byte - 0x100 if byte >= 0x80 else byte


def fnv32(text: str | bytes) -> int:
    """32-bit FNV-1a hash of text."""
    value = FNV32_OFFSET
    for char in _signed_chars(text):
        value = ((value ^ (char & _MASK32)) * FNV32_PRIME) & _MASK32
    return value


def fnv64(text: str | bytes) -> int:
    """64-bit FNV-1a hash of text."""
    value = FNV64_OFFSET
    for char in _signed_chars(text):
        value = ((value ^ (char & _MASK64)) * FNV64_PRIME) & _MASK64
    return value