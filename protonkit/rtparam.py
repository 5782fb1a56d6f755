"""Pipe-and-newline delimited key/value text ("rtvar") handling."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

EMPTY_MARKER = "[EMPTY]"

_ATOI = re.compile(r"\s*([+-]?\d+)")
_NUMBER = re.compile(r"-?[0-9]+")


def is_number(text: str) -> bool:
    """True if text is an optionally negative run of decimal digits."""
    return _NUMBER.fullmatch(text) is not None


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _split_lines(text: str, sep: str) -> list[str]:
    """Split like repeated getline: a trailing separator yields no extra token."""
    if not text:
        return []
    parts = text.split(sep)
    if parts[-1] == "":
        parts.pop()
    return parts


class RTPair:
    """One line: a key followed by '|'-separated values."""

    def __init__(self, key: str = "", values: Iterable[str] = ()) -> None:
        self.key = key
        self.values = list(values)
        self.value = "|".join(self.values)

    @classmethod
    def parse(cls, text: str) -> RTPair:
        """Parse one line; an empty line becomes the empty marker."""
        if not text:
            return cls("", [EMPTY_MARKER])
        key, *values = _split_lines(text, "|")
        return cls(key, values)

    def serialize(self) -> str:
        return self.key + "".join(f"|{value}" for value in self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RTPair):
            return NotImplemented
        return self.key == other.key and self.values[:1] == other.values[:1]

    def __repr__(self) -> str:
        return f"RTPair({self.key!r}, {self.values!r})"


class RTVar:
    """An ordered list of key/value lines."""

    def __init__(self, pairs: Iterable[RTPair] = ()) -> None:
        self._pairs = list(pairs)

    @classmethod
    def parse(cls, text: str) -> RTVar:
        result = cls()
        for line in _split_lines(text, "\n"):
            result.append(line)
        return result

    def append(self, text: str) -> RTPair:
        """Parse a line, add it, and return the new pair."""
        pair = RTPair.parse(text)
        self._pairs.append(pair)
        return pair

    def pair_at(self, index: int) -> RTPair:
        """Pair at index; an out-of-range index yields the first pair."""
        if not self._pairs:
            raise IndexError("no pairs")
        if 0 <= index < len(self._pairs):
            return self._pairs[index]
        return self._pairs[0]

    def valid(self) -> bool:
        return bool(self._pairs) and bool(self._pairs[0].values)

    def find(self, key: str) -> RTPair | None:
        return next((pair for pair in self._pairs if pair.key == key), None)

    def get(self, key: str) -> str:
        """Joined value text for key, or an empty string."""
        pair = self.find(key)
        return pair.value if pair else ""

    def set(self, key: str, value: str) -> None:
        """Replace the first value of key's pair, if it has one."""
        pair = self.find(key)
        if pair and pair.values:
            pair.values[0] = value

    def serialize(self) -> str:
        return "\n".join(pair.serialize() for pair in self._pairs)

    def validate_ints(self, keys: Iterable[str]) -> bool:
        return all(self.validate_int(key) for key in keys)

    def validate_int(self, key: str) -> bool:
        pair = self.find(key)
        return pair is not None and is_number(pair.value)

    def _require(self, key: str) -> RTPair:
        pair = self.find(key)
        if pair is None:
            raise KeyError(key)
        return pair

    def get_int(self, key: str) -> int:
        """Leading integer of key's value; raises KeyError if key is absent."""
        return _atoi(self._require(key).value)

    def get_long(self, key: str) -> int:
        """Leading integer of key's value; raises KeyError if key is absent."""
        return _atoi(self._require(key).value)

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[RTPair]:
        return iter(self._pairs)

    def remove(self, key: str) -> None:
        """Remove every pair equal to the first pair with this key."""
        target = self.find(key)
        if target is None:
            return
        probe = RTPair(target.key, target.values[:1])
        self._pairs = [pair for pair in self._pairs if not pair == probe]


class RTVarOpt:
    """Append-only builder of newline-separated text."""

    def __init__(self, start: str = "") -> None:
        self._text = start

    def append(self, text: str) -> None:
        self._text += "\n" + text

    def get(self) -> str:
        return self._text