"""A string-to-string dictionary with slot ordering and a stable 32-bit key hash."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Iterator, Optional

_MIN_SIZE = 128
_MASK = 0xFFFFFFFF


def dictionary_hash(key: Optional[str]) -> int:
    """Return the one-at-a-time 32-bit hash of ``key`` (0 for ``None``)."""
    if key is None:
        return 0
    value = 0
    for byte in key.encode("utf-8"):
        value = (value + byte) & _MASK
        value = (value + (value << 10)) & _MASK
        value ^= value >> 6
    value = (value + (value << 3)) & _MASK
    value ^= value >> 11
    value = (value + (value << 15)) & _MASK
    return value


@dataclass
class _Slot:
    key: str
    value: Optional[str]
    hash: int


class Dictionary:
    """Associations of string keys to string (or ``None``) values.

    Entries live in a table of slots that doubles when full; iteration follows
    slot order, and a new key takes the first free slot from the current entry
    count onwards, wrapping at the end of the table.
    """

    def __init__(self, size: int = 0) -> None:
        self._slots: list[Optional[_Slot]] = [None] * max(size, _MIN_SIZE)
        self._index: dict[str, int] = {}

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated."""
        return len(self._slots)

    def _find(self, key: str) -> Optional[int]:
        position = self._index.get(key)
        if position is None:
            return None
        slot = self._slots[position]
        if slot is None or slot.hash != dictionary_hash(key):
            return None
        return position

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value stored for ``key``, or ``default`` if it is absent."""
        position = self._find(key)
        if position is None:
            return default
        return self._slots[position].value

    def set(self, key: str, value: Optional[str]) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        if key is None:
            raise ValueError("dictionary key must not be None")
        position = self._find(key)
        if position is not None:
            self._slots[position].value = value
            return
        count = len(self._index)
        if count == len(self._slots):
            self._slots.extend([None] * len(self._slots))
        position = count
        while self._slots[position] is not None:
            position += 1
            if position == len(self._slots):
                position = 0
        self._slots[position] = _Slot(key, value, dictionary_hash(key))
        self._index[key] = position

    def unset(self, key: str) -> None:
        """Remove ``key``; nothing happens when it is absent."""
        if key is None:
            return
        position = self._find(key)
        if position is None:
            return
        self._slots[position] = None
        del self._index[key]

    def dump(self, out: IO[str]) -> None:
        """Write every entry to ``out`` as an aligned key and bracketed value."""
        if out is None:
            return
        if not self._index:
            out.write("empty dictionary\n")
            return
        for key, value in self.items():
            shown = value if value is not None else "UNDEF"
            out.write(f"{key:>20}\t[{shown}]\n")

    def items(self) -> Iterator[tuple[str, Optional[str]]]:
        """Yield ``(key, value)`` pairs in slot order."""
        for slot in self._slots:
            if slot is not None:
                yield slot.key, slot.value

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.items())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None