"""A fixed-size string-keyed hash map with linear probing."""

from __future__ import annotations

from typing import Any, Iterator, Optional


def string_hash(text: str) -> int:
    """Sum of every byte of the UTF-8 text (as signed chars) times 31."""
    return sum((b - 256 if b > 127 else b) * 31 for b in text.encode("utf-8"))


class Hashmap:
    """A map with a fixed number of slots, resolving collisions by probing."""

    def __init__(self, max_entries: int) -> None:
        if max_entries <= 0:
            raise ValueError("a hashmap needs at least one slot")
        self.max = max_entries
        self.count = 0
        self._slots: list[Optional[tuple[str, Any]]] = [None] * max_entries

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[str]:
        return (slot[0] for slot in self._slots if slot is not None)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __getitem__(self, key: str) -> Any:
        index = self._find(key)
        if index is None:
            raise KeyError(key)
        return self._slots[index][1]  # type: ignore[index]

    def _home(self, key: str) -> int:
        return string_hash(key) % self.max

    def _probe(self, start: int, key: Optional[str]) -> Optional[int]:
        """Search forward then backward (never reaching slot 0) from ``start``."""
        candidates = list(range(start + 1, self.max)) + list(range(start - 1, 0, -1))
        for i in candidates:
            slot = self._slots[i]
            if key is None:
                if slot is None:
                    return i
            elif slot is not None and slot[0] == key:
                return i
        return None

    def _find(self, key: str) -> Optional[int]:
        home = self._home(key)
        slot = self._slots[home]
        if slot is None:
            return None
        if slot[0] == key:
            return home
        return self._probe(home, key)

    def set(self, key: str, value: Any) -> bool:
        """Store a value; return True for a new key, False when updating one."""
        if value is None:
            raise ValueError("hashmap values must not be None")
        if self.count + 1 > self.max:
            raise OverflowError("hashmap is full")
        home = self._home(key)
        slot = self._slots[home]
        if slot is not None:
            if slot[0] == key:
                self._slots[home] = (key, value)
                return False
            free = self._probe(home, None)
            if free is None:
                raise OverflowError("no free slot found while probing")
            home = free
        self._slots[home] = (key, value)
        self.count += 1
        return True

    def get(self, key: str) -> Any:
        """Return the value for ``key``, or None when it is absent."""
        index = self._find(key)
        return None if index is None else self._slots[index][1]  # type: ignore[index]

    def remove(self, key: str) -> None:
        """Remove ``key``; raise KeyError when it is absent."""
        index = self._find(key)
        if index is None:
            raise KeyError(key)
        self._slots[index] = None
        self.count -= 1