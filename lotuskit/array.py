"""A growable array that tracks its stride, length and capacity."""

from __future__ import annotations

from typing import Any, Iterator, Optional

HEADER_SIZE = 16


class DynamicArray:
    """An array of fixed-size slots that doubles its capacity when full."""

    def __init__(self, stride: int, capacity: int) -> None:
        if stride <= 0:
            raise ValueError("stride must be positive")
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.stride = stride
        self.capacity = capacity
        self._items: list[Any] = []

    @property
    def length(self) -> int:
        """Number of elements stored."""
        return len(self._items)

    @property
    def size(self) -> int:
        """Bytes the array would occupy: header plus every slot."""
        return HEADER_SIZE + self.capacity * self.stride

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def _grow(self) -> None:
        self.resize(max(self.capacity * 2, 1))

    def push(self, value: Any) -> None:
        """Append a value, doubling the capacity if the array is full."""
        if self.length >= self.capacity:
            self._grow()
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the last value."""
        if not self._items:
            raise IndexError("pop from an empty array")
        return self._items.pop()

    def insert(self, index: int, value: Any) -> None:
        """Insert a value at ``index``, shifting later values up."""
        if not 0 <= index <= self.length:
            raise IndexError("insert index out of range")
        if self.length >= self.capacity:
            self._grow()
        self._items.insert(index, value)

    def resize(self, new_capacity: int) -> None:
        """Change the capacity, dropping values that no longer fit."""
        if new_capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = new_capacity
        del self._items[new_capacity:]

    def describe(self, tag: Optional[str] = None) -> str:
        """Return a two-line summary of the array's layout."""
        return (
            f"|(Array): {tag or 'Lotus Array'}\n"
            f"|(size): {self.size} bytes (stride): {self.stride} bytes "
            f"(length): {self.length} elems (capacity): {self.capacity} elems"
        )