"""Chained fixed-capacity storage regions."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class MemoryRegion:
    """A fixed-capacity store of values that can be chained to other regions."""

    def __init__(self, stride: int, capacity: int, align: int = 16) -> None:
        if align <= 0 or align & (align - 1):
            raise ValueError("align must be a power of two")
        if stride <= 0 or capacity <= 0:
            raise ValueError("stride and capacity must be positive")
        self.stride = stride
        self.capacity = capacity
        self.align = align
        self.next: Optional[MemoryRegion] = None
        self.last: Optional[MemoryRegion] = None
        self._data: list[Any] = []

    @property
    def count(self) -> int:
        """Number of values stored."""
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def append(self, value: Any) -> None:
        """Store a value; raise OverflowError when the region is full."""
        if self.count + 1 > self.capacity:
            raise OverflowError("memory region is full")
        self._data.append(value)

    def get(self, index: int) -> Any:
        """Return the value stored at ``index``."""
        if not 0 <= index < self.count:
            raise IndexError("region index out of range")
        return self._data[index]

    def spawn(self, stride: int, capacity: int) -> MemoryRegion:
        """Create a new region directly after this one and return it."""
        region = MemoryRegion(stride, capacity, self.align)
        self.next = region
        region.last = self
        return region

    def step(self, step: int) -> MemoryRegion:
        """Return the region ``step`` links away (negative walks backwards)."""
        region = self
        for _ in range(abs(step)):
            neighbour = region.next if step > 0 else region.last
            if neighbour is None:
                raise IndexError("no region at that step")
            region = neighbour
        return region

    def link(self, region: MemoryRegion, step: int) -> None:
        """Insert ``region`` right after the region ``step`` links away."""
        target = self.step(step)
        if target.next is not None:
            target.next.last = region
        region.next = target.next
        region.last = target
        target.next = region

    def unlink(self) -> None:
        """Clear this region's own links; neighbouring regions keep theirs."""
        self.last = None
        self.next = None

    def free(self) -> None:
        """Bypass this region in its chain and release its contents."""
        if self.last is not None:
            self.last.next = self.next
        if self.next is not None:
            self.next.last = self.last
        self.last = None
        self.next = None
        self.capacity = 0
        self.stride = 0
        self._data.clear()

    def free_all(self) -> None:
        """Free this region and every region after it."""
        current: Optional[MemoryRegion] = self
        while current is not None:
            following = current.next
            current.free()
            current = following