"""A doubly linked list with a header recording its size and length."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

HEADER_SIZE = 12
NODE_SIZE = 24


@dataclass(eq=False)
class ListNode:
    """One node of a linked list."""

    prev: Optional[ListNode] = field(default=None, repr=False)
    next: Optional[ListNode] = field(default=None, repr=False)
    data: Any = None


@dataclass(frozen=True)
class ListHeader:
    """Bookkeeping for a list: bytes used, element stride and node count."""

    size: int
    stride: int
    length: int


class LinkedList:
    """A doubly linked list that always holds at least its start node."""

    def __init__(self, stride: int) -> None:
        self.stride = stride
        self.head = ListNode()
        self._tail = self.head
        self._length = 1

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[ListNode]:
        node: Optional[ListNode] = self.head
        while node is not None:
            yield node
            node = node.next

    def header(self) -> ListHeader:
        """Return the list's current header."""
        return ListHeader(
            size=HEADER_SIZE + self._length * NODE_SIZE,
            stride=self.stride,
            length=self._length,
        )

    def append_node(self) -> ListNode:
        """Add an empty node at the end and return it."""
        node = ListNode(prev=self._tail)
        self._tail.next = node
        self._tail = node
        self._length += 1
        return node

    def remove_node(self) -> None:
        """Remove the last node; the start node cannot be removed."""
        if self._tail is self.head:
            raise IndexError("cannot remove the start node")
        tail = self._tail
        previous = tail.prev
        assert previous is not None
        previous.next = None
        tail.prev = None
        self._tail = previous
        self._length -= 1

    def node(self, index: int) -> ListNode:
        """Return the node at ``index``."""
        if not 0 <= index < self._length:
            raise IndexError("list index out of range")
        for position, node in enumerate(self):
            if position == index:
                return node
        raise IndexError("list index out of range")