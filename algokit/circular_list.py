"""A singly linked circular list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: int
    next: Optional[_Node] = None


class CircularList:
    """A circular singly linked list with 1-based positional deletion."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def _link_first(self, value: int) -> _Node:
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1
        return node

    def insert_at_head(self, value: int) -> None:
        """Put ``value`` at the front of the list."""
        self._link_first(value)

    def insert_at_tail(self, value: int) -> None:
        """Put ``value`` at the end of the list."""
        self._tail = self._link_first(value)

    def delete_at_head(self) -> int:
        """Remove and return the first value."""
        if self._tail is None:
            raise IndexError("delete from an empty list")
        head = self._tail.next
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.value

    def delete(self, position: int) -> int:
        """Remove and return the value at 1-based ``position``."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is outside 1..{self._size}")
        if position == 1:
            return self.delete_at_head()
        before = self._tail.next
        for _ in range(position - 2):
            before = before.next
        removed = before.next
        before.next = removed.next
        if removed is self._tail:
            self._tail = before
        self._size -= 1
        return removed.value

    def __iter__(self) -> Iterator[int]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)