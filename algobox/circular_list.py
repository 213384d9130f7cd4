"""A circular singly linked list addressed through its last node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node = self


class CircularLinkedList:
    """Circular list whose last node links back to the first."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._last: _Node | None = None
        self._size = 0
        for item in items:
            self.add_end(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _nodes(self) -> Iterator[_Node]:
        if self._last is None:
            return
        node = self._last.next
        while True:
            yield node
            if node is self._last:
                return
            node = node.next

    def _link_after(self, anchor: _Node | None, value: Any) -> _Node:
        node = _Node(value)
        if anchor is not None:
            node.next = anchor.next
            anchor.next = node
        else:
            self._last = node
        self._size += 1
        return node

    def add_front(self, value: Any) -> None:
        """Insert ``value`` as the first element."""
        self._link_after(self._last, value)

    def add_end(self, value: Any) -> None:
        """Insert ``value`` as the last element."""
        self._last = self._link_after(self._last, value)

    def add_after(self, item: Any, value: Any) -> None:
        """Insert ``value`` after the first element equal to ``item``."""
        for node in self._nodes():
            if node.value == item:
                created = self._link_after(node, value)
                if node is self._last:
                    self._last = created
                return
        raise ValueError(f"{item!r} is not in the list")

    def remove(self, key: Any) -> None:
        """Remove the first element equal to ``key``."""
        if self._last is None:
            raise ValueError(f"{key!r} is not in the list")
        previous = self._last
        for node in self._nodes():
            if node.value == key:
                if node is previous:
                    self._last = None
                else:
                    previous.next = node.next
                    if node is self._last:
                        self._last = previous
                self._size -= 1
                return
            previous = node
        raise ValueError(f"{key!r} is not in the list")