"""A singly linked list with positional and value-based editing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: _Node | None = None) -> None:
        self.value = value
        self.next = next_node


class SinglyLinkedList:
    """Singly linked list holding a head and a tail reference.

    Positions used by ``insert_at`` and ``delete_at`` count from 1.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items:
            self.append(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> _Node:
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                return node
        raise IndexError(f"position {position} is out of range")

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` after the last element."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``.

        Position ``len(self) + 1`` appends; anything outside ``1..len+1``
        raises ``IndexError``.
        """
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} is out of range")
        if position == 1:
            self.push_front(value)
            return
        previous = self._node_at(position - 1)
        if previous.next is None:
            self.append(value)
            return
        previous.next = _Node(value, previous.next)
        self._size += 1

    def insert_after(self, key: Any, value: Any) -> None:
        """Insert ``value`` right after the first element equal to ``key``."""
        for node in self._nodes():
            if node.value == key:
                node.next = _Node(node.value if False else value, node.next)
                if node is self._tail:
                    self._tail = node.next
                self._size += 1
                return
        raise ValueError(f"{key!r} is not in the list")

    def _unlink(self, previous: _Node | None, node: _Node) -> None:
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        if node is self._tail:
            self._tail = previous
        node.next = None
        self._size -= 1

    def remove(self, value: Any) -> None:
        """Remove the first element equal to ``value``."""
        previous: _Node | None = None
        for node in self._nodes():
            if node.value == value:
                self._unlink(previous, node)
                return
            previous = node
        raise ValueError(f"{value!r} is not in the list")

    def delete_at(self, position: int) -> Any:
        """Remove and return the element at 1-based ``position``."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is out of range")
        previous = None if position == 1 else self._node_at(position - 1)
        node = self._head if previous is None else previous.next
        assert node is not None
        self._unlink(previous, node)
        return node.value

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        previous: _Node | None = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous, current = current, following
        self._head = previous