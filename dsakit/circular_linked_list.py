"""A circular singly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum

from dsakit.linked_list import _ListRepr, _Node


class InsertMode(IntEnum):
    """Where :meth:`CircularLinkedList.insert` places a new value."""

    BEGIN = 0
    END = 1
    INDEX = 2
    AFTER_KEY = 3


class DeleteMode(IntEnum):
    """Which node :meth:`CircularLinkedList.delete` removes."""

    BEGIN = 0
    END = 1
    INDEX = 2
    KEY = 3


class CircularLinkedList(_ListRepr):
    """Circular list whose tail links back to its head."""

    def __init__(self) -> None:
        self._tail: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            assert node is not None
            yield node.data
            node = node.next

    def _advance(self, steps: int) -> _Node:
        """The node ``steps`` links past the tail (0 is the tail itself)."""
        node = self._tail
        for _ in range(steps):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def _find_before(self, key: int) -> _Node | None:
        """The node whose successor holds ``key``, searching from the head."""
        previous = self._tail
        for _ in range(self._size):
            assert previous is not None and previous.next is not None
            if previous.next.data == key:
                return previous
            previous = previous.next
        return None

    def _link_after(self, previous: _Node, node: _Node) -> None:
        node.next = previous.next
        previous.next = node
        self._size += 1

    def insert(
        self, data: int, mode: InsertMode | int = InsertMode.END, param: int = 0
    ) -> None:
        """Insert ``data``; ``param`` is an index or a key depending on ``mode``.

        Into an empty list the value is always inserted, whatever the mode.
        """
        node = _Node(data)
        if self._tail is None:
            node.next = node
            self._tail = node
            self._size = 1
            return
        mode = InsertMode(mode)
        if mode is InsertMode.BEGIN:
            self._link_after(self._tail, node)
            return
        if mode is InsertMode.END:
            self._link_after(self._tail, node)
            self._tail = node
            return
        if mode is InsertMode.INDEX:
            if not 0 <= param <= self._size:
                raise IndexError("invalid index")
            previous = self._advance(param)
        else:
            before = self._find_before(param)
            if before is None:
                raise ValueError(f"key {param} not found")
            previous = before.next
            assert previous is not None
        becomes_tail = previous is self._tail
        self._link_after(previous, node)
        if becomes_tail:
            self._tail = node

    def _unlink_after(self, previous: _Node) -> int:
        removed = previous.next
        assert removed is not None
        if removed is previous:
            self._tail = None
        else:
            previous.next = removed.next
            if removed is self._tail:
                self._tail = previous
        self._size -= 1
        return removed.data

    def delete(self, mode: DeleteMode | int = DeleteMode.BEGIN, param: int = 0) -> int:
        """Remove a node chosen by ``mode`` and return its value."""
        if self._tail is None:
            raise IndexError("list is empty")
        mode = DeleteMode(mode)
        if mode is DeleteMode.BEGIN:
            return self._unlink_after(self._tail)
        if mode is DeleteMode.END:
            return self._unlink_after(self._advance(self._size - 1))
        if mode is DeleteMode.INDEX:
            if not 0 <= param < self._size:
                raise IndexError("invalid index")
            return self._unlink_after(self._advance(param))
        previous = self._find_before(param)
        if previous is None:
            raise ValueError(f"key {param} not found")
        return self._unlink_after(previous)