"""A doubly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterator

from dsakit.linked_list import _Node, _NodeChain, _walk


class _DoubleNode(_Node):
    __slots__ = ("prev",)

    def __init__(self, data: int) -> None:
        super().__init__(data)
        self.prev: _DoubleNode | None = None


class DoublyLinkedList(_NodeChain):
    """Doubly linked list traversable in both directions."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return _walk(self._head)

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def append(self, data: int) -> None:
        """Add ``data`` after the current tail."""
        node = _DoubleNode(data)
        node.prev = self._tail
        self._link_tail(node)

    def insert(self, data: int, index: int, at_begin: bool = False) -> None:
        """Insert ``data`` at ``index``; ``at_begin`` or index 0 prepends."""
        if at_begin or index == 0:
            node = _DoubleNode(data)
            node.next = self._head
            if self._head is None:
                self._tail = node
            else:
                self._head.prev = node
            self._head = node
            self._size += 1
            return
        if index == self._size:
            self.append(data)
            return
        if not 0 <= index < self._size:
            raise IndexError("invalid index")
        previous = self._node_at(index - 1)
        following = previous.next
        assert following is not None
        node = _DoubleNode(data)
        node.next = following
        node.prev = previous
        previous.next = node
        following.prev = node
        self._size += 1

    def delete(self, index: int) -> int:
        """Remove and return the value at ``index``."""
        if self._head is None:
            raise IndexError("list is empty")
        if not 0 <= index < self._size:
            raise IndexError("invalid index")
        node = self._node_at(index)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.data