"""A singly linked list of integers, and the node chain it is built on."""

from __future__ import annotations

from collections.abc import Iterator


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: int, next_node: _Node | None = None) -> None:
        self.data = data
        self.next = next_node


def _walk(node: _Node | None) -> Iterator[int]:
    """Yield values following ``next`` links until the chain ends."""
    while node is not None:
        yield node.data
        node = node.next


class _ListRepr:
    """A repr that lists the values."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"  # type: ignore[call-overload]


class _NodeChain(_ListRepr):
    """Helpers for a chain of nodes with head and tail references."""

    _head: _Node | None
    _tail: _Node | None
    _size: int

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def _link_tail(self, node: _Node) -> None:
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1


class LinkedList(_NodeChain):
    """Singly linked list supporting positional and keyed removal."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return _walk(self._head)

    def reversed_values(self) -> list[int]:
        """The values from tail to head."""
        values = list(self)
        values.reverse()
        return values

    def append(self, data: int) -> None:
        """Add ``data`` after the current tail."""
        self._link_tail(_Node(data))

    def insert(self, data: int, index: int, at_begin: bool = False) -> None:
        """Insert ``data`` at ``index``, or at the head when ``at_begin``.

        Inserting at index 0 requires ``at_begin``.
        """
        if index == 0 and not at_begin:
            raise ValueError("inserting at index 0 requires at_begin")
        if not 0 <= index <= self._size:
            raise IndexError("invalid index")
        if at_begin:
            self._head = _Node(data, self._head)
            if self._tail is None:
                self._tail = self._head
        else:
            previous = self._node_at(index - 1)
            node = _Node(data, previous.next)
            previous.next = node
            if node.next is None:
                self._tail = node
        self._size += 1

    def _unlink_after(self, previous: _Node | None) -> int:
        """Remove the node after ``previous`` (the head when ``None``)."""
        removed = self._head if previous is None else previous.next
        assert removed is not None
        following = removed.next
        if previous is None:
            self._head = following
        else:
            previous.next = following
        if following is None:
            self._tail = previous
        self._size -= 1
        return removed.data

    def delete_at(self, index: int) -> int:
        """Remove and return the value at ``index``."""
        if self._head is None:
            raise IndexError("list is empty")
        if not 0 <= index < self._size:
            raise IndexError("invalid index")
        return self._unlink_after(None if index == 0 else self._node_at(index - 1))

    def delete_key(self, key: int) -> None:
        """Remove the first node holding ``key``."""
        if self._head is None:
            raise ValueError("list is empty")
        previous: _Node | None = None
        node: _Node | None = self._head
        while node is not None and node.data != key:
            previous, node = node, node.next
        if node is None:
            raise ValueError(f"key {key} not found")
        self._unlink_after(previous)