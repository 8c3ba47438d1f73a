"""Bounded stacks backed by a list and by linked nodes."""

from __future__ import annotations

from collections.abc import Iterator

from dsakit.linked_list import _Node, _walk


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when reading from an empty stack."""


def _checked_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    return capacity


class _CapacityRepr:
    """The capacity property and a repr listing values top to bottom."""

    _capacity: int

    @property
    def capacity(self) -> int:
        return self._capacity

    def __repr__(self) -> str:
        values = list(self)  # type: ignore[call-overload]
        return f"{type(self).__name__}({values!r}, capacity={self._capacity})"


class ArrayStack(_CapacityRepr):
    """Bounded stack stored in a contiguous list."""

    def __init__(self, capacity: int) -> None:
        self._capacity = _checked_capacity(capacity)
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Values from top to bottom."""
        return reversed(list(self._items))

    def bottom_up(self) -> Iterator[int]:
        """Values from bottom to top."""
        return iter(list(self._items))

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def push(self, data: int) -> None:
        if self.is_full():
            raise StackOverflowError("stack overflow")
        self._items.append(data)

    def pop(self) -> int:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> int:
        """The top value, left in place."""
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def pop_index(self, index: int) -> int:
        """Remove and return the value ``index`` places above the bottom."""
        if not 0 <= index < len(self._items):
            raise IndexError("invalid index")
        return self._items.pop(index)


class LinkedStack(_CapacityRepr):
    """Bounded stack built from linked nodes."""

    def __init__(self, capacity: int) -> None:
        self._capacity = _checked_capacity(capacity)
        self._size = 0
        self._top: _Node | None = None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Values from top to bottom."""
        return _walk(self._top)

    def is_empty(self) -> bool:
        return self._top is None

    def is_full(self) -> bool:
        return self._size == self._capacity

    def push(self, value: int) -> None:
        if self.is_full():
            raise StackOverflowError("stack overflow")
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> int:
        """The top value, left in place."""
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        return self._top.data

    def bottom(self) -> int:
        """The value at the bottom of the stack."""
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        *_, last = self
        return last