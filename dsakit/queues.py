"""FIFO queues: a linear array queue, a ring buffer and an unbounded queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from itertools import islice


class QueueOverflowError(Exception):
    """Raised when enqueuing onto a full queue."""


class QueueUnderflowError(Exception):
    """Raised when dequeuing from an empty queue."""


class ArrayQueue:
    """Linear queue over a fixed array; dequeued slots are never reused."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._slots: list[int] = []
        self._front = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[int]:
        return islice(list(self._slots), self._front, None)

    def __repr__(self) -> str:
        return f"ArrayQueue({list(self)!r}, capacity={self._capacity})"

    def is_empty(self) -> bool:
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        """True once the rear has reached the end of the array."""
        return len(self._slots) == self._capacity

    def enqueue(self, data: int) -> None:
        if self.is_full():
            raise QueueOverflowError("queue overflow")
        self._slots.append(data)

    def dequeue(self) -> int:
        if self.is_empty():
            raise QueueUnderflowError("queue underflow")
        value = self._slots[self._front]
        self._front += 1
        return value


class CircularQueue:
    """Bounded queue in a ring buffer that reuses freed slots."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._buffer: list[int] = [0] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        capacity = len(self._buffer)
        snapshot = list(self._buffer)
        start = self._front
        return (snapshot[(start + offset) % capacity] for offset in range(self._size))

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r}, capacity={self.capacity})"

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == len(self._buffer)

    def enqueue(self, data: int) -> None:
        if self.is_full():
            raise QueueOverflowError("queue overflow")
        self._buffer[(self._front + self._size) % len(self._buffer)] = data
        self._size += 1

    def dequeue(self) -> int:
        if self.is_empty():
            raise QueueUnderflowError("queue underflow")
        value = self._buffer[self._front]
        self._front = (self._front + 1) % len(self._buffer)
        self._size -= 1
        return value


class LinkedQueue:
    """Unbounded FIFO queue."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self._items)!r})"

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, data: int) -> None:
        self._items.append(data)

    def dequeue(self) -> int:
        if not self._items:
            raise QueueUnderflowError("queue underflow")
        return self._items.popleft()