"""A fixed-capacity integer array that grows on demand."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class DynamicArray:
    """An array with an explicit size and capacity that grows by a fixed step."""

    GROWTH = 10

    def __init__(self, size: int, capacity: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        if capacity < size:
            raise ValueError("capacity should be greater than size")
        self._capacity = capacity
        self._items: list[int] = [0] * size

    @property
    def capacity(self) -> int:
        """Number of slots available before the array must grow."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> int:
        if not 0 <= index < len(self._items):
            raise IndexError("index out of bounds")
        return self._items[index]

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r}, capacity={self._capacity})"

    def set_values(self, values: Iterable[int]) -> None:
        """Replace every element; exactly ``len(self)`` values are required."""
        new_values = list(values)
        if len(new_values) != len(self._items):
            raise ValueError(
                f"expected {len(self._items)} values, got {len(new_values)}"
            )
        self._items[:] = new_values

    def resize(self) -> None:
        """Grow the capacity by ``GROWTH`` slots, keeping the contents."""
        self._capacity += self.GROWTH

    def insert(
        self,
        value: int,
        index: int,
        override: bool = False,
        swap_back: bool = False,
    ) -> None:
        """Insert ``value`` at ``index``.

        With ``override`` the element at ``index`` is replaced. With
        ``swap_back`` the displaced element moves to the end instead of
        shifting the tail. Otherwise the tail shifts one place right.
        """
        size = len(self._items)
        if not 0 <= index <= size:
            raise IndexError("index out of bounds")
        if override:
            if index == size:
                raise IndexError("index out of bounds")
            self._items[index] = value
            return
        if size >= self._capacity:
            self.resize()
        if swap_back and index < size:
            self._items.append(self._items[index])
            self._items[index] = value
        else:
            self._items.insert(index, value)

    def delete(self, index: int, swap_last: bool = False) -> int:
        """Remove and return the element at ``index``.

        With ``swap_last`` the last element fills the gap instead of
        shifting the tail left.
        """
        if not self._items:
            raise IndexError("array is empty")
        if not 0 <= index < len(self._items):
            raise IndexError("index out of bounds")
        removed = self._items[index]
        if swap_last:
            self._items[index] = self._items[-1]
            self._items.pop()
        else:
            del self._items[index]
        return removed

    def linear_search(self, value: int) -> int | None:
        """Index of the first element equal to ``value``, or None."""
        for position, item in enumerate(self._items):
            if item == value:
                return position
        return None

    def binary_search(self, value: int) -> int | None:
        """Index of ``value`` in an ascending array, or None."""
        low, high = 0, len(self._items) - 1
        while low <= high:
            mid = (low + high) // 2
            current = self._items[mid]
            if current == value:
                return mid
            if current < value:
                low = mid + 1
            else:
                high = mid - 1
        return None