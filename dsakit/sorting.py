"""In-place sorting algorithms over lists of integers."""

from __future__ import annotations


def bubble_sort(items: list[int]) -> None:
    """Sort ascending in place, stopping early once a pass makes no swap."""
    for last in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(last):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            return


def insertion_sort(items: list[int]) -> None:
    """Sort in place in descending order."""
    for i in range(1, len(items)):
        current = items[i]
        j = i
        while j > 0 and current > items[j - 1]:
            items[j] = items[j - 1]
            j -= 1
        items[j] = current


def selection_sort(items: list[int]) -> None:
    """Sort ascending in place using the minimum number of swaps."""
    for j in range(len(items) - 1):
        smallest = min(range(j, len(items)), key=items.__getitem__)
        if smallest != j:
            items[j], items[smallest] = items[smallest], items[j]


def partition(items: list[int], low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` around ``items[high]``; return the pivot's index."""
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(items: list[int], low: int, high: int) -> None:
    """Sort ``items[low:high + 1]`` ascending in place."""
    if low < high:
        pivot_index = partition(items, low, high)
        quick_sort(items, low, pivot_index - 1)
        quick_sort(items, pivot_index + 1, high)