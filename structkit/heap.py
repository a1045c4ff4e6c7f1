"""A bounded binary max-heap stored in a list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional


class HeapFullError(Exception):
    """Raised when pushing onto a heap that is at capacity."""


class HeapEmptyError(Exception):
    """Raised when reading from an empty heap."""


class MaxHeap:
    """Max-heap of integers with an optional capacity."""

    def __init__(self, capacity: Optional[int] = None, values: Iterable[int] = ()) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._data: list[int] = []
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        """Add ``value``; raise HeapFullError when the heap is at capacity."""
        if self.capacity is not None and len(self._data) >= self.capacity:
            raise HeapFullError("heap is full")
        data = self._data
        data.append(value)
        index = len(data) - 1
        while index > 0:
            parent = (index - 1) // 2
            if data[parent] >= data[index]:
                break
            data[parent], data[index] = data[index], data[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            largest = index
            left, right = 2 * index + 1, 2 * index + 2
            if left < size and data[left] > data[largest]:
                largest = left
            if right < size and data[right] > data[largest]:
                largest = right
            if largest == index:
                return
            data[index], data[largest] = data[largest], data[index]
            index = largest

    def pop(self) -> int:
        """Remove and return the largest value."""
        if not self._data:
            raise HeapEmptyError("heap is empty")
        data = self._data
        top = data[0]
        last = data.pop()
        if data:
            data[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> int:
        """Return the largest value without removing it."""
        if not self._data:
            raise HeapEmptyError("heap is empty")
        return self._data[0]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        """Yield the stored values in heap-array order."""
        return iter(list(self._data))