"""Classic comparison sorts and a k-way merge of sorted streams.

Every sort takes any iterable and returns a new sorted list, leaving the
input untouched.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    data = list(items)
    for end in range(len(data), 0, -1):
        for j in range(end - 1):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
    return data


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    data = list(items)
    for i in range(1, len(data)):
        current = data[i]
        j = i
        while j > 0 and data[j - 1] > current:
            data[j] = data[j - 1]
            j -= 1
        data[j] = current
    return data


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] > right[j]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort; the left half takes the extra element."""
    data = list(items)
    if len(data) <= 1:
        return data
    mid = (len(data) + 1) // 2
    return _merge(merge_sort(data[:mid]), merge_sort(data[mid:]))


def _quick(data: list[Any], lo: int, hi: int) -> None:
    if lo >= hi:
        return
    pivot = data[lo + (hi - lo) // 2]
    left, right = lo, hi
    while left <= right:
        while data[left] < pivot:
            left += 1
        while data[right] > pivot:
            right -= 1
        if left <= right:
            data[left], data[right] = data[right], data[left]
            left += 1
            right -= 1
    _quick(data, lo, right)
    _quick(data, left, hi)


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quicksort partitioning around the middle element."""
    data = list(items)
    _quick(data, 0, len(data) - 1)
    return data


def _sift_down(data: list[Any], size: int, index: int) -> None:
    while True:
        largest = index
        left = 2 * index + 1
        right = 2 * index + 2
        if left < size and data[left] > data[largest]:
            largest = left
        if right < size and data[right] > data[largest]:
            largest = right
        if largest == index:
            return
        data[index], data[largest] = data[largest], data[index]
        index = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Build a max-heap, then move the maximum to the end repeatedly."""
    data = list(items)
    size = len(data)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(data, size, index)
    for end in range(size - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        _sift_down(data, end, 0)
    return data


def _as_value(item: Any) -> Any:
    if isinstance(item, (str, bytes)):
        return int(item)
    return item


def k_way_merge(streams: Iterable[Iterable[Any]]) -> list[Any]:
    """Merge several individually sorted streams into one sorted list.

    Items given as text, such as lines read from a file, are parsed as
    integers; a line that is not a number raises ValueError.
    """
    iterators = [iter(stream) for stream in streams]
    heap: list[tuple[Any, int]] = []
    for index, iterator in enumerate(iterators):
        for item in iterator:
            heapq.heappush(heap, (_as_value(item), index))
            break

    merged: list[Any] = []
    while heap:
        value, index = heapq.heappop(heap)
        merged.append(value)
        for item in iterators[index]:
            heapq.heappush(heap, (_as_value(item), index))
            break
    return merged