"""First-in first-out queues: unbounded and bounded."""

from __future__ import annotations

from collections import deque
from typing import Any


class QueueFullError(Exception):
    """Raised when pushing onto a bounded queue that is at capacity."""


class LinkedQueue:
    """Unbounded FIFO queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def rear(self) -> Any:
        """Return the rear item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class BoundedQueue:
    """FIFO queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Add ``value`` at the back; raise QueueFullError when full."""
        if len(self._items) >= self.capacity:
            raise QueueFullError("queue is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def back(self) -> Any:
        """Return the back item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)