"""A fixed-capacity stack."""

from __future__ import annotations

from typing import Any


class Stack:
    """Last-in first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def push(self, value: Any) -> None:
        """Push ``value``; raise OverflowError when the stack is full."""
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top item without removing it; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)