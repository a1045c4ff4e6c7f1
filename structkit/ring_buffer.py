"""Circular FIFO buffer and a semaphore-guarded blocking buffer."""

from __future__ import annotations

import threading
import time
from typing import Any

RING_BUFFER_SIZE = 24
MAX_NUM_OF_THREADS = 2


class BufferFullError(Exception):
    """Raised when writing to a ring buffer with no free slot."""


class BufferEmptyError(Exception):
    """Raised when reading from an empty ring buffer."""


class RingBuffer:
    """Fixed-size circular FIFO that keeps one slot free to tell full from empty.

    A buffer of ``size`` slots therefore holds at most ``size - 1`` items.
    """

    def __init__(self, size: int = RING_BUFFER_SIZE) -> None:
        if size < 2:
            raise ValueError("size must be at least 2")
        self.size = size
        self._slots: list[Any] = [None] * size
        self._head = 0
        self._tail = 0
        self._lock = threading.Lock()

    def is_full(self) -> bool:
        return (self._head + 1) % self.size == self._tail

    def is_empty(self) -> bool:
        return self._head == self._tail

    def write(self, data: Any) -> None:
        """Append ``data``; raise BufferFullError when there is no room."""
        with self._lock:
            if self.is_full():
                raise BufferFullError("ring buffer is full")
            self._slots[self._head] = data
            self._head = (self._head + 1) % self.size

    def read(self) -> Any:
        """Remove and return the oldest item; raise BufferEmptyError when empty."""
        with self._lock:
            if self.is_empty():
                raise BufferEmptyError("ring buffer is empty")
            data = self._slots[self._tail]
            self._slots[self._tail] = None
            self._tail = (self._tail + 1) % self.size
            return data


class BlockingBuffer:
    """Bounded buffer shared by many threads; writers and readers block.

    Items are taken back in last-in first-out order.
    """

    def __init__(self, size: int = RING_BUFFER_SIZE) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._items: list[Any] = []
        self._lock = threading.Lock()
        self._free = threading.Semaphore(size)
        self._filled = threading.Semaphore(0)

    def write(self, data: Any) -> None:
        """Store ``data``, waiting while the buffer is full."""
        self._free.acquire()
        with self._lock:
            self._items.append(data)
        self._filled.release()

    def read(self) -> Any:
        """Remove and return the newest item, waiting while the buffer is empty."""
        self._filled.acquire()
        with self._lock:
            data = self._items.pop()
        self._free.release()
        return data


def transfer(count: int, size: int = RING_BUFFER_SIZE) -> list[int]:
    """Pass 1..count from a writer thread to a reader thread through a RingBuffer.

    Both threads retry while the buffer is full or empty. Returns the values
    in the order the reader received them.
    """
    if count < 1:
        raise ValueError("count must be at least 1")
    buffer = RingBuffer(size)
    received: list[int] = []

    def reader() -> None:
        while True:
            try:
                value = buffer.read()
            except BufferEmptyError:
                time.sleep(0)
                continue
            received.append(value)
            if value == count:
                return

    def writer() -> None:
        counter = 1
        while counter <= count:
            try:
                buffer.write(counter)
            except BufferFullError:
                time.sleep(0)
                continue
            counter += 1

    threads = [threading.Thread(target=reader), threading.Thread(target=writer)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return received


def run_producers_consumers(
    target: int, threads: int = MAX_NUM_OF_THREADS, size: int = RING_BUFFER_SIZE
) -> list[int]:
    """Run ``threads`` writers and as many readers over one BlockingBuffer.

    Each writer writes ``target`` down to 1 and each reader reads ``target``
    values. Returns every value read, in the order reads completed.
    """
    if target < 0:
        raise ValueError("target must not be negative")
    if threads < 1:
        raise ValueError("threads must be at least 1")
    buffer = BlockingBuffer(size)
    results: list[int] = []
    results_lock = threading.Lock()

    def writer() -> None:
        for value in range(target, 0, -1):
            buffer.write(value)

    def reader() -> None:
        for _ in range(target):
            value = buffer.read()
            with results_lock:
                results.append(value)

    workers = [threading.Thread(target=writer) for _ in range(threads)]
    workers += [threading.Thread(target=reader) for _ in range(threads)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return results