"""Integer-keyed hash tables: linear probing and separate chaining."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional, Union

DEFAULT_SIZE = 20

DELETED = (-1, -1)
"""How a slot freed by a deletion is shown by ``OpenAddressingTable.slots``."""

_TOMBSTONE = object()


class DuplicateKeyError(Exception):
    """Raised when inserting a key that a chained table already holds."""


class OpenAddressingTable:
    """Fixed-size table with linear probing and tombstones for deletions.

    Keys are not checked for duplicates; a later insert of an existing key
    takes another slot, and lookups find the one nearest its home slot.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._slots: list[Union[None, object, tuple[int, int]]] = [None] * size

    def _probe(self, key: int) -> Iterator[int]:
        start = key % self.size
        for offset in range(self.size):
            yield (start + offset) % self.size

    def _find(self, key: int) -> Optional[int]:
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is not _TOMBSTONE and slot[0] == key:  # type: ignore[index]
                return index
        return None

    def insert(self, key: int, data: int) -> None:
        """Store ``data`` under ``key`` in the first empty or deleted slot.

        Raises OverflowError when every slot is occupied.
        """
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None or slot is _TOMBSTONE:
                self._slots[index] = (key, data)
                return
        raise OverflowError("hash table is full")

    def search(self, key: int) -> Optional[int]:
        """Return the data stored under ``key``, or None."""
        index = self._find(key)
        if index is None:
            return None
        return self._slots[index][1]  # type: ignore[index]

    def delete(self, key: int) -> Optional[int]:
        """Remove ``key`` and return its data, or None if it is absent."""
        index = self._find(key)
        if index is None:
            return None
        _, data = self._slots[index]  # type: ignore[misc]
        self._slots[index] = _TOMBSTONE
        return data

    def slots(self) -> list[Optional[tuple[int, int]]]:
        """Return every slot: a (key, data) pair, DELETED, or None if empty."""
        return [
            DELETED if slot is _TOMBSTONE else slot  # type: ignore[misc]
            for slot in self._slots
        ]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self._find(key) is not None


class ChainedHashTable:
    """Fixed number of buckets, each an ordered chain of (key, data) pairs."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._buckets: list[list[tuple[int, int]]] = [[] for _ in range(size)]

    def _bucket(self, key: int) -> list[tuple[int, int]]:
        return self._buckets[key % self.size]

    def insert(self, key: int, data: int) -> None:
        """Append (key, data) to its bucket; raise DuplicateKeyError if present."""
        bucket = self._bucket(key)
        if any(existing == key for existing, _ in bucket):
            raise DuplicateKeyError(f"item with key {key} already exists")
        bucket.append((key, data))

    def search(self, key: int) -> Optional[int]:
        """Return the data stored under ``key``, or None."""
        for existing, data in self._bucket(key):
            if existing == key:
                return data
        return None

    def delete(self, key: int) -> Optional[int]:
        """Remove ``key`` and return its data, or None if it is absent."""
        bucket = self._bucket(key)
        for position, (existing, data) in enumerate(bucket):
            if existing == key:
                del bucket[position]
                return data
        return None

    def buckets(self) -> list[list[tuple[int, int]]]:
        """Return a copy of every bucket's chain in order."""
        return [list(bucket) for bucket in self._buckets]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None