"""Hash table dictionary with separate chaining in linked lists."""

from __future__ import annotations

from typing import List as _PyList, TypeVar

from pracollections.entries import Dict, TableEntry
from pracollections.lists import ListLinked

V = TypeVar("V")


class HashTable(Dict[V]):
    """Fixed number of buckets; each bucket is a linked list of entries."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("hash table size must be positive")
        self._capacity = size
        self._count = 0
        self._table: _PyList[ListLinked[TableEntry[V]]] = [
            ListLinked() for _ in range(size)
        ]

    def _hash(self, key: str) -> int:
        return sum(ord(ch) - ord("0") for ch in key) % self._capacity

    def _locate(self, key: str) -> tuple[ListLinked[TableEntry[V]], int]:
        bucket = self._table[self._hash(key)]
        return bucket, bucket.search(TableEntry(key))

    def insert(self, key: str, value: V) -> None:
        bucket, pos = self._locate(key)
        if pos != -1:
            raise ValueError(f"key already in dictionary: {key!r}")
        bucket.append(TableEntry(key, value))
        self._count += 1

    def search(self, key: str) -> V:
        bucket, pos = self._locate(key)
        if pos == -1:
            raise KeyError(key)
        return bucket.get(pos).value

    def remove(self, key: str) -> V:
        bucket, pos = self._locate(key)
        if pos == -1:
            raise KeyError(key)
        entry = bucket.remove(pos)
        self._count -= 1
        return entry.value

    def entries(self) -> int:
        return self._count

    def capacity(self) -> int:
        """Return the number of buckets."""
        return self._capacity

    def __str__(self) -> str:
        parts = [
            f"HashTable [entries: {self._count}, capacity: {self._capacity}]\n",
            "==============\n\n",
        ]
        for index, bucket in enumerate(self._table):
            parts.append(f"== Bucket {index} ==\n\n{bucket}\n\n")
        parts.append("==============\n")
        return "".join(parts)