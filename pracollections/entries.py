"""Key/value entries and the dictionary interface built on them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Generic, Optional, TypeVar

V = TypeVar("V")


@total_ordering
@dataclass(eq=False)
class TableEntry(Generic[V]):
    """A key with an optional value; entries compare and hash by key alone."""

    key: str = ""
    value: Optional[V] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TableEntry):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, TableEntry):
            return NotImplemented
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"('{self.key}' => {self.value})"


class Dict(ABC, Generic[V]):
    """Interface for dictionaries mapping string keys to values."""

    @abstractmethod
    def insert(self, key: str, value: V) -> None:
        """Add ``key`` with ``value``; raise ValueError if the key exists."""

    @abstractmethod
    def search(self, key: str) -> V:
        """Return the value for ``key``; raise KeyError if it is missing."""

    @abstractmethod
    def remove(self, key: str) -> V:
        """Remove ``key`` and return its value; raise KeyError if it is missing."""

    @abstractmethod
    def entries(self) -> int:
        """Return the number of stored entries."""

    def __getitem__(self, key: str) -> V:
        return self.search(key)