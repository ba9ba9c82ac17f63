"""Dictionary backed by a binary search tree of entries."""

from __future__ import annotations

from typing import TypeVar

from pracollections.bstree import BSTree
from pracollections.entries import Dict, TableEntry

V = TypeVar("V")


class BSTreeDict(Dict[V]):
    """Dictionary whose entries are kept ordered by key."""

    def __init__(self) -> None:
        self._tree: BSTree[TableEntry[V]] = BSTree()

    def insert(self, key: str, value: V) -> None:
        self._tree.insert(TableEntry(key, value))

    def search(self, key: str) -> V:
        return self._tree.search(TableEntry(key)).value

    def remove(self, key: str) -> V:
        value = self.search(key)
        self._tree.remove(TableEntry(key))
        return value

    def entries(self) -> int:
        return self._tree.size()

    def __str__(self) -> str:
        return str(self._tree)