"""Binary search tree holding unique, ordered elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class BSNode(Generic[T]):
    """A tree node with its element and two children."""

    elem: T
    left: Optional["BSNode[T]"] = None
    right: Optional["BSNode[T]"] = None

    def __str__(self) -> str:
        return str(self.elem)


class BSTree(Generic[T]):
    """Unbalanced binary search tree without duplicates."""

    def __init__(self) -> None:
        self._root: Optional[BSNode[T]] = None
        self._count = 0

    def size(self) -> int:
        """Return the number of elements."""
        return self._count

    def search(self, e: T) -> T:
        """Return the stored element equal to ``e``; raise KeyError if absent."""
        node = self._root
        while node is not None:
            if node.elem > e:
                node = node.left
            elif node.elem < e:
                node = node.right
            else:
                return node.elem
        raise KeyError(f"element not found: {e}")

    def insert(self, e: T) -> None:
        """Add ``e``; raise ValueError if an equal element is present."""
        self._root = self._insert(self._root, e)
        self._count += 1

    def _insert(self, node: Optional[BSNode[T]], e: T) -> BSNode[T]:
        if node is None:
            return BSNode(e)
        if node.elem > e:
            node.left = self._insert(node.left, e)
        elif node.elem < e:
            node.right = self._insert(node.right, e)
        else:
            raise ValueError(f"element already present: {e}")
        return node

    def remove(self, e: T) -> None:
        """Remove the element equal to ``e``; raise KeyError if absent."""
        self._root = self._remove(self._root, e)
        self._count -= 1

    def _remove(self, node: Optional[BSNode[T]], e: T) -> Optional[BSNode[T]]:
        if node is None:
            raise KeyError(f"element not found: {e}")
        if node.elem > e:
            node.left = self._remove(node.left, e)
        elif node.elem < e:
            node.right = self._remove(node.right, e)
        elif node.left is not None and node.right is not None:
            node.elem = self._max(node.left)
            node.left = self._remove_max(node.left)
        else:
            return node.left if node.left is not None else node.right
        return node

    @staticmethod
    def _max(node: BSNode[T]) -> T:
        while node.right is not None:
            node = node.right
        return node.elem

    def _remove_max(self, node: BSNode[T]) -> Optional[BSNode[T]]:
        if node.right is None:
            return node.left
        node.right = self._remove_max(node.right)
        return node

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, e: T) -> T:
        return self.search(e)

    def __iter__(self) -> Iterator[T]:
        stack: list[BSNode[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.elem
            node = node.right

    def __str__(self) -> str:
        return "".join(f"{elem} " for elem in self)