"""Positional lists backed by a dynamic array or by a chain of linked nodes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterator, List as _PyList, Optional, TypeVar

T = TypeVar("T")

_OUT_OF_RANGE = "position out of range"


class Node(Generic[T]):
    """A single link in a singly linked chain."""

    __slots__ = ("data", "next")

    def __init__(self, data: T, next: Optional["Node[T]"] = None) -> None:
        self.data = data
        self.next = next

    def __str__(self) -> str:
        return str(self.data)

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


class List(ABC, Generic[T]):
    """Interface shared by the positional list implementations."""

    @abstractmethod
    def insert(self, pos: int, e: T) -> None:
        """Insert ``e`` so that it ends up at index ``pos`` (0 <= pos <= size)."""

    def append(self, e: T) -> None:
        """Add ``e`` at the end."""
        self.insert(self.size(), e)

    def prepend(self, e: T) -> None:
        """Add ``e`` at the front."""
        self.insert(0, e)

    @abstractmethod
    def remove(self, pos: int) -> T:
        """Remove and return the element at ``pos``."""

    @abstractmethod
    def get(self, pos: int) -> T:
        """Return the element at ``pos``."""

    @abstractmethod
    def search(self, e: T) -> int:
        """Return the index of the first element equal to ``e``, or -1."""

    def empty(self) -> bool:
        """Return True when the list holds no elements."""
        return self.size() == 0

    @abstractmethod
    def size(self) -> int:
        """Return the number of elements."""

    @abstractmethod
    def duplicate_list(self) -> None:
        """Append a copy of the current contents to the end of the list."""

    def __len__(self) -> int:
        return self.size()

    def __getitem__(self, pos: int) -> T:
        return self.get(pos)


def _check_index(pos: int, limit: int) -> None:
    if not 0 <= pos < limit:
        raise IndexError(_OUT_OF_RANGE)


class ListArray(List[T]):
    """List stored in a contiguous, growable array."""

    def __init__(self) -> None:
        self._items: _PyList[T] = []

    def insert(self, pos: int, e: T) -> None:
        _check_index(pos, len(self._items) + 1)
        self._items.insert(pos, e)

    def remove(self, pos: int) -> T:
        _check_index(pos, len(self._items))
        return self._items.pop(pos)

    def get(self, pos: int) -> T:
        _check_index(pos, len(self._items))
        return self._items[pos]

    def search(self, e: T) -> int:
        try:
            return self._items.index(e)
        except ValueError:
            return -1

    def size(self) -> int:
        return len(self._items)

    def duplicate_list(self) -> None:
        self._items.extend(list(self._items))

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __str__(self) -> str:
        body = "".join(f"   {item}\n" for item in self._items)
        return f"List => [\n{body}]"


class ListLinked(List[T]):
    """List stored as a singly linked chain of nodes."""

    def __init__(self) -> None:
        self._first: Optional[Node[T]] = None
        self._size = 0

    def _node_at(self, pos: int) -> Node[T]:
        node = self._first
        for _ in range(pos):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def _nodes(self) -> Iterator[Node[T]]:
        node = self._first
        while node is not None:
            yield node
            node = node.next

    def insert(self, pos: int, e: T) -> None:
        _check_index(pos, self._size + 1)
        if pos == 0:
            self._first = Node(e, self._first)
        else:
            prev = self._node_at(pos - 1)
            prev.next = Node(e, prev.next)
        self._size += 1

    def remove(self, pos: int) -> T:
        _check_index(pos, self._size)
        if pos == 0:
            node = self._first
            assert node is not None
            self._first = node.next
        else:
            prev = self._node_at(pos - 1)
            node = prev.next
            assert node is not None
            prev.next = node.next
        self._size -= 1
        return node.data

    def get(self, pos: int) -> T:
        _check_index(pos, self._size)
        return self._node_at(pos).data

    def search(self, e: T) -> int:
        for index, node in enumerate(self._nodes()):
            if node.data == e:
                return index
        return -1

    def size(self) -> int:
        return self._size

    def duplicate_list(self) -> None:
        if self._first is None:
            return
        values = [node.data for node in self._nodes()]
        tail = self._node_at(self._size - 1)
        for value in values:
            tail.next = Node(value)
            tail = tail.next
        self._size *= 2

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in list(self._nodes()))

    def __str__(self) -> str:
        items = list(self)
        if not items:
            return "List => []"
        head, *rest = items
        body = f"\n    {head}\n" + "".join(f"   {item}\n" for item in rest)
        return f"List => [{body}]"