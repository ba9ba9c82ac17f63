"""A minimal binary search tree built from bare nodes and free functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class TreeNode:
    """A node with its value and two children."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def insert(root: Optional[TreeNode], data: Any) -> TreeNode:
    """Insert ``data`` and return the root; raise ValueError on duplicates."""
    new = TreeNode(data)
    if root is None:
        return new
    node = root
    while True:
        if data == node.data:
            raise ValueError(f"node already present: {data}")
        if data > node.data:
            if node.right is None:
                node.right = new
                return root
            node = node.right
        else:
            if node.left is None:
                node.left = new
                return root
            node = node.left


def delete(root: Optional[TreeNode], data: Any) -> Optional[TreeNode]:
    """Remove ``data`` and return the new root; raise KeyError if absent."""
    if root is None:
        raise KeyError(data)
    if data == root.data:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        predecessor = root.left
        while predecessor.right is not None:
            predecessor = predecessor.right
        root.data = predecessor.data
        root.left = delete(root.left, predecessor.data)
    elif data > root.data:
        root.right = delete(root.right, data)
    else:
        root.left = delete(root.left, data)
    return root


def preorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values node first, then left and right subtrees."""
    if root is not None:
        yield root.data
        yield from preorder(root.left)
        yield from preorder(root.right)


def inorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values in ascending order."""
    if root is not None:
        yield from inorder(root.left)
        yield root.data
        yield from inorder(root.right)


def postorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values of both subtrees before the node itself."""
    if root is not None:
        yield from postorder(root.left)
        yield from postorder(root.right)
        yield root.data