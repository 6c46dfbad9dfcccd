"""Binary trees: traversals, a plain binary search tree and a self-balancing AVL tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


class Placement(Enum):
    """Where a value ended up when added to a binary search tree."""

    ROOT = "root"
    LEFT = "left"
    RIGHT = "right"
    DUPLICATE = "duplicate"


def inorder(root: Optional[TreeNode]) -> list:
    """Return the values of the tree in left, node, right order."""
    result = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def preorder(root: Optional[TreeNode]) -> list:
    """Return the values of the tree in node, left, right order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: Optional[TreeNode]) -> list:
    """Return the values of the tree in left, right, node order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def morris_inorder(root: Optional[TreeNode]) -> list:
    """Inorder traversal without a stack, threading links to successors temporarily.

    The tree is left exactly as it was found.
    """
    result = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.value)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            current = current.left
        else:
            predecessor.right = None
            result.append(current.value)
            current = current.right
    return result


@dataclass(eq=False)
class _AVLNode(TreeNode):
    height: int = 1


def _height(node: Optional[_AVLNode]) -> int:
    return 0 if node is None else node.height


def _update(node: _AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance_factor(node: _AVLNode) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_left(parent: _AVLNode) -> _AVLNode:
    child = parent.right
    parent.right = child.left
    child.left = parent
    _update(parent)
    _update(child)
    return child


def _rotate_right(parent: _AVLNode) -> _AVLNode:
    child = parent.left
    parent.left = child.right
    child.right = parent
    _update(parent)
    _update(child)
    return child


def _rebalance(node: _AVLNode) -> _AVLNode:
    factor = _balance_factor(node)
    if factor > 1:
        if _balance_factor(node.left) <= 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """A binary search tree kept height-balanced by rotations.

    Values equal to an existing value are stored in its right subtree.
    """

    def __init__(self) -> None:
        self.root: Optional[_AVLNode] = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        return iter(inorder(self.root))

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({inorder(self.root)!r})"

    def _insert(self, node: Optional[_AVLNode], value: Any) -> _AVLNode:
        if node is None:
            return _AVLNode(value)
        if value < node.value:
            node.left = self._insert(node.left, value)
        else:
            node.right = self._insert(node.right, value)
        _update(node)
        return _rebalance(node)

    def insert(self, value: Any) -> None:
        """Add ``value`` and rebalance the tree."""
        self.root = self._insert(self.root, value)
        self._size += 1

    def height(self) -> int:
        """Number of nodes on the longest path from the root; 0 when empty."""
        return _height(self.root)

    def inorder(self) -> list:
        return inorder(self.root)

    def preorder(self) -> list:
        return preorder(self.root)

    def postorder(self) -> list:
        return postorder(self.root)

    def show(self) -> str:
        """Render the tree sideways, right subtree first, one node per line."""
        lines: list[str] = []

        def walk(node: Optional[_AVLNode], level: int) -> None:
            if node is None:
                return
            walk(node.right, level + 1)
            prefix = "Root -> " if node is self.root else " " * level
            lines.append(f" {prefix}{node.value}")
            walk(node.left, level + 1)

        walk(self.root, 1)
        return "\n".join(lines)


class BinarySearchTree:
    """An unbalanced binary search tree that rejects duplicate values."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None

    def add(self, value: Any) -> Placement:
        """Insert ``value``; report whether it became the root, a left or right child."""
        if self.root is None:
            self.root = TreeNode(value)
            return Placement.ROOT
        node = self.root
        while True:
            if value == node.value:
                return Placement.DUPLICATE
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return Placement.LEFT
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value)
                    return Placement.RIGHT
                node = node.right

    def inorder(self) -> list:
        return inorder(self.root)

    def preorder(self) -> list:
        return preorder(self.root)

    def postorder(self) -> list:
        return postorder(self.root)