"""An unbalanced binary search tree of distinct integers."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class BSTNode:
    """A node holding an integer."""

    data: int
    left: Optional["BSTNode"] = None
    right: Optional["BSTNode"] = None


class BST:
    """A binary search tree that ignores duplicate values."""

    def __init__(self) -> None:
        self.root: Optional[BSTNode] = None

    def __len__(self) -> int:
        return len(self.inorder())

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def insert(self, value: int) -> bool:
        """Insert value; return False if it is already present."""
        if self.root is None:
            self.root = BSTNode(value)
            return True
        node = self.root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = BSTNode(value)
                    return True
                node = node.left
            elif value > node.data:
                if node.right is None:
                    node.right = BSTNode(value)
                    return True
                node = node.right
            else:
                return False

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""

        def depth(node: Optional[BSTNode]) -> int:
            if node is None:
                return 0
            return 1 + max(depth(node.left), depth(node.right))

        return depth(self.root)

    def min_value(self) -> int:
        """The leftmost value."""
        if self.root is None:
            raise ValueError("tree is empty")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.data

    def max_value(self) -> int:
        """The rightmost value."""
        if self.root is None:
            raise ValueError("tree is empty")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.data

    def search(self, value: int) -> Optional[int]:
        """Return the number of comparisons needed to find value, or None if absent."""
        comparisons = 0
        node = self.root
        while node is not None:
            comparisons += 1
            if value < node.data:
                node = node.left
            elif value > node.data:
                node = node.right
            else:
                return comparisons
        return None

    def mirror(self) -> None:
        """Swap the left and right children of every node in place."""

        def swap(node: Optional[BSTNode]) -> None:
            if node is not None:
                node.left, node.right = node.right, node.left
                swap(node.left)
                swap(node.right)

        swap(self.root)

    def delete(self, value: int) -> bool:
        """Remove value; return False if it was not found."""
        parent: Optional[BSTNode] = None
        current = self.root
        while current is not None and current.data != value:
            parent = current
            current = current.left if value < current.data else current.right
        if current is None:
            return False

        if current.left is not None and current.right is not None:
            successor = current.right
            while successor.left is not None:
                successor = successor.left
            replacement = successor.data
            self.delete(replacement)
            current.data = replacement
            return True

        child = current.left if current.left is not None else current.right
        if parent is None:
            self.root = child
        elif parent.left is current:
            parent.left = child
        else:
            parent.right = child
        return True

    def preorder(self) -> list[int]:
        def walk(node: Optional[BSTNode]) -> Iterator[int]:
            if node is not None:
                yield node.data
                yield from walk(node.left)
                yield from walk(node.right)

        return list(walk(self.root))

    def inorder(self) -> list[int]:
        def walk(node: Optional[BSTNode]) -> Iterator[int]:
            if node is not None:
                yield from walk(node.left)
                yield node.data
                yield from walk(node.right)

        return list(walk(self.root))

    def postorder(self) -> list[int]:
        def walk(node: Optional[BSTNode]) -> Iterator[int]:
            if node is not None:
                yield from walk(node.left)
                yield from walk(node.right)
                yield node.data

        return list(walk(self.root))

    def levels(self) -> list[list[int]]:
        """Values grouped by depth, top level first, left to right."""
        result: list[list[int]] = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            level: list[int] = []
            for _ in range(len(queue)):
                node = queue.popleft()
                level.append(node.data)
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)
            result.append(level)
        return result

    def render(self) -> str:
        """Draw the tree as an indented outline, one node per line."""
        lines: list[str] = []

        def draw(node: Optional[BSTNode], prefix: str, is_left: bool) -> None:
            if node is None:
                return
            lines.append(f"{prefix}{'|--' if is_left else chr(92) + '--'}{node.data}\n")
            child_prefix = prefix + ("|   " if is_left else "    ")
            draw(node.left, child_prefix, True)
            draw(node.right, child_prefix, False)

        draw(self.root, "", False)
        return "".join(lines)