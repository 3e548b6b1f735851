"""A plain binary tree of integers with traversals and heap rearrangement."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class TreeNode:
    """A node holding an integer."""

    data: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


class BinaryTree:
    """A binary tree built from a preorder listing with a null sentinel."""

    def __init__(self, root: Optional[TreeNode] = None) -> None:
        self.root = root

    @classmethod
    def from_preorder(cls, values: Iterable[int], sentinel: int = -1) -> "BinaryTree":
        """Build a tree from values in preorder, where sentinel marks an empty child."""
        stream = iter(values)

        def build() -> Optional[TreeNode]:
            try:
                value = next(stream)
            except StopIteration:
                raise ValueError("preorder listing ended before the tree was complete") from None
            if value == sentinel:
                return None
            node = TreeNode(value)
            node.left = build()
            node.right = build()
            return node

        return cls(build())

    def preorder(self) -> list[int]:
        def walk(node: Optional[TreeNode]) -> Iterator[int]:
            if node is not None:
                yield node.data
                yield from walk(node.left)
                yield from walk(node.right)

        return list(walk(self.root))

    def inorder(self) -> list[int]:
        def walk(node: Optional[TreeNode]) -> Iterator[int]:
            if node is not None:
                yield from walk(node.left)
                yield node.data
                yield from walk(node.right)

        return list(walk(self.root))

    def postorder(self) -> list[int]:
        def walk(node: Optional[TreeNode]) -> Iterator[int]:
            if node is not None:
                yield from walk(node.left)
                yield from walk(node.right)
                yield node.data

        return list(walk(self.root))

    def iterative_preorder(self) -> list[int]:
        """Preorder using an explicit stack."""
        result: list[int] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.data)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def iterative_inorder(self) -> list[int]:
        """Inorder using an explicit stack."""
        result: list[int] = []
        stack: list[TreeNode] = []
        node = self.root
        while node is not None or stack:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.data)
            node = node.right
        return result

    def iterative_postorder(self) -> list[int]:
        """Postorder using two stacks."""
        if self.root is None:
            return []
        pending = [self.root]
        output: list[TreeNode] = []
        while pending:
            node = pending.pop()
            output.append(node)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return [node.data for node in reversed(output)]

    def level_order(self) -> list[int]:
        """Breadth-first traversal."""
        result: list[int] = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""

        def depth(node: Optional[TreeNode]) -> int:
            if node is None:
                return 0
            return 1 + max(depth(node.left), depth(node.right))

        return depth(self.root)

    def count_nodes(self) -> tuple[int, int]:
        """Return (internal, leaf) node counts."""
        internal = leaf = 0
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            if node.left is None and node.right is None:
                leaf += 1
            else:
                internal += 1
            stack.extend(child for child in (node.left, node.right) if child is not None)
        return internal, leaf

    def mirror(self) -> None:
        """Swap the left and right children of every node in place."""

        def swap(node: Optional[TreeNode]) -> None:
            if node is not None:
                node.left, node.right = node.right, node.left
                swap(node.left)
                swap(node.right)

        swap(self.root)

    def copy(self) -> "BinaryTree":
        """A deep copy of the tree."""

        def clone(node: Optional[TreeNode]) -> Optional[TreeNode]:
            if node is None:
                return None
            return TreeNode(node.data, clone(node.left), clone(node.right))

        return BinaryTree(clone(self.root))

    def clear(self) -> list[int]:
        """Remove every node; return the removed values in deletion (postorder) order."""
        removed = self.postorder()
        self.root = None
        return removed

    def heapify_min(self) -> None:
        """Bubble smaller values towards the root in one bottom-up pass."""
        self._bubble(self.root, lambda child, parent: child < parent)

    def heapify_max(self) -> None:
        """Bubble larger values towards the root in one bottom-up pass."""
        self._bubble(self.root, lambda child, parent: child > parent)

    def _bubble(self, node: Optional[TreeNode], before) -> None:
        if node is None:
            return
        for child in (node.left, node.right):
            if child is not None:
                self._bubble(child, before)
                if before(child.data, node.data):
                    node.data, child.data = child.data, node.data

    def render(self) -> str:
        """Draw the tree as an indented outline, one node per line."""
        lines: list[str] = []

        def draw(node: Optional[TreeNode], prefix: str, is_left: bool) -> None:
            if node is None:
                return
            lines.append(f"{prefix}{'|--' if is_left else chr(92) + '--'}{node.data}\n")
            child_prefix = prefix + ("|   " if is_left else "    ")
            draw(node.left, child_prefix, True)
            draw(node.right, child_prefix, True)

        draw(self.root, "", False)
        return "".join(lines)