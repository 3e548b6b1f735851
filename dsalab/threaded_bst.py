"""A right- and left-threaded binary search tree of distinct integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ThreadedNode:
    """A node whose left/right links are threads when the matching flag is set."""

    data: int
    left: Optional["ThreadedNode"] = None
    right: Optional["ThreadedNode"] = None
    lthread: bool = True
    rthread: bool = True


class ThreadedBST:
    """A threaded binary search tree traversed without a stack."""

    def __init__(self) -> None:
        self.root: Optional[ThreadedNode] = None

    def insert(self, value: int) -> bool:
        """Insert value; return False if it is already present."""
        new = ThreadedNode(value)
        if self.root is None:
            self.root = new
            return True
        current = self.root
        while True:
            if value < current.data:
                if current.lthread:
                    new.left = current.left
                    new.right = current
                    current.left = new
                    current.lthread = False
                    return True
                current = current.left
            elif value > current.data:
                if current.rthread:
                    new.right = current.right
                    new.left = current
                    current.right = new
                    current.rthread = False
                    return True
                current = current.right
            else:
                return False

    def preorder(self) -> list[int]:
        result: list[int] = []
        node = self.root
        while node is not None:
            result.append(node.data)
            if not node.lthread:
                node = node.left
            elif not node.rthread:
                node = node.right
            else:
                while node is not None and node.rthread:
                    node = node.right
                if node is not None:
                    node = node.right
        return result

    def inorder(self) -> list[int]:
        result: list[int] = []
        node = self.root
        if node is None:
            return result
        while not node.lthread:
            node = node.left
        while node is not None:
            result.append(node.data)
            node = self.successor(node)
        return result

    def predecessor(self, node: ThreadedNode) -> Optional[ThreadedNode]:
        """The node before this one in sorted order, or None for the first."""
        if node.lthread:
            return node.left
        node = node.left
        while not node.rthread:
            node = node.right
        return node

    def successor(self, node: ThreadedNode) -> Optional[ThreadedNode]:
        """The node after this one in sorted order, or None for the last."""
        if node.rthread:
            return node.right
        node = node.right
        while not node.lthread:
            node = node.left
        return node

    def delete(self, value: int) -> bool:
        """Remove value; return False if it was not found."""
        parent: Optional[ThreadedNode] = None
        current = self.root
        while current is not None and current.data != value:
            parent = current
            if value < current.data:
                if current.lthread:
                    return False
                current = current.left
            else:
                if current.rthread:
                    return False
                current = current.right
        if current is None:
            return False

        if not current.lthread and not current.rthread:
            self._remove_with_two_children(current)
        elif not current.lthread or not current.rthread:
            self._remove_with_one_child(parent, current)
        else:
            self._remove_leaf(parent, current)
        return True

    def _remove_with_two_children(self, current: ThreadedNode) -> None:
        parent = current
        successor = current.right
        while not successor.lthread:
            parent = successor
            successor = successor.left
        current.data = successor.data
        if successor.lthread and successor.rthread:
            self._remove_leaf(parent, successor)
        else:
            self._remove_with_one_child(parent, successor)

    def _remove_with_one_child(
        self, parent: Optional[ThreadedNode], current: ThreadedNode
    ) -> None:
        if not current.lthread:
            child = current.left
            self.predecessor(current).right = current.right
        else:
            child = current.right
            self.successor(current).left = current.left
        if parent is None:
            self.root = child
        elif parent.left is current and not parent.lthread:
            parent.left = child
        else:
            parent.right = child

    def _remove_leaf(self, parent: Optional[ThreadedNode], current: ThreadedNode) -> None:
        if parent is None:
            self.root = None
        elif parent.left is current and not parent.lthread:
            parent.left = current.left
            parent.lthread = True
        else:
            parent.right = current.right
            parent.rthread = True