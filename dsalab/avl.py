"""A self-balancing AVL tree mapping integer keys to string values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

_INDENT = 10


@dataclass
class AVLNode:
    """A tree node; a leaf has height 0."""

    key: int
    value: str
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None
    height: int = 0


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a key lookup, with the number of key comparisons made."""

    found: bool
    value: Optional[str]
    comparisons: int


def _height(node: Optional[AVLNode]) -> int:
    return -1 if node is None else node.height


def _balance(node: Optional[AVLNode]) -> int:
    return 0 if node is None else _height(node.left) - _height(node.right)


def _refresh(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: AVLNode) -> AVLNode:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _refresh(y)
    _refresh(x)
    return x


def _rotate_left(x: AVLNode) -> AVLNode:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _refresh(x)
    _refresh(y)
    return y


class AVLTree:
    """An AVL tree that rejects duplicate keys."""

    def __init__(self) -> None:
        self.root: Optional[AVLNode] = None

    def __len__(self) -> int:
        return sum(1 for _ in self._walk(self.root))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key).found

    def insert(self, key: int, value: str) -> bool:
        """Insert a key; return False if the key is already present."""
        self.root, inserted = self._insert(self.root, key, value)
        return inserted

    def _insert(
        self, node: Optional[AVLNode], key: int, value: str
    ) -> tuple[AVLNode, bool]:
        if node is None:
            return AVLNode(key, value), True
        if key < node.key:
            node.left, inserted = self._insert(node.left, key, value)
        elif key > node.key:
            node.right, inserted = self._insert(node.right, key, value)
        else:
            return node, False

        _refresh(node)
        bf = _balance(node)

        if bf > 1 and node.left is not None and key < node.left.key:
            return _rotate_right(node), inserted
        if bf < -1 and node.right is not None and key > node.right.key:
            return _rotate_left(node), inserted
        if bf > 1 and node.left is not None and key > node.left.key:
            node.left = _rotate_left(node.left)
            return _rotate_right(node), inserted
        if bf < -1 and node.right is not None and key < node.right.key:
            node.right = _rotate_right(node.right)
            return _rotate_left(node), inserted
        return node, inserted

    def update(self, key: int, value: str) -> bool:
        """Replace the value stored under key; return False if it is absent."""
        node = self.root
        while node is not None:
            if key == node.key:
                node.value = value
                return True
            node = node.left if key < node.key else node.right
        return False

    def search(self, key: int) -> SearchResult:
        """Look up key, counting the nodes visited."""
        node = self.root
        comparisons = 0
        while node is not None:
            comparisons += 1
            if key == node.key:
                return SearchResult(True, node.value, comparisons)
            node = node.left if key < node.key else node.right
        return SearchResult(False, None, comparisons)

    def height(self) -> int:
        """Height of the tree: -1 when empty, 0 for a single node."""
        return _height(self.root)

    def keys(self) -> list[int]:
        """All keys in ascending order."""
        return [node.key for node in self._walk(self.root)]

    def _walk(self, node: Optional[AVLNode]) -> Iterator[AVLNode]:
        if node is None:
            return
        yield from self._walk(node.left)
        yield node
        yield from self._walk(node.right)

    def render(self) -> str:
        """Draw the tree sideways, right subtree on top, deeper nodes indented."""
        parts: list[str] = []
        self._render(self.root, 0, parts)
        return "".join(parts)

    def _render(self, node: Optional[AVLNode], space: int, parts: list[str]) -> None:
        if node is None:
            return
        space += _INDENT
        parts.append("\n")
        self._render(node.right, space, parts)
        parts.append("\n")
        parts.append(" " * (space - _INDENT))
        parts.append(f"{node.key}\n")
        self._render(node.left, space, parts)