"""An adjacency-list graph of named vertices with depth- and breadth-first search."""

from __future__ import annotations

from collections import deque
from typing import Iterable


class AdjacencyList:
    """A directed graph whose vertices keep their neighbours in insertion order."""

    def __init__(self) -> None:
        self._rows: dict[str, list[str]] = {}

    def __len__(self) -> int:
        return len(self._rows)

    def add_vertex(self, vertex: str, neighbours: Iterable[str] = ()) -> None:
        """Add a vertex row with its neighbours; raise ValueError if it already exists."""
        if vertex in self._rows:
            raise ValueError(f"vertex {vertex!r} already has a row")
        self._rows[vertex] = list(neighbours)

    def _neighbours(self, vertex: str) -> list[str]:
        try:
            return self._rows[vertex]
        except KeyError:
            raise KeyError(f"vertex {vertex!r} has no adjacency row") from None

    def dfs(self) -> list[str]:
        """Depth-first order from the first vertex added, marking vertices when pushed."""
        if not self._rows:
            return []
        start = next(iter(self._rows))
        stack = [start]
        visited = {start}
        order: list[str] = []
        while stack:
            current = stack.pop()
            order.append(current)
            for neighbour in self._neighbours(current):
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        return order

    def bfs(self) -> list[str]:
        """Breadth-first order from the first vertex added."""
        if not self._rows:
            return []
        start = next(iter(self._rows))
        queue = deque([start])
        visited = {start}
        order: list[str] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour in self._neighbours(current):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def render(self) -> str:
        """One line per vertex: the vertex followed by its neighbours, ending in NULL."""
        return "\n".join(
            "".join(f" --> {name}" for name in [vertex, *neighbours]) + "NULL"
            for vertex, neighbours in self._rows.items()
        )