"""An undirected weighted graph on an adjacency matrix, with Prim's algorithm."""

from __future__ import annotations

from dataclasses import dataclass

MAX_VERTICES = 20


@dataclass(frozen=True)
class Edge:
    """A chosen tree edge, from a vertex already in the tree to a new one."""

    source: int
    destination: int
    weight: int


class WeightedGraph:
    """An undirected graph where a weight of 0 means no edge."""

    def __init__(self, vertices: int) -> None:
        if not 0 <= vertices <= MAX_VERTICES:
            raise ValueError(f"vertex count must be between 0 and {MAX_VERTICES}")
        self.vertices = vertices
        self.matrix = [[0] * vertices for _ in range(vertices)]

    def add_edge(self, source: int, destination: int, weight: int) -> None:
        """Set the weight of the edge between two vertices, in both directions."""
        for vertex in (source, destination):
            if not 0 <= vertex < self.vertices:
                raise IndexError(f"vertex {vertex} out of range")
        self.matrix[source][destination] = weight
        self.matrix[destination][source] = weight

    def render(self) -> str:
        """The matrix, one row per line, each weight followed by a tab."""
        return "\n".join("".join(f"{weight}\t" for weight in row) for row in self.matrix)

    def minimum_spanning_tree(self) -> list[Edge]:
        """Grow a spanning tree from vertex 0, adding the cheapest crossing edge each step."""
        if self.vertices == 0:
            return []
        in_tree = {0}
        edges: list[Edge] = []
        while len(edges) < self.vertices - 1:
            best: Edge | None = None
            for source in sorted(in_tree):
                for destination, weight in enumerate(self.matrix[source]):
                    if destination in in_tree or not weight:
                        continue
                    if best is None or weight < best.weight:
                        best = Edge(source, destination, weight)
            if best is None:
                raise ValueError("graph is not connected")
            in_tree.add(best.destination)
            edges.append(best)
        return edges

    def minimum_cost(self) -> int:
        """Total weight of the minimum spanning tree."""
        return sum(edge.weight for edge in self.minimum_spanning_tree())