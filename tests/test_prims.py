import pytest

from dsalab.prims import Edge, WeightedGraph

EXAMPLE_EDGES = [(0, 1, 4), (0, 3, 5), (0, 4, 2), (4, 3, 2), (1, 3, 3), (1, 2, 1), (2, 3, 8)]


@pytest.fixture
def example():
    graph = WeightedGraph(5)
    for source, destination, weight in EXAMPLE_EDGES:
        graph.add_edge(source, destination, weight)
    return graph


def test_worked_example_tree(example):
    assert example.minimum_spanning_tree() == [
        Edge(0, 4, 2),
        Edge(4, 3, 2),
        Edge(3, 1, 3),
        Edge(1, 2, 1),
    ]


def test_worked_example_cost(example):
    assert example.minimum_cost() == 8


def test_tree_spans_all_vertices(example):
    edges = example.minimum_spanning_tree()
    assert len(edges) == example.vertices - 1
    reached = {0} | {edge.destination for edge in edges}
    assert reached == set(range(example.vertices))
    assert example.minimum_cost() == sum(edge.weight for edge in edges)
    for edge in edges:
        assert example.matrix[edge.source][edge.destination] == edge.weight


def test_matrix_is_symmetric(example):
    for source, destination, weight in EXAMPLE_EDGES:
        assert example.matrix[source][destination] == weight
        assert example.matrix[destination][source] == weight


def test_render_rows(example):
    lines = example.render().split("\n")
    assert len(lines) == 5
    assert lines[0] == "0\t4\t0\t5\t2\t"


def test_disconnected_graph_raises():
    graph = WeightedGraph(3)
    graph.add_edge(0, 1, 7)
    with pytest.raises(ValueError):
        graph.minimum_spanning_tree()


def test_trivial_graphs():
    assert WeightedGraph(0).minimum_spanning_tree() == []
    assert WeightedGraph(1).minimum_cost() == 0


def test_bad_vertex_and_size():
    graph = WeightedGraph(3)
    with pytest.raises(IndexError):
        graph.add_edge(0, 3, 1)
    with pytest.raises(ValueError):
        WeightedGraph(21)