import pytest

from dslab.adjacency_matrix import (
    AdjacencyMatrixGraph,
    DestinationNotFoundError,
    SourceNotFoundError,
)


def make_graph(names):
    graph = AdjacencyMatrixGraph(len(names))
    for index, name in enumerate(names):
        graph.set_vertex(index, name)
    return graph


@pytest.fixture
def sample():
    graph = make_graph("ABCD")
    graph.add_edge("A", "B")
    graph.add_edge("A", "C")
    graph.add_edge("B", "D")
    return graph


def test_new_graph_has_blank_names_and_no_edges():
    graph = AdjacencyMatrixGraph(3)
    assert len(graph) == 3
    assert graph.names == [" ", " ", " "]
    assert set(graph.render().split()) == {"0"}


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        AdjacencyMatrixGraph(-1)


def test_set_vertex_out_of_range():
    graph = AdjacencyMatrixGraph(2)
    with pytest.raises(IndexError):
        graph.set_vertex(2, "X")
    with pytest.raises(IndexError):
        graph.set_vertex(-1, "X")


def test_add_and_remove_edge(sample):
    assert sample.has_edge("A", "B")
    assert not sample.has_edge("B", "A")
    sample.remove_edge("A", "B")
    assert not sample.has_edge("A", "B")
    sample.remove_edge("A", "B")
    assert not sample.has_edge("A", "B")


def test_missing_source_and_destination(sample):
    with pytest.raises(SourceNotFoundError):
        sample.add_edge("Z", "A")
    with pytest.raises(DestinationNotFoundError):
        sample.add_edge("A", "Z")
    with pytest.raises(SourceNotFoundError):
        sample.remove_edge("Z", "Z")
    with pytest.raises(DestinationNotFoundError):
        sample.remove_edge("A", "Z")


def test_bfs_order(sample):
    assert sample.bfs() == ["A", "B", "C", "D"]


def test_dfs_order(sample):
    assert sample.dfs() == ["A", "C", "B", "D"]


def test_traversals_visit_every_vertex_once(sample):
    sample.add_edge("D", "A")
    sample.add_edge("C", "C")
    assert sorted(sample.bfs()) == ["A", "B", "C", "D"]
    assert sorted(sample.dfs()) == ["A", "B", "C", "D"]


def test_disconnected_graph_visits_in_slot_order():
    graph = make_graph("PQR")
    assert graph.bfs() == ["P", "Q", "R"]
    assert graph.dfs() == ["P", "Q", "R"]


def test_render_format():
    graph = make_graph("XY")
    graph.add_edge("X", "Y")
    assert graph.render() == "0 1 \n0 0 \n"


def test_render_has_one_row_per_vertex(sample):
    rows = sample.render().splitlines()
    assert len(rows) == len(sample)
    assert all(len(row.split()) == len(sample) for row in rows)


def test_duplicate_name_uses_first_slot():
    graph = make_graph("AAB")
    graph.add_edge("A", "B")
    first_row, second_row, _ = graph.render().splitlines()
    assert first_row.split() == ["0", "0", "1"]
    assert second_row.split() == ["0", "0", "0"]


def test_empty_graph_traversals():
    graph = AdjacencyMatrixGraph(0)
    assert graph.bfs() == []
    assert graph.dfs() == []
    assert graph.render() == ""