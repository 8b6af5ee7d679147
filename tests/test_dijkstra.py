import io
import random

import pytest

from dslab.dijkstra import INFINITY, MAX_VERTICES, dijkstra, run

EXAMPLE = [
    [0, 1, 999, 999],
    [1, 0, 2, 3],
    [999, 2, 0, 1],
    [999, 3, 1, 0],
]


def path_length(matrix, route):
    return sum(matrix[b][a] for a, b in zip(route, route[1:]))


def test_example_distances():
    result = dijkstra(EXAMPLE, 0)
    assert result.distances == (0, 1, 3, 4)


def test_example_path():
    assert dijkstra(EXAMPLE, 0).path(3) == [3, 1, 0]


def test_path_of_start_is_itself():
    result = dijkstra(EXAMPLE, 2)
    assert result.path(2) == [2]
    assert result.distances[2] == 0


def test_report_format():
    report = dijkstra(EXAMPLE, 0).report()
    assert report.startswith("\nDistance of node 1 = 1\nPath = 1 <= 0")
    assert "Distance of node 0" not in report


def test_single_vertex_report_is_empty():
    result = dijkstra([[0]], 0)
    assert result.report() == ""
    assert result.distances == (0,)


def test_unreachable_vertex_keeps_infinity():
    matrix = [[0, 5, 0], [5, 0, 0], [0, 0, 0]]
    result = dijkstra(matrix, 0)
    assert result.distances[2] == INFINITY
    assert result.path(2) == [2, 0]


@pytest.mark.parametrize("seed", range(5))
def test_paths_realise_distances(seed):
    rng = random.Random(seed)
    size = rng.randint(3, MAX_VERTICES)
    matrix = [
        [0 if i == j else rng.randint(1, 20) for j in range(size)] for i in range(size)
    ]
    start = rng.randrange(size)
    result = dijkstra(matrix, start)
    for node in range(size):
        route = result.path(node)
        assert route[0] == node and route[-1] == start
        assert path_length(matrix, route) == result.distances[node]
        for other in range(size):
            if other != node:
                assert result.distances[node] <= result.distances[other] + matrix[other][node]


def test_rejects_bad_input():
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [1]], 0)
    with pytest.raises(ValueError):
        dijkstra(EXAMPLE, 4)
    with pytest.raises(ValueError):
        dijkstra([[0] * 11 for _ in range(11)], 0)
    with pytest.raises(ValueError):
        dijkstra([], 0)


def test_path_out_of_range():
    with pytest.raises(IndexError):
        dijkstra(EXAMPLE, 0).path(7)


def test_run_prints_report():
    text = "4\n" + "\n".join(" ".join(map(str, row)) for row in EXAMPLE) + "\n0\n"
    out = io.StringIO()
    assert run(io.StringIO(text), out) == 0
    assert dijkstra(EXAMPLE, 0).report() in out.getvalue()


def test_run_reports_short_input():
    out = io.StringIO()
    assert run(io.StringIO("3\n0 1\n"), out) == 1
    assert "Input ended early" in out.getvalue()


def test_run_reports_invalid_number():
    out = io.StringIO()
    assert run(io.StringIO("x\n"), out) == 1
    assert "Invalid input" in out.getvalue()