import io

from dslab.graph_list_cli import run


def session(text):
    out = io.StringIO()
    status = run(io.StringIO(text), out)
    return status, out.getvalue()


def test_insert_vertices_and_bfs():
    status, out = session("1\nA alpha\n1\nB beta\n2\nA B\n5\n7\n")
    assert status == 0
    assert out.count("\nInserted Successfull\n") == 3
    assert "Breadth-first-traversal is : A\nB\n\n" in out
    assert "EXIT" in out


def test_dfs_output():
    status, out = session("1\nA a\n1\nB b\n1\nC c\n2\nA B\n2\nA C\n6\n7\n")
    assert status == 0
    assert "Depth-first-traversal is : A\nC\nB\n\n" in out


def test_edge_with_missing_key():
    _, out = session("1\nA a\n2\nA Z\n7\n")
    assert "key not found to insert an edge" in out


def test_delete_vertex_in_use_fails_then_succeeds():
    _, out = session("1\nA a\n1\nB b\n2\nA B\n3\nA\n4\nA B\n3\nA\n7\n")
    assert "Deleted Unsuccessfull" in out
    assert "Deleted Successfull\n" in out
    assert "Deleted Successfully" in out


def test_delete_missing_edge():
    _, out = session("1\nA a\n1\nB b\n4\nA B\n7\n")
    assert "Deleted Unsuccessfull\n" in out


def test_invalid_menu_inputs():
    _, out = session("x\n9\n7\n")
    assert "Invalid input please select any Integer between 1-to-7" in out
    assert "Invalid Choice choose between 1 - 7" in out


def test_bad_vertex_line_is_retried():
    _, out = session("1\nonlyone\nA alpha\n5\n7\n")
    assert "Invalid input! Please enter 2 value(s)" in out
    assert "Breadth-first-traversal is : A\n" in out


def test_end_of_input_stops_cleanly():
    status, out = session("1\n")
    assert status == 0
    assert "EXIT" not in out