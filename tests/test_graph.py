import io

import pytest

from ssspath.graph import Graph, read_graph


def _chain():
    graph = Graph(3, True, io.StringIO())
    graph.add_edge(1, 1, 2, 1.5)
    graph.add_edge(2, 2, 3, 2.0)
    graph.add_edge(3, 1, 3, 10.0)
    return graph


def _partial():
    graph = Graph(4, True, io.StringIO())
    graph.add_edge(1, 1, 2, 1.0)
    graph.add_edge(2, 1, 4, 5.0)
    graph.add_edge(3, 4, 3, 1.0)
    return graph


def test_directed_edges_go_one_way():
    graph = Graph(3, True)
    assert graph.add_edge(1, 1, 2, 1.0) is True
    assert graph.edge_exists(1, 2)
    assert not graph.edge_exists(2, 1)


def test_undirected_edges_go_both_ways():
    graph = Graph(3, False)
    graph.add_edge(1, 1, 2, 1.0)
    assert graph.edge_exists(1, 2)
    assert graph.edge_exists(2, 1)


def test_edges_with_unknown_vertices_are_ignored():
    graph = Graph(3, True)
    assert graph.add_edge(1, 0, 2, 1.0) is False
    assert graph.add_edge(2, 1, 4, 1.0) is False
    assert not graph.edge_exists(1, 4)
    assert str(graph) == str(Graph(3, True))


def test_contains_vertex_bounds():
    graph = Graph(5, True)
    assert [graph.contains_vertex(v) for v in (0, 1, 5, 6)] == [False, True, True, False]


def test_str_lists_newest_neighbour_first():
    graph = Graph(3, True)
    graph.add_edge(1, 1, 2, 1.0)
    graph.add_edge(2, 1, 3, 1.0)
    assert str(graph) == "1: 3 2 \n2: \n3: \n"


def test_shortest_path_on_chain():
    graph = _chain()
    graph.find(1, 3)
    assert graph.describe_path(1, 3) == (
        "Shortest Path: <1, 2, 3>\nThe path weight is:      3.5000\n"
    )


def test_no_path_exists_when_unreachable():
    graph = Graph(3, True, io.StringIO())
    graph.add_edge(1, 2, 3, 1.0)
    graph.find(1, 3)
    assert graph.describe_path(1, 3) == "No 1-3 path exists.\n"


def test_search_stops_at_destination():
    graph = _partial()
    graph.find(1, 2)
    assert graph.describe_path(1, 3) == "No 1-3 path has been computed.\n"
    assert graph.describe_path(1, 4).startswith("Path not known to be shortest: <1, 4>\n")
    assert graph.describe_path(1, 2).startswith("Shortest Path: <1, 2>\n")


def test_describe_before_any_search():
    graph = _chain()
    assert graph.describe_path(1, 3) == "No 1-3 path has been computed.\n"


def test_new_search_replaces_previous_results():
    graph = _chain()
    graph.find(1, 3)
    graph.find(2, 3)
    assert graph.describe_path(2, 3).startswith("Shortest Path: <2, 3>\n")


def test_invalid_vertices_raise():
    graph = _chain()
    with pytest.raises(ValueError):
        graph.find(0, 2)
    with pytest.raises(ValueError):
        graph.describe_path(1, 9)


def test_verbose_search_traces_heap_operations():
    trace = io.StringIO()
    graph = Graph(3, True, trace)
    graph.add_edge(1, 1, 2, 1.5)
    graph.add_edge(2, 2, 3, 2.0)
    graph.find(1, 3, True)
    lines = trace.getvalue().splitlines()
    assert lines[0].startswith("Insert vertex 1, key=")
    assert any(line.startswith("Delete vertex 3") for line in lines)
    assert sum(line.startswith("Delete") for line in lines) == 3


def test_quiet_search_writes_nothing():
    trace = io.StringIO()
    graph = Graph(3, True, trace)
    graph.add_edge(1, 1, 2, 1.5)
    graph.find(1, 2)
    assert trace.getvalue() == ""


def test_read_undirected_graph_gives_symmetric_weights(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("4 4\n1 1 2 2.0\n2 2 3 4.5\n3 1 4 1.0\n4 4 3 7.0\n")
    graph = read_graph(path, False, io.StringIO())
    assert graph.edge_exists(3, 2)
    graph.find(1, 3)
    forward = graph.describe_path(1, 3).splitlines()
    graph.find(3, 1)
    backward = graph.describe_path(3, 1).splitlines()
    assert forward[1] == backward[1]
    forward_path = forward[0].split("<")[1].rstrip(">").split(", ")
    backward_path = backward[0].split("<")[1].rstrip(">").split(", ")
    assert forward_path == list(reversed(backward_path))


def test_read_directed_graph(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("3 1\n1 1 2 2.0\n")
    graph = read_graph(path, True)
    assert graph.num_vertices == 3
    assert graph.edge_exists(1, 2)
    assert not graph.edge_exists(2, 1)


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_graph(tmp_path / "absent.txt")


def test_read_truncated_file_raises(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("3 2\n1 1 2 2.0\n")
    with pytest.raises(ValueError):
        read_graph(path)