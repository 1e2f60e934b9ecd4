import pytest

from dsalab.graph import Color, Graph, Vertex, main

SAMPLE = "4 3\nA\nB\nC\nD\nA B 5\nB C 2\nA C 10\n"


def searched(text=SAMPLE):
    graph = Graph.parse(text)
    graph.bfs()
    return graph


def test_parse_reads_labels_and_edges():
    graph = Graph.parse(SAMPLE)
    assert [vertex.label for vertex in graph.vertices] == ["A", "B", "C", "D"]
    assert graph.vertices[0].neighbors == [(1, 5), (2, 10)]
    assert graph.vertices[1].neighbors == [(2, 2)]


def test_bfs_distances_follow_first_discovery():
    graph = searched()
    assert graph.distance("A") == 0
    assert graph.distance("B") == 5
    assert graph.distance("C") == 10
    assert graph.distance("D") is None


def test_bfs_colours_reached_vertices_black():
    graph = searched()
    colors = [vertex.color for vertex in graph.vertices]
    assert colors == [Color.BLACK, Color.BLACK, Color.BLACK, Color.WHITE]


def test_distance_sums_weights_along_chain():
    graph = searched("3 2\nA\nB\nC\nA B 1\nB C 2\n")
    assert graph.distance("C") == graph.distance("B") + 2
    assert graph.previous("C") == "B"


def test_previous():
    graph = searched()
    assert graph.previous("C") == "A"
    assert graph.previous("A") is None
    assert graph.previous("D") is None


def test_unknown_label_raises():
    graph = searched()
    with pytest.raises(KeyError):
        graph.distance("Z")
    with pytest.raises(KeyError):
        graph.previous("Z")


def test_bfs_twice_gives_same_result():
    graph = searched()
    first = [vertex.distance for vertex in graph.vertices]
    graph.bfs()
    assert [vertex.distance for vertex in graph.vertices] == first


def test_bfs_on_empty_graph_raises():
    with pytest.raises(ValueError):
        Graph().bfs()


def test_graph_from_vertices():
    graph = Graph([Vertex("x", [(1, 4)]), Vertex("y")])
    graph.bfs()
    assert graph.distance("y") == 4


@pytest.mark.parametrize(
    "text",
    ["", "3 0\nA\n", "2 1\nA\nB\nA Z 1\n", "2 1\nA\nB\nA B\n", "2 1\nA\nB\nA B x\n"],
)
def test_parse_rejects_malformed_text(text):
    with pytest.raises(ValueError):
        Graph.parse(text)


def test_to_dot_lists_only_reached_vertices():
    lines = searched().to_dot().splitlines()
    assert lines[0] == "digraph G {"
    assert lines[-1] == "}"
    assert 'A [label= "Label: A, Distance: 0"];' in lines
    assert "A -> B" in lines
    assert not any(line.startswith("D") for line in lines)


def test_output_graph_writes_dot_file(tmp_path):
    graph = searched()
    target = tmp_path / "graph.dot"
    graph.output_graph(str(target))
    assert target.read_text(encoding="utf-8") == graph.to_dot()


def test_from_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    graph = Graph.from_file(str(path))
    assert [vertex.label for vertex in graph.vertices] == ["A", "B", "C", "D"]


def test_main_writes_dot(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "The End."
    assert (tmp_path / "input.txt.dot").read_text(encoding="utf-8") == searched().to_dot()


def test_main_usage_error(capsys):
    assert main([]) == 1
    assert "Usage error" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Input file not found." in capsys.readouterr().err