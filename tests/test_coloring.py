import io
from itertools import permutations

import pytest

from grafoalg.coloring import best_greedy_coloring, greedy_coloring, main, parse_graph


def _adjacency(node_count, edges):
    adjacency = [[] for _ in range(node_count)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _is_proper(adjacency, colors):
    return all(
        colors[u] != colors[v]
        for u, neighbours in enumerate(adjacency)
        for v in neighbours
        if u != v
    )


CROWN = _adjacency(6, [(i, 3 + j) for i in range(3) for j in range(3) if i != j])
K4 = _adjacency(4, [(u, v) for u in range(4) for v in range(u + 1, 4)])


def test_path_in_natural_order_alternates():
    assert greedy_coloring([[1], [0, 2], [1]], [0, 1, 2]) == [1, 2, 1]


@pytest.mark.parametrize("order", list(permutations(range(6)))[::37])
def test_greedy_is_proper_and_bounded_by_degree(order):
    colors = greedy_coloring(CROWN, order)
    assert _is_proper(CROWN, colors)
    for node, neighbours in enumerate(CROWN):
        assert 1 <= colors[node] <= len(neighbours) + 1


def test_crown_interleaved_order_needs_three_colours():
    colors = greedy_coloring(CROWN, [0, 3, 1, 4, 2, 5])
    assert _is_proper(CROWN, colors)
    assert max(colors) == 3


def test_best_order_on_crown_is_bipartite():
    count, colors = best_greedy_coloring(CROWN)
    assert count == 2
    assert max(colors) == count
    assert _is_proper(CROWN, colors)


def test_best_on_complete_graph_uses_every_colour():
    count, colors = best_greedy_coloring(K4)
    assert count == len(K4)
    assert sorted(colors) == list(range(1, len(K4) + 1))


def test_best_is_never_worse_than_any_single_order():
    adjacency = _adjacency(5, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)])
    count, colors = best_greedy_coloring(adjacency)
    assert _is_proper(adjacency, colors)
    for order in permutations(range(5)):
        assert count <= max(greedy_coloring(adjacency, order))


def test_edgeless_graph_uses_a_single_colour():
    colors = greedy_coloring([[], [], []], [2, 0, 1])
    assert min(colors) == max(colors)
    assert best_greedy_coloring([[], [], []])[1] == colors


def test_parse_graph_reads_edges_and_order():
    adjacency, order = parse_graph("3 2\n1 2\n2 3\n3 1 2\n")
    assert adjacency == [[1], [0, 2], [1]]
    assert order == [x - 1 for x in (3, 1, 2)]


def test_parse_graph_without_order():
    adjacency, order = parse_graph("2 1\n1 2\n", with_order=False)
    assert order is None
    assert adjacency == [[1], [0]]


@pytest.mark.parametrize(
    "text",
    ["3 2\n1 2\n", "2 1\n1 5\n1 2\n", "2 1\n1 2\n1 9\n", "x 1\n", "2 1\n1 2\n1\n"],
)
def test_parse_graph_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_graph(text)


def test_main_prints_greedy_colouring(monkeypatch, capsys):
    text = "3 2\n1 2\n2 3\n1 2 3\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    adjacency, order = parse_graph(text)
    assert lines[0] == "El coloreo es:"
    assert lines[1].split() == [str(c) for c in greedy_coloring(adjacency, order)]


def test_main_brute_reports_colour_count(tmp_path, capsys):
    path = tmp_path / "graph.txt"
    path.write_text("6 6\n1 5\n1 6\n2 4\n2 6\n3 4\n3 5\n")
    assert main([str(path), "--brute"]) == 0
    lines = capsys.readouterr().out.splitlines()
    count, colors = best_greedy_coloring(CROWN)
    assert lines[0] == f"El coloreo es de {count}:"
    assert lines[1].split() == [str(c) for c in colors]


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err