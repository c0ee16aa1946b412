"""Edmonds-Karp maximum flow: breadth-first (shortest) augmenting paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from .ford_fulkerson import _build_graph
from .greedy_flow import _augment_until_stuck, _run_cli, _step_lines
from .network import (
    INF,
    SINK,
    SOURCE,
    FlowResult,
    NetworkError,
    NodeNames,
    ResidualGraph,
    Step,
)


def _find_path(graph: ResidualGraph) -> Step | None:
    adjacency = graph.adjacency
    parent: list[tuple[int, int] | None] = [None] * len(adjacency)
    parent[SOURCE] = (-1, -1)
    queue = deque([SOURCE])
    while queue:
        u = queue.popleft()
        if u == SINK:
            break
        for index, edge in enumerate(adjacency[u]):
            if parent[edge.target] is None and graph.residual(edge) > 0:
                parent[edge.target] = (u, index)
                queue.append(edge.target)

    if parent[SINK] is None:
        return None

    path: list[tuple[int, int]] = [(SINK, -1)]
    amount = INF
    node = SINK
    while node != SOURCE:
        previous = parent[node]
        assert previous is not None
        path.append(previous)
        node, index = previous
        amount = min(amount, graph.residual(adjacency[node][index]))
    path.reverse()
    return Step(amount, path)


def _verified_cut(graph: ResidualGraph, total: int) -> list[int]:
    """Minimum cut of a saturated graph, checked against the flow it must carry."""
    cut = graph.min_cut()
    if graph.cut_flow(cut) != total:
        raise NetworkError("flow across the minimum cut does not match the maximum flow")
    return cut


def _labels(names: NodeNames, nodes: Iterable[int]) -> str:
    return "".join(f"{names.label(node)} " for node in nodes)


def edmonds_karp(node_count: int, edges: Iterable[tuple[int, int, int]]) -> FlowResult:
    """Maximum flow from node 0 to node 1, with its steps and minimum cut."""
    graph = _build_graph(node_count, edges)
    total, steps = _augment_until_stuck(lambda: _find_path(graph), graph.augment)
    return FlowResult(total, steps, _verified_cut(graph, total))


def format_report(names: NodeNames, result: FlowResult) -> str:
    lines = [
        *_step_lines(names, result),
        "",
        "Ademas, el MIN CUT esta dado por:",
        "   " + _labels(names, result.min_cut),
    ]
    return "\n".join(lines) + "\n\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Read a network and print its maximum flow, augmenting paths and minimum cut."""
    return _run_cli(argv, "grafoalg-edmonds-karp", __doc__, edmonds_karp, format_report)