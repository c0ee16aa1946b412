"""Ford-Fulkerson maximum flow with depth-first augmenting paths."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .greedy_flow import (
    _augment_until_stuck,
    _depth_first_step,
    _Memory,
    _run_cli,
)
from .greedy_flow import format_report as _steps_report
from .network import FlowResult, NodeNames, ResidualGraph


def _build_graph(node_count: int, edges: Iterable[tuple[int, int, int]]) -> ResidualGraph:
    graph = ResidualGraph(node_count)
    for u, v, capacity in edges:
        graph.add_edge(u, v, capacity)
    return graph


def ford_fulkerson(node_count: int, edges: Iterable[tuple[int, int, int]]) -> FlowResult:
    """Augment along depth-first residual paths until none reaches the sink."""
    graph = _build_graph(node_count, edges)
    total, steps = _augment_until_stuck(
        lambda: _depth_first_step(graph.adjacency, graph.residual, _Memory.VISITED),
        graph.augment,
    )
    return FlowResult(total, steps)


def format_report(names: NodeNames, result: FlowResult) -> str:
    return _steps_report(names, result)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a network and print its maximum flow and augmenting paths."""
    return _run_cli(argv, "grafoalg-ford-fulkerson", __doc__, ford_fulkerson, format_report)