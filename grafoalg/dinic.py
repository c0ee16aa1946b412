"""Dinic maximum flow: blocking flows on layered auxiliary networks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .edmonds_karp import _labels, _verified_cut
from .ford_fulkerson import _build_graph
from .greedy_flow import (
    _augment_until_stuck,
    _depth_first_step,
    _headline,
    _Memory,
    _run_cli,
)
from .network import SINK, SOURCE, NodeNames, ResidualGraph, Step, format_path


@dataclass
class Phase:
    """One auxiliary network: its nodes in BFS order and the paths pushed through it."""

    nodes: list[int]
    steps: list[Step] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(step.amount for step in self.steps)


@dataclass
class DinicResult:
    max_flow: int
    phases: list[Phase]
    min_cut: list[int] = field(default_factory=list)

    @property
    def steps(self) -> list[Step]:
        return [step for phase in self.phases for step in phase.steps]


def _level_graph(graph: ResidualGraph) -> tuple[list[int], set[tuple[int, int]]] | None:
    """Nodes and edges of the auxiliary network, or ``None`` if the sink is unreachable."""
    adjacency = graph.adjacency
    dist = [0] * len(adjacency)
    dist[SOURCE] = 1
    queue = deque([SOURCE])
    while queue:
        u = queue.popleft()
        if u == SINK:
            break
        for edge in adjacency[u]:
            if dist[edge.target] == 0 and graph.residual(edge) > 0:
                dist[edge.target] = dist[u] + 1
                queue.append(edge.target)

    if dist[SINK] == 0:
        return None

    sink_level = dist[SINK]
    dist = [dist[SOURCE], sink_level] + [0] * (len(adjacency) - 2)
    marked: set[tuple[int, int]] = set()
    nodes: list[int] = []
    queue = deque([SOURCE])
    while queue:
        u = queue.popleft()
        nodes.append(u)
        for index, edge in enumerate(adjacency[u]):
            if graph.residual(edge) <= 0:
                continue
            v = edge.target
            if dist[u] == sink_level - 1:
                if v == SINK:
                    marked.add((u, index))
            elif dist[v] != 0:
                if dist[v] == dist[u] + 1:
                    marked.add((u, index))
            else:
                marked.add((u, index))
                dist[v] = dist[u] + 1
                queue.append(v)
    nodes.append(SINK)
    return nodes, marked


def _blocking_flow(graph: ResidualGraph, marked: set[tuple[int, int]]) -> tuple[int, list[Step]]:
    def find() -> Step | None:
        return _depth_first_step(
            graph.adjacency,
            graph.residual,
            _Memory.DEAD_ENDS,
            lambda node, index: (node, index) in marked,
        )

    return _augment_until_stuck(find, graph.augment)


def dinic(node_count: int, edges: Iterable[tuple[int, int, int]]) -> DinicResult:
    """Maximum flow from node 0 to node 1, phase by phase, with its minimum cut."""
    graph = _build_graph(node_count, edges)
    total = 0
    phases: list[Phase] = []
    while (level := _level_graph(graph)) is not None:
        nodes, marked = level
        pushed, steps = _blocking_flow(graph, marked)
        total += pushed
        phases.append(Phase(nodes, steps))
    return DinicResult(total, phases, _verified_cut(graph, total))


def format_report(names: NodeNames, result: DinicResult) -> str:
    parts = [
        _headline(names, result.max_flow) + "\n\n",
        "Los pasos a seguir para lograrlo son:\n\n",
    ]
    for phase in result.phases:
        parts.append("   Network Auxiliar con los siguientes nodos:\n      ")
        parts.append(_labels(names, phase.nodes))
        parts.append("\n   y con Greedy se resuelve con:\n")
        parts.extend(
            f"      {format_path(names, step.path)}: {step.amount}\n" for step in phase.steps
        )
        parts.append(f"   sumando {phase.total} al flujo\n\n")
    parts.append("Ademas, el MIN CUT esta dado por:\n   ")
    parts.append(_labels(names, result.min_cut))
    parts.append("\n\n")
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a network and print its Dinic phases, maximum flow and minimum cut."""
    return _run_cli(argv, "grafoalg-dinic", __doc__, dinic, format_report)