"""Greedy maximum flow: augment along forward edges only, never undoing flow."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from pathlib import Path
from typing import Any

from .network import (
    INF,
    SINK,
    SOURCE,
    Edge,
    FlowResult,
    NetworkError,
    NodeNames,
    Step,
    format_path,
    parse_network,
)

EdgeSpec = tuple[int, int, int]


class _Memory(Enum):
    """Which nodes a depth-first path search refuses to enter."""

    PATH = "path"  # nodes on the current path only
    VISITED = "visited"  # every node entered so far
    DEAD_ENDS = "dead"  # nodes already found to lead nowhere


def _depth_first_step(
    adjacency: list[list[Edge]],
    residual: Callable[[Edge], int],
    memory: _Memory,
    allowed: Callable[[int, int], bool] | None = None,
) -> Step | None:
    """First source-to-sink path of positive residual capacity, searched depth first."""
    blocked: set[int] = set() if memory is _Memory.DEAD_ENDS else {SOURCE}
    stack = [[SOURCE, 0]]
    chosen: list[tuple[int, int]] = []

    def usable(node: int, index: int) -> bool:
        edge = adjacency[node][index]
        return (
            edge.target not in blocked
            and residual(edge) > 0
            and (allowed is None or allowed(node, index))
        )

    while stack:
        frame = stack[-1]
        node, start = frame
        edges = adjacency[node]
        index = next((i for i in range(start, len(edges)) if usable(node, i)), None)
        if index is None:
            stack.pop()
            if memory is _Memory.PATH:
                blocked.discard(node)
            elif memory is _Memory.DEAD_ENDS:
                blocked.add(node)
            if chosen:
                chosen.pop()
            continue
        frame[1] = index + 1
        chosen.append((node, index))
        target = edges[index].target
        if target == SINK:
            amount = min([INF, *(residual(adjacency[u][i]) for u, i in chosen)])
            return Step(amount, [*chosen, (SINK, -1)])
        if memory is not _Memory.DEAD_ENDS:
            blocked.add(target)
        stack.append([target, 0])
    return None


def _augment_until_stuck(
    find: Callable[[], Step | None], apply: Callable[[Step], Any]
) -> tuple[int, list[Step]]:
    """Apply every step ``find`` yields until it finds none; return total and steps."""
    total = 0
    steps: list[Step] = []
    while (step := find()) is not None:
        total += step.amount
        apply(step)
        steps.append(step)
    return total, steps


def _headline(names: NodeNames, max_flow: int) -> str:
    return (
        f"El MAX FLOW es de {max_flow} considerando {names.label(SOURCE)} "
        f"como source y {names.label(SINK)} como sink"
    )


def _step_lines(names: NodeNames, result: FlowResult) -> list[str]:
    return [
        _headline(names, result.max_flow),
        "",
        "Los pasos a seguir para lograrlo son:",
        *(
            f"   EPS = {step.amount} con camino  {format_path(names, step.path)}"
            for step in result.steps
        ),
    ]


def _run_cli(
    argv: Sequence[str] | None,
    prog: str,
    description: str | None,
    solve: Callable[[int, list[EdgeSpec]], Any],
    report: Callable[[NodeNames, Any], str],
) -> int:
    """Parse a network from a file or standard input, solve it and print the report."""
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("input", nargs="?", help="network file (default: standard input)")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text() if args.input else sys.stdin.read()
    try:
        names, edges = parse_network(text)
        result = solve(len(names), edges)
    except NetworkError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(report(names, result))
    return 0


def _spare(edge: Edge) -> int:
    return edge.capacity - edge.flow


def greedy_max_flow(node_count: int, edges: Iterable[EdgeSpec]) -> FlowResult:
    """Repeatedly push flow along the first unsaturated source-to-sink path found."""
    if node_count < 2:
        raise NetworkError("a network needs at least a source and a sink")
    adjacency: list[list[Edge]] = [[] for _ in range(node_count)]
    for u, v, capacity in edges:
        if not (0 <= u < node_count and 0 <= v < node_count):
            raise NetworkError(f"edge ({u}, {v}) leaves the network")
        adjacency[u].append(Edge(target=v, rev=-1, flow=0, capacity=capacity))

    def push(step: Step) -> None:
        for node, index in step.path[:-1]:
            adjacency[node][index].flow += step.amount

    # Nodes on the current path are skipped so that cycles cannot trap the search.
    total, steps = _augment_until_stuck(
        lambda: _depth_first_step(adjacency, _spare, _Memory.PATH), push
    )
    return FlowResult(total, steps)


def format_report(names: NodeNames, result: FlowResult) -> str:
    return "\n".join(_step_lines(names, result)) + "\n\n\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Read a network and print the greedy flow and its augmenting paths."""
    return _run_cli(argv, "grafoalg-greedy-flow", __doc__, greedy_max_flow, format_report)