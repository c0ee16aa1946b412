"""Greedy vertex colouring of undirected graphs."""

from __future__ import annotations

import argparse
import sys
from itertools import permutations
from pathlib import Path
from typing import Iterable, Sequence


def greedy_coloring(adjacency: Sequence[Sequence[int]], order: Iterable[int]) -> list[int]:
    """Colour nodes in ``order``, each with the smallest colour unused by its neighbours.

    Colours start at 1; nodes that never appear in ``order`` keep colour 0.
    """
    colors = [0] * len(adjacency)
    for node in order:
        used = {colors[neighbour] for neighbour in adjacency[node] if colors[neighbour]}
        color = 1
        while color in used:
            color += 1
        colors[node] = color
    return colors


def best_greedy_coloring(adjacency: Sequence[Sequence[int]]) -> tuple[int, list[int]]:
    """Run the greedy colouring over every node order and keep the first one using the fewest colours."""
    best_count: int | None = None
    best: list[int] = []
    for order in permutations(range(len(adjacency))):
        colors = greedy_coloring(adjacency, order)
        count = max([1, *colors])
        if best_count is None or count < best_count:
            best_count, best = count, colors
    return (best_count if best_count is not None else 1), best


def parse_graph(text: str, with_order: bool = True) -> tuple[list[list[int]], list[int] | None]:
    """Read ``n m``, ``m`` edges and optionally ``n`` order entries, all 1-based.

    Returns the 0-based adjacency lists and the 0-based order (``None`` when not read).
    """
    tokens = iter(text.split())

    def take(what: str) -> int:
        try:
            raw = next(tokens)
        except StopIteration:
            raise ValueError(f"missing {what}") from None
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"expected an integer for {what}, got {raw!r}") from None

    def take_node(what: str, count: int) -> int:
        node = take(what) - 1
        if not 0 <= node < count:
            raise ValueError(f"{what} {node + 1} is outside 1..{count}")
        return node

    node_count = take("node count")
    edge_count = take("edge count")
    if node_count < 0 or edge_count < 0:
        raise ValueError("node and edge counts must not be negative")

    adjacency: list[list[int]] = [[] for _ in range(node_count)]
    for _ in range(edge_count):
        u = take_node("edge endpoint", node_count)
        v = take_node("edge endpoint", node_count)
        adjacency[u].append(v)
        adjacency[v].append(u)

    order = None
    if with_order:
        order = [take_node("order entry", node_count) for _ in range(node_count)]
    return adjacency, order


def main(argv: Sequence[str] | None = None) -> int:
    """Colour a graph read from a file or standard input and print the colouring."""
    parser = argparse.ArgumentParser(
        prog="grafoalg-coloring",
        description="Greedy graph colouring. Input: n m, then m edges u v, then the node order.",
    )
    parser.add_argument("input", nargs="?", help="graph file (default: standard input)")
    parser.add_argument(
        "--brute",
        action="store_true",
        help="try every node order (no order in the input) and keep the fewest colours",
    )
    args = parser.parse_args(argv)

    text = Path(args.input).read_text() if args.input else sys.stdin.read()
    try:
        adjacency, order = parse_graph(text, with_order=not args.brute)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.brute:
        count, colors = best_greedy_coloring(adjacency)
        print(f"El coloreo es de {count}:")
    else:
        colors = greedy_coloring(adjacency, order or [])
        print("El coloreo es:")
    print("".join(f"{color} " for color in colors))
    return 0