"""Flow networks with single-character node labels and residual edges."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

INF = 10**18
SOURCE = 0
SINK = 1


class NetworkError(ValueError):
    """Raised for malformed network input or an impossible flow state."""


class NodeNames:
    """Two-way mapping between node labels and indices in first-seen order."""

    def __init__(self) -> None:
        self._indices: dict[str, int] = {}
        self._labels: list[str] = []

    def add(self, label: str) -> int:
        """Register ``label`` if new and return its index."""
        if label not in self._indices:
            self._indices[label] = len(self._labels)
            self._labels.append(label)
        return self._indices[label]

    def index(self, label: str) -> int:
        try:
            return self._indices[label]
        except KeyError:
            raise KeyError(f"unknown node label {label!r}") from None

    def label(self, index: int) -> str:
        if not 0 <= index < len(self._labels):
            raise KeyError(f"unknown node index {index}")
        return self._labels[index]

    def __len__(self) -> int:
        return len(self._labels)


@dataclass
class Edge:
    """A directed edge; backward (residual) edges have capacity 0."""

    target: int
    rev: int
    flow: int = 0
    capacity: int = 0


@dataclass
class Step:
    """An augmenting path: ``(node, edge index)`` pairs from source to ``(sink, -1)``."""

    amount: int
    path: list[tuple[int, int]]


@dataclass
class FlowResult:
    max_flow: int
    steps: list[Step]
    min_cut: list[int] = field(default_factory=list)


class ResidualGraph:
    """Adjacency lists where every edge is paired with a zero-capacity backward edge."""

    def __init__(self, node_count: int) -> None:
        if node_count < 2:
            raise NetworkError("a network needs at least a source and a sink")
        self.adjacency: list[list[Edge]] = [[] for _ in range(node_count)]

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self.adjacency):
            raise NetworkError(f"node {node} is not in the network")

    def add_edge(self, u: int, v: int, capacity: int) -> None:
        self._check(u)
        self._check(v)
        self.adjacency[u].append(Edge(v, len(self.adjacency[v]), 0, capacity))
        self.adjacency[v].append(Edge(u, len(self.adjacency[u]) - 1, 0, 0))

    @staticmethod
    def residual(edge: Edge) -> int:
        """Amount that can still be pushed along ``edge``."""
        return edge.capacity - edge.flow if edge.capacity else edge.flow

    def augment(self, step: Step) -> None:
        """Push ``step.amount`` along ``step.path``, cancelling flow on backward edges."""
        for node, index in step.path:
            if index == -1:
                break
            edge = self.adjacency[node][index]
            delta = step.amount if edge.capacity else -step.amount
            edge.flow += delta
            self.adjacency[edge.target][edge.rev].flow += delta

    def min_cut(self) -> list[int]:
        """Nodes reachable from the source in the residual graph, in BFS order."""
        visited = [False] * len(self.adjacency)
        queue = deque([SOURCE])
        cut: list[int] = []
        while queue:
            u = queue.popleft()
            if u == SINK:
                raise NetworkError("the sink is still reachable: the flow is not maximal")
            if visited[u]:
                continue
            visited[u] = True
            cut.append(u)
            for edge in self.adjacency[u]:
                if not visited[edge.target] and self.residual(edge) > 0:
                    queue.append(edge.target)
        return cut

    def cut_flow(self, cut) -> int:
        """Total flow on forward edges leaving the node set ``cut``."""
        inside = set(cut)
        return sum(
            edge.flow
            for u in inside
            for edge in self.adjacency[u]
            if edge.capacity and edge.target not in inside
        )


def parse_network(text: str) -> tuple[NodeNames, list[tuple[int, int, int]]]:
    """Parse ``xy capacity`` pairs until ``END``.

    The first label seen is the source and the second the sink; a capacity of
    -1 only registers the labels without adding an edge.
    """
    names = NodeNames()
    edges: list[tuple[int, int, int]] = []
    tokens = iter(text.split())
    for token in tokens:
        if token == "END":
            break
        try:
            raw = next(tokens)
        except StopIteration:
            raise NetworkError(f"missing capacity after {token!r}") from None
        try:
            capacity = int(raw)
        except ValueError:
            raise NetworkError(f"capacity {raw!r} is not an integer") from None
        if len(token) < 2:
            raise NetworkError(f"edge {token!r} must name two nodes")
        u = names.add(token[0])
        v = names.add(token[1])
        if capacity == -1:
            continue
        edges.append((u, v, capacity))
    return names, edges


def format_path(names: NodeNames, path) -> str:
    """Labels of the nodes on ``path``, each followed by a space."""
    return "".join(f"{names.label(node)} " for node, _ in path)