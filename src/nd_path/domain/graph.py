# nd_path/domain/graph.py
"""
Working graph for shortest-path runs.

All nodes live in a single dict keyed by vertex key; neighbour and predecessor
links are stored as keys into that dict, never as object references. Besides
topology each node carries per-run relaxation state (``best_distance`` and the
order in which it was finalized). That state is only valid for one run: once a
run finishes the graph is marked ``consumed`` and must be ``reset()`` before it
is used again.
"""

import logging
import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from nd_path.app.protocols import Metric, Vertex
from nd_path.domain.entities.geometry import Position
from nd_path.domain.errors import (
    DuplicateVertexKey,
    FinishNotFound,
    StaleGraph,
    StartNotFound,
    UnknownConnectionTarget,
)
from nd_path.domain.metrics import DEFAULT_METRIC

log = logging.getLogger(__name__)

INF = math.inf


@dataclass(eq=False)
class GraphNode:
    key: int
    position: Position
    neighbors: set[int] = field(default_factory=set)  # outgoing
    predecessors: set[int] = field(default_factory=set)  # incoming
    best_distance: float = INF
    order: int | None = None  # finalization index within the current run

    @property
    def finalized(self) -> bool:
        return self.order is not None


class Graph:
    def __init__(self, nodes: dict[int, GraphNode]):
        self._nodes = nodes
        self.frontier: set[int] = set(nodes)
        self.consumed = False
        self._finalized = 0

    # --------------- Construction -----------------------------

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vertex]) -> "Graph":
        vertices = list(vertices)
        nodes: dict[int, GraphNode] = {}
        for v in vertices:
            if v.key in nodes:
                raise DuplicateVertexKey(v.key)
            nodes[v.key] = GraphNode(key=v.key, position=Position(v.key, tuple(v.coordinates)))

        for v in vertices:
            src = nodes[v.key]
            for target in v.connections:
                dst = nodes.get(target)
                if dst is None:
                    raise UnknownConnectionTarget(v.key, target)
                src.neighbors.add(target)
                dst.predecessors.add(v.key)

        log.debug("graph built: %d nodes", len(nodes))
        return cls(nodes)

    from_vertex_set = from_vertices

    # --------------- Inspection -------------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key) -> bool:
        return key in self._nodes

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self._nodes.values())

    def node(self, key: int) -> GraphNode:
        return self._nodes[key]

    def get(self, key: int) -> GraphNode | None:
        return self._nodes.get(key)

    def neighbors(self, key: int) -> Iterator[GraphNode]:
        for k in self._nodes[key].neighbors:
            yield self._nodes[k]

    def predecessors(self, key: int) -> Iterator[GraphNode]:
        for k in self._nodes[key].predecessors:
            yield self._nodes[k]

    # --------------- Run lifecycle ----------------------------

    def reset(self) -> None:
        for n in self._nodes.values():
            n.best_distance = INF
            n.order = None
        self.frontier = set(self._nodes)
        self._finalized = 0
        self.consumed = False

    def begin(self, start: GraphNode) -> None:
        """Claim the graph for a run starting at ``start``."""
        if self.consumed:
            raise StaleGraph()
        self.consumed = True
        start.best_distance = 0.0

    def finalize(self, node: GraphNode) -> None:
        self.frontier.discard(node.key)
        node.order = self._finalized
        self._finalized += 1

    @property
    def finalized_count(self) -> int:
        return self._finalized

    # --------------- Locating endpoints -----------------------

    def locate_by_key(self, start: int, finish: int) -> tuple[GraphNode, GraphNode]:
        st, fn = self._nodes.get(start), self._nodes.get(finish)
        if st is None:
            raise StartNotFound(start)
        if fn is None:
            raise FinishNotFound(finish)
        return st, fn

    def locate_by_position(
        self,
        start: Position | Sequence[float],
        finish: Position | Sequence[float],
        metric: Metric = DEFAULT_METRIC,
    ) -> tuple[GraphNode, GraphNode]:
        # first coincident node wins; prefer keys when coordinates repeat
        a, b = coordinates_of(start), coordinates_of(finish)
        st = fn = None
        for n in self._nodes.values():
            if st is None and metric.distance(n.position.coordinates, a) == 0:
                st = n
            if fn is None and metric.distance(n.position.coordinates, b) == 0:
                fn = n
            if st is not None and fn is not None:
                break
        if st is None:
            raise StartNotFound(a)
        if fn is None:
            raise FinishNotFound(b)
        return st, fn


def coordinates_of(p: Position | Sequence[float]) -> tuple[float, ...]:
    if isinstance(p, Position):
        return p.coordinates
    return tuple(float(c) for c in p)
