# nd_path/domain/engine.py

import heapq
import math
import time
from collections.abc import Sequence

from nd_path.app.protocols import Frontier, Metric
from nd_path.domain.entities.geometry import Path, PathStep, Position
from nd_path.domain.errors import GraphStateError, NdPathError, NoPath
from nd_path.domain.graph import Graph, GraphNode, coordinates_of
from nd_path.domain.metrics import DEFAULT_METRIC
from nd_path.runtime.hooks import EngineHooks, NoopHooks


# ------------------------- Frontiers -----------------------------


class ScanFrontier(Frontier):
    """Linear scan over the graph's unfinalized keys."""

    def __init__(self, graph: Graph):
        self.G = graph

    def update(self, key, best):
        pass

    def peek_min(self):
        best, found = math.inf, None
        for k in self.G.frontier:
            d = self.G.node(k).best_distance
            if d < best:
                best, found = d, k
        return found


class HeapFrontier(Frontier):
    """Binary heap with lazy deletion of stale or finalized entries."""

    def __init__(self, graph: Graph):
        self.G = graph
        self._q: list[tuple[float, int]] = []

    def update(self, key, best):
        heapq.heappush(self._q, (best, key))

    def peek_min(self):
        while self._q:
            best, key = self._q[0]
            if key in self.G.frontier and best == self.G.node(key).best_distance:
                return key
            heapq.heappop(self._q)
        return None


FRONTIERS: dict[str, type] = {"scan": ScanFrontier, "heap": HeapFrontier}


# ------------------------- Engine --------------------------------


class PathEngine:
    def __init__(
        self,
        metric: Metric | None = None,
        *,
        frontier: str = "scan",
        hooks: EngineHooks | None = None,
    ):
        if frontier not in FRONTIERS:
            raise ValueError(f"Unknown frontier kind {frontier!r}")
        self.metric = metric or DEFAULT_METRIC
        self.frontier_kind = frontier
        self._hooks = hooks or NoopHooks()

    def by_key(self, graph: Graph, start: int, finish: int) -> Path:
        try:
            st, fn = graph.locate_by_key(start, finish)
        except NdPathError as exc:
            self._hooks.error(start_key=start, finish_key=finish, exc=exc)
            raise
        return self.run(graph, st, fn)

    def by_position(
        self,
        graph: Graph,
        start: Position | Sequence[float],
        finish: Position | Sequence[float],
    ) -> Path:
        try:
            st, fn = graph.locate_by_position(start, finish, self.metric)
        except NdPathError as exc:
            self._hooks.error(
                start_key=None,
                finish_key=None,
                exc=exc,
                start_position=list(coordinates_of(start)),
                finish_position=list(coordinates_of(finish)),
            )
            raise
        return self.run(graph, st, fn)

    def run(self, graph: Graph, st: GraphNode, fn: GraphNode) -> Path:
        t0 = time.perf_counter()
        try:
            graph.begin(st)
            self._hooks.run_start(start_key=st.key, finish_key=fn.key, nodes=len(graph))
            if self._coincident_hop(st, fn):
                self._finalize(graph, st)
                path = Path()
            else:
                reached = self._relax(graph, st, fn)
                path = self._reconstruct(graph, st, reached)
        except NdPathError as exc:
            self._hooks.error(start_key=st.key, finish_key=fn.key, exc=exc)
            raise
        self._hooks.run_end(
            start_key=st.key,
            finish_key=fn.key,
            total=path.total_distance,
            steps=len(path),
            finalized=graph.finalized_count,
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return path

    # --------------- Helpers -----------------------------

    def _dist(self, a: GraphNode, b: GraphNode) -> float:
        return self.metric.distance(a.position.coordinates, b.position.coordinates)

    def _coincident_hop(self, st: GraphNode, fn: GraphNode) -> bool:
        return st is fn or self._dist(st, fn) == 0

    def _finalize(self, graph: Graph, node: GraphNode) -> None:
        graph.finalize(node)
        self._hooks.finalize(node.key, best=node.best_distance, order=node.order)

    def _relax(self, graph: Graph, st: GraphNode, fn: GraphNode) -> GraphNode:
        frontier: Frontier = FRONTIERS[self.frontier_kind](graph)
        act = st
        while True:
            for n in graph.neighbors(act.key):
                if n.key not in graph.frontier:
                    continue
                candidate = act.best_distance + self._dist(act, n)
                if candidate < n.best_distance:
                    n.best_distance = candidate
                    frontier.update(n.key, candidate)
            self._finalize(graph, act)

            key = frontier.peek_min()
            if key is None:
                raise NoPath(st.key, fn.key)
            act = graph.node(key)
            if act is fn or self._dist(act, fn) == 0:
                self._finalize(graph, act)
                return act

    def _reconstruct(self, graph: Graph, st: GraphNode, reached: GraphNode) -> Path:
        # Walk incoming links back to the start. Only predecessors finalized
        # before the current node can have set its best distance, and the one
        # minimizing pred.best + edge reproduces that distance exactly.
        steps: list[PathStep] = []
        cur = reached
        while cur is not st:
            parent, best = None, math.inf
            for p in graph.predecessors(cur.key):
                if p.order is None or p.order >= cur.order:
                    continue
                via = p.best_distance + self._dist(p, cur)
                if via < best:
                    parent, best = p, via
            if parent is None:
                raise GraphStateError(f"no finalized predecessor for node {cur.key!r}")
            steps.append(PathStep(parent_key=parent.key, node_key=cur.key))
            cur = parent
        steps.reverse()
        return Path(tuple(steps), reached.best_distance)


# ------------------------- Entry points --------------------------


def compute_path_by_key(
    graph: Graph,
    start_key: int,
    finish_key: int,
    *,
    metric: Metric | None = None,
    hooks: EngineHooks | None = None,
) -> Path:
    return PathEngine(metric, hooks=hooks).by_key(graph, start_key, finish_key)


def compute_path_by_position(
    graph: Graph,
    start_position: Position | Sequence[float],
    finish_position: Position | Sequence[float],
    *,
    metric: Metric | None = None,
    hooks: EngineHooks | None = None,
) -> Path:
    return PathEngine(metric, hooks=hooks).by_position(graph, start_position, finish_position)
