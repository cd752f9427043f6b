from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable


# ------------- Vertices --------------------
@runtime_checkable
class Locator(Protocol):
    """Unique key identifying a vertex on the graph."""

    @property
    def key(self) -> int: ...


@runtime_checkable
class Positioner(Protocol):
    """Position of a vertex in n-dimensional space."""

    @property
    def coordinates(self) -> Sequence[float]: ...


@runtime_checkable
class Connector(Protocol):
    """Keys of the vertices this one links to (directed)."""

    @property
    def connections(self) -> Iterable[int]: ...


@runtime_checkable
class Vertex(Locator, Positioner, Connector, Protocol):
    """
    Everything graph construction needs from a vertex.
    Any object exposing ``key``, ``coordinates`` and ``connections`` qualifies;
    no base class is required.
    """


# ------------- Metrics --------------------
@runtime_checkable
class Metric(Protocol):
    """
    Responsibilities:
      • Edge weight between two coordinate vectors.
      • Must be symmetric and non-negative; zero for coincident points.
      • Raise DimensionMismatch for vectors of different length.
    """

    def distance(self, a: Sequence[float], b: Sequence[float]) -> float: ...


# ------------- Frontier --------------------
@runtime_checkable
class Frontier(Protocol):
    """
    Unfinalized node keys of a single run, ordered by best-known distance.
    peek_min returns None once no key with a finite distance is left.
    """

    def update(self, key: int, best: float) -> None: ...
    def peek_min(self) -> int | None: ...
