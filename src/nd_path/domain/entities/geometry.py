from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

import numpy as np

from nd_path.domain.errors import DimensionMismatch


def euclidean(a: Sequence[float], b: Sequence[float]) -> float:
    """L2 norm of the coordinate-wise difference of ``a`` and ``b``."""
    if len(a) != len(b):
        raise DimensionMismatch(len(a), len(b))
    return float(np.linalg.norm(np.subtract(a, b, dtype=float)))


# Core geometry types used by the engine
@dataclass(frozen=True)
class Position:
    key: int
    coordinates: tuple[float, ...]

    def __post_init__(self):
        object.__setattr__(self, "coordinates", tuple(float(c) for c in self.coordinates))

    @property
    def dim(self) -> int:
        return len(self.coordinates)

    def distance(self, other: "Position") -> float:
        return euclidean(self.coordinates, other.coordinates)


def distance(p: Position, q: Position) -> float:
    return p.distance(q)


@dataclass(frozen=True)
class VertexSpec:
    position: Position
    connections: tuple[int, ...] = ()  # directed: self -> target

    def __post_init__(self):
        object.__setattr__(self, "connections", tuple(self.connections))

    @classmethod
    def of(cls, key: int, coordinates: Iterable[float], connections: Iterable[int] = ()):
        return cls(Position(key, tuple(coordinates)), tuple(connections))

    @property
    def key(self) -> int:
        return self.position.key

    @property
    def coordinates(self) -> tuple[float, ...]:
        return self.position.coordinates


@dataclass(frozen=True)
class VertexSet:
    """Ordered collection of vertices handed to graph construction."""

    vertices: tuple[VertexSpec, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "vertices", tuple(self.vertices))

    def __iter__(self) -> Iterator[VertexSpec]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def position_by_index(self, idx: int) -> Position:
        return self.vertices[idx].position

    def position_by_key(self, key: int) -> Position | None:
        for v in self.vertices:
            if v.key == key:
                return v.position
        return None


@dataclass(frozen=True)
class PathStep:
    parent_key: int  # node the step leaves
    node_key: int  # node the step reaches


@dataclass(frozen=True)
class Path:
    steps: tuple[PathStep, ...] = field(default_factory=tuple)
    total_distance: float = 0.0

    @property
    def keys(self) -> list[int]:
        """Node keys visited from source to destination (empty for a degenerate path)."""
        if not self.steps:
            return []
        return [self.steps[0].parent_key, *(s.node_key for s in self.steps)]

    def __len__(self) -> int:
        return len(self.steps)
