# nd_path/domain/generate.py
"""Reproducible random graphs for tests and benchmarks."""

import numpy as np

from nd_path.domain.entities.geometry import VertexSet, VertexSpec


def random_geometric_vertices(
    n: int,
    dim: int,
    radius: float,
    rng: np.random.Generator,
    *,
    extent: float = 1.0,
) -> VertexSet:
    """
    ``n`` points drawn uniformly from the cube [0, extent]^dim, keys 0..n-1.
    Every ordered pair closer than ``radius`` is connected in both directions.
    """
    pts = rng.uniform(0.0, extent, size=(n, dim))
    diff = pts[:, None, :] - pts[None, :, :]
    d = np.linalg.norm(diff, axis=-1)
    close = (d < radius) & ~np.eye(n, dtype=bool)

    vertices = []
    for i in range(n):
        conns = np.flatnonzero(close[i]).tolist()
        vertices.append(VertexSpec.of(i, pts[i].tolist(), conns))
    return VertexSet(tuple(vertices))
