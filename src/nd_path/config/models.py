from typing import Annotated, Literal

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from nd_path.domain.entities.geometry import VertexSet, VertexSpec
from nd_path.domain.generate import random_geometric_vertices


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1

    @field_validator("sample_every")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("sample_every must be >= 1")
        return v


# ----------------- METRICS ---------------------


class MetricEuclideanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["euclidean"] = "euclidean"


class MetricManhattanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["manhattan"] = "manhattan"


MetricUnion = Annotated[
    MetricEuclideanModel | MetricManhattanModel,
    Field(discriminator="kind"),
]


# ----------------- ENGINE ---------------------


class EngineModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    frontier: Literal["scan", "heap"] = "scan"


# ----------------- GRAPH ---------------------


class VertexModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    key: int
    coordinates: list[float] = Field(min_length=1)
    connections: list[int] = Field(default_factory=list)

    def to_spec(self) -> VertexSpec:
        return VertexSpec.of(self.key, self.coordinates, self.connections)


class RandomGraphModel(BaseModel):
    """Points drawn uniformly from [0, extent]^dim, linked when closer than radius."""

    model_config = ConfigDict(extra="forbid")
    n: int = Field(ge=1)
    dim: int = Field(ge=1)
    radius: float = Field(gt=0)
    seed: int = Field(default=0, ge=0)
    extent: float = Field(default=1.0, gt=0)

    def to_vertex_set(self) -> VertexSet:
        rng = np.random.default_rng(self.seed)
        return random_geometric_vertices(self.n, self.dim, self.radius, rng, extent=self.extent)


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    vertices: list[VertexModel] = Field(default_factory=list)
    random: RandomGraphModel | None = None

    @model_validator(mode="after")
    def _one_source(self):
        if self.random is not None and self.vertices:
            raise ValueError("graph takes either vertices or random, not both")
        return self

    @model_validator(mode="after")
    def _unique_keys(self):
        seen: set[int] = set()
        for v in self.vertices:
            if v.key in seen:
                raise ValueError(f"duplicate vertex key {v.key}")
            seen.add(v.key)
        return self

    def to_vertex_set(self) -> VertexSet:
        if self.random is not None:
            return self.random.to_vertex_set()
        return VertexSet(tuple(v.to_spec() for v in self.vertices))


# ----------------- QUERIES ---------------------


class QueryByKey(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["key"] = "key"
    start: int
    finish: int


class QueryByPosition(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["position"] = "position"
    start: list[float]
    finish: list[float]


QueryUnion = Annotated[QueryByKey | QueryByPosition, Field(discriminator="by")]


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    log: LogModel = LogModel()
    metric: MetricUnion = Field(default_factory=MetricEuclideanModel)
    engine: EngineModel = Field(default_factory=EngineModel)
    graph: GraphModel
    queries: list[QueryUnion] = Field(default_factory=list)
