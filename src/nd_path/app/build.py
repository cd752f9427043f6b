# nd_path/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from nd_path.app.protocols import Metric
from nd_path.config.models import ScenarioModel
from nd_path.domain.engine import PathEngine
from nd_path.domain.entities.geometry import VertexSet
from nd_path.domain.graph import Graph
from nd_path.io.engine_logging import EngineLogging
from nd_path.runtime.hooks import NoopHooks
from nd_path.runtime.registries import make_metric


@dataclass
class App:
    model: ScenarioModel
    vertices: VertexSet
    graph: Graph
    metric: Metric
    engine: PathEngine


def build(cfg: ScenarioModel | Mapping, *, use_logging: bool = True) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        EngineLogging(
            run_id=model.name,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Graph & engine
    vertices = model.graph.to_vertex_set()
    graph = Graph.from_vertex_set(vertices)
    metric = make_metric(model.metric)
    engine = PathEngine(metric, frontier=model.engine.frontier, hooks=hooks)

    return App(model=model, vertices=vertices, graph=graph, metric=metric, engine=engine)
