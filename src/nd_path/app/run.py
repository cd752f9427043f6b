# nd_path/app/run.py
from dataclasses import dataclass

from nd_path.app.build import App
from nd_path.config.models import QueryByKey, QueryUnion
from nd_path.domain.entities.geometry import Path
from nd_path.domain.errors import NdPathError


@dataclass
class QueryOutcome:
    query: QueryUnion
    path: Path | None = None
    error: NdPathError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        out = self.query.model_dump()
        if self.path is not None:
            out["total_distance"] = self.path.total_distance
            out["keys"] = self.path.keys
        if self.error is not None:
            out["error"] = type(self.error).__name__
            out["detail"] = self.error.message
        return out


def run_query(app: App, query: QueryUnion) -> QueryOutcome:
    app.graph.reset()
    try:
        if isinstance(query, QueryByKey):
            path = app.engine.by_key(app.graph, query.start, query.finish)
        else:
            path = app.engine.by_position(app.graph, query.start, query.finish)
    except NdPathError as exc:
        return QueryOutcome(query, error=exc)
    return QueryOutcome(query, path=path)


def run(app: App) -> list[QueryOutcome]:
    return [run_query(app, q) for q in app.model.queries]
