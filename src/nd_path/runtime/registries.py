# runtime/registries.py
from collections.abc import Callable

from nd_path.app.protocols import Metric
from nd_path.config.models import MetricEuclideanModel, MetricManhattanModel, MetricUnion
from nd_path.domain.metrics import EuclideanMetric, ManhattanMetric

MetricFactory = Callable[[MetricUnion], Metric]

_metric_registry: dict[str, MetricFactory] = {}


# --------------------- Metrics  ---------------------
def register_metric(kind: str):
    def deco(fn: MetricFactory):
        _metric_registry[kind] = fn
        return fn

    return deco


def make_metric(cfg: MetricUnion) -> Metric:
    try:
        factory = _metric_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown metric kind {cfg.kind!r}") from None
    return factory(cfg)


@register_metric("euclidean")
def _make_euclidean(cfg: MetricEuclideanModel):
    return EuclideanMetric()


@register_metric("manhattan")
def _make_manhattan(cfg: MetricManhattanModel):
    return ManhattanMetric()
