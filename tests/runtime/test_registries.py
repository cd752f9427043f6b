from types import SimpleNamespace

import pytest

from nd_path.config.models import MetricEuclideanModel, MetricManhattanModel
from nd_path.domain.metrics import EuclideanMetric, ManhattanMetric
from nd_path.runtime import registries
from nd_path.runtime.registries import make_metric, register_metric


def test_make_metric_by_kind():
    assert isinstance(make_metric(MetricEuclideanModel()), EuclideanMetric)
    assert isinstance(make_metric(MetricManhattanModel()), ManhattanMetric)


def test_unknown_metric_kind():
    with pytest.raises(ValueError, match="chebyshev"):
        make_metric(SimpleNamespace(kind="chebyshev"))


def test_registered_factory_receives_only_the_config(monkeypatch):
    monkeypatch.setattr(registries, "_metric_registry", dict(registries._metric_registry))
    seen = []

    @register_metric("recording")
    def _make_recording(cfg):
        seen.append(cfg)
        return ManhattanMetric()

    cfg = SimpleNamespace(kind="recording")
    assert isinstance(make_metric(cfg), ManhattanMetric)
    assert seen == [cfg]
