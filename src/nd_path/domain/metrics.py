import numpy as np

from nd_path.app.protocols import Metric
from nd_path.domain.entities.geometry import euclidean
from nd_path.domain.errors import DimensionMismatch


class EuclideanMetric(Metric):
    def distance(self, a, b):
        return euclidean(a, b)


class ManhattanMetric(Metric):
    def distance(self, a, b):
        if len(a) != len(b):
            raise DimensionMismatch(len(a), len(b))
        return float(np.abs(np.subtract(a, b, dtype=float)).sum())


DEFAULT_METRIC = EuclideanMetric()
