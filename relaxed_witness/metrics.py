# relaxed_witness/metrics.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Union

import numpy as np
from scipy.spatial.distance import cdist


# ============================================================
# Vectorized metric objects
# ============================================================

class Metric(Protocol):
    """Vectorized metric interface: returns full distance matrices."""
    name: str

    def pairwise(self, X: np.ndarray, Y: Optional[np.ndarray] = None) -> np.ndarray:
        ...


def _as_2d(X: np.ndarray) -> np.ndarray:
    X = np.asarray(X, dtype=float)
    if X.ndim == 1:
        X = X.reshape(-1, 1)
    if X.ndim != 2:
        raise ValueError(f"Expected (n, d) point array. Got {X.shape}.")
    return X


@dataclass(frozen=True)
class EuclideanMetric:
    name: str = "euclidean"

    def pairwise(self, X: np.ndarray, Y: Optional[np.ndarray] = None) -> np.ndarray:
        X = _as_2d(X)
        Y = X if Y is None else _as_2d(Y)
        if X.shape[1] != Y.shape[1]:
            raise ValueError(f"Dim mismatch: X d={X.shape[1]} vs Y d={Y.shape[1]}.")
        return np.linalg.norm(X[:, None, :] - Y[None, :, :], axis=-1)


@dataclass(frozen=True)
class SquaredEuclideanMetric:
    """
    Squared Euclidean distance.

    Witness complexes built on squared distances use a squared relaxation
    parameter (``alpha = r**2``), which is the convention of GUDHI's
    ``EuclideanWitnessComplex``.
    """
    name: str = "sqeuclidean"

    def pairwise(self, X: np.ndarray, Y: Optional[np.ndarray] = None) -> np.ndarray:
        X = _as_2d(X)
        Y = X if Y is None else _as_2d(Y)
        if X.shape[1] != Y.shape[1]:
            raise ValueError(f"Dim mismatch: X d={X.shape[1]} vs Y d={Y.shape[1]}.")
        diff = X[:, None, :] - Y[None, :, :]
        return np.einsum("ijk,ijk->ij", diff, diff)


@dataclass(frozen=True)
class S1AngleMetric:
    """Angles in radians; distance on S^1."""
    name: str = "S1_angle"

    def pairwise(self, X: np.ndarray, Y: Optional[np.ndarray] = None) -> np.ndarray:
        t1 = np.asarray(X, dtype=float).reshape(-1)[:, None]
        t2 = t1.T if Y is None else np.asarray(Y, dtype=float).reshape(-1)[None, :]
        d = np.abs(t2 - t1) % (2 * np.pi)
        return np.minimum(d, 2 * np.pi - d)


# ============================================================
# Converting scalar metrics -> vectorized metrics
# ============================================================

@dataclass(frozen=True)
class SciPyCdistMetric:
    """Wrapper for a scalar metric(p,q) (or a cdist metric name) using scipy's cdist."""
    metric: Union[Callable, str]
    name: str = "scipy_cdist"

    def pairwise(self, X: np.ndarray, Y: Optional[np.ndarray] = None) -> np.ndarray:
        X = _as_2d(X)
        Y = X if Y is None else _as_2d(Y)
        return cdist(X, Y, metric=self.metric)


def as_metric(metric: Union["Metric", Callable, str, None]) -> "Metric":
    """
    Convert a Metric object, a scipy metric name, or a callable(p,q) into a Metric object.

    ``None`` and ``"euclidean"`` give :class:`EuclideanMetric`,
    ``"sqeuclidean"`` gives :class:`SquaredEuclideanMetric`.
    """
    if metric is None:
        return EuclideanMetric()
    if hasattr(metric, "pairwise"):
        return metric  # type: ignore[return-value]
    if isinstance(metric, str):
        key = metric.lower().strip()
        if key == "euclidean":
            return EuclideanMetric()
        if key == "sqeuclidean":
            return SquaredEuclideanMetric()
        return SciPyCdistMetric(metric=key, name=key)
    if callable(metric):
        return SciPyCdistMetric(metric=metric, name=getattr(metric, "__name__", "custom_metric"))
    raise TypeError(f"Cannot interpret {metric!r} as a metric.")
