# relaxed_witness/euclidean.py
from __future__ import annotations

from typing import Optional

import numpy as np

from .construction.builder import Strategy, WitnessComplexResult, build_witness_complex
from .landmarks import nearest_landmark_table
from .metrics import EuclideanMetric, SquaredEuclideanMetric


def build_euclidean_witness_complex(
    witnesses: np.ndarray,
    landmarks: np.ndarray,
    *,
    alpha: float = 0.0,
    max_dimension: Optional[int] = None,
    n_nearest: Optional[int] = None,
    squared: bool = False,
    strategy: Strategy = "incremental",
    verbose: bool = False,
) -> WitnessComplexResult:
    """
    Witness complex of two Euclidean point clouds.

    Parameters
    ----------
    witnesses : (n_witnesses, d)
    landmarks : (n_landmarks, d)
        Landmark ``i`` becomes vertex ``i``.
    alpha :
        Relaxation, in the same units as the distances (squared if ``squared``).
    n_nearest :
        Number of nearest landmarks kept per witness (default: all of them).
    squared :
        Use squared distances, as GUDHI's ``EuclideanWitnessComplex`` does with
        ``max_alpha_square``.
    """
    W = np.asarray(witnesses, dtype=float)
    L = np.asarray(landmarks, dtype=float)
    if W.ndim != 2:
        raise ValueError(f"witnesses must be (n_witnesses, d). Got {W.shape}.")
    if L.ndim != 2:
        raise ValueError(f"landmarks must be (n_landmarks, d). Got {L.shape}.")
    if W.shape[1] != L.shape[1]:
        raise ValueError(f"Dim mismatch: witnesses d={W.shape[1]} vs landmarks d={L.shape[1]}.")

    metric = SquaredEuclideanMetric() if squared else EuclideanMetric()
    table = nearest_landmark_table(W, L, metric=metric, n_nearest=n_nearest)
    return build_witness_complex(
        table,
        alpha=alpha,
        max_dimension=max_dimension,
        n_landmarks=int(L.shape[0]),
        strategy=strategy,
        verbose=verbose,
    )
