# relaxed_witness/landmarks.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Sequence, Tuple

import numpy as np

from .metrics import as_metric


__all__ = [
    "IdDistancePair",
    "LandmarkRow",
    "NearestLandmarkTable",
    "choose_farthest_point_landmarks",
    "pick_random_landmarks",
    "nearest_landmark_table",
]

IdDistancePair = Tuple[int, float]
LandmarkRow = Tuple[IdDistancePair, ...]


# -----------------------------------------------------------------------------
# Nearest-landmark table
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class NearestLandmarkTable:
    """
    For each witness, its landmarks as ``(landmark_id, distance)`` pairs sorted
    by increasing distance.

    Witness ids are row indices. Rows may have different lengths (a witness can
    list only its first few nearest landmarks). Rows must be sorted ascending by
    distance; this is asserted on construction.
    """
    rows: Tuple[LandmarkRow, ...]

    def __post_init__(self):
        assert self.is_sorted(), "every nearest-landmark row must be sorted by increasing distance"

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Tuple[Any, Any]]]) -> "NearestLandmarkTable":
        return cls(
            rows=tuple(
                tuple((int(l), float(d)) for l, d in row)
                for row in rows
            )
        )

    @classmethod
    def from_arrays(
        cls,
        indices: Sequence[Sequence[int]],
        distances: Sequence[Sequence[float]],
    ) -> "NearestLandmarkTable":
        """
        Build from a ``knn`` index matrix and the matching distance matrix.

        Both may be ragged (lists of lists), but corresponding rows must have
        equal lengths.
        """
        if len(indices) != len(distances):
            raise ValueError(
                f"indices and distances must have the same number of rows. "
                f"Got {len(indices)} vs {len(distances)}."
            )
        rows = []
        for w, (idx_row, dist_row) in enumerate(zip(indices, distances)):
            idx_row = list(idx_row)
            dist_row = list(dist_row)
            if len(idx_row) != len(dist_row):
                raise ValueError(
                    f"Row {w}: {len(idx_row)} landmark ids but {len(dist_row)} distances."
                )
            rows.append(zip(idx_row, dist_row))
        return cls.from_rows(rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[LandmarkRow]:
        return iter(self.rows)

    def __getitem__(self, witness: int) -> LandmarkRow:
        return self.rows[witness]

    @property
    def n_witnesses(self) -> int:
        return len(self.rows)

    @property
    def n_landmarks(self) -> int:
        """Smallest landmark count consistent with the ids in the table."""
        ids = [l for row in self.rows for l, _ in row]
        return (max(ids) + 1) if ids else 0

    def is_sorted(self) -> bool:
        for row in self.rows:
            for (_, d0), (_, d1) in zip(row[:-1], row[1:]):
                if d1 < d0:
                    return False
        return True

    def check_landmark_ids(self, n_landmarks: int) -> None:
        for w, row in enumerate(self.rows):
            seen = set()
            for l, _ in row:
                if l < 0 or l >= n_landmarks:
                    raise ValueError(
                        f"Witness {w} lists landmark {l}, outside [0, {n_landmarks})."
                    )
                if l in seen:
                    raise ValueError(f"Witness {w} lists landmark {l} more than once.")
                seen.add(l)


# -----------------------------------------------------------------------------
# Landmark selection
# -----------------------------------------------------------------------------

def choose_farthest_point_landmarks(
    points: np.ndarray,
    n_landmarks: int,
    *,
    metric: Any = None,
    seed: Optional[int] = None,
    first: Optional[int] = None,
) -> np.ndarray:
    """
    Farthest point sampling.

    Starts from ``first`` (or a random point drawn with ``seed``) and greedily
    adds the point farthest from the landmarks chosen so far.

    Returns
    -------
    idx : (n_landmarks,) int
        Indices into ``points``.
    """
    X = np.asarray(points, dtype=float)
    if X.ndim == 1:
        X = X.reshape(-1, 1)
    n = X.shape[0]
    k = int(n_landmarks)
    if k <= 0 or k > n:
        raise ValueError(f"n_landmarks must be in 1..{n}. Got {n_landmarks}.")

    M = as_metric(metric)
    if first is None:
        rng = np.random.default_rng(seed)
        first = int(rng.integers(0, n))
    elif not (0 <= int(first) < n):
        raise ValueError(f"first must be in 0..{n - 1}. Got {first}.")

    chosen = np.empty(k, dtype=int)
    chosen[0] = int(first)

    min_d = M.pairwise(X[[chosen[0]]], X).reshape(-1)
    min_d[chosen[0]] = -np.inf

    for t in range(1, k):
        nxt = int(np.argmax(min_d))
        chosen[t] = nxt
        dn = M.pairwise(X[[nxt]], X).reshape(-1)
        min_d = np.minimum(min_d, dn)
        min_d[chosen[: t + 1]] = -np.inf

    return chosen


def pick_random_landmarks(
    points: np.ndarray,
    n_landmarks: int,
    *,
    seed: Optional[int] = None,
) -> np.ndarray:
    """Uniformly random landmark indices (without replacement)."""
    n = int(np.asarray(points).shape[0])
    k = int(n_landmarks)
    if k <= 0 or k > n:
        raise ValueError(f"n_landmarks must be in 1..{n}. Got {n_landmarks}.")
    rng = np.random.default_rng(seed)
    return np.sort(rng.choice(n, size=k, replace=False))


# -----------------------------------------------------------------------------
# Brute-force nearest-landmark table
# -----------------------------------------------------------------------------

def nearest_landmark_table(
    witnesses: np.ndarray,
    landmarks: np.ndarray,
    *,
    metric: Any = None,
    n_nearest: Optional[int] = None,
) -> NearestLandmarkTable:
    """
    Sort, for every witness, all landmarks by distance.

    Parameters
    ----------
    witnesses : (n_witnesses, d)
    landmarks : (n_landmarks, d)
    metric :
        Anything accepted by :func:`relaxed_witness.metrics.as_metric`.
        Default is Euclidean.
    n_nearest :
        Keep only this many nearest landmarks per witness (default: all).
        Simplices of dimension ``>= n_nearest`` can then never be witnessed.

    Notes
    -----
    The sort is stable, so equidistant landmarks stay in increasing id order.
    """
    M = as_metric(metric)
    D = np.asarray(M.pairwise(witnesses, landmarks), dtype=float)
    if D.ndim != 2:
        raise ValueError(f"metric.pairwise must return a 2D matrix. Got {D.shape}.")

    n_l = D.shape[1]
    k = n_l if n_nearest is None else int(n_nearest)
    if k <= 0:
        raise ValueError(f"n_nearest must be positive. Got {n_nearest}.")
    k = min(k, n_l)

    order = np.argsort(D, axis=1, kind="stable")[:, :k]
    dists = np.take_along_axis(D, order, axis=1)
    return NearestLandmarkTable.from_arrays(order.tolist(), dists.tolist())
