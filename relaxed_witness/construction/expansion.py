# relaxed_witness/construction/expansion.py
"""
Naive per-dimension expansion: every round rescans each active witness's
sorted landmark list.

For a witness with sorted list ``[(l0, d0), (l1, d1), ...]`` the landmark at
position ``i`` may join the candidate simplex iff ``d_i - alpha <= norelax_dist``,
where ``norelax_dist`` is the distance of the nearest landmark skipped so far
(``+inf`` while nothing has been skipped). Once a position fails the test every
later one fails too, so each scan stops there.
"""
from __future__ import annotations

import math
from typing import List

from ..complex.closure import all_faces_in, assign_filtration
from ..complex.container import SimplicialComplexForWitness
from ..landmarks import LandmarkRow
from .active_witness import ActiveWitness, ActiveWitnessPool


def add_all_faces_of_dimension(
    dim: int,
    alpha: float,
    norelax_dist: float,
    landmarks: LandmarkRow,
    start: int,
    simplex: List[int],
    sc: SimplicialComplexForWitness,
) -> bool:
    """
    Insert every ``(len(simplex) + dim + 1)``-vertex simplex this witness admits
    that extends the prefix ``simplex`` with landmarks from ``landmarks[start:]``.

    ``simplex`` is used as a stack and is restored before returning. Returns
    True if at least one simplex passed the closure test (the witness may
    still be useful in the next dimension).
    """
    if start >= len(landmarks):
        return False
    will_be_active = False
    for pos in range(start, len(landmarks)):
        landmark, dist = landmarks[pos]
        if dist - alpha > norelax_dist:
            break
        simplex.append(landmark)
        if dim > 0:
            # a prefix that is not in the complex cannot be the face of a new simplex
            if sc.find(simplex):
                will_be_active = add_all_faces_of_dimension(
                    dim - 1, alpha, norelax_dist, landmarks, pos + 1, simplex, sc
                ) or will_be_active
        else:
            closed, bound = all_faces_in(simplex, sc)
            if closed:
                will_be_active = True
                sc.insert(list(simplex), assign_filtration(bound, dist, norelax_dist))
        simplex.pop()
        # from here on this landmark counts as skipped
        if dist < norelax_dist:
            norelax_dist = dist
    return will_be_active


def expand_dimension(
    dim: int,
    alpha: float,
    pool: ActiveWitnessPool,
    sc: SimplicialComplexForWitness,
) -> int:
    """
    One naive round: insert all ``dim``-simplices witnessed by the active pool.

    Witnesses that admitted nothing, or whose list is too short for a
    ``(dim + 1)``-simplex, are retired. Returns the number retired.
    """
    simplex: List[int] = []

    def _expand(witness: ActiveWitness) -> bool:
        ok = add_all_faces_of_dimension(
            dim, alpha, math.inf, witness.landmarks, witness.cursor, simplex, sc
        )
        assert not simplex
        return ok and not witness.exhausted_for(dim + 1)

    return pool.for_each_active(_expand)
