# relaxed_witness/construction/witness_map.py
"""
Incremental expansion through a witness-simplex association map.

After dimension ``k`` every committed ``k``-simplex remembers which witnesses
admitted it, where in their sorted lists the last vertex sat, and the
``norelax_dist`` in force at that point. Dimension ``k + 1`` resumes each of
these records one position later instead of rescanning whole lists, and
produces the same simplices and filtration values as the naive rescan.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List

from ..complex.closure import all_faces_in, assign_filtration, relaxation_cost
from ..complex.combinatorics import Simplex, canon_simplex
from ..complex.container import SimplicialComplexForWitness
from .active_witness import ActiveWitness, ActiveWitnessPool


@dataclass(frozen=True)
class WitnessForSimplex:
    """One witness's claim on a simplex, with the state needed to resume it."""
    witness: ActiveWitness
    last_position: int
    limit_distance: float


SimplexWitnessMap = Dict[Simplex, List[WitnessForSimplex]]


def _record(
    sw_map: SimplexWitnessMap,
    key: Simplex,
    witness: ActiveWitness,
    position: int,
    limit_distance: float,
) -> None:
    # a record at the end of the list can never be extended
    if position + 1 >= len(witness.landmarks):
        return
    sw_map.setdefault(key, []).append(WitnessForSimplex(witness, position, limit_distance))
    witness.increase()


def fill_vertices(
    alpha: float,
    sc: SimplicialComplexForWitness,
    pool: ActiveWitnessPool,
) -> SimplexWitnessMap:
    """Insert the 0-simplices and map each of them to its witnesses."""
    sw_map: SimplexWitnessMap = {}
    for witness in pool:
        landmarks = witness.landmarks
        norelax_dist = math.inf
        for pos in range(witness.cursor, len(landmarks)):
            landmark, dist = landmarks[pos]
            if dist - alpha > norelax_dist:
                break
            sc.insert([landmark], relaxation_cost(dist, norelax_dist))
            _record(sw_map, (landmark,), witness, pos, norelax_dist)
            if dist < norelax_dist:
                norelax_dist = dist
        if witness.counter == 0:
            pool.retire(witness)
    return sw_map


def fill_simplices(
    alpha: float,
    sc: SimplicialComplexForWitness,
    pool: ActiveWitnessPool,
    prev_map: SimplexWitnessMap,
) -> SimplexWitnessMap:
    """
    Extend every recorded ``k``-simplex by one admissible landmark.

    Each consumed record releases one reference on its witness; a witness with
    no live records left is retired.
    """
    curr_map: SimplexWitnessMap = {}
    for key, records in prev_map.items():
        for rec in records:
            witness = rec.witness
            landmarks = witness.landmarks
            norelax_dist = rec.limit_distance
            for pos in range(rec.last_position + 1, len(landmarks)):
                landmark, dist = landmarks[pos]
                if dist - alpha > norelax_dist:
                    break
                candidate = list(key)
                candidate.append(landmark)
                closed, bound = all_faces_in(candidate, sc)
                if closed:
                    sc.insert(candidate, assign_filtration(bound, dist, norelax_dist))
                    _record(curr_map, canon_simplex(candidate), witness, pos, norelax_dist)
                if dist < norelax_dist:
                    norelax_dist = dist
            if witness.decrease() == 0:
                pool.retire(witness)
    return curr_map
