# relaxed_witness/complex/closure.py
from __future__ import annotations

import math
from typing import Sequence, Tuple

from .combinatorics import facets
from .container import SimplicialComplexForWitness


def all_faces_in(
    simplex: Sequence[int],
    sc: SimplicialComplexForWitness,
) -> Tuple[bool, float]:
    """
    Closure oracle.

    Returns ``(True, bound)`` if every facet of ``simplex`` is in ``sc``,
    where ``bound`` is the largest facet filtration, and ``(False, bound)`` at
    the first missing facet (``bound`` is then meaningless).

    A vertex has no facets and always closes with bound 0.
    """
    bound = 0.0
    if len(simplex) <= 1:
        return True, bound
    for facet in facets(simplex):
        if not sc.find(facet):
            return False, bound
        f = float(sc.filtration(facet))
        if f > bound:
            bound = f
    return True, bound


def relaxation_cost(distance: float, norelax_dist: float) -> float:
    """How far past the no-relaxation boundary a landmark at ``distance`` lies."""
    if math.isinf(norelax_dist) or distance <= norelax_dist:
        return 0.0
    return float(distance - norelax_dist)


def assign_filtration(bound: float, distance: float, norelax_dist: float) -> float:
    """Filtration of an admitted simplex: never below its facets, never below its relaxation."""
    return max(float(bound), relaxation_cost(distance, norelax_dist))
