# relaxed_witness/complex/validation.py
from __future__ import annotations

from typing import Dict, List, Tuple

from .combinatorics import Simplex, facets


__all__ = [
    "simplex_filtrations",
    "closure_violations",
    "filtration_violations",
    "is_subcomplex",
]


def simplex_filtrations(st) -> Dict[Simplex, float]:
    """Every simplex of ``st`` (sorted vertex tuple) -> filtration value."""
    return {tuple(s): float(f) for s, f in st.get_simplices()}


def closure_violations(st) -> List[Tuple[Simplex, Simplex]]:
    """Pairs ``(simplex, missing_facet)``; empty for a valid simplicial complex."""
    present = simplex_filtrations(st)
    out: List[Tuple[Simplex, Simplex]] = []
    for s in present:
        if len(s) <= 1:
            continue
        for f in facets(s):
            if tuple(f) not in present:
                out.append((s, tuple(f)))
    return out


def filtration_violations(st, *, atol: float = 0.0) -> List[Tuple[Simplex, Simplex]]:
    """Pairs ``(facet, simplex)`` where the facet appears strictly later than the simplex."""
    present = simplex_filtrations(st)
    out: List[Tuple[Simplex, Simplex]] = []
    for s, fs in present.items():
        if len(s) <= 1:
            continue
        for f in facets(s):
            ff = present.get(tuple(f))
            if ff is not None and ff > fs + atol:
                out.append((tuple(f), s))
    return out


def is_subcomplex(st_a, st_b) -> bool:
    """True if every simplex of ``st_a`` is a simplex of ``st_b`` (filtrations ignored)."""
    b = simplex_filtrations(st_b)
    return all(s in b for s in simplex_filtrations(st_a))
