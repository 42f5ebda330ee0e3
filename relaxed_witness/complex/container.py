# relaxed_witness/complex/container.py
from __future__ import annotations

from typing import Dict, List, Protocol, Sequence

from .combinatorics import Simplex


class SimplicialComplexForWitness(Protocol):
    """
    What the witness-complex builder needs from a simplicial complex container.

    ``gudhi.SimplexTree`` satisfies it. Simplices are passed as vertex lists in
    any order; a simplex is identified by its sorted vertex tuple, and that
    identity is stable once inserted. Inserting a simplex that is already
    present must keep the smaller of the two filtration values.
    """

    def insert(self, simplex: Sequence[int], filtration: float = 0.0) -> bool:
        ...

    def find(self, simplex: Sequence[int]) -> bool:
        ...

    def filtration(self, simplex: Sequence[int]) -> float:
        ...

    def num_vertices(self) -> int:
        ...


def new_simplex_tree():
    """Empty ``gudhi.SimplexTree``."""
    try:
        import gudhi  # type: ignore
    except ImportError as e:
        raise ImportError("This function requires `gudhi`. Install with `pip install gudhi`.") from e
    return gudhi.SimplexTree()


def get_simplices(st, n: int) -> List[Simplex]:
    """All n-simplices of ``st`` as sorted vertex tuples."""
    return [
        tuple(s)
        for s, _ in st.get_skeleton(n)
        if len(s) == n + 1
    ]


def simplices_by_dimension(st) -> Dict[int, List[Simplex]]:
    out: Dict[int, List[Simplex]] = {}
    for s, _ in st.get_simplices():
        out.setdefault(len(s) - 1, []).append(tuple(s))
    for d in out:
        out[d].sort()
    return out
