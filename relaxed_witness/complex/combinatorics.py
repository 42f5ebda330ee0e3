# relaxed_witness/complex/combinatorics.py
from typing import Iterator, Sequence, Tuple

Simplex = Tuple[int, ...]
Edge = Tuple[int, int]


def canon_simplex(vertices: Sequence[int]) -> Simplex:
    return tuple(sorted(int(v) for v in vertices))


def canon_edge(a: int, b: int) -> Edge:
    return (int(a), int(b)) if a < b else (int(b), int(a))


def facets(vertices: Sequence[int]) -> Iterator[list]:
    """Codimension-1 faces: omit exactly one vertex (order of the rest preserved)."""
    for skip in range(len(vertices)):
        yield [v for i, v in enumerate(vertices) if i != skip]
