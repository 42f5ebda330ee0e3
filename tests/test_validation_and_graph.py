"""Tests for complex checks and 1-skeleton graphs (relaxed_witness.complex)."""

import networkx as nx
import pytest

from relaxed_witness.complex.container import get_simplices, new_simplex_tree, simplices_by_dimension
from relaxed_witness.complex.graph_utils import n_components, one_skeleton_graph
from relaxed_witness.complex.validation import (
    closure_violations,
    filtration_violations,
    is_subcomplex,
    simplex_filtrations,
)
from relaxed_witness.construction.builder import build_witness_complex


class _ListComplex:
    """Just enough of the SimplexTree interface to hold a non-closed family."""

    def __init__(self, simplices):
        self._simplices = [(list(s), float(f)) for s, f in simplices]

    def get_simplices(self):
        return iter(self._simplices)


# ═══════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════


class TestValidation:

    def test_closure_violations(self):
        sc = _ListComplex([([0], 0.0), ([1], 0.0), ([0, 1, 2], 0.0), ([0, 1], 0.0)])
        missing = closure_violations(sc)
        assert ((0, 1, 2), (1, 2)) in missing
        assert ((0, 1, 2), (0, 2)) in missing
        assert len(missing) == 2

    def test_filtration_violations(self):
        st = new_simplex_tree()
        st.insert([0, 1], 0.2)
        assert filtration_violations(st) == []
        st.assign_filtration([0], 0.9)
        assert filtration_violations(st) == [((0,), (0, 1))]
        assert filtration_violations(st, atol=1.0) == []

    def test_is_subcomplex(self):
        a = new_simplex_tree()
        a.insert([0, 1], 0.0)
        b = new_simplex_tree()
        b.insert([0, 1, 2], 0.5)
        assert is_subcomplex(a, b)
        assert not is_subcomplex(b, a)

    def test_simplex_filtrations_and_dimensions(self):
        st = new_simplex_tree()
        st.insert([2, 0], 0.3)
        assert simplex_filtrations(st) == pytest.approx({(0,): 0.3, (2,): 0.3, (0, 2): 0.3})
        assert sorted(get_simplices(st, 1)) == [(0, 2)]
        by_dim = simplices_by_dimension(st)
        assert sorted(by_dim[0]) == [(0,), (2,)]


# ═══════════════════════════════════════════════════════════════════
# 1-skeleton graphs
# ═══════════════════════════════════════════════════════════════════


class TestGraph:

    def test_triangle_graph(self, cyclic_triangle_table):
        st = build_witness_complex(cyclic_triangle_table, alpha=0.0).simplex_tree
        G = one_skeleton_graph(st)
        assert isinstance(G, nx.Graph)
        assert sorted(G.nodes) == [0, 1, 2]
        assert G.number_of_edges() == 3
        assert G.nodes[0]["filtration"] == 0.0
        assert n_components(st) == 1

    def test_max_filtration_drops_late_simplices(self, relaxation_window_table):
        st = build_witness_complex(relaxation_window_table, alpha=0.5).simplex_tree
        G = one_skeleton_graph(st, max_filtration=0.1)
        assert list(G.nodes) == [0]
        assert G.number_of_edges() == 0
        assert one_skeleton_graph(st)[0][1]["weight"] == pytest.approx(0.2)

    def test_disconnected_witnesses(self):
        st = build_witness_complex([[(0, 1.0)], [(1, 1.0)]], alpha=0.0).simplex_tree
        assert n_components(st) == 2
