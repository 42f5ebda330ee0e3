"""Tests for the closure oracle and filtration assignment (relaxed_witness.complex.closure)."""

import math

import pytest

from relaxed_witness.complex.closure import all_faces_in, assign_filtration, relaxation_cost
from relaxed_witness.complex.combinatorics import canon_simplex, facets
from relaxed_witness.complex.container import new_simplex_tree


@pytest.fixture
def triangle_boundary():
    st = new_simplex_tree()
    st.insert([0], 0.0)
    st.insert([1], 0.2)
    st.insert([2], 0.0)
    st.insert([0, 1], 0.3)
    st.insert([1, 2], 0.5)
    return st


def test_facets_omit_one_vertex_each():
    assert list(facets([3, 1, 2])) == [[1, 2], [3, 2], [3, 1]]
    assert list(facets([4])) == [[]]
    assert canon_simplex([3, 1, 2]) == (1, 2, 3)


def test_vertex_always_closes(triangle_boundary):
    assert all_faces_in([7], triangle_boundary) == (True, 0.0)


def test_edge_bound_is_max_vertex_filtration(triangle_boundary):
    closed, bound = all_faces_in([1, 2], triangle_boundary)
    assert closed
    assert bound == pytest.approx(0.2)


def test_missing_facet(triangle_boundary):
    closed, _ = all_faces_in([0, 1, 2], triangle_boundary)
    assert not closed


def test_triangle_closes_once_all_edges_present(triangle_boundary):
    triangle_boundary.insert([0, 2], 0.1)
    closed, bound = all_faces_in([2, 0, 1], triangle_boundary)
    assert closed
    assert bound == pytest.approx(0.5)


def test_relaxation_cost():
    assert relaxation_cost(1.0, math.inf) == 0.0
    assert relaxation_cost(1.0, 1.5) == 0.0
    assert relaxation_cost(1.5, 1.5) == 0.0
    assert relaxation_cost(1.2, 1.0) == pytest.approx(0.2)


def test_assign_filtration_never_below_facets():
    assert assign_filtration(0.4, 1.2, 1.0) == pytest.approx(0.4)
    assert assign_filtration(0.1, 1.2, 1.0) == pytest.approx(0.2)
    assert assign_filtration(0.0, 1.0, math.inf) == 0.0
