"""Tests for the naive backtracking expansion (relaxed_witness.construction.expansion)."""

import math

import pytest

from relaxed_witness.complex.container import new_simplex_tree
from relaxed_witness.construction.active_witness import ActiveWitnessPool
from relaxed_witness.construction.expansion import add_all_faces_of_dimension, expand_dimension
from relaxed_witness.complex.validation import simplex_filtrations


def test_vertices_inside_relaxation_window(relaxation_window_table):
    st = new_simplex_tree()
    stack = []
    active = add_all_faces_of_dimension(0, 0.5, math.inf, relaxation_window_table[0], 0, stack, st)
    assert active
    assert stack == []
    assert simplex_filtrations(st) == pytest.approx({(0,): 0.0, (1,): 0.2})


def test_zero_alpha_only_nearest_vertex(relaxation_window_table):
    st = new_simplex_tree()
    add_all_faces_of_dimension(0, 0.0, math.inf, relaxation_window_table[0], 0, [], st)
    assert list(simplex_filtrations(st)) == [(0,)]


def test_edge_needs_both_vertices(relaxation_window_table):
    row = relaxation_window_table[0]
    st = new_simplex_tree()
    st.insert([0], 0.0)
    # vertex 1 missing: no edge can close
    assert not add_all_faces_of_dimension(1, 0.5, math.inf, row, 0, [], st)
    assert st.num_simplices() == 1

    st.insert([1], 0.2)
    assert add_all_faces_of_dimension(1, 0.5, math.inf, row, 0, [], st)
    assert st.find([0, 1])
    assert st.filtration([0, 1]) == pytest.approx(0.2)
    assert not st.find([1, 2])
    assert not st.find([0, 2])


def test_start_past_end_is_inactive():
    st = new_simplex_tree()
    assert not add_all_faces_of_dimension(0, 1.0, math.inf, ((0, 1.0),), 1, [], st)
    assert not add_all_faces_of_dimension(0, 1.0, math.inf, (), 0, [], st)


def test_skipped_landmark_slides_the_window():
    # 0 and 1 tie; skipping 0 moves the boundary to 1.0, so 2 (at 1.4) needs alpha >= 0.4
    row = ((0, 1.0), (1, 1.0), (2, 1.4))
    st = new_simplex_tree()
    for v in (0, 1, 2):
        st.insert([v], 0.0)
    add_all_faces_of_dimension(1, 0.3, math.inf, row, 0, [], st)
    assert st.find([0, 1])
    assert not st.find([1, 2])
    # {0, 2} skips 1 (at 1.0) as well
    assert not st.find([0, 2])

    st2 = new_simplex_tree()
    for v in (0, 1, 2):
        st2.insert([v], 0.0)
    add_all_faces_of_dimension(1, 0.4, math.inf, row, 0, [], st2)
    assert st2.find([0, 2])
    assert st2.find([1, 2])
    assert st2.filtration([0, 2]) == pytest.approx(0.4)
    assert st2.filtration([0, 1]) == pytest.approx(0.0)


def test_expand_dimension_retires_single_landmark_witness():
    from relaxed_witness.landmarks import NearestLandmarkTable

    table = NearestLandmarkTable.from_rows([
        [(0, 1.0)],
        [(1, 1.0), (0, 1.1)],
    ])
    pool = ActiveWitnessPool.initialize(table)
    st = new_simplex_tree()

    retired = expand_dimension(0, 0.2, pool, st)
    assert retired == 1
    assert pool.witness_ids() == [1]
    assert simplex_filtrations(st) == pytest.approx({(0,): 0.0, (1,): 0.0})

    retired = expand_dimension(1, 0.2, pool, st)
    assert st.find([0, 1])
    # the two-landmark witness cannot reach a triangle
    assert retired == 1
    assert not pool
