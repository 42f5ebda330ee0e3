"""Tests for the witness-simplex association map (relaxed_witness.construction.witness_map)."""

import math

import pytest

from relaxed_witness.complex.container import new_simplex_tree
from relaxed_witness.complex.validation import simplex_filtrations
from relaxed_witness.construction.active_witness import ActiveWitnessPool
from relaxed_witness.construction.witness_map import fill_simplices, fill_vertices
from relaxed_witness.landmarks import NearestLandmarkTable


def test_fill_vertices_records_resume_state(relaxation_window_table):
    pool = ActiveWitnessPool.initialize(relaxation_window_table)
    st = new_simplex_tree()
    sw_map = fill_vertices(0.5, st, pool)

    assert simplex_filtrations(st) == pytest.approx({(0,): 0.0, (1,): 0.2})
    assert set(sw_map) == {(0,), (1,)}

    (rec0,) = sw_map[(0,)]
    assert rec0.last_position == 0
    assert math.isinf(rec0.limit_distance)

    (rec1,) = sw_map[(1,)]
    assert rec1.last_position == 1
    assert rec1.limit_distance == pytest.approx(1.0)

    (w,) = list(pool)
    assert w.counter == 2
    assert rec0.witness is w and rec1.witness is w


def test_fill_simplices_extends_and_releases(relaxation_window_table):
    pool = ActiveWitnessPool.initialize(relaxation_window_table)
    st = new_simplex_tree()
    dim0 = fill_vertices(0.5, st, pool)
    dim1 = fill_simplices(0.5, st, pool, dim0)

    assert set(dim1) == {(0, 1)}
    assert st.filtration([0, 1]) == pytest.approx(0.2)
    (w,) = list(pool)
    assert w.counter == 1

    dim2 = fill_simplices(0.5, st, pool, dim1)
    assert dim2 == {}
    assert not st.find([0, 1, 2])
    assert not pool


def test_single_landmark_witness_retired_after_vertices():
    table = NearestLandmarkTable.from_rows([[(0, 1.0)]])
    pool = ActiveWitnessPool.initialize(table)
    st = new_simplex_tree()
    sw_map = fill_vertices(0.0, st, pool)
    assert st.find([0])
    assert sw_map == {}
    assert not pool


def test_records_at_end_of_list_are_dropped():
    # the second witness admits landmark 1 only as its last entry
    table = NearestLandmarkTable.from_rows([
        [(0, 1.0), (1, 2.0)],
        [(1, 0.5)],
    ])
    pool = ActiveWitnessPool.initialize(table)
    st = new_simplex_tree()
    sw_map = fill_vertices(0.0, st, pool)
    assert set(sw_map) == {(0,)}
    assert pool.witness_ids() == [0]
