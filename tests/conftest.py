"""
Pytest configuration and fixtures for relaxed_witness tests.
"""
import numpy as np
import pytest

from relaxed_witness.landmarks import NearestLandmarkTable


@pytest.fixture
def relaxation_window_table():
    """One witness; landmark 2 lies far outside the relaxation window."""
    return NearestLandmarkTable.from_rows([
        [(0, 1.0), (1, 1.2), (2, 5.0)],
    ])


@pytest.fixture
def cyclic_triangle_table():
    """
    Three witnesses that between them witness every vertex and edge of the
    triangle {0, 1, 2} at alpha = 0; the first one then witnesses the triangle.
    """
    return NearestLandmarkTable.from_rows([
        [(0, 1.0), (1, 1.5), (2, 2.0)],
        [(1, 1.0), (2, 1.5), (0, 2.0)],
        [(2, 1.0), (0, 1.5), (1, 2.0)],
    ])


@pytest.fixture
def ragged_table():
    """Rows of different lengths, including a single-landmark witness."""
    return NearestLandmarkTable.from_rows([
        [(0, 0.5)],
        [(1, 0.2), (0, 0.3), (3, 0.35), (2, 0.9)],
        [(2, 0.1), (3, 0.15), (1, 0.4)],
        [(3, 0.0), (2, 0.05), (0, 0.2), (1, 0.25), (4, 0.3)],
        [(4, 0.3), (0, 0.31)],
    ])


@pytest.fixture
def point_cloud():
    """Witnesses and landmarks sampled from a noisy circle in the plane."""
    rng = np.random.default_rng(0)
    t = rng.uniform(0.0, 2.0 * np.pi, size=60)
    witnesses = np.stack([np.cos(t), np.sin(t)], axis=1) + 0.05 * rng.standard_normal((60, 2))
    landmarks = witnesses[:8].copy()
    return witnesses, landmarks
