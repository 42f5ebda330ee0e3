from __future__ import annotations

"""
Public API re-exports for relaxed_witness.

Import style:
    from relaxed_witness.api import build_witness_complex, nearest_landmark_table, ...

Notes
-----
- This file is intentionally curated (not a dump of every internal helper).
"""

# ----------------------------
# Construction
# ----------------------------
from .construction.builder import (
    ConstructionRound,
    RelaxedWitnessComplex,
    WitnessComplexConfig,
    WitnessComplexResult,
    build_witness_complex,
)
from .construction.active_witness import ActiveWitness, ActiveWitnessPool
from .construction.expansion import add_all_faces_of_dimension, expand_dimension
from .construction.witness_map import (
    WitnessForSimplex,
    fill_simplices,
    fill_vertices,
)
from .euclidean import build_euclidean_witness_complex

# ----------------------------
# Landmarks / metrics
# ----------------------------
from .landmarks import (
    NearestLandmarkTable,
    choose_farthest_point_landmarks,
    nearest_landmark_table,
    pick_random_landmarks,
)
from .metrics import (
    EuclideanMetric,
    Metric,
    S1AngleMetric,
    SciPyCdistMetric,
    SquaredEuclideanMetric,
    as_metric,
)

# ----------------------------
# Complex helpers
# ----------------------------
from .complex.closure import all_faces_in, assign_filtration, relaxation_cost
from .complex.container import (
    SimplicialComplexForWitness,
    get_simplices,
    new_simplex_tree,
    simplices_by_dimension,
)
from .complex.graph_utils import n_components, one_skeleton_graph
from .complex.validation import (
    closure_violations,
    filtration_violations,
    is_subcomplex,
    simplex_filtrations,
)

# ----------------------------
# Summaries
# ----------------------------
from .summaries.complex_summary import (
    WitnessComplexSummary,
    plot_filtration_histograms,
    summarize_simplex_tree,
    summarize_witness_complex,
)


__all__ = [
    # construction
    "ConstructionRound",
    "RelaxedWitnessComplex",
    "WitnessComplexConfig",
    "WitnessComplexResult",
    "build_witness_complex",
    "build_euclidean_witness_complex",
    "ActiveWitness",
    "ActiveWitnessPool",
    "add_all_faces_of_dimension",
    "expand_dimension",
    "WitnessForSimplex",
    "fill_vertices",
    "fill_simplices",
    # landmarks / metrics
    "NearestLandmarkTable",
    "choose_farthest_point_landmarks",
    "nearest_landmark_table",
    "pick_random_landmarks",
    "Metric",
    "EuclideanMetric",
    "SquaredEuclideanMetric",
    "S1AngleMetric",
    "SciPyCdistMetric",
    "as_metric",
    # complex helpers
    "all_faces_in",
    "assign_filtration",
    "relaxation_cost",
    "SimplicialComplexForWitness",
    "new_simplex_tree",
    "get_simplices",
    "simplices_by_dimension",
    "one_skeleton_graph",
    "n_components",
    "simplex_filtrations",
    "closure_violations",
    "filtration_violations",
    "is_subcomplex",
    # summaries
    "WitnessComplexSummary",
    "plot_filtration_histograms",
    "summarize_simplex_tree",
    "summarize_witness_complex",
]
