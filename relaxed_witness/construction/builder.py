# relaxed_witness/construction/builder.py
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Literal, Optional, Sequence, Tuple, Union

from ..complex.container import SimplicialComplexForWitness, new_simplex_tree
from ..landmarks import NearestLandmarkTable
from ..utils.status_utils import _status, _status_done
from .active_witness import ActiveWitnessPool
from .expansion import expand_dimension
from .witness_map import SimplexWitnessMap, fill_simplices, fill_vertices


__all__ = [
    "Strategy",
    "WitnessComplexConfig",
    "ConstructionRound",
    "WitnessComplexResult",
    "RelaxedWitnessComplex",
    "build_witness_complex",
]

Strategy = Literal["naive", "incremental"]
_STRATEGIES = ("naive", "incremental")


# ----------------------------
# Config / results
# ----------------------------

@dataclass(frozen=True)
class WitnessComplexConfig:
    """
    alpha:
      relaxation parameter (>= 0), in the units of the table's distances.
      0 gives the weak witness complex.

    max_dimension:
      largest simplex dimension to build (>= 0), or None for no limit
      beyond ``n_landmarks - 1``.

    strategy:
      - "incremental" (default): extend the simplices of the previous
        dimension through the witness-simplex map.
      - "naive": rescan every active witness's list each dimension.
      Both give the same complex.

    verbose:
      print one progress line per dimension.
    """
    alpha: float = 0.0
    max_dimension: Optional[int] = None
    strategy: Strategy = "incremental"
    verbose: bool = False


@dataclass(frozen=True)
class ConstructionRound:
    dimension: int
    n_active: int      # active witnesses entering the round
    n_inserted: int    # new simplices of this dimension
    n_retired: int     # witnesses retired during the round


@dataclass
class WitnessComplexResult:
    simplex_tree: Any
    dimension: int
    alpha: float
    max_dimension: Optional[int]
    strategy: str
    n_landmarks: int
    n_witnesses: int
    rounds: Tuple[ConstructionRound, ...] = ()

    @property
    def n_simplices(self) -> int:
        return int(sum(r.n_inserted for r in self.rounds))

    def summarize(self, *, verbose: bool = True, latex: Union[str, bool] = "auto"):
        from ..summaries.complex_summary import summarize_witness_complex

        return summarize_witness_complex(self, verbose=verbose, latex=latex)


def _check_parameters(alpha: float, max_dimension: Optional[int], strategy: str) -> None:
    if not (float(alpha) >= 0.0):
        raise ValueError(f"alpha must be non-negative. Got {alpha}.")
    if max_dimension is not None and int(max_dimension) < 0:
        raise ValueError(f"max_dimension must be non-negative (or None). Got {max_dimension}.")
    if strategy not in _STRATEGIES:
        raise ValueError(f"Unknown strategy={strategy!r}. Expected one of {_STRATEGIES}.")


class _CountingComplex:
    """Forwards to the target complex and counts newly inserted simplices per dimension."""

    def __init__(self, sc: SimplicialComplexForWitness):
        self.sc = sc
        self.counts: Dict[int, int] = defaultdict(int)

    def insert(self, simplex: Sequence[int], filtration: float = 0.0) -> bool:
        inserted = bool(self.sc.insert(simplex, filtration))
        if inserted:
            self.counts[len(simplex) - 1] += 1
        return inserted

    def find(self, simplex: Sequence[int]) -> bool:
        return bool(self.sc.find(simplex))

    def filtration(self, simplex: Sequence[int]) -> float:
        return self.sc.filtration(simplex)

    def num_vertices(self) -> int:
        return self.sc.num_vertices()


# ----------------------------
# Builder
# ----------------------------

class RelaxedWitnessComplex:
    """
    Relaxed (weak) witness complex of a nearest-landmark table.

    A set of landmarks ``{l_0, ..., l_k}`` is a simplex when some witness can
    reach all of them in its sorted landmark list without going more than
    ``alpha`` past the nearest landmark it skipped, and all its facets are
    already simplices. The filtration value of a simplex is the relaxation it
    needed, raised to the largest value of its facets.

    The builder borrows the table and the target complex; each call to
    :meth:`create_complex` owns its own witness pool and maps.
    """

    def __init__(
        self,
        nearest_landmark_table: Union[NearestLandmarkTable, Iterable[Iterable[Tuple[int, float]]]],
        *,
        n_landmarks: Optional[int] = None,
    ):
        if isinstance(nearest_landmark_table, NearestLandmarkTable):
            table = nearest_landmark_table
        else:
            table = NearestLandmarkTable.from_rows(nearest_landmark_table)

        nbL = table.n_landmarks if n_landmarks is None else int(n_landmarks)
        if nbL < 0:
            raise ValueError(f"n_landmarks must be non-negative. Got {n_landmarks}.")
        table.check_landmark_ids(nbL)

        self.table = table
        self.n_landmarks = nbL
        self.rounds: Tuple[ConstructionRound, ...] = ()

    def create_complex(
        self,
        sc: SimplicialComplexForWitness,
        alpha: float,
        max_dimension: Optional[int] = None,
        *,
        strategy: Strategy = "incremental",
        verbose: bool = False,
    ) -> int:
        """
        Write the witness complex into the empty complex ``sc``.

        Returns
        -------
        dimension : int
            Highest dimension in which a simplex was inserted (-1 if none).

        Raises
        ------
        ValueError
            Negative ``alpha`` or ``max_dimension``, unknown ``strategy``, or a
            non-empty ``sc``.
        """
        _check_parameters(alpha, max_dimension, strategy)
        if sc.num_vertices() > 0:
            raise ValueError("Witness complex cannot be created in a non-empty complex.")

        alpha = float(alpha)
        limit = self.n_landmarks - 1
        if max_dimension is not None:
            limit = min(limit, int(max_dimension))

        target = _CountingComplex(sc)
        pool = ActiveWitnessPool.initialize(self.table)
        rounds: List[ConstructionRound] = []
        sw_map: Optional[SimplexWitnessMap] = None

        k = 0
        while pool and k <= limit:
            n_active = len(pool)
            retired_before = pool.n_retired
            if strategy == "naive":
                expand_dimension(k, alpha, pool, target)
            elif k == 0:
                sw_map = fill_vertices(alpha, target, pool)
            else:
                sw_map = fill_simplices(alpha, target, pool, sw_map)
            rounds.append(
                ConstructionRound(
                    dimension=k,
                    n_active=n_active,
                    n_inserted=target.counts[k],
                    n_retired=pool.n_retired - retired_before,
                )
            )
            if verbose:
                _status(
                    f"[witness complex] dim {k}: {target.counts[k]} simplices, "
                    f"{len(pool)}/{n_active} witnesses still active"
                )
            k += 1

        self.rounds = tuple(rounds)
        dimension = max((r.dimension for r in rounds if r.n_inserted > 0), default=-1)
        if verbose:
            _status_done(
                f"[witness complex] alpha={alpha:g}: {sum(target.counts.values())} simplices, "
                f"dimension {dimension}"
            )
        return dimension


def build_witness_complex(
    nearest_landmark_table: Union[NearestLandmarkTable, Iterable[Iterable[Tuple[int, float]]]],
    *,
    alpha: float = 0.0,
    max_dimension: Optional[int] = None,
    n_landmarks: Optional[int] = None,
    strategy: Strategy = "incremental",
    verbose: bool = False,
    config: Optional[WitnessComplexConfig] = None,
) -> WitnessComplexResult:
    """
    Build the relaxed witness complex into a fresh ``gudhi.SimplexTree``.

    If ``config`` is given, its fields replace ``alpha``, ``max_dimension``,
    ``strategy`` and ``verbose``.
    """
    if config is None:
        config = WitnessComplexConfig(
            alpha=alpha,
            max_dimension=max_dimension,
            strategy=strategy,
            verbose=verbose,
        )
    _check_parameters(config.alpha, config.max_dimension, config.strategy)

    builder = RelaxedWitnessComplex(nearest_landmark_table, n_landmarks=n_landmarks)
    st = new_simplex_tree()
    dimension = builder.create_complex(
        st,
        config.alpha,
        config.max_dimension,
        strategy=config.strategy,
        verbose=config.verbose,
    )
    return WitnessComplexResult(
        simplex_tree=st,
        dimension=int(dimension),
        alpha=float(config.alpha),
        max_dimension=config.max_dimension,
        strategy=str(config.strategy),
        n_landmarks=int(builder.n_landmarks),
        n_witnesses=int(builder.table.n_witnesses),
        rounds=builder.rounds,
    )
