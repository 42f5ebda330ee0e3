# relaxed_witness/construction/active_witness.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List

from ..landmarks import LandmarkRow, NearestLandmarkTable


@dataclass(eq=False)
class ActiveWitness:
    """
    Bookkeeping for one witness that may still witness new simplices.

    ``cursor`` is the position in ``landmarks`` where the next rescan starts.
    ``counter`` is the number of live witness-simplex records that point at
    this witness (incremental construction only).
    """
    witness_id: int
    landmarks: LandmarkRow
    cursor: int = 0
    counter: int = 0

    @property
    def remaining(self) -> int:
        return len(self.landmarks) - self.cursor

    def exhausted_for(self, dim: int) -> bool:
        """True if too few landmarks remain to form a ``dim``-simplex."""
        return self.remaining < dim + 1

    def increase(self) -> None:
        self.counter += 1

    def decrease(self) -> int:
        if self.counter <= 0:
            raise RuntimeError(f"Witness {self.witness_id}: reference counter already zero.")
        self.counter -= 1
        return self.counter


@dataclass
class ActiveWitnessPool:
    """
    Witnesses that can still contribute simplices, in table order.

    The pool only shrinks: a retired witness is never re-added.
    """
    _active: Dict[int, ActiveWitness] = field(default_factory=dict)
    n_retired: int = 0

    @classmethod
    def initialize(cls, table: NearestLandmarkTable) -> "ActiveWitnessPool":
        pool = cls()
        for w, row in enumerate(table):
            pool._active[w] = ActiveWitness(witness_id=w, landmarks=row)
        return pool

    def __len__(self) -> int:
        return len(self._active)

    def __bool__(self) -> bool:
        return bool(self._active)

    def __iter__(self) -> Iterator[ActiveWitness]:
        return iter(list(self._active.values()))

    def __contains__(self, witness: ActiveWitness) -> bool:
        return self._active.get(witness.witness_id) is witness

    def witness_ids(self) -> List[int]:
        return list(self._active)

    def retire(self, witness: ActiveWitness) -> None:
        if self._active.pop(witness.witness_id, None) is not None:
            self.n_retired += 1

    def for_each_active(self, fn: Callable[[ActiveWitness], bool]) -> int:
        """
        Call ``fn`` on every active witness; retire those for which it returns False.

        Returns the number of witnesses retired during this pass.
        """
        before = self.n_retired
        for witness in self:
            if not fn(witness):
                self.retire(witness)
        return self.n_retired - before
