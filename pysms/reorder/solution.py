"""
Reordering solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pysms.core.result import Result
from pysms.reorder.design import ReorderWeights

if TYPE_CHECKING:
    from pysms.sparse.store import SparseStore


@dataclass(frozen=True)
class ReorderParams:
    """
    Parameter payload for a reordering run.

    Permutations are 1-based: ``row_order[p - 1]`` is the original row now
    at position p, ``col_order[q - 1]`` the original column now at q.
    """
    row_order: NDArray[np.int64]
    col_order: NDArray[np.int64]
    pivots: tuple[int | None, ...]
    badness: NDArray[np.floating[Any]]
    weights: ReorderWeights
    steps: int
    stopped_early: bool


@dataclass
class ReorderSolution:
    """
    User-facing reordering result.

    Wraps Result[ReorderParams] together with the reordered store.
    """
    _result: Result[ReorderParams]
    _store: 'SparseStore'

    @property
    def store(self) -> 'SparseStore':
        """The reordered matrix (the input store, mutated in place)."""
        return self._store

    @property
    def row_order(self) -> NDArray[np.int64]:
        return self._result.params.row_order

    @property
    def col_order(self) -> NDArray[np.int64]:
        return self._result.params.col_order

    @property
    def pivots(self) -> tuple[int | None, ...]:
        """Pivot column swapped into place at each cursor (None if none)."""
        return self._result.params.pivots

    @property
    def badness(self) -> NDArray[np.floating[Any]]:
        """Badness of the row chosen at each cursor."""
        return self._result.params.badness

    @property
    def weights(self) -> ReorderWeights:
        """Normalized weights that were used."""
        return self._result.params.weights

    @property
    def steps(self) -> int:
        return self._result.params.steps

    @property
    def stopped_early(self) -> bool:
        """True if the loop ran out of nonempty rows before the last cursor."""
        return self._result.params.stopped_early

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    def summary(self) -> str:
        lines = [
            f"Reordered {self._store.nrows} x {self._store.ncols} matrix "
            f"({self._store.nnz} entries)",
            f"Cursor steps: {self.steps}"
            + (" (stopped early: no nonempty rows left)" if self.stopped_early else ""),
            "Weights: " + ", ".join(
                f"{name}={getattr(self.weights, name):.4f}" for name in 'abcde'
            ),
        ]
        if self.timing:
            lines.append(f"Time: {self.timing['total_seconds']:.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (f"ReorderSolution(nrows={self._store.nrows}, ncols={self._store.ncols}, "
                f"steps={self.steps})")
