"""
Greedy row reordering with coupled column swaps.

For each cursor i = 1..nrows the unplaced nonempty row with the lowest
badness is swapped into position i and its pivot column into column i.
The loop stops at the first cursor with no nonempty unplaced row; the
remaining rows keep their relative order.
"""

from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from pysms.core.compute.timing import Timer
from pysms.reorder._criteria import CandidateScore, score_row
from pysms.reorder.design import ReorderWeights
from pysms.sparse.store import SparseStore


@dataclass(frozen=True)
class ReorderStep:
    """
    One placement of the greedy loop.

    Attributes:
        cursor: Position i that was finalized
        row: Position the chosen row came from (before the swap)
        pivot: Column swapped into column i, or None
        badness: Badness of the chosen row
        candidates: Number of rows scored at this cursor
    """
    cursor: int
    row: int
    pivot: int | None
    badness: float
    candidates: int


def iter_reorder_steps(
    store: SparseStore,
    weights: ReorderWeights,
    *,
    timer: Timer | None = None,
) -> Iterator[ReorderStep]:
    """
    Reorder ``store`` in place, yielding after every placed cursor.

    The generator is lazy: each step's swaps happen when it is advanced,
    so the store may be inspected between steps. ``weights`` must
    already be normalized.
    """
    nrows, ncols = store.shape
    if nrows == 0 or ncols == 0:
        return

    row_counts, col_counts = store.count_views()
    max_r = int(row_counts.max())
    seen = np.zeros(ncols + 1, dtype=bool)

    def section(name: str):
        return timer.section(name) if timer is not None else nullcontext()

    for i in range(1, nrows + 1):
        best: CandidateScore | None = None
        n_candidates = 0
        with section('scan'):
            for ii in range(i, nrows + 1):
                if row_counts[ii] == 0:
                    continue
                n_candidates += 1
                score = score_row(
                    ii, store.row_items(ii), i, col_counts, seen, max_r, weights,
                )
                if best is None or score.badness < best.badness:
                    best = score

        if best is None:
            return

        with section('swap'):
            store.swap_rows(best.row, i)
            if best.pivot is not None:
                store.swap_columns(best.pivot, i)
            placed = [col for col, _ in store.row_items(i)]
            seen[placed] = True

        yield ReorderStep(
            cursor=i,
            row=best.row,
            pivot=best.pivot,
            badness=best.badness,
            candidates=n_candidates,
        )
