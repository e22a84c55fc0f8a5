"""
Per-candidate scoring for the greedy row reordering.

A candidate row is scored at cursor ``i`` by five structural criteria:

    a. RowStat[ii] relative to the largest initial row
    b. share of entries in columns < i
    c. share of entries in columns >= i
    d. share of entries in columns no finalized row has touched
    e. exp(-ncols / l), l the distance from i to the nearest entry at or
       right of i that is not the pivot

Lower badness is better.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pysms.reorder.design import ReorderWeights


@dataclass(frozen=True)
class CandidateScore:
    """Scoring breakdown for one candidate row at one cursor."""
    row: int
    pivot: int | None
    c1: int
    c2: int
    c3: int
    distance: int
    badness: float


def choose_pivot(
    items: Sequence[tuple[int, Any]],
    cursor: int,
    col_counts: NDArray[np.int64],
) -> int | None:
    """
    Pick the pivot column of a row at ``cursor``.

    Among the row's columns >= cursor (ascending), the one with the
    fewest entries wins. On equal counts the later column wins only if
    its value in this row is smaller than the value at the current pick.

    Returns:
        Column index, or None if the row has no column >= cursor
    """
    best_col = None
    best_count = 0
    best_value = None
    for col, value in items:
        if col < cursor:
            continue
        count = col_counts[col]
        # value comparison on ties preserves the historical output ordering
        if (best_col is None
                or count < best_count
                or (count == best_count and value < best_value)):
            best_col = col
            best_count = count
            best_value = value
    return best_col


def score_row(
    row: int,
    items: Sequence[tuple[int, Any]],
    cursor: int,
    col_counts: NDArray[np.int64],
    seen: NDArray[np.bool_],
    max_r: int,
    weights: ReorderWeights,
) -> CandidateScore:
    """
    Score one nonempty candidate row.

    Parameters
    ----------
    row : int
        Candidate row index.
    items : sequence of (col, value)
        The row's entries in ascending column order.
    cursor : int
        Current placement position i.
    col_counts : ndarray
        ColStat, indexed by column.
    seen : ndarray of bool
        Seen mask, indexed by column.
    max_r : int
        Largest RowStat before reordering started.
    weights : ReorderWeights
        Normalized weights.
    """
    ncols = seen.shape[0] - 1
    r = len(items)
    pivot = choose_pivot(items, cursor, col_counts)

    cols = np.fromiter((col for col, _ in items), dtype=np.int64, count=r)
    right = cols >= cursor
    c1 = int(np.count_nonzero(~right))
    c2 = r - c1
    c3 = int(np.count_nonzero(~seen[cols]))

    others = cols[right & (cols != pivot)] if pivot is not None else cols[right]
    distance = int(others.min()) - cursor if others.size else ncols

    if distance > 0:
        closeness = float(np.exp(-1.0 * ncols / distance))
    else:
        # exp(-ncols/0) in the limit
        closeness = 0.0

    badness = (
        (100.0 * r / max_r) * weights.a
        + (100.0 * c1 / r) * weights.b
        + (100.0 * c2 / r) * weights.c
        + (100.0 * c3 / r) * weights.d
        + (100.0 * closeness) * weights.e
    )
    return CandidateScore(
        row=row, pivot=pivot, c1=c1, c2=c2, c3=c3,
        distance=distance, badness=badness,
    )
