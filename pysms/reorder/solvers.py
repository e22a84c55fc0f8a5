"""
Entry points for the row reordering.

reorder_rows() works on an in-memory SparseStore; reorder_stream() runs
the whole read / reorder / write pipeline over two open streams.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, IO

import numpy as np

from pysms.codec._values import ValueFormat, parse_value
from pysms.codec.reader import SMSReader
from pysms.codec.writer import SMSWriter
from pysms.core.compute.timing import Timer
from pysms.core.result import Result
from pysms.reorder._greedy import iter_reorder_steps
from pysms.reorder.design import ReorderWeights
from pysms.reorder.solution import ReorderParams, ReorderSolution
from pysms.sparse.io import drain_reader, write_matrix
from pysms.sparse.store import SparseStore


BACKEND_NAME = 'greedy_badness'


def reorder_rows(
    store: SparseStore,
    weights: ReorderWeights | None = None,
    *,
    check_counts: bool = False,
) -> ReorderSolution:
    """
    Permute rows (and pivot columns) of ``store`` in place to favor low
    fill-in during Gaussian elimination.

    Parameters
    ----------
    store : SparseStore
        Populated matrix; mutated in place.
    weights : ReorderWeights, optional
        Criterion weights, normalized before use. Default
        (4.5, 2.0, 1.0, 2.0, 0.5).
    check_counts : bool
        Verify RowStat/ColStat against the contents after every cursor
        step (slow; for debugging).

    Returns
    -------
    ReorderSolution

    Raises
    ------
    ConfigurationError
        If all weights are zero or any is not finite.
    IntegrityError
        If check_counts is set and the counts drift.
    """
    weights = (weights if weights is not None else ReorderWeights()).normalized()
    return _reorder(store, weights, check_counts=check_counts, timer=None, warn_list=[])


def _reorder(
    store: SparseStore,
    weights: ReorderWeights,
    *,
    check_counts: bool,
    timer: Timer | None,
    warn_list: list[str],
) -> ReorderSolution:
    own_timer = timer is None
    if own_timer:
        timer = Timer()
        timer.start()

    nrows, ncols = store.shape
    row_order = np.arange(nrows + 1, dtype=np.int64)
    col_order = np.arange(ncols + 1, dtype=np.int64)
    pivots: list[int | None] = []
    badness: list[float] = []
    max_row_count = int(store.count_views()[0].max()) if nrows else 0

    with timer.section('reorder'):
        for step in iter_reorder_steps(store, weights, timer=timer):
            i = step.cursor
            row_order[[i, step.row]] = row_order[[step.row, i]]
            if step.pivot is not None:
                col_order[[i, step.pivot]] = col_order[[step.pivot, i]]
            pivots.append(step.pivot)
            badness.append(step.badness)
            if check_counts:
                store.check_counts()

    n_steps = len(pivots)
    stopped_early = n_steps < nrows

    if own_timer:
        timer.stop()

    params = ReorderParams(
        row_order=row_order[1:],
        col_order=col_order[1:],
        pivots=tuple(pivots),
        badness=np.asarray(badness, dtype=np.float64),
        weights=weights,
        steps=n_steps,
        stopped_early=stopped_early,
    )
    result = Result(
        params=params,
        info={
            'nrows': nrows,
            'ncols': ncols,
            'nnz': store.nnz,
            'max_row_count': max_row_count,
            'steps': n_steps,
            'stopped_early': stopped_early,
            'column_swaps': sum(1 for k, p in enumerate(pivots, 1)
                                if p is not None and p != k),
        },
        timing=timer.result() if own_timer else None,
        backend_name=BACKEND_NAME,
        warnings=tuple(warn_list),
    )
    return ReorderSolution(_result=result, _store=store)


def reorder_stream(
    input: IO[Any],
    output: IO[Any],
    weights: ReorderWeights | None = None,
    *,
    value_format: ValueFormat | None = None,
    value_type: Callable[[str], Any] = parse_value,
) -> ReorderSolution:
    """
    Read an SMS matrix from ``input``, reorder it, write it to ``output``.

    The phases never interleave: the input is fully read before
    reordering starts, and nothing is written until reordering is done.
    Weights are validated before either stream is touched. Streams are
    not closed.

    Parameters
    ----------
    input, output : file objects
        Open readable / writable streams (binary or text).
    weights : ReorderWeights, optional
        Criterion weights. Default (4.5, 2.0, 1.0, 2.0, 0.5).
    value_format : ValueFormat, optional
        Output value formatting.
    value_type : callable
        Value token converter for the reader.
    """
    weights = (weights if weights is not None else ReorderWeights()).normalized()

    timer = Timer()
    timer.start()
    warn_list: list[str] = []

    with timer.section('read'):
        reader = SMSReader(input, value_type=value_type)
        store, n_replaced = drain_reader(reader)

    if n_replaced:
        msg = f"{n_replaced} duplicate entries overwritten (last value kept)"
        warnings.warn(msg, UserWarning, stacklevel=2)
        warn_list.append(msg)

    solution = _reorder(store, weights, check_counts=False, timer=timer, warn_list=warn_list)

    with timer.section('write'):
        write_matrix(store, SMSWriter(output, value_format))

    timer.stop()
    result = Result(
        params=solution._result.params,
        info=solution.info,
        timing=timer.result(),
        backend_name=solution.backend_name,
        warnings=solution.warnings,
    )
    return ReorderSolution(_result=result, _store=store)
