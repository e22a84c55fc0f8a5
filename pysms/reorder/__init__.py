"""
Row/column reordering for fast rank computation.

Public API:
    reorder_rows(store)            - reorder an in-memory SparseStore
    reorder_stream(input, output)  - read, reorder, write SMS streams
    iter_reorder_steps(store, w)   - the greedy loop, one step at a time
    ReorderWeights                 - criterion weights (a, b, c, d, e)
"""

from pysms.reorder.design import ReorderWeights
from pysms.reorder.solution import ReorderParams, ReorderSolution
from pysms.reorder._greedy import ReorderStep, iter_reorder_steps
from pysms.reorder.solvers import reorder_rows, reorder_stream

__all__ = [
    "reorder_rows",
    "reorder_stream",
    "iter_reorder_steps",
    "ReorderStep",
    "ReorderWeights",
    "ReorderParams",
    "ReorderSolution",
]
