"""
In-memory sparse matrices.

Public API:
    SparseStore          - row-major sparse matrix with row/column counts
    read_matrix()        - drain an SMSReader into a store
    write_matrix()       - write a store through an SMSWriter
    summarize()          - rows, columns, nonzeros, density of a store
    summarize_entries()  - the same, in one pass over a reader
    transpose_matrix()   - reader -> writer transpose
"""

from pysms.sparse.store import SparseStore
from pysms.sparse.io import drain_reader, read_matrix, write_matrix
from pysms.sparse.info import MatrixInfo, summarize, summarize_entries
from pysms.sparse.transpose import transpose_matrix, wants_transpose

__all__ = [
    "SparseStore",
    "drain_reader",
    "read_matrix",
    "write_matrix",
    "MatrixInfo",
    "summarize",
    "summarize_entries",
    "transpose_matrix",
    "wants_transpose",
]
