"""
PySMS: sparse matrices in the SMS exchange format.

Streaming codec for the line-oriented SMS format, an in-memory sparse
store with row/column nonzero counts, and a greedy row/column reordering
that favors fast rank computation by Gaussian elimination.

Submodules:
    codec: SMS reader and writer
    sparse: SparseStore and whole-matrix helpers
    reorder: Row/column reordering heuristic
    cli: Command-line front end
"""

__version__ = "0.1.0"

from pysms import codec
from pysms import sparse
from pysms import reorder
from pysms.codec import SMSReader, SMSWriter, Header, Entry, ValueFormat
from pysms.sparse import SparseStore, read_matrix, write_matrix
from pysms.reorder import ReorderWeights, reorder_rows, reorder_stream

__all__ = [
    "__version__",
    "codec",
    "sparse",
    "reorder",
    "SMSReader",
    "SMSWriter",
    "Header",
    "Entry",
    "ValueFormat",
    "SparseStore",
    "read_matrix",
    "write_matrix",
    "ReorderWeights",
    "reorder_rows",
    "reorder_stream",
]
