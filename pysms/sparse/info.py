"""
Summary information about a matrix: dimensions, nonzeros, density.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass

from pysms.codec.reader import SMSReader
from pysms.sparse.store import SparseStore


@dataclass(frozen=True)
class MatrixInfo:
    """Dimensions and fill of a sparse matrix."""
    rows: int
    cols: int
    nonzero: int
    density: float  # percent

    def format(self, short: bool = False) -> str:
        if short:
            return (f"rows:{self.rows} columns:{self.cols} "
                    f"nonzero:{self.nonzero} density:{self.density:g}")
        return (f"Rows: {self.rows}\n"
                f"Columns: {self.cols}\n"
                f"Non-zeros: {self.nonzero}\n"
                f"Density%: {self.density:g}")


def _is_nonzero(value) -> bool:
    if isinstance(value, numbers.Number):
        return value != 0
    return True


def summarize(store: SparseStore) -> MatrixInfo:
    """
    Summarize ``store``.

    Entries whose value is numerically zero are not counted as nonzeros;
    opaque (non-numeric) values always are. Density is a percentage of
    rows * cols, 0 for a matrix without cells.
    """
    nonzero = sum(1 for _, _, value in store.entries() if _is_nonzero(value))
    cells = store.nrows * store.ncols
    density = 100.0 * nonzero / cells if cells else 0.0
    return MatrixInfo(rows=store.nrows, cols=store.ncols, nonzero=nonzero, density=density)


def summarize_entries(reader: SMSReader) -> MatrixInfo:
    """
    Summarize an SMS stream in one pass, without building a store.

    Every entry line with a nonzero value is counted, so duplicate
    coordinates count once per line.
    """
    header = reader.header if reader.header is not None else reader.open()
    nonzero = sum(1 for _, _, value in reader if _is_nonzero(value))
    cells = header.rows * header.cols
    density = 100.0 * nonzero / cells if cells else 0.0
    return MatrixInfo(rows=header.rows, cols=header.cols, nonzero=nonzero, density=density)
