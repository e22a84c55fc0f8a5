"""
SparseStore: in-memory sparse matrix with nonzero-count tracking.

Rows are kept in 1-based slots, each a dict mapping column index to
value. Row and column entry counts live in numpy integer vectors that
are updated on every mutation, so ``row_count(i)`` always equals the
number of entries stored in row ``i`` (and likewise for columns).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

import numpy as np
from numpy.typing import NDArray
from scipy import sparse as sp_sparse

from pysms.codec._common import Entry, Header
from pysms.core.exceptions import IntegrityError
from pysms.core.validation import (
    check_col_index,
    check_coordinate,
    check_dimensions,
    check_row_index,
)


class SparseStore:
    """
    Row-major sparse matrix with 1-based indices.

    Construction:
        SparseStore(nrows, ncols)
        SparseStore.from_entries(header, entries)
        SparseStore.from_scipy(matrix)

    Any stored entry counts as a nonzero, including an explicit zero
    value.
    """

    def __init__(self, nrows: int, ncols: int):
        check_dimensions(nrows, ncols)
        self._nrows = int(nrows)
        self._ncols = int(ncols)
        # slot 0 unused so indices match SMS coordinates
        self._rows: list[dict[int, Any]] = [{} for _ in range(self._nrows + 1)]
        self._row_counts = np.zeros(self._nrows + 1, dtype=np.int64)
        self._col_counts = np.zeros(self._ncols + 1, dtype=np.int64)

    # === Construction ===

    @classmethod
    def from_entries(cls, header: Header, entries: Iterable[Entry]) -> SparseStore:
        """Build a store from a header and (row, col, value) triples."""
        store = cls(header.rows, header.cols)
        for row, col, value in entries:
            store.set(row, col, value)
        return store

    @classmethod
    def from_scipy(cls, matrix) -> SparseStore:
        """
        Build a store from any scipy.sparse matrix (or dense array).

        Explicitly stored zeros in the scipy matrix are kept.
        """
        coo = sp_sparse.coo_matrix(matrix)
        nrows, ncols = coo.shape
        store = cls(nrows, ncols)
        for i, j, v in zip(coo.row, coo.col, coo.data):
            store.set(int(i) + 1, int(j) + 1, v.item())
        return store

    # === Properties ===

    @property
    def nrows(self) -> int:
        return self._nrows

    @property
    def ncols(self) -> int:
        return self._ncols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._nrows, self._ncols)

    @property
    def header(self) -> Header:
        return Header(self._nrows, self._ncols)

    @property
    def nnz(self) -> int:
        """Number of stored entries."""
        return int(self._row_counts.sum())

    @property
    def row_counts(self) -> NDArray[np.int64]:
        """Copy of RowStat, shape (nrows + 1,); index 0 unused."""
        return self._row_counts.copy()

    @property
    def col_counts(self) -> NDArray[np.int64]:
        """Copy of ColStat, shape (ncols + 1,); index 0 unused."""
        return self._col_counts.copy()

    def count_views(self) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
        """Read-only live views of RowStat and ColStat (no copy)."""
        row_view = self._row_counts.view()
        row_view.flags.writeable = False
        col_view = self._col_counts.view()
        col_view.flags.writeable = False
        return row_view, col_view

    def row_count(self, i: int) -> int:
        return int(self._row_counts[i])

    def col_count(self, j: int) -> int:
        return int(self._col_counts[j])

    # === Access ===

    def set(self, row: int, col: int, value: Any) -> bool:
        """
        Store ``value`` at (row, col), overwriting any previous value.

        Returns:
            True if an existing entry was replaced

        Raises:
            RangeError: If the coordinate is outside the matrix
        """
        check_coordinate(row, col, self._nrows, self._ncols)
        slot = self._rows[row]
        replaced = col in slot
        slot[col] = value
        if not replaced:
            self._row_counts[row] += 1
            self._col_counts[col] += 1
        return replaced

    def get(self, row: int, col: int, default: Any = None) -> Any:
        check_coordinate(row, col, self._nrows, self._ncols)
        return self._rows[row].get(col, default)

    def row(self, i: int) -> Mapping[int, Any]:
        """Read-only view of row ``i`` as col -> value, ascending columns."""
        check_row_index(i, self._nrows, 'row')
        return MappingProxyType(dict(sorted(self._rows[i].items())))

    def row_items(self, i: int) -> list[tuple[int, Any]]:
        """(col, value) pairs of row ``i`` in ascending column order."""
        return sorted(self._rows[i].items())

    def entries(self) -> Iterator[Entry]:
        """All entries, ascending row then column."""
        for i in range(1, self._nrows + 1):
            slot = self._rows[i]
            if not slot:
                continue
            for j in sorted(slot):
                yield Entry(i, j, slot[j])

    def __len__(self) -> int:
        return self.nnz

    def __contains__(self, coord) -> bool:
        row, col = coord
        if not (1 <= row <= self._nrows):
            return False
        return col in self._rows[row]

    # === Mutation ===

    def swap_rows(self, i: int, k: int) -> None:
        """Exchange rows ``i`` and ``k`` (slot swap, no per-entry copy)."""
        check_row_index(i, self._nrows, 'i')
        check_row_index(k, self._nrows, 'k')
        if i == k:
            return
        rows = self._rows
        rows[i], rows[k] = rows[k], rows[i]
        counts = self._row_counts
        counts[i], counts[k] = counts[k], counts[i]

    def swap_columns(self, j: int, k: int) -> None:
        """
        Exchange columns ``j`` and ``k`` in every row.

        A row holding only one of the two columns has that entry moved to
        the other column.
        """
        check_col_index(j, self._ncols, 'j')
        check_col_index(k, self._ncols, 'k')
        if j == k:
            return
        for slot in self._rows:
            has_j = j in slot
            has_k = k in slot
            if has_j and has_k:
                slot[j], slot[k] = slot[k], slot[j]
            elif has_j:
                slot[k] = slot.pop(j)
            elif has_k:
                slot[j] = slot.pop(k)
        counts = self._col_counts
        counts[j], counts[k] = counts[k], counts[j]

    # === Consistency ===

    def _recount(self) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
        row_counts = np.zeros(self._nrows + 1, dtype=np.int64)
        col_counts = np.zeros(self._ncols + 1, dtype=np.int64)
        for i in range(1, self._nrows + 1):
            slot = self._rows[i]
            row_counts[i] = len(slot)
            if slot:
                col_counts[np.fromiter(slot.keys(), dtype=np.int64, count=len(slot))] += 1
        return row_counts, col_counts

    def counts_consistent(self) -> bool:
        """Whether RowStat/ColStat match the stored entries."""
        row_counts, col_counts = self._recount()
        return (np.array_equal(row_counts, self._row_counts)
                and np.array_equal(col_counts, self._col_counts))

    def check_counts(self) -> None:
        """
        Raise IntegrityError if RowStat/ColStat drifted from the contents.
        """
        row_counts, col_counts = self._recount()
        bad_rows = np.flatnonzero(row_counts != self._row_counts)
        if bad_rows.size:
            i = int(bad_rows[0])
            raise IntegrityError(
                f"Row count mismatch at row {i}: tracked {self._row_counts[i]}, "
                f"stored {row_counts[i]}"
            )
        bad_cols = np.flatnonzero(col_counts != self._col_counts)
        if bad_cols.size:
            j = int(bad_cols[0])
            raise IntegrityError(
                f"Column count mismatch at column {j}: tracked {self._col_counts[j]}, "
                f"stored {col_counts[j]}"
            )

    # === Transforms ===

    def transpose(self) -> SparseStore:
        """New store holding the transposed matrix."""
        result = SparseStore(self._ncols, self._nrows)
        for i, j, value in self.entries():
            result.set(j, i, value)
        return result

    def copy(self) -> SparseStore:
        result = SparseStore(self._nrows, self._ncols)
        result._rows = [dict(slot) for slot in self._rows]
        result._row_counts = self._row_counts.copy()
        result._col_counts = self._col_counts.copy()
        return result

    def to_scipy(self, dtype=np.float64) -> sp_sparse.csr_matrix:
        """
        Convert to a scipy CSR matrix (0-based).

        Values must be convertible to ``dtype``.
        """
        nnz = self.nnz
        rows = np.empty(nnz, dtype=np.int64)
        cols = np.empty(nnz, dtype=np.int64)
        data = np.empty(nnz, dtype=dtype)
        for k, (i, j, value) in enumerate(self.entries()):
            rows[k] = i - 1
            cols[k] = j - 1
            data[k] = value
        return sp_sparse.csr_matrix((data, (rows, cols)), shape=self.shape)

    def __repr__(self) -> str:
        return f"SparseStore(nrows={self._nrows}, ncols={self._ncols}, nnz={self.nnz})"
