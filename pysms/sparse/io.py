"""
Move whole matrices between the codec and a SparseStore.

read_matrix drains a reader completely; write_matrix emits the store in
canonical order. Nothing is interleaved: a store is fully built before
it is handed on.
"""

from __future__ import annotations

import warnings

from pysms.codec.reader import SMSReader
from pysms.codec.writer import SMSWriter
from pysms.sparse.store import SparseStore


def drain_reader(reader: SMSReader) -> tuple[SparseStore, int]:
    """
    Read every entry of ``reader`` into a new store.

    Opens the reader first if its header has not been read.

    Returns:
        (store, number of entries that overwrote an earlier one)
    """
    header = reader.header if reader.header is not None else reader.open()
    store = SparseStore(header.rows, header.cols)
    n_replaced = 0
    for row, col, value in reader:
        if store.set(row, col, value):
            n_replaced += 1
    return store, n_replaced


def read_matrix(reader: SMSReader) -> SparseStore:
    """
    Drain ``reader`` into a new SparseStore.

    Later entries for the same coordinate overwrite earlier ones; a
    UserWarning reports how many were overwritten.

    Raises:
        FormatError: Malformed header, entry or missing terminator
        RangeError: Coordinate outside the declared dimensions
        StreamIOError: Underlying read failure
    """
    store, n_replaced = drain_reader(reader)
    if n_replaced:
        warnings.warn(
            f"{n_replaced} duplicate entries overwritten (last value kept)",
            UserWarning,
            stacklevel=2,
        )
    return store


def write_matrix(store: SparseStore, writer: SMSWriter) -> int:
    """
    Write ``store`` to ``writer``: header, entries by ascending row then
    column, terminator.

    Returns:
        Number of entry lines written
    """
    writer.open(store.nrows, store.ncols)
    count = 0
    for row, col, value in store.entries():
        writer.write(row, col, value)
        count += 1
    writer.close()
    return count
