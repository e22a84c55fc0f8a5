"""
Transpose an SMS matrix, optionally only when it has a given shape.
"""

from __future__ import annotations

from typing import Literal

from pysms.codec.reader import SMSReader
from pysms.codec.writer import SMSWriter
from pysms.core.exceptions import ConfigurationError
from pysms.sparse.io import read_matrix, write_matrix
from pysms.sparse.store import SparseStore


OnlyIf = Literal['tall', 'wide']


def wants_transpose(nrows: int, ncols: int, only_if: OnlyIf | None = None) -> bool:
    """
    Decide whether a ``nrows x ncols`` input is transposed.

    ``only_if='tall'`` transposes only if the output has more rows than
    columns; ``only_if='wide'`` only if it has more columns than rows.
    Square matrices are transposed under either condition.
    """
    if only_if is None:
        return True
    if only_if == 'tall':
        return not nrows > ncols
    if only_if == 'wide':
        return not ncols > nrows
    raise ConfigurationError(
        f"Unknown transpose condition {only_if!r}; expected 'tall' or 'wide'",
        option='only_if',
    )


def transpose_matrix(reader: SMSReader, writer: SMSWriter,
                     only_if: OnlyIf | None = None) -> SparseStore:
    """
    Read a matrix from ``reader`` and write its transpose (or an exact
    copy, when ``only_if`` is not met) to ``writer``.

    Returns:
        The store that was written
    """
    store = read_matrix(reader)
    if wants_transpose(store.nrows, store.ncols, only_if):
        store = store.transpose()
    write_matrix(store, writer)
    return store
