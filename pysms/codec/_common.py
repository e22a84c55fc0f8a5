"""
Shared types for the SMS exchange format.

An SMS stream is a header line ``<rows> <cols> M``, any number of
``<row> <col> <value>`` entry lines, and the terminator ``0 0 0``.
"""

from __future__ import annotations

import io
import re
from dataclasses import dataclass
from typing import Any, NamedTuple


HEADER_MARKER = 'M'
TERMINATOR_LINE = '0 0 0'

_INTEGER = re.compile(r'[+-]?[0-9]+\Z')


@dataclass(frozen=True)
class Header:
    """Matrix dimensions declared at the top of an SMS stream."""
    rows: int
    cols: int

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def __str__(self) -> str:
        return f"{self.rows} {self.cols} {HEADER_MARKER}"


class Entry(NamedTuple):
    """One ``(row, col, value)`` triple, 1-based coordinates."""
    row: int
    col: int
    value: Any


def is_terminator(row: int, col: int) -> bool:
    """
    True for the end-of-stream coordinates ``(0, 0)``.

    Only coordinates are tested, so opaque (non-numeric) values end the
    stream exactly like numeric ones.
    """
    return row == 0 and col == 0


def parse_int(token: str) -> int:
    """Parse a plain decimal integer token; raise ValueError otherwise."""
    if not _INTEGER.match(token):
        raise ValueError(f"not an integer: {token!r}")
    return int(token)


def is_binary_stream(stream) -> bool:
    """Whether ``stream`` expects bytes rather than str."""
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return 'b' in getattr(stream, 'mode', '')
