"""
Writer for SMS matrix streams.

Usage:
    with SMSWriter(sys.stdout) as writer:
        writer.open(nrows, ncols)
        for row, col, value in entries:
            writer.write(row, col, value)
    # terminator written on successful exit only

Entry order is up to the caller; canonical writers emit ascending row,
then column.
"""

from __future__ import annotations

from typing import Any, IO

from pysms.codec._common import Header, TERMINATOR_LINE, is_binary_stream
from pysms.codec._values import ValueFormat
from pysms.core.exceptions import FormatError, StreamIOError
from pysms.core.validation import check_coordinate, check_dimensions


class SMSWriter:
    """
    Emit an SMS stream: header, entry lines, terminator.

    Parameters
    ----------
    stream : binary or text file object
        Writable stream. Not closed by the writer.
    value_format : ValueFormat, optional
        How values are rendered. Default: exact shortest form.
    name : str, optional
        Name used in error messages (defaults to ``stream.name``).
    """

    def __init__(
        self,
        stream: IO[Any],
        value_format: ValueFormat | None = None,
        *,
        name: str | None = None,
    ):
        self._stream = stream
        self._format = value_format if value_format is not None else ValueFormat()
        self._binary = is_binary_stream(stream)
        if name is None:
            name = getattr(stream, 'name', None)
        self._name = name if isinstance(name, str) else None
        self._header: Header | None = None
        self._closed = False
        self._entries_written = 0

    @property
    def header(self) -> Header | None:
        return self._header

    @property
    def entries_written(self) -> int:
        return self._entries_written

    @property
    def closed(self) -> bool:
        """True once the terminator has been written."""
        return self._closed

    def open(self, rows: int, cols: int) -> Header:
        """Write the header line ``<rows> <cols> M``."""
        if self._header is not None:
            raise FormatError("SMS header already written to this stream")
        check_dimensions(rows, cols)
        header = Header(int(rows), int(cols))
        self._emit(str(header))
        self._header = header
        return header

    def write(self, row: int, col: int, value: Any) -> None:
        """Write one entry line."""
        header = self._require_open()
        check_coordinate(row, col, header.rows, header.cols)
        self._emit(f"{row} {col} {self._format.format(value)}")
        self._entries_written += 1

    def close(self) -> None:
        """Write the ``0 0 0`` terminator and flush."""
        self._require_open()
        self._emit(TERMINATOR_LINE)
        self._closed = True
        try:
            self._stream.flush()
        except OSError as e:
            raise StreamIOError.from_os_error('flush', e, self._name) from e

    def __enter__(self) -> SMSWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # an aborted stream must not end with a terminator
        if exc_type is None and self._header is not None and not self._closed:
            self.close()

    def _require_open(self) -> Header:
        if self._header is None:
            raise FormatError("SMS header not written yet; call open() first")
        if self._closed:
            raise FormatError("SMS stream already terminated")
        return self._header

    def _emit(self, line: str) -> None:
        data = line + "\n"
        try:
            if self._binary:
                self._stream.write(data.encode('ascii'))
            else:
                self._stream.write(data)
        except OSError as e:
            raise StreamIOError.from_os_error('write to', e, self._name) from e

    def __repr__(self) -> str:
        dims = f"{self._header.rows}x{self._header.cols}" if self._header else "unopened"
        return f"SMSWriter({dims}, entries={self._entries_written})"
