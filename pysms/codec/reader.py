"""
Single-pass reader for SMS matrix streams.

Usage:
    with open(path, 'rb') as fh:
        reader = SMSReader(fh)
        header = reader.open()
        for entry in reader:
            ...

The reader is its own iterator: entries are parsed lazily, one line at a
time, and iteration ends at the ``0 0 0`` terminator. It cannot be
restarted. The stream stays owned by whoever opened it.
"""

from __future__ import annotations

from typing import Any, Callable, IO, Iterator

from pysms.codec._common import (
    HEADER_MARKER,
    Entry,
    Header,
    is_terminator,
    parse_int,
)
from pysms.codec._values import parse_value
from pysms.core.exceptions import FormatError, RangeError, StreamIOError


class SMSReader:
    """
    Parse an SMS stream into a Header and a lazy sequence of Entry values.

    Parameters
    ----------
    stream : binary or text file object
        Readable stream positioned at the header.
    value_type : callable
        Converts a value token. Defaults to :func:`parse_value` (int or
        float); pass :func:`parse_token` to keep values opaque. A
        ValueError or TypeError from the converter is a FormatError.
    name : str, optional
        Name used in error messages (defaults to ``stream.name``).
    """

    def __init__(
        self,
        stream: IO[Any],
        value_type: Callable[[str], Any] = parse_value,
        *,
        name: str | None = None,
    ):
        self._stream = stream
        self._value_type = value_type
        if name is None:
            name = getattr(stream, 'name', None)
        self._name = name if isinstance(name, str) else None
        self._header: Header | None = None
        self._line_number = 0
        self._finished = False

    # === Properties ===

    @property
    def header(self) -> Header | None:
        """Header parsed by open(), or None before that."""
        return self._header

    @property
    def rows(self) -> int:
        return self._require_header().rows

    @property
    def columns(self) -> int:
        return self._require_header().cols

    @property
    def line_number(self) -> int:
        """Number of lines consumed so far."""
        return self._line_number

    @property
    def finished(self) -> bool:
        """True once the terminator was read (or reading failed at EOF)."""
        return self._finished

    # === Reading ===

    def open(self) -> Header:
        """
        Parse the header line ``<rows> <cols> M``.

        Raises:
            FormatError: If the header is missing, malformed, or was
                already read
        """
        if self._header is not None:
            raise FormatError("SMS header already read from this stream")

        found = self._next_tokens()
        if found is None:
            raise FormatError(
                f"Empty input{self._where()}: missing SMS header",
                line_number=self._line_number,
            )
        tokens, line = found
        if len(tokens) != 3 or tokens[2] != HEADER_MARKER:
            raise FormatError(
                f"Malformed SMS header{self._where()}: "
                f"expected '<rows> <cols> {HEADER_MARKER}', got {line.strip()!r}",
                line_number=self._line_number, line=line,
            )
        try:
            rows = parse_int(tokens[0])
            cols = parse_int(tokens[1])
        except ValueError as e:
            raise FormatError(
                f"Malformed SMS header{self._where()}: {e}",
                line_number=self._line_number, line=line,
            ) from e
        if rows < 0 or cols < 0:
            raise FormatError(
                f"Malformed SMS header{self._where()}: negative dimensions {rows} x {cols}",
                line_number=self._line_number, line=line,
            )

        self._header = Header(rows, cols)
        return self._header

    def __iter__(self) -> Iterator[Entry]:
        return self

    def __next__(self) -> Entry:
        header = self._require_header()
        if self._finished:
            raise StopIteration

        found = self._next_tokens()
        if found is None:
            self._finished = True
            raise FormatError(
                f"Unexpected end of input{self._where()}: missing '0 0 0' terminator",
                line_number=self._line_number,
            )
        tokens, line = found
        if len(tokens) != 3:
            raise FormatError(
                f"Malformed entry{self._where()}: expected '<row> <col> <value>', "
                f"got {line.strip()!r}",
                line_number=self._line_number, line=line,
            )
        try:
            row = parse_int(tokens[0])
            col = parse_int(tokens[1])
        except ValueError as e:
            raise FormatError(
                f"Malformed entry{self._where()}: {e}",
                line_number=self._line_number, line=line,
            ) from e

        if is_terminator(row, col):
            self._finished = True
            raise StopIteration

        if not (1 <= row <= header.rows and 1 <= col <= header.cols):
            raise RangeError(
                f"Entry ({row}, {col}){self._where()} outside matrix bounds "
                f"{header.rows} x {header.cols}",
                row=row, col=col, nrows=header.rows, ncols=header.cols,
            )

        try:
            value = self._value_type(tokens[2])
        except (ValueError, TypeError) as e:
            raise FormatError(
                f"Malformed entry value{self._where()}: {tokens[2]!r}",
                line_number=self._line_number, line=line,
            ) from e
        return Entry(row, col, value)

    # === Context manager ===

    def __enter__(self) -> SMSReader:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._finished = True

    # === Internals ===

    def _require_header(self) -> Header:
        if self._header is None:
            raise FormatError("SMS header not read yet; call open() first")
        return self._header

    def _where(self) -> str:
        loc = f" at line {self._line_number}"
        if self._name:
            return f" in '{self._name}'{loc}"
        return loc

    def _readline(self) -> str | None:
        try:
            raw = self._stream.readline()
        except OSError as e:
            raise StreamIOError.from_os_error('read from', e, self._name) from e
        if not raw:
            return None
        self._line_number += 1
        if isinstance(raw, bytes):
            try:
                return raw.decode('ascii')
            except UnicodeDecodeError as e:
                raise FormatError(
                    f"Non-ASCII data{self._where()}",
                    line_number=self._line_number,
                ) from e
        return raw

    def _next_tokens(self) -> tuple[list[str], str] | None:
        """Next non-blank line, split into tokens; None at end of input."""
        while True:
            line = self._readline()
            if line is None:
                return None
            tokens = line.split()
            if tokens:
                return tokens, line

    def __repr__(self) -> str:
        dims = f"{self._header.rows}x{self._header.cols}" if self._header else "unopened"
        return f"SMSReader({dims}, line={self._line_number})"
