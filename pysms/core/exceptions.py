"""
Exception hierarchy for PySMS.

All exceptions inherit from PySMSError to allow catching any
library-specific error. The CLI converts any PySMSError into a one-line
message on stderr and exit status 1.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages name the offending line, coordinate or option
    - Never catch and re-raise with less information
"""


class PySMSError(Exception):
    """Base exception for all PySMS errors."""
    pass


class FormatError(PySMSError):
    """
    Input does not follow the SMS exchange format.

    Raised for a missing or garbled header marker, a malformed entry line,
    or a stream that ends before the terminator.

    Attributes:
        line_number: 1-based line number in the input, if known
        line: Offending line text, if available
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
    ):
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class IntegrityError(PySMSError):
    """
    Matrix data is internally inconsistent.

    Base class for faults in the stored matrix itself, as opposed to
    faults in the text that described it.
    """
    pass


class RangeError(IntegrityError):
    """
    A coordinate lies outside the declared matrix bounds.

    Attributes:
        row: Offending row index
        col: Offending column index
        nrows: Declared number of rows
        ncols: Declared number of columns
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        col: int | None = None,
        nrows: int | None = None,
        ncols: int | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.nrows = nrows
        self.ncols = ncols


class ConfigurationError(PySMSError):
    """
    Invalid configuration value.

    Raised for degenerate reordering weights, unknown options and
    invalid output formats, always before any stream is touched.

    Attributes:
        option: Name of the offending option, if applicable
    """

    def __init__(self, message: str, option: str | None = None):
        super().__init__(message)
        self.option = option


class StreamIOError(PySMSError):
    """
    Reading from or writing to an underlying stream failed.

    Attributes:
        reason: System error text (``strerror``) of the original failure
        errno: System error number, if available
        path: File name involved, if known
    """

    def __init__(
        self,
        message: str,
        reason: str | None = None,
        errno: int | None = None,
        path: str | None = None,
    ):
        super().__init__(message)
        self.reason = reason
        self.errno = errno
        self.path = path

    @classmethod
    def from_os_error(cls, action: str, exc: OSError, path: str | None = None) -> 'StreamIOError':
        """Wrap an OSError, keeping its system reason."""
        reason = exc.strerror or str(exc)
        path = path if path is not None else exc.filename
        where = f" '{path}'" if path else ""
        return cls(
            f"Cannot {action}{where}: {reason}",
            reason=reason,
            errno=exc.errno,
            path=path,
        )
