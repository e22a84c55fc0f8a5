"""
Core infrastructure for PySMS.

Shared abstractions used by the codec, the sparse store and the
reordering engine.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from pysms.core.result import Result
from pysms.core.exceptions import (
    PySMSError,
    FormatError,
    IntegrityError,
    RangeError,
    ConfigurationError,
    StreamIOError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PySMSError",
    "FormatError",
    "IntegrityError",
    "RangeError",
    "ConfigurationError",
    "StreamIOError",
]
