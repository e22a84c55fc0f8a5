"""
SMS exchange-format codec.

Public API:
    SMSReader   - lazy, single-pass parser (header + entries + terminator)
    SMSWriter   - header / entry / terminator emitter
    Header      - declared matrix dimensions
    Entry       - (row, col, value) triple
    ValueFormat - output notation and precision for values
"""

from pysms.codec._common import Header, Entry, is_terminator
from pysms.codec._values import ValueFormat, parse_value, parse_token, format_value
from pysms.codec.reader import SMSReader
from pysms.codec.writer import SMSWriter

__all__ = [
    "SMSReader",
    "SMSWriter",
    "Header",
    "Entry",
    "ValueFormat",
    "is_terminator",
    "parse_value",
    "parse_token",
    "format_value",
]
