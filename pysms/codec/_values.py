"""
Parsing and formatting of entry values.

Numeric values round-trip exactly by default: integers are written as
integers, floats in shortest round-trip form without a trailing ``.0``.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Literal

from pysms.codec._common import parse_int
from pysms.core.exceptions import ConfigurationError


Notation = Literal['general', 'fixed', 'scientific']

_NOTATIONS = ('general', 'fixed', 'scientific')
_DEFAULT_PRECISION = 6


def parse_value(token: str) -> int | float:
    """
    Parse a numeric entry value.

    Integer literals become ``int``, anything ``float()`` accepts becomes
    ``float``.

    Raises:
        ValueError: If the token is not numeric
    """
    try:
        return parse_int(token)
    except ValueError:
        return float(token)


def parse_token(token: str) -> str:
    """Keep the entry value as an opaque token."""
    return token


@dataclass(frozen=True)
class ValueFormat:
    """
    How entry values are written.

    Attributes:
        notation: 'general' (shortest form, or ``g`` with a precision),
            'fixed' (``f``) or 'scientific' (``e``)
        precision: Significant digits ('general') or digits after the
            decimal point ('fixed', 'scientific'); None for the default
    """
    notation: Notation = 'general'
    precision: int | None = None

    def __post_init__(self):
        if self.notation not in _NOTATIONS:
            raise ConfigurationError(
                f"Unknown notation {self.notation!r}; expected one of {_NOTATIONS}",
                option='notation',
            )
        if self.precision is not None:
            if isinstance(self.precision, bool) or not isinstance(self.precision, int):
                raise ConfigurationError(
                    f"precision: expected integer, got {self.precision!r}",
                    option='precision',
                )
            if self.precision < 0:
                raise ConfigurationError(
                    f"precision: must be non-negative, got {self.precision}",
                    option='precision',
                )

    def format(self, value: Any) -> str:
        """Render one value as an SMS value token."""
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            return str(value)

        if self.notation == 'general' and self.precision is None:
            if isinstance(value, numbers.Integral):
                return str(int(value))
            return _shortest(float(value))

        x = float(value)
        if self.notation == 'general':
            return f"{x:.{self.precision}g}"
        precision = _DEFAULT_PRECISION if self.precision is None else self.precision
        if self.notation == 'fixed':
            return f"{x:.{precision}f}"
        return f"{x:.{precision}e}"


def _shortest(x: float) -> str:
    if not math.isfinite(x):
        return repr(x)
    text = repr(x)
    if text.endswith('.0'):
        return text[:-2]
    return text


def format_value(value: Any) -> str:
    """Format with the default ValueFormat."""
    return _DEFAULT_FORMAT.format(value)


_DEFAULT_FORMAT = ValueFormat()
