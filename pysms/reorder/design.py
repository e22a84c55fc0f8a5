"""
ReorderWeights: configuration of the row-reordering heuristic.

Five criteria are combined into a badness score; each gets a weight.
Weights are normalized by the sum of their absolute values before use.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

import numpy as np
from numpy.typing import NDArray

from pysms.core.exceptions import ConfigurationError
from pysms.core.validation import check_weights


WEIGHT_NAMES = ('a', 'b', 'c', 'd', 'e')
OPTION_NAMES = tuple(f'weight-{name}' for name in WEIGHT_NAMES)


@dataclass(frozen=True)
class ReorderWeights:
    """
    Criterion weights for the reordering heuristic.

    Attributes:
        a: Row fill, RowStat relative to the largest row
        b: Share of the row's entries left of the cursor
        c: Share of the row's entries at or right of the cursor
        d: Share of the row's entries in columns not yet seen
        e: Closeness of the nearest non-pivot entry right of the cursor
    """
    a: float = 4.5
    b: float = 2.0
    c: float = 1.0
    d: float = 2.0
    e: float = 0.5

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> ReorderWeights:
        """
        Build weights from a configuration mapping.

        Recognized keys are ``weight-a`` .. ``weight-e`` (``weight_a``
        spellings are accepted too); missing keys keep their default.

        Raises:
            ConfigurationError: Unknown key or non-numeric value
        """
        values: dict[str, float] = {}
        for key, raw in options.items():
            name = key.replace('_', '-')
            if name not in OPTION_NAMES:
                raise ConfigurationError(
                    f"Unknown option {key!r}; expected one of {OPTION_NAMES}",
                    option=key,
                )
            try:
                values[name[-1]] = float(raw)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(
                    f"{name}: not a number: {raw!r}", option=name,
                ) from e
        return cls(**values)

    def as_array(self) -> NDArray[np.floating[Any]]:
        """Weights as a float64 vector (a, b, c, d, e)."""
        return np.array([getattr(self, f.name) for f in fields(self)], dtype=np.float64)

    @property
    def total(self) -> float:
        """Sum of absolute weights."""
        return float(np.sum(np.abs(self.as_array())))

    def normalized(self) -> ReorderWeights:
        """
        Divide every weight by the sum of absolute weights.

        Raises:
            ConfigurationError: If all weights are zero or any is not finite
        """
        arr = check_weights(self.as_array().tolist(), OPTION_NAMES)
        arr = arr / np.sum(np.abs(arr))
        return ReorderWeights(*(float(w) for w in arr))
