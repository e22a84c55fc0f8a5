"""
Input validation utilities for PySMS.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently clamping or
dropping data.

Design principles:
    - No silent coercion of out-of-range coordinates
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pysms.core.exceptions import ConfigurationError, RangeError


def check_dimensions(nrows: int, ncols: int) -> None:
    """
    Verify matrix dimensions are non-negative integers.

    Args:
        nrows: Number of rows
        ncols: Number of columns

    Raises:
        RangeError: If either dimension is negative or not an integer
    """
    for name, value in (('nrows', nrows), ('ncols', ncols)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise RangeError(f"{name}: expected integer, got {type(value).__name__}")
        if value < 0:
            raise RangeError(f"{name}: must be non-negative, got {value}")


def check_coordinate(row: int, col: int, nrows: int, ncols: int) -> None:
    """
    Verify a 1-based coordinate lies inside the matrix bounds.

    Args:
        row: 1-based row index
        col: 1-based column index
        nrows: Number of rows
        ncols: Number of columns

    Raises:
        RangeError: If 1 <= row <= nrows and 1 <= col <= ncols does not hold
    """
    if not (1 <= row <= nrows and 1 <= col <= ncols):
        raise RangeError(
            f"Entry ({row}, {col}) outside matrix bounds {nrows} x {ncols}",
            row=row, col=col, nrows=nrows, ncols=ncols,
        )


def check_row_index(i: int, nrows: int, name: str) -> None:
    """
    Verify a 1-based row index.

    Raises:
        RangeError: If i is not in 1..nrows
    """
    if not 1 <= i <= nrows:
        raise RangeError(f"{name}: row {i} not in 1..{nrows}", row=i, nrows=nrows)


def check_col_index(j: int, ncols: int, name: str) -> None:
    """
    Verify a 1-based column index.

    Raises:
        RangeError: If j is not in 1..ncols
    """
    if not 1 <= j <= ncols:
        raise RangeError(f"{name}: column {j} not in 1..{ncols}", col=j, ncols=ncols)


def check_weights(weights: Sequence[float], names: Sequence[str]) -> NDArray[np.floating[Any]]:
    """
    Validate a vector of criterion weights.

    Args:
        weights: Weight values
        names: Option names for error messages (must match weights)

    Returns:
        numpy.ndarray of float64 weights

    Raises:
        ConfigurationError: If a weight is non-numeric or non-finite, or
            all weights are zero
    """
    if len(weights) != len(names):
        raise ValueError(
            f"Number of weights ({len(weights)}) must match number of names ({len(names)})"
        )

    values = []
    for name, w in zip(names, weights):
        try:
            values.append(float(w))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"{name}: not a number: {w!r}", option=name) from e
    arr = np.asarray(values, dtype=np.float64)

    bad = ~np.isfinite(arr)
    if np.any(bad):
        name = names[int(np.flatnonzero(bad)[0])]
        raise ConfigurationError(f"{name}: weight must be finite", option=name)

    if np.sum(np.abs(arr)) == 0.0:
        raise ConfigurationError(
            "All reordering weights are zero; at least one must be nonzero"
        )
    return arr
