"""
Generic result container for PySMS computations.

Result is the standard envelope returned by the reordering pipeline and
the summary helpers. Domains define their own parameter payload.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (steps, stop reason, dimensions)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a result can't drift from what was computed
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (permutations, counts, ...)
        info: Structured metadata
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the algorithm that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=ReorderParams(...),
        ...     info={'steps': 3, 'stopped_early': False},
        ...     timing={'total_seconds': 0.01, 'scan': 0.008},
        ...     backend_name='greedy_badness',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
