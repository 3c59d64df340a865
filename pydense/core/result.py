"""
Generic result container for pydense kernels.

The Result class provides a standardized envelope for kernels that report
more than their in-place effect (elimination pivots, permutation parity).
This enables shared tooling for timing, diagnostics and warnings while
allowing each kernel to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (tolerance tier, pivot range)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for kernel computations.

    Type Parameters:
        P: The kernel-specific parameter payload type

    Attributes:
        params: Kernel-specific payload (pivot sequence, parity, ...)
        info: Structured metadata (method, tolerance, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        method: Identifier of the kernel that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=EliminationParams(...),
        ...     info={'n': 4, 'tolerance': 'fp64'},
        ...     timing={'total_seconds': 1e-4, 'elimination': 8e-5},
        ...     method='gauss_jordan',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    method: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
