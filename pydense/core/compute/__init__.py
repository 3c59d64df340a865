"""
Shared compute infrastructure for pydense.

This module provides precision utilities, tolerance tiers, timing and the
dense linear algebra kernels that DenseMatrix and FixedRankTensor build on.

IMPORTANT: This is NOT where the user-facing types live. Those go in
matrix/ and tensor/. This module contains shared NUMERIC infrastructure.

Submodules:
    precision: Numerical precision constants and utilities
    tolerances: Pivot tolerance tiers
    timing: Execution timing utilities
    linalg: Elimination, determinant and norm kernels
"""

from pydense.core.compute.timing import Timer
from pydense.core.compute.tolerances import (
    EXACT,
    FP16,
    FP32,
    FP64,
    PivotTolerance,
    select_pivot_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "PivotTolerance",
    "FP64",
    "FP32",
    "FP16",
    "EXACT",
    "select_pivot_tolerance",
]
