"""
Core infrastructure for pydense.

This module provides shared abstractions, utilities, and numeric kernels
used by the user-facing DenseMatrix and FixedRankTensor types.

Key components:
    protocols: Scalar protocol (the scalar contract)
    domains: Scalar domain constants
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerances, timing, linear algebra kernels
"""

from pydense.core.protocols import Scalar
from pydense.core.result import Result
from pydense.core.exceptions import (
    PyDenseError,
    ValidationError,
    InvalidDimensionError,
    IndexOutOfRangeError,
    DimensionError,
    DimensionMismatchError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Scalar",
    # Result
    "Result",
    # Exceptions
    "PyDenseError",
    "ValidationError",
    "InvalidDimensionError",
    "IndexOutOfRangeError",
    "DimensionError",
    "DimensionMismatchError",
    "NotSquareError",
    "NumericalError",
    "SingularMatrixError",
]
