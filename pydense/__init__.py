"""
pydense: generic dense linear algebra kernels for Python.

Small-to-moderate dense matrices and fixed-size tensors over real,
complex or generic (Scalar-conforming) element types, with full-pivoting
Gauss-Jordan inversion, multi right-hand-side solve, determinants and
norms.

Submodules:
    matrix: DenseMatrix
    tensor: FixedRankTensor
    core: exceptions, validation, tolerances and numeric kernels
"""

__version__ = "0.1.0"

from pydense.core.compute.tolerances import EXACT, FP16, FP32, FP64, PivotTolerance
from pydense.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    NotSquareError,
    NumericalError,
    PyDenseError,
    SingularMatrixError,
    ValidationError,
)
from pydense.core.protocols import Scalar
from pydense.matrix import DenseMatrix
from pydense.tensor import FixedRankTensor

__all__ = [
    "__version__",
    # Types
    "DenseMatrix",
    "FixedRankTensor",
    "Scalar",
    # Tolerances
    "PivotTolerance",
    "FP64",
    "FP32",
    "FP16",
    "EXACT",
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
