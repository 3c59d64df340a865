"""
Dense matrix module.

Public API:
    DenseMatrix    - runtime-sized row-major matrix with in-place
                     Gauss-Jordan inversion/solve, determinant and norms
"""

from pydense.matrix.dense import DenseMatrix

__all__ = [
    "DenseMatrix",
]
