"""
Determinant of a square matrix.

- n = 0: 1 (empty product)
- n = 1..3: closed-form expansion
- n > 3: full-pivoting elimination on a scratch copy; the determinant is
  the product of the pivots times the sign of the pivot permutation.
  A pivot at or below the tolerance threshold makes the determinant zero.

The input is never modified.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydense.core.compute.linalg.gauss_jordan import eliminate
from pydense.core.compute.linalg.pivoting import (
    max_magnitude,
    pivot_permutation,
    permutation_sign,
)
from pydense.core.compute.tolerances import PivotTolerance, select_pivot_tolerance
from pydense.core.validation import check_2d, check_array, check_finite, check_square


def closed_form_determinant(A: NDArray[Any]) -> Any:
    """
    Determinant of a 1x1, 2x2 or 3x3 matrix by direct expansion.

    Raises:
        ValueError: If A is larger than 3x3
    """
    n = A.shape[0]
    if n == 1:
        return A[0, 0]
    if n == 2:
        return A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0]
    if n == 3:
        return (
            A[0, 0] * A[1, 1] * A[2, 2]
            - A[0, 0] * A[1, 2] * A[2, 1]
            - A[0, 1] * A[1, 0] * A[2, 2]
            + A[0, 1] * A[1, 2] * A[2, 0]
            + A[0, 2] * A[1, 0] * A[2, 1]
            - A[0, 2] * A[1, 1] * A[2, 0]
        )
    raise ValueError(f"closed form only available up to 3x3, got {n}x{n}")


def pivoted_determinant(
    A: NDArray[Any],
    tolerance: PivotTolerance | None = None,
) -> Any:
    """Determinant by full-pivoting elimination of a scratch copy of A."""
    tol = tolerance if tolerance is not None else select_pivot_tolerance(A.dtype)
    work = A.copy()
    sweep = eliminate(work, (), tol.threshold(max_magnitude(A)))
    if not sweep.complete:
        return np.zeros((), dtype=A.dtype)[()]

    rows = np.asarray(sweep.rows, dtype=np.intp)
    cols = np.asarray(sweep.cols, dtype=np.intp)
    sign = permutation_sign(pivot_permutation(rows, cols))
    return np.prod(np.asarray(sweep.pivots, dtype=A.dtype)) * sign


def determinant(
    A: ArrayLike,
    tolerance: PivotTolerance | None = None,
    name: str = 'A',
) -> Any:
    """
    Compute det(A) without modifying A.

    Args:
        A: Square matrix (floating, complex or Scalar-conforming objects)
        tolerance: Pivot tolerance tier for n > 3; chosen from the dtype if None
        name: Parameter name for error messages

    Returns:
        Scalar of the matrix element type (complex for complex input)

    Raises:
        DimensionError: If A is not 2D
        NotSquareError: If A is not square
    """
    values = check_array(A, name)
    check_2d(values, name)
    check_square(values, name)
    check_finite(values, name)

    n = values.shape[0]
    if n == 0:
        return np.ones((), dtype=values.dtype)[()]
    if n <= 3:
        return closed_form_determinant(values)
    return pivoted_determinant(values, tolerance)
