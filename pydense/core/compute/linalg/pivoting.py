"""
Pivot selection and permutation bookkeeping.

Full pivoting picks, at every elimination step, the entry of largest
magnitude among the rows and columns not yet used as pivots. Rows and
columns are never swapped physically; instead the kernels record which
(row, column) pair was used at each step and un-permute once at the end.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from typing import Any


def magnitudes(values: NDArray[Any]) -> NDArray[Any]:
    """
    Element-wise magnitude: absolute value for real, modulus for complex.

    Generic (object) arrays call abs() on every element, so the result keeps
    the element's own magnitude type.
    """
    return np.abs(values)


def max_magnitude(values: NDArray[Any]) -> Any:
    """Largest magnitude in an array, 0 for an empty array."""
    if values.size == 0:
        return 0
    return magnitudes(values).max()


def select_pivot(
    values: NDArray[Any],
    free_rows: NDArray[np.intp],
    free_cols: NDArray[np.intp],
) -> tuple[int, int, Any]:
    """
    Find the largest-magnitude entry of the unreduced sub-block.

    Ties are broken by the first occurrence in row-major order of the
    sub-block, so the choice is deterministic.

    Args:
        values: Square working matrix
        free_rows: Rows not yet used as pivot rows (ascending)
        free_cols: Columns not yet used as pivot columns (ascending)

    Returns:
        (row, col, magnitude) of the selected pivot in matrix coordinates
    """
    block = magnitudes(values[np.ix_(free_rows, free_cols)])
    flat = int(np.argmax(block))
    i, j = divmod(flat, len(free_cols))
    return int(free_rows[i]), int(free_cols[j]), block[i, j]


def permutation_sign(perm: NDArray[np.intp]) -> int:
    """
    Sign of a permutation given as an index array.

    Each cycle of length L contributes L - 1 transpositions.

    Args:
        perm: Array with perm[i] the image of i

    Returns:
        +1 for an even permutation, -1 for an odd one
    """
    n = len(perm)
    seen = np.zeros(n, dtype=bool)
    sign = 1
    for start in range(n):
        if seen[start]:
            continue
        length = 0
        i = start
        while not seen[i]:
            seen[i] = True
            i = int(perm[i])
            length += 1
        if length % 2 == 0:
            sign = -sign
    return sign


def pivot_permutation(
    pivot_rows: NDArray[np.intp],
    pivot_cols: NDArray[np.intp],
) -> NDArray[np.intp]:
    """
    Permutation mapping each pivot row to its pivot column.

    After full elimination the reduced matrix is the permutation matrix P
    with P[pivot_rows[k], pivot_cols[k]] = 1; this returns perm with
    perm[pivot_rows[k]] = pivot_cols[k].
    """
    perm = np.empty(len(pivot_rows), dtype=np.intp)
    perm[pivot_rows] = pivot_cols
    return perm
