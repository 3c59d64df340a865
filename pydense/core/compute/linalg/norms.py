"""
Matrix and vector norms.

All norms work on magnitudes (absolute value for real, modulus for
complex, abs() for generic scalars) and return a value of the magnitude
type. Empty inputs have norm zero.

    l1:        max_j sum_i |a_ij|   (induced 1-norm; plain sum for vectors)
    linfty:    max_i sum_j |a_ij|   (induced inf-norm; max |a_i| for vectors)
    frobenius: sqrt(sum_ij |a_ij|^2)
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydense.core.compute.linalg.pivoting import magnitudes
from pydense.core.exceptions import DimensionError
from pydense.core.validation import check_array


def _as_operand(values: ArrayLike, name: str) -> NDArray[Any]:
    array = check_array(values, name)
    if array.ndim not in (1, 2):
        raise DimensionError(
            f"{name}: expected 1D or 2D array, got {array.ndim}D with shape {array.shape}"
        )
    return array


def _zero_magnitude(dtype: np.dtype) -> Any:
    return np.abs(np.zeros(1, dtype=dtype))[0]


def l1_norm(values: ArrayLike, name: str = 'A') -> Any:
    """
    Induced 1-norm: the largest column sum of magnitudes.

    For a 1D array this is the sum of magnitudes.
    """
    array = _as_operand(values, name)
    if array.size == 0:
        return _zero_magnitude(array.dtype)
    column_sums = magnitudes(array).sum(axis=0)
    if array.ndim == 1:
        return column_sums
    return column_sums.max()


def linfty_norm(values: ArrayLike, name: str = 'A') -> Any:
    """
    Induced infinity-norm: the largest row sum of magnitudes.

    For a 1D array this is the largest magnitude.
    """
    array = _as_operand(values, name)
    if array.size == 0:
        return _zero_magnitude(array.dtype)
    if array.ndim == 1:
        return magnitudes(array).max()
    return magnitudes(array).sum(axis=1).max()


def frobenius_norm_square(values: ArrayLike, name: str = 'A') -> Any:
    """Sum of squared magnitudes."""
    array = _as_operand(values, name)
    if array.size == 0:
        return _zero_magnitude(array.dtype)
    return (magnitudes(array) ** 2).sum()


def frobenius_norm(values: ArrayLike, name: str = 'A') -> Any:
    """Euclidean norm of all entries: sqrt of the sum of squared magnitudes."""
    return frobenius_norm_square(values, name) ** 0.5
