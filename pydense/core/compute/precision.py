"""
Numerical precision utilities.

Provides the machine epsilon used to pick a pivot tolerance tier and the
condition estimate attached to singularity diagnostics.
"""

import numpy as np
import scipy.linalg
from numpy.typing import NDArray
from typing import Any

from pydense.core.domains import DOMAIN_GENERIC, scalar_domain


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Complex dtypes report the epsilon of their real component.

    Args:
        dtype: NumPy floating or complex dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def condition_number(A: NDArray[Any]) -> float | None:
    """
    Compute the 2-norm condition number of a square matrix using SVD.

    Args:
        A: Input matrix

    Returns:
        Condition number (ratio of largest to smallest singular value),
        inf if the matrix is exactly singular, or None for generic
        scalars, non-finite entries and empty matrices where no SVD is
        available.
    """
    if A.size == 0 or scalar_domain(A.dtype) == DOMAIN_GENERIC:
        return None
    if not np.all(np.isfinite(A)):
        return None
    s = scipy.linalg.svdvals(A)
    if s[-1] == 0:
        return np.inf
    return float(s[0] / s[-1])
