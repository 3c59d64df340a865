"""
Dense linear algebra kernels for pydense.

All functions follow these conventions:
    - Operate on NumPy arrays of floating, complex or object dtype
    - Pivot magnitudes use abs(), never the real part
    - In-place kernels say so in their name and docstring
    - Errors are raised immediately with clear messages

Submodules:
    pivoting: Magnitudes, full-pivot search, permutation parity
    gauss_jordan: In-place inversion and multi right-hand-side solve
    determinant: Closed-form and pivoted determinant
    norms: l1, linfty and Frobenius norms
"""

from pydense.core.compute.linalg.gauss_jordan import (
    EliminationParams,
    gauss_jordan,
)
from pydense.core.compute.linalg.determinant import (
    closed_form_determinant,
    determinant,
)
from pydense.core.compute.linalg.norms import (
    frobenius_norm,
    frobenius_norm_square,
    l1_norm,
    linfty_norm,
)
from pydense.core.compute.linalg.pivoting import (
    magnitudes,
    permutation_sign,
    select_pivot,
)

__all__ = [
    # Elimination
    "EliminationParams",
    "gauss_jordan",
    # Determinant
    "closed_form_determinant",
    "determinant",
    # Norms
    "frobenius_norm",
    "frobenius_norm_square",
    "l1_norm",
    "linfty_norm",
    # Pivoting
    "magnitudes",
    "permutation_sign",
    "select_pivot",
]
