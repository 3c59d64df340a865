"""
Scalar domain constants for pydense.

This module is the SINGLE SOURCE OF TRUTH for scalar domain strings.
Import from here, never use raw strings.

Usage:
    from pydense.core.domains import DOMAIN_COMPLEX, scalar_domain

    if scalar_domain(values.dtype) == DOMAIN_COMPLEX:
        ...
"""

import numpy as np

# NumPy floating dtypes (integers are promoted here)
DOMAIN_REAL = 'real'

# NumPy complex dtypes; magnitude is the modulus
DOMAIN_COMPLEX = 'complex'

# Object dtype holding arbitrary Scalar-conforming elements
DOMAIN_GENERIC = 'generic'


def scalar_domain(dtype: np.dtype | type) -> str:
    """
    Map a dtype to its scalar domain.

    Args:
        dtype: NumPy dtype or type

    Returns:
        One of DOMAIN_REAL, DOMAIN_COMPLEX, DOMAIN_GENERIC

    Raises:
        ValueError: If the dtype is not floating, complex or object
    """
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.complexfloating):
        return DOMAIN_COMPLEX
    if np.issubdtype(dtype, np.floating):
        return DOMAIN_REAL
    if dtype == object:
        return DOMAIN_GENERIC
    raise ValueError(f"dtype {dtype} has no scalar domain")


__all__ = [
    'DOMAIN_REAL',
    'DOMAIN_COMPLEX',
    'DOMAIN_GENERIC',
    'scalar_domain',
]
