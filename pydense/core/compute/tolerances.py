"""
Pivot tolerance tiers for singularity detection.

Elimination rejects a pivot whose magnitude does not exceed

    threshold = atol + rtol * max|a_ij|

where the maximum is taken over the input matrix before elimination.
Making the threshold relative keeps the decision invariant under scaling
of the whole matrix. Tiers:

- FP64: double precision (float64, complex128, longdouble)
- FP32: single precision (float32, complex64)
- FP16: half precision (float16)
- EXACT: generic scalars (object dtype); only an exactly zero pivot is
  singular, which is right for exact arithmetic such as Fraction

Callers may pass their own PivotTolerance to any operation.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from pydense.core.compute.precision import machine_epsilon
from pydense.core.domains import DOMAIN_GENERIC, scalar_domain


@dataclass(frozen=True)
class PivotTolerance:
    """Tolerance specification for pivot acceptance."""
    rtol: float
    atol: float
    # min|pivot| / max|pivot| below this is reported as ill-conditioning
    ill_conditioned_ratio: float
    name: str
    description: str

    def threshold(self, scale: Any) -> Any:
        """
        Absolute pivot threshold for a matrix whose largest magnitude is scale.

        The arithmetic is done in the magnitude type of the matrix, so exact
        scalars keep an exact threshold.
        """
        if self.rtol == 0:
            return self.atol
        return self.atol + self.rtol * scale


FP64 = PivotTolerance(
    rtol=1e-13,
    atol=0.0,
    ill_conditioned_ratio=1e-10,
    name='fp64',
    description='Double precision, relative to the largest entry',
)

FP32 = PivotTolerance(
    rtol=1e-5,
    atol=0.0,
    ill_conditioned_ratio=1e-4,
    name='fp32',
    description='Single precision, relative to the largest entry',
)

FP16 = PivotTolerance(
    rtol=1e-2,
    atol=0.0,
    ill_conditioned_ratio=1e-1,
    name='fp16',
    description='Half precision, relative to the largest entry',
)

EXACT = PivotTolerance(
    rtol=0.0,
    atol=0.0,
    ill_conditioned_ratio=0.0,
    name='exact',
    description='Generic scalars: only an exactly zero pivot is singular',
)


def select_pivot_tolerance(dtype: np.dtype | type) -> PivotTolerance:
    """
    Select the default tolerance tier for a matrix dtype.

    Floating and complex dtypes are matched on machine epsilon, so a dtype
    never gets a tier tighter than its own rounding error.
    """
    if scalar_domain(dtype) == DOMAIN_GENERIC:
        return EXACT
    eps = machine_epsilon(dtype)
    if eps <= machine_epsilon(np.float64):
        return FP64
    if eps <= machine_epsilon(np.float32):
        return FP32
    return FP16
