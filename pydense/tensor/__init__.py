"""
Fixed-size tensor module.

Public API:
    FixedRankTensor    - rank-1/rank-2 tensor of fixed dimension with
                         contraction, l1/linfty/Euclidean norms,
                         determinant and inverse
"""

from pydense.tensor.fixed import FixedRankTensor

__all__ = [
    "FixedRankTensor",
]
