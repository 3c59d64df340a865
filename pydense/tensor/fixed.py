"""
Small fixed-size tensors of rank 1 and 2.

A FixedRankTensor of dimension D and rank R stores exactly D**R entries.
Dimension, rank and element dtype are fixed when the tensor is created;
assignment only ever changes the values. Arithmetic returns new tensors.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pydense.core.compute.linalg.determinant import determinant as _determinant
from pydense.core.compute.linalg.norms import (
    frobenius_norm,
    frobenius_norm_square,
    l1_norm,
    linfty_norm,
)
from pydense.core.compute.tolerances import PivotTolerance
from pydense.core.exceptions import (
    DimensionMismatchError,
    InvalidDimensionError,
    ValidationError,
)
from pydense.core.validation import (
    check_array,
    check_dimension,
    check_element,
    check_finite,
    check_index,
    check_length,
)
from pydense.matrix.dense import DenseMatrix

SUPPORTED_RANKS = (1, 2)


class FixedRankTensor:
    """
    Rank-1 or rank-2 tensor in D dimensions.

    Construction:
        FixedRankTensor(3)                             # 3x3 zeros
        FixedRankTensor(3, values=[[1, 2, 3], ...])    # nested initializer
        FixedRankTensor(2, values=[1, 2, 3, 4])        # flat, row-major
        FixedRankTensor(3, rank=1, values=[1, 0, 0])   # vector

    Tensor products contract the last index of the left operand with the
    first index of the right one: vector * vector is the (unconjugated) dot
    product, tensor * vector is the matrix-vector product.
    """

    def __init__(
        self,
        dim: int,
        rank: int = 2,
        values: ArrayLike | None = None,
        *,
        dtype: DTypeLike | None = None,
    ):
        dim = check_dimension(dim, 'dim')
        if dim < 1:
            raise InvalidDimensionError(
                f"dim: must be at least 1, got {dim}", name='dim', value=dim
            )
        if rank not in SUPPORTED_RANKS:
            raise InvalidDimensionError(
                f"rank: must be one of {SUPPORTED_RANKS}, got {rank!r}",
                name='rank',
                value=rank,
            )

        if dtype is None:
            if values is not None and np.ndim(values) > 0:
                dtype = check_array(values, 'values').dtype
            else:
                dtype = np.float64
        dtype = np.dtype(dtype)
        if not (np.issubdtype(dtype, np.inexact) or dtype == object):
            raise ValidationError(
                f"dtype: {dtype} is not a floating, complex or object dtype"
            )

        self._values = np.zeros((dim,) * rank, dtype=dtype)
        if values is not None:
            self.assign(values)

    @classmethod
    def _wrap(cls, values: NDArray[Any]) -> FixedRankTensor:
        tensor = cls.__new__(cls)
        tensor._values = values
        return tensor

    @classmethod
    def identity(cls, dim: int, *, dtype: DTypeLike | None = None) -> FixedRankTensor:
        """Rank-2 unit tensor."""
        tensor = cls(dim, 2, dtype=dtype)
        np.fill_diagonal(tensor._values, 1)
        return tensor

    # ------------------------------------------------------------------
    # Shape and storage
    # ------------------------------------------------------------------

    @property
    def dim(self) -> int:
        return self._values.shape[0]

    @property
    def rank(self) -> int:
        return self._values.ndim

    @property
    def shape(self) -> tuple[int, ...]:
        return self._values.shape

    @property
    def dtype(self) -> np.dtype:
        return self._values.dtype

    def copy(self) -> FixedRankTensor:
        return FixedRankTensor._wrap(self._values.copy())

    def to_numpy(self) -> NDArray[Any]:
        return self._values.copy()

    def to_matrix(self) -> DenseMatrix:
        """Rank-2 tensor as a DenseMatrix (copy)."""
        self._require_rank(2, 'to_matrix')
        return DenseMatrix.from_array(self._values)

    # ------------------------------------------------------------------
    # Assignment and element access
    # ------------------------------------------------------------------

    def assign(self, values: ArrayLike) -> None:
        """
        Overwrite all entries.

        Accepts a flat row-major sequence of dim**rank values, an array of
        the tensor's shape, or the scalar 0 (zero-fills). Any other scalar
        is rejected: there is no meaningful broadcast of a non-zero scalar
        to every entry of a tensor.

        Raises:
            ValidationError: For a non-zero scalar or an incompatible dtype
            DimensionMismatchError: If the number or layout of values is wrong
        """
        if np.ndim(values) == 0:
            if values != 0:
                raise ValidationError(
                    f"values: only the scalar 0 can be assigned to a tensor, got {values!r}"
                )
            self._values[...] = 0
            return

        array = check_array(values, 'values')
        check_length(array, self._values.size, 'values')
        if array.ndim != 1 and array.shape != self._values.shape:
            raise DimensionMismatchError(
                f"values: expected a flat sequence or shape {self._values.shape}, "
                f"got shape {array.shape}",
                expected=self._values.size,
                actual=array.size,
            )
        check_finite(array, 'values')
        if not np.can_cast(array.dtype, self._values.dtype, casting='same_kind'):
            raise ValidationError(
                f"values: dtype {array.dtype} cannot be stored in a tensor of dtype "
                f"{self._values.dtype}"
            )
        self._values[...] = array.reshape(self._values.shape)

    def _key(self, key: Any) -> tuple[int, ...]:
        if not isinstance(key, tuple):
            key = (key,)
        return check_index(key, self._values.shape, 'tensor')

    def __getitem__(self, key: Any) -> Any:
        return self._values[self._key(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        index = self._key(key)
        check_element(value, self._values.dtype, 'value')
        self._values[index] = value

    # ------------------------------------------------------------------
    # Norms and scalar-valued functions
    # ------------------------------------------------------------------

    def norm(self) -> Any:
        """Euclidean (Frobenius) norm: sqrt of the sum of squared magnitudes."""
        return frobenius_norm(self._values, 'tensor')

    def norm_square(self) -> Any:
        return frobenius_norm_square(self._values, 'tensor')

    def l1_norm(self) -> Any:
        """Largest column sum of magnitudes; sum of magnitudes for vectors."""
        return l1_norm(self._values, 'tensor')

    def linfty_norm(self) -> Any:
        """Largest row sum of magnitudes; largest magnitude for vectors."""
        return linfty_norm(self._values, 'tensor')

    def trace(self) -> Any:
        self._require_rank(2, 'trace')
        return np.trace(self._values)

    def determinant(self) -> Any:
        self._require_rank(2, 'determinant')
        return _determinant(self._values, name='tensor')

    def transpose(self) -> FixedRankTensor:
        self._require_rank(2, 'transpose')
        return FixedRankTensor._wrap(self._values.T.copy())

    def invert(self, tolerance: PivotTolerance | None = None) -> FixedRankTensor:
        """
        Inverse of a rank-2 tensor.

        Raises:
            SingularMatrixError: If the tensor is numerically singular, with
                its condition number attached
        """
        self._require_rank(2, 'invert')
        inverse = self.to_matrix()._invert(tolerance, stacklevel=4)
        return FixedRankTensor._wrap(inverse.to_numpy())

    def _require_rank(self, rank: int, operation: str) -> None:
        if self.rank != rank:
            raise ValidationError(
                f"{operation}: requires a rank-{rank} tensor, got rank {self.rank}"
            )

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _check_same_shape(self, other: FixedRankTensor) -> None:
        if other.shape != self.shape:
            raise DimensionMismatchError(
                f"other: expected shape {self.shape}, got {other.shape}",
                expected=self._values.size,
                actual=other._values.size,
            )

    def __add__(self, other: Any) -> FixedRankTensor:
        if not isinstance(other, FixedRankTensor):
            return NotImplemented
        self._check_same_shape(other)
        return FixedRankTensor._wrap(self._values + other._values)

    def __sub__(self, other: Any) -> FixedRankTensor:
        if not isinstance(other, FixedRankTensor):
            return NotImplemented
        self._check_same_shape(other)
        return FixedRankTensor._wrap(self._values - other._values)

    def __neg__(self) -> FixedRankTensor:
        return FixedRankTensor._wrap(-self._values)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, FixedRankTensor):
            return self.contract(other)
        if np.ndim(other) != 0:
            return NotImplemented
        return FixedRankTensor._wrap(self._values * other)

    def __rmul__(self, other: Any) -> FixedRankTensor:
        if np.ndim(other) != 0:
            return NotImplemented
        return FixedRankTensor._wrap(other * self._values)

    def __truediv__(self, other: Any) -> FixedRankTensor:
        if isinstance(other, FixedRankTensor) or np.ndim(other) != 0:
            return NotImplemented
        return FixedRankTensor._wrap(self._values / other)

    def contract(self, other: FixedRankTensor) -> Any:
        """
        Contract the last index of self with the first index of other.

        Returns:
            A scalar for two vectors, otherwise a tensor of rank
            self.rank + other.rank - 2
        """
        if other.dim != self.dim:
            raise DimensionMismatchError(
                f"other: expected dimension {self.dim}, got {other.dim}",
                expected=self.dim,
                actual=other.dim,
            )
        product = np.tensordot(self._values, other._values, axes=1)
        if product.ndim == 0:
            return product[()]
        return FixedRankTensor._wrap(product)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedRankTensor):
            return NotImplemented
        return self.shape == other.shape and bool(np.all(self._values == other._values))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"FixedRankTensor(dim={self.dim}, rank={self.rank}, "
            f"dtype={self.dtype}, values={self._values.tolist()})"
        )
