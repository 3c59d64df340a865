"""
Dense matrix type.

DenseMatrix owns a contiguous row-major buffer of rows * cols elements.
The buffer is never shared: constructors copy their input, to_numpy()
returns a copy, and in-place operations (gauss_jordan) only ever touch the
matrices they are called on or handed as companions. Callers that need the
original contents after an in-place operation must copy() first.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pydense.core.compute.linalg.determinant import determinant as _determinant
from pydense.core.compute.linalg.gauss_jordan import EliminationParams, gauss_jordan as _gauss_jordan
from pydense.core.compute.linalg.norms import frobenius_norm, l1_norm, linfty_norm
from pydense.core.compute.precision import condition_number
from pydense.core.compute.tolerances import PivotTolerance
from pydense.core.domains import DOMAIN_COMPLEX, scalar_domain
from pydense.core.exceptions import (
    DimensionMismatchError,
    SingularMatrixError,
    ValidationError,
)
from pydense.core.result import Result
from pydense.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_dimension,
    check_element,
    check_finite,
    check_index,
    check_length,
    check_square,
)


def _element_dtype(dtype: DTypeLike | None) -> np.dtype:
    if dtype is None:
        return np.dtype(np.float64)
    dtype = np.dtype(dtype)
    if not (np.issubdtype(dtype, np.inexact) or dtype == object):
        raise ValidationError(
            f"dtype: {dtype} is not a floating, complex or object dtype"
        )
    return dtype


def _conjugate(values: NDArray[Any]) -> NDArray[Any]:
    if scalar_domain(values.dtype) == DOMAIN_COMPLEX:
        return np.conj(values)
    return values


class DenseMatrix:
    """
    Runtime-sized dense matrix over a real, complex or generic scalar type.

    Construction:
        DenseMatrix(3, 3)                          # 3x3 zeros (float64)
        DenseMatrix(2, 3, [1, 2, 3, 4, 5, 6])      # row-major initializer
        DenseMatrix(2, 2, dtype=complex)           # complex zeros
        DenseMatrix(2, 2, [Fraction(1), ...])      # generic scalars
        DenseMatrix.from_array(np.eye(4))          # copy of a 2D array

    Indexing is 0-based and bounds checked: m[i, j], m.at(i, j),
    m.set_at(i, j, v). Negative indices are rejected.
    """

    def __init__(
        self,
        rows: int = 0,
        cols: int | None = None,
        data: ArrayLike | None = None,
        *,
        dtype: DTypeLike | None = None,
    ):
        n_rows = check_dimension(rows, 'rows')
        n_cols = n_rows if cols is None else check_dimension(cols, 'cols')

        if data is None:
            self._values = np.zeros((n_rows, n_cols), dtype=_element_dtype(dtype))
            return

        if dtype is not None:
            _element_dtype(dtype)
        flat = check_array(data, 'data', dtype=dtype)
        check_1d(flat, 'data')
        check_length(flat, n_rows * n_cols, 'data')
        check_finite(flat, 'data')
        self._values = flat.reshape(n_rows, n_cols).copy(order='C')

    @classmethod
    def from_array(cls, array: ArrayLike, *, dtype: DTypeLike | None = None) -> DenseMatrix:
        """Build a matrix from a 2D array-like (deep copy)."""
        if dtype is not None:
            _element_dtype(dtype)
        values = check_array(array, 'array', dtype=dtype)
        check_2d(values, 'array')
        check_finite(values, 'array')
        return cls._wrap(values.copy(order='C'))

    @classmethod
    def identity(cls, n: int, *, dtype: DTypeLike | None = None) -> DenseMatrix:
        """n x n identity matrix."""
        n = check_dimension(n, 'n')
        return cls._wrap(np.eye(n, dtype=_element_dtype(dtype)))

    @classmethod
    def _wrap(cls, values: NDArray[Any]) -> DenseMatrix:
        # Takes ownership of an already validated array
        matrix = cls.__new__(cls)
        matrix._values = values
        return matrix

    # ------------------------------------------------------------------
    # Shape and storage
    # ------------------------------------------------------------------

    @property
    def n_rows(self) -> int:
        return self._values.shape[0]

    @property
    def n_cols(self) -> int:
        return self._values.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._values.shape

    @property
    def size(self) -> int:
        """Number of stored elements, rows * cols."""
        return self._values.size

    @property
    def dtype(self) -> np.dtype:
        return self._values.dtype

    @property
    def scalar_domain(self) -> str:
        return scalar_domain(self._values.dtype)

    @property
    def is_square(self) -> bool:
        return self.n_rows == self.n_cols

    @property
    def empty(self) -> bool:
        """True if the matrix has no elements."""
        return self._values.size == 0

    def reinit(self, rows: int, cols: int | None = None) -> None:
        """
        Resize to rows x cols. Previous contents are discarded (zero-filled).
        """
        n_rows = check_dimension(rows, 'rows')
        n_cols = n_rows if cols is None else check_dimension(cols, 'cols')
        self._values = np.zeros((n_rows, n_cols), dtype=self._values.dtype)

    def copy(self) -> DenseMatrix:
        """Deep copy; the copy owns its own buffer."""
        return DenseMatrix._wrap(self._values.copy(order='C'))

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the contents as a 2D array."""
        return self._values.copy()

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def at(self, i: int, j: int) -> Any:
        """Element (i, j); IndexOutOfRangeError outside the bounds."""
        return self._values[check_index((i, j), self.shape, 'matrix')]

    def set_at(self, i: int, j: int, value: Any) -> None:
        """Overwrite element (i, j) in place."""
        index = check_index((i, j), self.shape, 'matrix')
        check_element(value, self._values.dtype, 'value')
        self._values[index] = value

    def __getitem__(self, key: Any) -> Any:
        if not isinstance(key, tuple):
            key = (key,)
        return self._values[check_index(key, self.shape, 'matrix')]

    def __setitem__(self, key: Any, value: Any) -> None:
        if not isinstance(key, tuple):
            key = (key,)
        self.set_at(*check_index(key, self.shape, 'matrix'), value)

    # ------------------------------------------------------------------
    # Elimination
    # ------------------------------------------------------------------

    def gauss_jordan(
        self,
        *companions: DenseMatrix,
        tolerance: PivotTolerance | None = None,
    ) -> Result[EliminationParams]:
        """
        Invert this matrix in place by full-pivoting Gauss-Jordan elimination.

        Every companion B is transformed into A^{-1} B in the same pass.
        Both this matrix and the companions are overwritten.

        Args:
            *companions: Right-hand side matrices with as many rows as
                this matrix; each must be a distinct DenseMatrix
            tolerance: Pivot tolerance tier; chosen from the dtype if None

        Returns:
            Result with the pivot record (rows, columns, values, parity)

        Raises:
            NotSquareError: If this matrix is not square
            DimensionMismatchError: If a companion has the wrong row count
            ValidationError: If a companion is not a DenseMatrix, is this
                matrix itself, appears twice, or cannot hold the result dtype
            SingularMatrixError: If the matrix is numerically singular. The
                contents of this matrix and of the companions are then
                partially reduced and must not be used.

        Warns:
            RuntimeWarning: If the pivot magnitudes indicate ill-conditioning
        """
        return self._gauss_jordan(companions, tolerance, stacklevel=3)

    def _gauss_jordan(
        self,
        companions: tuple[DenseMatrix, ...],
        tolerance: PivotTolerance | None,
        stacklevel: int,
    ) -> Result[EliminationParams]:
        for i, companion in enumerate(companions):
            if not isinstance(companion, DenseMatrix):
                raise ValidationError(
                    f"companion[{i}]: expected DenseMatrix, got {type(companion).__name__}"
                )
            if companion is self:
                raise ValidationError(
                    f"companion[{i}]: is the matrix being inverted; pass a copy()"
                )

        result = _gauss_jordan(
            self._values,
            *(companion._values for companion in companions),
            tolerance=tolerance,
            name='matrix',
        )
        for message in result.warnings:
            warnings.warn(message, RuntimeWarning, stacklevel=stacklevel)
        return result

    def invert(self, tolerance: PivotTolerance | None = None) -> DenseMatrix:
        """
        Inverse as a new matrix; this matrix is left unchanged.

        Raises:
            NotSquareError: If this matrix is not square
            SingularMatrixError: If the matrix is numerically singular, with
                the condition number of this matrix attached
        """
        return self._invert(tolerance, stacklevel=4)

    def _invert(self, tolerance: PivotTolerance | None, stacklevel: int) -> DenseMatrix:
        inverse = self.copy()
        try:
            inverse._gauss_jordan((), tolerance, stacklevel=stacklevel)
        except SingularMatrixError as e:
            raise SingularMatrixError(
                str(e),
                matrix_name=e.matrix_name,
                condition_number=condition_number(self._values),
                rank=e.rank,
                expected_rank=e.expected_rank,
                pivot_magnitude=e.pivot_magnitude,
                threshold=e.threshold,
            ) from e
        return inverse

    def solve(
        self,
        rhs: DenseMatrix | ArrayLike,
        tolerance: PivotTolerance | None = None,
    ) -> DenseMatrix | NDArray[Any]:
        """
        Solve A X = B without modifying A or B.

        Args:
            rhs: DenseMatrix, or 1D/2D array-like with as many rows as A
            tolerance: Pivot tolerance tier; chosen from the dtype if None

        Returns:
            DenseMatrix for a DenseMatrix right-hand side, otherwise an
            array with the same number of dimensions as rhs

        Raises:
            NotSquareError: If A is not square
            DimensionMismatchError: If rhs has the wrong row count
            SingularMatrixError: If A is numerically singular
        """
        if isinstance(rhs, DenseMatrix):
            values = rhs._values
        else:
            values = check_array(rhs, 'rhs')
            if values.ndim not in (1, 2):
                check_2d(values, 'rhs')
            check_finite(values, 'rhs')

        dtype = np.result_type(self._values.dtype, values.dtype)
        solution = values.astype(dtype, copy=True)
        work = self._values.astype(dtype, copy=True)
        rhs_2d = solution[:, np.newaxis] if solution.ndim == 1 else solution

        result = _gauss_jordan(work, rhs_2d, tolerance=tolerance, name='matrix')
        for message in result.warnings:
            warnings.warn(message, RuntimeWarning, stacklevel=2)

        if isinstance(rhs, DenseMatrix):
            return DenseMatrix._wrap(solution)
        return solution

    # ------------------------------------------------------------------
    # Scalar-valued functions
    # ------------------------------------------------------------------

    def determinant(self, tolerance: PivotTolerance | None = None) -> Any:
        """
        Determinant; the matrix is not modified.

        Raises:
            NotSquareError: If the matrix is not square
        """
        return _determinant(self._values, tolerance, name='matrix')

    def trace(self) -> Any:
        """Sum of the diagonal entries."""
        check_square(self._values, 'matrix')
        return np.trace(self._values)

    def l1_norm(self) -> Any:
        """Largest column sum of magnitudes (induced 1-norm)."""
        return l1_norm(self._values, 'matrix')

    def linfty_norm(self) -> Any:
        """Largest row sum of magnitudes (induced infinity-norm)."""
        return linfty_norm(self._values, 'matrix')

    def frobenius_norm(self) -> Any:
        """Square root of the sum of squared magnitudes."""
        return frobenius_norm(self._values, 'matrix')

    def matrix_norm_square(self, v: ArrayLike) -> Any:
        """v^H M v for a square M."""
        check_square(self._values, 'matrix')
        vector = self._vector(v, self.n_cols, 'v')
        return _conjugate(vector) @ (self._values @ vector)

    def matrix_scalar_product(self, u: ArrayLike, v: ArrayLike) -> Any:
        """u^H M v."""
        left = self._vector(u, self.n_rows, 'u')
        right = self._vector(v, self.n_cols, 'v')
        return _conjugate(left) @ (self._values @ right)

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def _vector(self, v: ArrayLike, length: int, name: str) -> NDArray[Any]:
        vector = check_array(v, name)
        check_1d(vector, name)
        check_length(vector, length, name)
        return vector

    def vmult(self, v: ArrayLike) -> NDArray[Any]:
        """M v."""
        return self._values @ self._vector(v, self.n_cols, 'v')

    def tvmult(self, v: ArrayLike) -> NDArray[Any]:
        """M^T v (no conjugation)."""
        return self._values.T @ self._vector(v, self.n_rows, 'v')

    def mmult(self, other: DenseMatrix) -> DenseMatrix:
        """Matrix product self @ other as a new matrix."""
        if not isinstance(other, DenseMatrix):
            raise ValidationError(
                f"other: expected DenseMatrix, got {type(other).__name__}"
            )
        if self.n_cols != other.n_rows:
            raise DimensionMismatchError(
                f"other: expected {self.n_cols} rows, got {other.n_rows}",
                expected=self.n_cols,
                actual=other.n_rows,
            )
        return DenseMatrix._wrap(np.ascontiguousarray(self._values @ other._values))

    def transpose(self) -> DenseMatrix:
        """Transpose as a new matrix (no conjugation)."""
        return DenseMatrix._wrap(self._values.T.copy(order='C'))

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, DenseMatrix):
            return self.mmult(other)
        return self.vmult(other)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.all(self._values == other._values))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"DenseMatrix(rows={self.n_rows}, cols={self.n_cols}, "
            f"dtype={self.dtype}, data={self._values.ravel().tolist()})"
        )
