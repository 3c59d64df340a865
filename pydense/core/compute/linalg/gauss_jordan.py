"""
In-place Gauss-Jordan elimination with full pivoting.

For a square A (n x n) and optional companion matrices B_1 ... B_k
(each n x m_i), computes A <- A^{-1} and B_i <- A^{-1} B_i in place.

Algorithm (exchange form, no physical row/column swaps):

    for each step:
        (r, c) = largest |a_rc| over unused rows r and unused columns c
        if |a_rc| <= threshold: singular
        p = a_rc
        row r        <- row r / p,  a_rc <- 1 / p
        rows i != r  <- row i - a_ic * row r,  a_ic <- -a_ic / p
        companions get the same row operations

    After n steps the tableau holds A^{-1} with rows and columns permuted:
        A^{-1}[c_k, r_l] = M[r_k, c_l],   X[c_k, :] = B[r_k, :]

Storing the exchanged column in place of the eliminated one is what lets
the inverse overwrite A without an augmented identity block. Cost is
O(n^3) for A plus O(n^2 m) per companion.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pydense.core.compute.linalg.pivoting import (
    max_magnitude,
    pivot_permutation,
    permutation_sign,
    select_pivot,
)
from pydense.core.compute.timing import Timer
from pydense.core.compute.tolerances import PivotTolerance, select_pivot_tolerance
from pydense.core.domains import scalar_domain
from pydense.core.exceptions import SingularMatrixError, ValidationError
from pydense.core.result import Result
from pydense.core.validation import (
    check_2d,
    check_consistent_rows,
    check_finite,
    check_square,
)


@dataclass(frozen=True)
class EliminationParams:
    """
    Pivot record of a full-pivoting elimination.

    Attributes:
        pivot_rows: Row used as pivot row at each step
        pivot_cols: Column used as pivot column at each step
        pivots: Pivot values in step order (matrix dtype)
        permutation_sign: Sign of the row -> column pivot permutation
    """
    pivot_rows: NDArray[np.intp]
    pivot_cols: NDArray[np.intp]
    pivots: NDArray[Any]
    permutation_sign: int

    @property
    def rank(self) -> int:
        """Number of pivots accepted."""
        return len(self.pivots)

    @property
    def determinant(self) -> Any:
        """Product of the pivots times the permutation sign."""
        return np.prod(self.pivots) * self.permutation_sign


@dataclass(frozen=True)
class _Sweep:
    rows: list[int]
    cols: list[int]
    pivots: list[Any]
    magnitudes: list[Any]
    rejected_magnitude: Any = None

    @property
    def complete(self) -> bool:
        return self.rejected_magnitude is None


def eliminate(
    values: NDArray[Any],
    companions: tuple[NDArray[Any], ...],
    threshold: Any,
) -> _Sweep:
    """
    Run exchange steps until all rows are pivoted or a pivot is rejected.

    values and companions are modified in place; nothing is un-permuted.
    """
    n = values.shape[0]
    used_rows = np.zeros(n, dtype=bool)
    used_cols = np.zeros(n, dtype=bool)
    rows: list[int] = []
    cols: list[int] = []
    pivots: list[Any] = []
    mags: list[Any] = []

    for _ in range(n):
        free_rows = np.flatnonzero(~used_rows)
        free_cols = np.flatnonzero(~used_cols)
        r, c, magnitude = select_pivot(values, free_rows, free_cols)
        if magnitude <= threshold:
            return _Sweep(rows, cols, pivots, mags, rejected_magnitude=magnitude)

        p = values[r, c]
        others = np.arange(n) != r
        column = values[others, c]

        pivot_row = values[r, :] / p
        pivot_row[c] = 1 / p
        values[others, :] -= np.outer(column, pivot_row)
        values[others, c] = -column / p
        values[r, :] = pivot_row

        for rhs in companions:
            rhs_row = rhs[r, :] / p
            rhs[others, :] -= np.outer(column, rhs_row)
            rhs[r, :] = rhs_row

        used_rows[r] = True
        used_cols[c] = True
        rows.append(r)
        cols.append(c)
        pivots.append(p)
        mags.append(magnitude)

    return _Sweep(rows, cols, pivots, mags)


def _unpermute(
    values: NDArray[Any],
    companions: tuple[NDArray[Any], ...],
    rows: NDArray[np.intp],
    cols: NDArray[np.intp],
) -> None:
    inverse = np.empty_like(values)
    inverse[np.ix_(cols, rows)] = values[np.ix_(rows, cols)]
    values[...] = inverse
    for rhs in companions:
        solution = np.empty_like(rhs)
        solution[cols, :] = rhs[rows, :]
        rhs[...] = solution


def _check_operands(
    A: NDArray[Any],
    companions: tuple[NDArray[Any], ...],
    name: str,
) -> None:
    check_2d(A, name)
    check_square(A, name)
    if not A.flags.writeable:
        raise ValidationError(f"{name}: array is read-only")
    if not _has_domain(A.dtype):
        raise ValidationError(
            f"{name}: dtype {A.dtype} cannot be eliminated in place; "
            f"expected floating, complex or object dtype"
        )
    check_finite(A, name)

    names = tuple(f"companion[{i}]" for i in range(len(companions)))
    for rhs, rhs_name in zip(companions, names):
        check_2d(rhs, rhs_name)
        if not rhs.flags.writeable:
            raise ValidationError(f"{rhs_name}: array is read-only")
        if np.result_type(A.dtype, rhs.dtype) != rhs.dtype:
            raise ValidationError(
                f"{rhs_name}: dtype {rhs.dtype} cannot hold results of "
                f"elimination with {name} of dtype {A.dtype}"
            )
        check_finite(rhs, rhs_name)
        if np.may_share_memory(A, rhs):
            raise ValidationError(
                f"{rhs_name}: shares memory with {name}; pass a copy"
            )
    check_consistent_rows(*companions, names=names, expected=A.shape[0])

    for i in range(len(companions)):
        for j in range(i + 1, len(companions)):
            if np.may_share_memory(companions[i], companions[j]):
                raise ValidationError(
                    f"{names[i]} and {names[j]} share memory; pass copies"
                )


def _has_domain(dtype: np.dtype) -> bool:
    return np.issubdtype(dtype, np.inexact) or dtype == object


def _format_ratio(ratio: Any) -> str:
    if isinstance(ratio, (float, np.floating)):
        return f"{ratio:.3e}"
    return str(ratio)


def gauss_jordan(
    A: NDArray[Any],
    *companions: NDArray[Any],
    tolerance: PivotTolerance | None = None,
    name: str = 'A',
) -> Result[EliminationParams]:
    """
    Invert A in place and transform companion matrices into A^{-1} B.

    Args:
        A: Square matrix (n x n), floating, complex or object dtype.
           Overwritten with its inverse.
        *companions: Right-hand sides (n x m each), overwritten with the
           solutions. Must not share memory with A or with each other.
        tolerance: Pivot tolerance tier; chosen from A.dtype if None
        name: Name of A for error messages

    Returns:
        Result with the pivot record, tolerance info, timing and any
        ill-conditioning warnings

    Raises:
        NotSquareError: If A is not square
        DimensionMismatchError: If a companion has a different row count
        ValidationError: For unusable dtypes, non-finite entries, read-only
            or aliased arrays
        SingularMatrixError: If a pivot magnitude does not exceed the
            threshold. A and the companions are then partially reduced
            and must not be used.
    """
    _check_operands(A, companions, name)
    tol = tolerance if tolerance is not None else select_pivot_tolerance(A.dtype)
    n = A.shape[0]

    timer = Timer()
    timer.start()

    threshold = tol.threshold(max_magnitude(A))

    with timer.section('elimination'):
        sweep = eliminate(A, companions, threshold)

    if not sweep.complete:
        raise SingularMatrixError(
            f"{name} is singular to working precision: pivot magnitude "
            f"{sweep.rejected_magnitude} <= threshold {threshold} "
            f"after {len(sweep.pivots)} of {n} elimination steps "
            f"(tolerance '{tol.name}')",
            matrix_name=name,
            rank=len(sweep.pivots),
            expected_rank=n,
            pivot_magnitude=sweep.rejected_magnitude,
            threshold=threshold,
        )

    rows = np.asarray(sweep.rows, dtype=np.intp)
    cols = np.asarray(sweep.cols, dtype=np.intp)

    with timer.section('unpermute'):
        if n > 0:
            _unpermute(A, companions, rows, cols)

    timer.stop()

    warnings_list: list[str] = []
    info: dict[str, Any] = {
        'n': n,
        'n_companions': len(companions),
        'scalar_domain': scalar_domain(A.dtype),
        'tolerance': tol.name,
        'threshold': threshold,
    }
    if n > 0:
        smallest = min(sweep.magnitudes)
        largest = max(sweep.magnitudes)
        ratio = smallest / largest
        info['min_pivot_magnitude'] = smallest
        info['max_pivot_magnitude'] = largest
        if ratio < tol.ill_conditioned_ratio:
            warnings_list.append(
                f"{name} is ill-conditioned: smallest/largest pivot magnitude "
                f"ratio {_format_ratio(ratio)} is below "
                f"{tol.ill_conditioned_ratio:g}; the inverse may be inaccurate"
            )

    params = EliminationParams(
        pivot_rows=rows,
        pivot_cols=cols,
        pivots=np.asarray(sweep.pivots, dtype=A.dtype),
        permutation_sign=permutation_sign(pivot_permutation(rows, cols)),
    )

    return Result(
        params=params,
        info=info,
        timing=timer.result(),
        method='gauss_jordan',
        warnings=tuple(warnings_list),
    )
