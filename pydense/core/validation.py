"""
Input validation utilities for pydense.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes and
      integer-to-float promotion)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray, DTypeLike
from typing import Any

from pydense.core.exceptions import (
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    NotSquareError,
)
from pydense.core.protocols import Scalar


def check_array(
    array: ArrayLike,
    name: str,
    *,
    dtype: DTypeLike | None = None,
    allow_object: bool = True,
) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Integer data is
    promoted to float64; floating and complex data keep their precision.
    Object dtype is accepted (when allow_object is True) only if every
    element satisfies the Scalar protocol.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Optional dtype to convert to
        allow_object: Whether generic (object dtype) scalars are accepted

    Returns:
        numpy.ndarray with floating, complex or object dtype

    Raises:
        ValidationError: If input cannot be converted to a usable array
    """
    try:
        result = np.asarray(array, dtype=dtype)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        if not allow_object:
            raise ValidationError(
                f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
            )
        check_scalar_contract(result, name)
        return result

    # Reject non-numeric dtypes (strings, bytes, datetime, bool, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    # Ensure floating point for elimination
    if not np.issubdtype(result.dtype, np.inexact):
        result = result.astype(np.float64)

    return result


def check_scalar_contract(array: NDArray[Any], name: str) -> None:
    """
    Verify every element of an object array satisfies the Scalar protocol.

    Args:
        array: Object-dtype array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If any element lacks a required operation
    """
    for position, value in enumerate(array.flat):
        if not isinstance(value, Scalar):
            raise ValidationError(
                f"{name}: element {position} of type {type(value).__name__} "
                f"does not support the scalar contract "
                f"(+, -, *, /, unary -, abs)"
            )


def check_finite(array: NDArray[Any], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Object arrays are not inspected; their elements define their own
    notion of finiteness.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if array.dtype == object:
        return
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_element(value: Any, dtype: np.dtype, name: str) -> None:
    """
    Verify a single value can be stored in an array of the given dtype.

    Object arrays accept any Scalar-conforming value. Floating and complex
    arrays accept finite numbers whose dtype casts within the same kind,
    so a complex value never goes silently into a real array.

    Args:
        value: Value about to be stored
        dtype: dtype of the receiving array
        name: Parameter name for error messages

    Raises:
        ValidationError: If the value is not a scalar, is non-finite, or
            cannot be stored without changing kind
    """
    if dtype == object:
        if not isinstance(value, Scalar):
            raise ValidationError(
                f"{name}: {type(value).__name__} does not support the scalar contract"
            )
        return

    element = check_array(value, name)
    if element.ndim != 0:
        raise ValidationError(
            f"{name}: expected a single value, got shape {element.shape}"
        )
    check_finite(element, name)
    if not np.can_cast(element.dtype, dtype, casting='same_kind'):
        raise ValidationError(
            f"{name}: dtype {element.dtype} cannot be stored in an array of dtype {dtype}"
        )


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a requested size is a non-negative integer.

    Args:
        value: Requested size
        name: Parameter name for error messages

    Returns:
        The size as a Python int

    Raises:
        InvalidDimensionError: If value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidDimensionError(
            f"{name}: expected a non-negative integer, got {value!r}",
            name=name,
            value=value,
        )
    if value < 0:
        raise InvalidDimensionError(
            f"{name}: must be non-negative, got {value}",
            name=name,
            value=value,
        )
    return int(value)


def check_square(array: NDArray[Any], name: str) -> None:
    """
    Verify a 2D array is square.

    Args:
        array: 2D array to check
        name: Parameter name for error messages

    Raises:
        NotSquareError: If the row and column counts differ
    """
    n_rows, n_cols = array.shape
    if n_rows != n_cols:
        raise NotSquareError(
            f"{name}: expected a square matrix, got shape {array.shape}",
            shape=array.shape,
        )


def check_length(array: NDArray[Any], expected: int, name: str) -> None:
    """
    Verify a flat initializer has exactly the expected number of values.

    Args:
        array: Initializer data
        expected: Required number of values
        name: Parameter name for error messages

    Raises:
        DimensionMismatchError: If the element count differs
    """
    if array.size != expected:
        raise DimensionMismatchError(
            f"{name}: expected {expected} values, got {array.size}",
            expected=expected,
            actual=array.size,
        )


def check_index(index: tuple[Any, ...], shape: tuple[int, ...], name: str) -> tuple[int, ...]:
    """
    Verify an index tuple addresses an existing element.

    Only plain integers inside [0, extent) are accepted. Negative indices
    are rejected instead of wrapping around.

    Args:
        index: Index tuple, one entry per axis
        shape: Shape of the indexed object
        name: Name of the indexed object for error messages

    Returns:
        The index as a tuple of Python ints

    Raises:
        IndexOutOfRangeError: If the index has the wrong arity or any
            component lies outside its axis
    """
    if len(index) != len(shape):
        raise IndexOutOfRangeError(
            f"{name}: expected {len(shape)} indices, got {len(index)}",
            index=tuple(index),
            shape=shape,
        )
    checked = []
    for axis, (i, extent) in enumerate(zip(index, shape)):
        if isinstance(i, bool) or not isinstance(i, numbers.Integral):
            raise IndexOutOfRangeError(
                f"{name}: index {i!r} on axis {axis} is not an integer",
                index=tuple(index),
                shape=shape,
            )
        if not 0 <= i < extent:
            raise IndexOutOfRangeError(
                f"{name}: index {tuple(index)} out of range for shape {shape}",
                index=tuple(index),
                shape=shape,
            )
        checked.append(int(i))
    return tuple(checked)


def check_consistent_rows(
    *arrays: NDArray[Any],
    names: tuple[str, ...],
    expected: int,
) -> None:
    """
    Verify all arrays have the expected number of rows (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)
        expected: Required row count

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionMismatchError: If any array has a different row count
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    for arr, name in zip(arrays, names):
        if arr.shape[0] != expected:
            raise DimensionMismatchError(
                f"{name}: expected {expected} rows, got {arr.shape[0]}",
                expected=expected,
                actual=arr.shape[0],
            )
