"""
Exception hierarchy for pydense.

All exceptions inherit from PyDenseError to allow catching any
library-specific error. Validation failures (caller supplied something
inconsistent) and numerical failures (the data itself defeats the
algorithm) are kept in separate branches.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDenseError(Exception):
    """Base exception for all pydense errors."""
    pass


class ValidationError(PyDenseError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidDimensionError(ValidationError):
    """
    A requested size is not a non-negative integer.

    Attributes:
        name: Name of the offending size parameter ('rows', 'cols', 'dim', ...)
        value: The value that was supplied
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        value: object = None,
    ):
        super().__init__(message)
        self.name = name
        self.value = value


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Element access outside the declared bounds.

    Negative indices are out of range as well; there is no wrap-around.

    Attributes:
        index: The index tuple that was requested
        shape: Shape of the object being indexed
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, ...] | None = None,
        shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Initializer length or companion shape inconsistent with the target.

    Attributes:
        expected: Expected length or row count
        actual: Length or row count that was supplied
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        shape: Shape of the matrix that was supplied
    """

    def __init__(self, message: str, shape: tuple[int, ...] | None = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(PyDenseError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when elimination meets a pivot whose magnitude does not exceed
    the tolerance threshold. The matrix being eliminated (and every
    companion matrix) is left partially reduced and must not be used.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Number of pivots accepted before the failure
        expected_rank: Expected rank (the matrix order)
        pivot_magnitude: Magnitude of the rejected pivot
        threshold: Threshold the pivot was compared against
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
        pivot_magnitude: object = None,
        threshold: object = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank
        self.pivot_magnitude = pivot_magnitude
        self.threshold = threshold
