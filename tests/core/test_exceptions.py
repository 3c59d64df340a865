"""
Tests for pydense exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyDenseError)
    - Diagnostic attributes on the dimension, index and singularity errors
    - str/repr work correctly
    - Default attribute values (None for optional attributes)
"""

import pytest

from pydense.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    NotSquareError,
    NumericalError,
    PyDenseError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyDenseError."""

    def test_validation_error_is_pydense_error(self):
        with pytest.raises(PyDenseError):
            raise ValidationError("bad input")

    def test_invalid_dimension_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise InvalidDimensionError("rows: must be non-negative")

    def test_index_out_of_range_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise IndexOutOfRangeError("out of range")

    def test_index_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("out of range")

    def test_dimension_mismatch_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise DimensionMismatchError("expected 4 values, got 3")

    def test_not_square_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise NotSquareError("expected square")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_pydense_error(self):
        with pytest.raises(PyDenseError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_not_validation_error(self):
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)

    def test_index_error_is_not_numerical_error(self):
        err = IndexOutOfRangeError("out of range")
        assert not isinstance(err, NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# Simple exceptions (no extra attributes)
# ═══════════════════════════════════════════════════════════════════════


class TestSimpleExceptions:
    """ValidationError, DimensionError, NumericalError carry only a message."""

    def test_pydense_error_message(self):
        err = PyDenseError("base error")
        assert str(err) == "base error"

    def test_validation_error_message(self):
        err = ValidationError("data: cannot convert to array")
        assert "cannot convert" in str(err)

    def test_dimension_error_message(self):
        err = DimensionError("data: expected 1D, got 2D")
        assert "expected 1D" in str(err)

    def test_numerical_error_message(self):
        err = NumericalError("overflow in computation")
        assert "overflow" in str(err)


# ═══════════════════════════════════════════════════════════════════════
# Attribute-carrying exceptions
# ═══════════════════════════════════════════════════════════════════════


class TestInvalidDimensionError:

    def test_attributes(self):
        err = InvalidDimensionError("rows: must be non-negative, got -1", name="rows", value=-1)
        assert err.name == "rows"
        assert err.value == -1

    def test_defaults_are_none(self):
        err = InvalidDimensionError("bad size")
        assert err.name is None
        assert err.value is None


class TestIndexOutOfRangeError:

    def test_attributes(self):
        err = IndexOutOfRangeError("out of range", index=(3, 0), shape=(2, 2))
        assert err.index == (3, 0)
        assert err.shape == (2, 2)

    def test_defaults_are_none(self):
        err = IndexOutOfRangeError("out of range")
        assert err.index is None
        assert err.shape is None


class TestDimensionMismatchError:

    def test_attributes(self):
        err = DimensionMismatchError("expected 9 values, got 8", expected=9, actual=8)
        assert err.expected == 9
        assert err.actual == 8

    def test_defaults_are_none(self):
        err = DimensionMismatchError("mismatch")
        assert err.expected is None
        assert err.actual is None


class TestNotSquareError:

    def test_shape_attribute(self):
        err = NotSquareError("expected square", shape=(2, 3))
        assert err.shape == (2, 3)


class TestSingularMatrixError:
    """SingularMatrixError carries matrix diagnostic attributes."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "A is singular",
            matrix_name="A",
            condition_number=1e18,
            rank=2,
            expected_rank=3,
            pivot_magnitude=1e-17,
            threshold=9e-13,
        )
        assert str(err) == "A is singular"
        assert err.matrix_name == "A"
        assert err.condition_number == 1e18
        assert err.rank == 2
        assert err.expected_rank == 3
        assert err.pivot_magnitude == 1e-17
        assert err.threshold == 9e-13

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.condition_number is None
        assert err.rank is None
        assert err.expected_rank is None
        assert err.pivot_magnitude is None
        assert err.threshold is None

    def test_catchable_with_attributes(self):
        """Attributes accessible in except block."""
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError(
                "singular", matrix_name="jacobian", rank=1
            )
        assert exc_info.value.matrix_name == "jacobian"
        assert exc_info.value.rank == 1
