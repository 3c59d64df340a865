"""
Tests for the compute infrastructure: tolerance tiers, precision helpers,
timing and scalar domains.
"""

import time
from fractions import Fraction

import numpy as np
import pytest

from pydense.core.compute.precision import condition_number, machine_epsilon
from pydense.core.compute.timing import Timer
from pydense.core.compute.tolerances import (
    EXACT,
    FP16,
    FP32,
    FP64,
    PivotTolerance,
    select_pivot_tolerance,
)
from pydense.core.domains import (
    DOMAIN_COMPLEX,
    DOMAIN_GENERIC,
    DOMAIN_REAL,
    scalar_domain,
)
from pydense.core.protocols import Scalar


# ═══════════════════════════════════════════════════════════════════════
# Scalar domains and the scalar contract
# ═══════════════════════════════════════════════════════════════════════


class TestScalarDomain:

    @pytest.mark.parametrize("dtype", [np.float16, np.float32, np.float64])
    def test_real(self, dtype):
        assert scalar_domain(dtype) == DOMAIN_REAL

    @pytest.mark.parametrize("dtype", [np.complex64, np.complex128])
    def test_complex(self, dtype):
        assert scalar_domain(dtype) == DOMAIN_COMPLEX

    def test_generic(self):
        assert scalar_domain(object) == DOMAIN_GENERIC

    def test_integer_has_no_domain(self):
        with pytest.raises(ValueError, match="no scalar domain"):
            scalar_domain(np.int64)


class TestScalarProtocol:

    @pytest.mark.parametrize("value", [1, 2.5, 1 + 2j, Fraction(1, 3), np.float32(1.0)])
    def test_numbers_conform(self, value):
        assert isinstance(value, Scalar)

    @pytest.mark.parametrize("value", ["x", None, [1, 2]])
    def test_non_numbers_do_not_conform(self, value):
        assert not isinstance(value, Scalar)


# ═══════════════════════════════════════════════════════════════════════
# Tolerance tiers
# ═══════════════════════════════════════════════════════════════════════


class TestPivotTolerance:

    def test_tier_names(self):
        assert FP64.name == "fp64"
        assert FP32.name == "fp32"
        assert FP16.name == "fp16"
        assert EXACT.name == "exact"

    def test_relative_threshold(self):
        assert FP64.threshold(10.0) == pytest.approx(1e-12)
        assert FP32.threshold(2.0) == pytest.approx(2e-5)
        assert FP16.threshold(3.0) == pytest.approx(3e-2)

    def test_absolute_part(self):
        tol = PivotTolerance(rtol=1e-10, atol=1e-3, ill_conditioned_ratio=0.0,
                             name="custom", description="")
        assert tol.threshold(1.0) == pytest.approx(1e-3 + 1e-10)

    def test_exact_threshold_is_zero(self):
        assert EXACT.threshold(Fraction(7, 2)) == 0

    def test_frozen(self):
        with pytest.raises(AttributeError):
            FP64.rtol = 1.0

    def test_tiers_ordered(self):
        assert EXACT.rtol < FP64.rtol < FP32.rtol < FP16.rtol


class TestSelectPivotTolerance:

    @pytest.mark.parametrize("dtype", [np.float64, np.complex128, np.longdouble])
    def test_double_precision(self, dtype):
        assert select_pivot_tolerance(dtype) is FP64

    @pytest.mark.parametrize("dtype", [np.float32, np.complex64])
    def test_single_precision(self, dtype):
        assert select_pivot_tolerance(dtype) is FP32

    def test_half_precision(self):
        assert select_pivot_tolerance(np.float16) is FP16

    def test_generic(self):
        assert select_pivot_tolerance(object) is EXACT

    @pytest.mark.parametrize("dtype", [np.float16, np.float32, np.float64, np.complex64])
    def test_tier_never_tighter_than_rounding(self, dtype):
        assert select_pivot_tolerance(dtype).rtol > machine_epsilon(dtype)


# ═══════════════════════════════════════════════════════════════════════
# Precision helpers
# ═══════════════════════════════════════════════════════════════════════


class TestPrecision:

    def test_machine_epsilon_default_is_double(self):
        assert machine_epsilon() == np.finfo(np.float64).eps

    @pytest.mark.parametrize("dtype", [np.float16, np.float32, np.float64])
    def test_machine_epsilon_real(self, dtype):
        assert machine_epsilon(dtype) == float(np.finfo(dtype).eps)

    def test_machine_epsilon_complex_uses_real_part(self):
        assert machine_epsilon(np.complex64) == pytest.approx(np.finfo(np.float32).eps)

    def test_condition_number_identity(self):
        assert condition_number(np.eye(4)) == pytest.approx(1.0)

    def test_condition_number_diagonal(self):
        assert condition_number(np.diag([10.0, 1.0, 0.1])) == pytest.approx(100.0)

    def test_condition_number_exactly_singular(self):
        assert condition_number(np.array([[1.0, 0.0], [0.0, 0.0]])) == np.inf

    def test_condition_number_generic_is_none(self):
        values = np.array([[Fraction(1), Fraction(0)], [Fraction(0), Fraction(1)]], dtype=object)
        assert condition_number(values) is None

    def test_condition_number_empty_is_none(self):
        assert condition_number(np.zeros((0, 0))) is None


# ═══════════════════════════════════════════════════════════════════════
# Timing
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_recorded(self):
        timer = Timer()
        timer.start()
        with timer.section("elimination"):
            time.sleep(0.001)
        with timer.section("unpermute"):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {"total_seconds", "elimination", "unpermute"}
        assert result["total_seconds"] >= result["elimination"] > 0

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("step"):
            time.sleep(0.001)
        first = timer._sections["step"]
        with timer.section("step"):
            time.sleep(0.001)
        timer.stop()
        assert timer.result()["step"] > first

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()
