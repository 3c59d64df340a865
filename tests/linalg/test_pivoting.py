"""
Tests for pivot selection and permutation bookkeeping.
"""

from fractions import Fraction

import numpy as np
import pytest

from pydense.core.compute.linalg.pivoting import (
    magnitudes,
    max_magnitude,
    permutation_sign,
    pivot_permutation,
    select_pivot,
)


def _all(n):
    return np.arange(n, dtype=np.intp)


# ═══════════════════════════════════════════════════════════════════════
# Magnitudes
# ═══════════════════════════════════════════════════════════════════════


class TestMagnitudes:

    def test_real_absolute_value(self):
        np.testing.assert_array_equal(magnitudes(np.array([-3.0, 2.0])), [3.0, 2.0])

    def test_complex_modulus(self):
        np.testing.assert_allclose(magnitudes(np.array([3 + 4j, -1j])), [5.0, 1.0])

    def test_generic_keeps_element_type(self):
        values = np.array([Fraction(-1, 2), Fraction(3, 4)], dtype=object)
        result = magnitudes(values)
        assert result[0] == Fraction(1, 2)
        assert isinstance(result[1], Fraction)

    def test_max_magnitude(self):
        assert max_magnitude(np.array([[1.0, -7.0], [2.0, 3.0]])) == 7.0

    def test_max_magnitude_empty(self):
        assert max_magnitude(np.zeros((0, 0))) == 0


# ═══════════════════════════════════════════════════════════════════════
# select_pivot
# ═══════════════════════════════════════════════════════════════════════


class TestSelectPivot:

    def test_largest_magnitude(self):
        A = np.array([[1.0, 2.0], [-5.0, 3.0]])
        assert select_pivot(A, _all(2), _all(2)) == (1, 0, 5.0)

    def test_tie_takes_first_in_row_major_order(self):
        A = np.array([[1.0, 4.0], [-4.0, 4.0]])
        row, col, magnitude = select_pivot(A, _all(2), _all(2))
        assert (row, col) == (0, 1)
        assert magnitude == 4.0

    def test_restricted_to_free_rows_and_cols(self):
        A = np.array([
            [9.0, 0.0, 0.0],
            [0.0, 1.0, 2.0],
            [0.0, 3.0, 1.0],
        ])
        row, col, _ = select_pivot(A, np.array([1, 2]), np.array([1, 2]))
        assert (row, col) == (2, 1)

    def test_complex_uses_modulus_not_real_part(self):
        A = np.array([[1.0, 0.5], [0.2, 0.1 + 5j]])
        row, col, magnitude = select_pivot(A, _all(2), _all(2))
        assert (row, col) == (1, 1)
        assert magnitude == pytest.approx(abs(0.1 + 5j))

    def test_generic_scalars(self):
        A = np.array([[Fraction(1, 3), Fraction(-2, 3)], [Fraction(1, 2), Fraction(0)]], dtype=object)
        row, col, magnitude = select_pivot(A, _all(2), _all(2))
        assert (row, col) == (0, 1)
        assert magnitude == Fraction(2, 3)


# ═══════════════════════════════════════════════════════════════════════
# Permutations
# ═══════════════════════════════════════════════════════════════════════


class TestPermutationSign:

    def test_identity_is_even(self):
        assert permutation_sign(_all(5)) == 1

    def test_single_transposition_is_odd(self):
        assert permutation_sign(np.array([1, 0, 2])) == -1

    def test_three_cycle_is_even(self):
        assert permutation_sign(np.array([1, 2, 0])) == 1

    def test_two_transpositions(self):
        assert permutation_sign(np.array([1, 0, 3, 2])) == 1

    def test_empty(self):
        assert permutation_sign(np.array([], dtype=np.intp)) == 1

    @pytest.mark.parametrize("seed", range(5))
    def test_matches_determinant_of_permutation_matrix(self, seed):
        perm = np.random.default_rng(seed).permutation(6)
        P = np.eye(6)[perm]
        assert permutation_sign(perm) == round(np.linalg.det(P))


class TestPivotPermutation:

    def test_maps_rows_to_cols(self):
        perm = pivot_permutation(np.array([2, 0, 1]), np.array([0, 1, 2]))
        np.testing.assert_array_equal(perm, [1, 2, 0])

    def test_diagonal_pivots_give_identity(self):
        rows = np.array([1, 0, 2])
        np.testing.assert_array_equal(pivot_permutation(rows, rows), [0, 1, 2])
