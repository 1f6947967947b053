"""
Test full-pivot LU decomposition.

Checks the factorization identity L @ U == A[p][:, q] over every supported
domain and shape (square, wide, tall, singular), the pivot order and the
fixed-width rational overflow behaviour.
"""

import pytest
import numpy as np
from fractions import Fraction as F

from pybuckingham import lu_decomposition_with_full_pivoting, RationalOverflowError
from pybuckingham._core.lu import _find_pivot


def frac_matrix(rows):
    """Object array of Fractions."""
    return np.array([[F(x) for x in row] for row in rows], dtype=object)


# reshape(1:12, 3, 4) in column-major order
A_3x4 = np.arange(1, 13).reshape(4, 3).T


class TestFactorizationInvariant:
    """L @ U equals the permuted input."""

    @pytest.mark.parametrize("shape", [(3, 3), (3, 5), (5, 3), (1, 4), (4, 1)])
    def test_float_random(self, shape):
        """Test random float matrices of several shapes."""
        np.random.seed(42)
        A = np.random.randn(*shape)
        lu = lu_decomposition_with_full_pivoting(A)
        assert lu.domain.name == 'float64'
        np.testing.assert_allclose(lu.L @ lu.U, A[lu.p][:, lu.q], atol=1e-12)

    @pytest.mark.parametrize("shape", [(3, 3), (2, 4), (4, 2)])
    def test_complex_random(self, shape):
        """Test random complex matrices."""
        np.random.seed(0)
        A = np.random.randn(*shape) + 1j * np.random.randn(*shape)
        lu = lu_decomposition_with_full_pivoting(A)
        assert lu.domain.name == 'complex128'
        np.testing.assert_allclose(lu.L @ lu.U, A[lu.p][:, lu.q], atol=1e-12)

    def test_integer_promoted_to_float(self):
        """Test integer input is factorized in float64."""
        A = np.array([[4, 3], [6, 3]])
        L, U, p, q = lu_decomposition_with_full_pivoting(A)
        assert U.dtype == np.float64
        np.testing.assert_array_equal(U, [[6.0, 3.0], [0.0, 1.0]])
        np.testing.assert_allclose(L, [[1.0, 0.0], [2 / 3, 1.0]])
        np.testing.assert_array_equal(p, [1, 0])
        np.testing.assert_array_equal(q, [0, 1])

    def test_complex_integer_promoted(self):
        """Test complex integer input is factorized in complex128."""
        A = np.array([[1 + 1j, 2], [3, 4 - 2j]], dtype=object)
        lu = lu_decomposition_with_full_pivoting(A)
        assert lu.domain.name == 'complex128'
        np.testing.assert_allclose(lu.L @ lu.U,
                                   A.astype(complex)[lu.p][:, lu.q], atol=1e-12)

    def test_singular_float(self):
        """Test singular wide float matrix."""
        A = A_3x4.astype(float)
        lu = lu_decomposition_with_full_pivoting(A)
        np.testing.assert_allclose(lu.L @ lu.U, A[lu.p][:, lu.q], atol=1e-12)
        np.testing.assert_array_equal(lu.p, [2, 0, 1])
        np.testing.assert_array_equal(lu.q, [3, 0, 2, 1])

    def test_singular_complex(self):
        """Test singular complex matrix stays within tolerance."""
        A = A_3x4.astype(complex)
        lu = lu_decomposition_with_full_pivoting(A)
        np.testing.assert_allclose(lu.L @ lu.U, A[lu.p][:, lu.q], atol=1e-12)

    def test_rational_exact(self):
        """Test exact rational factorization of a singular matrix."""
        A = frac_matrix(A_3x4)
        L, U, p, q = lu_decomposition_with_full_pivoting(A)

        expected_U = frac_matrix([[12, 3, 9, 6], [0, F(-3, 2), F(-1, 2), -1], [0, 0, 0, 0]])
        expected_L = frac_matrix([[1, 0, 0], [F(5, 6), 1, 0], [F(11, 12), F(1, 2), 1]])
        assert np.array_equal(U, expected_U)
        assert np.array_equal(L, expected_L)
        assert np.array_equal(L @ U, A[p][:, q])
        assert all(isinstance(x, F) for x in U.ravel())

    def test_integers_in_fraction_domain(self):
        """Test plain integers can be factorized exactly on request."""
        lu = lu_decomposition_with_full_pivoting(A_3x4, domain='fraction')
        assert lu.rank == 2
        assert np.array_equal(lu.reconstruct(), lu.permute(frac_matrix(A_3x4)))

    @pytest.mark.parametrize("rows", [
        [[2, 1, 1], [4, -6, 0], [-2, 7, 2]],
        [[1, 2, 3], [2, 4, 6]],
        [[1, 2], [2, 4], [3, 6]],
        [[0, 0], [0, 0]],
        [[0, 1, 0], [0, 0, 0], [0, 0, 1]],
    ])
    def test_exact_shapes(self, rows):
        """Test exact identity on square, wide, tall and zero matrices."""
        A = frac_matrix(rows)
        lu = lu_decomposition_with_full_pivoting(A)
        assert np.array_equal(lu.L @ lu.U, A[lu.p][:, lu.q])

    def test_bigint_fractions(self):
        """Test Hilbert-like matrix with large denominators."""
        A = np.empty((4, 3), dtype=object)
        for i in range(4):
            for j in range(3):
                A[i, j] = F(1, 10001 + i + 4 * j)
        lu = lu_decomposition_with_full_pivoting(A)
        assert lu.domain.name == 'fraction'
        assert lu.rank == 3
        assert np.array_equal(lu.L @ lu.U, A[lu.p][:, lu.q])


class TestFactorShape:
    """Test structure of the factors."""

    def test_shapes(self):
        """Test L is n x n and U is n x m."""
        lu = lu_decomposition_with_full_pivoting(frac_matrix(A_3x4))
        assert lu.L.shape == (3, 3)
        assert lu.U.shape == (3, 4)
        assert len(lu.p) == 3
        assert len(lu.q) == 4

    def test_triangular(self):
        """Test L is unit lower and U upper triangular."""
        np.random.seed(1)
        A = np.random.randn(4, 6)
        L, U, p, q = lu_decomposition_with_full_pivoting(A)
        np.testing.assert_array_equal(np.diag(L), np.ones(4))
        assert np.all(np.triu(L, 1) == 0)
        assert np.all(np.tril(U, -1) == 0)

    def test_pivots_decrease(self):
        """Test full pivoting puts the largest entry first."""
        np.random.seed(3)
        A = np.random.randn(5, 5)
        lu = lu_decomposition_with_full_pivoting(A)
        assert abs(lu.U[0, 0]) == np.max(np.abs(A))

    def test_input_not_modified(self):
        """Test the input matrix is left untouched."""
        A = frac_matrix([[1, 2], [3, 4]])
        before = A.copy()
        lu_decomposition_with_full_pivoting(A)
        assert np.array_equal(A, before)

        B = np.array([[1.0, 2.0], [3.0, 4.0]])
        B_before = B.copy()
        lu_decomposition_with_full_pivoting(B)
        np.testing.assert_array_equal(B, B_before)

    def test_empty(self):
        """Test empty matrices factorize with rank zero."""
        lu = lu_decomposition_with_full_pivoting(np.empty((0, 0), dtype=object))
        assert lu.rank == 0
        assert lu.U.shape == (0, 0)

        lu = lu_decomposition_with_full_pivoting(np.empty((0, 3), dtype=object))
        assert lu.rank == 0
        np.testing.assert_array_equal(lu.q, [0, 1, 2])


class TestPivotOrder:
    """Test the deterministic tie-break."""

    def test_column_major_tie_break(self):
        """Test ties go to the first maximum scanning columns outer."""
        A = frac_matrix([[0, 2], [2, 0]])
        lu = lu_decomposition_with_full_pivoting(A)
        np.testing.assert_array_equal(lu.p, [1, 0])
        np.testing.assert_array_equal(lu.q, [0, 1])

    def test_find_pivot_object_and_float_agree(self):
        """Test both scan implementations pick the same entry."""
        mag = np.array([[1, 3, 3], [3, 0, 1]])
        assert _find_pivot(mag.astype(float)) == (1, 0)
        assert _find_pivot(np.array([[F(x) for x in r] for r in mag], dtype=object)) == (1, 0)

    def test_all_equal(self):
        """Test a constant matrix needs no swaps."""
        lu = lu_decomposition_with_full_pivoting(frac_matrix([[1, 1], [1, 1]]))
        np.testing.assert_array_equal(lu.p, [0, 1])
        np.testing.assert_array_equal(lu.q, [0, 1])
        assert lu.rank == 1


class TestTolerance:
    """Test rank decisions."""

    def test_exact_tolerance_zero(self):
        """Test a tiny but nonzero rational is a usable pivot."""
        A = frac_matrix([[1, 0], [0, F(1, 10**30)]])
        lu = lu_decomposition_with_full_pivoting(A)
        assert lu.tol == 0
        assert lu.rank == 2

    def test_float_tolerance(self):
        """Test rounding noise below min(n, m) * eps ends elimination."""
        A = np.array([[1.0, 0.0], [0.0, 1e-17]])
        lu = lu_decomposition_with_full_pivoting(A)
        assert lu.tol == 2 * np.finfo(np.float64).eps
        assert lu.rank == 1

    def test_explicit_tolerance(self):
        """Test a user tolerance overrides the default."""
        A = np.array([[1.0, 0.0], [0.0, 1e-3]])
        assert lu_decomposition_with_full_pivoting(A, tol=1e-2).rank == 1
        assert lu_decomposition_with_full_pivoting(A).rank == 2


class TestRationalOverflow:
    """Fixed-width rationals overflow loudly; arbitrary precision does not."""

    # 1/(2^31 - 1) * 1/(2^61 - 1) needs a ~92-bit denominator
    OVERFLOW_ROWS = [[1, F(1, 2**61 - 1)], [F(1, 2**31 - 1), F(1, 3)]]

    def test_rational64_overflow(self):
        """Test rational64 raises RationalOverflowError."""
        A = frac_matrix(self.OVERFLOW_ROWS)
        with pytest.raises(RationalOverflowError, match="64-bit"):
            lu_decomposition_with_full_pivoting(A, domain='rational64')

    def test_overflow_is_overflow_error(self):
        """Test the overflow is distinguishable and still an OverflowError."""
        A = frac_matrix(self.OVERFLOW_ROWS)
        with pytest.raises(OverflowError):
            lu_decomposition_with_full_pivoting(A, domain='rational64')

    def test_fraction_succeeds(self):
        """Test the same values factorize exactly with arbitrary precision."""
        A = frac_matrix(self.OVERFLOW_ROWS)
        lu = lu_decomposition_with_full_pivoting(A, domain='fraction')
        assert lu.rank == 2
        assert np.array_equal(lu.L @ lu.U, A[lu.p][:, lu.q])

    def test_rational64_near_limit(self):
        """Test results that still fit in 64 bits are accepted."""
        big = 2**63 - 1
        A = frac_matrix([[1, 1], [F(big, 2), 1]])
        lu = lu_decomposition_with_full_pivoting(A, domain='rational64')
        assert lu.U[1, 1] == F(big - 2, big)
        assert np.array_equal(lu.L @ lu.U, A[lu.p][:, lu.q])

    def test_rational64_input_out_of_range(self):
        """Test entries that do not fit are rejected on conversion."""
        A = np.array([[2**64, 1]], dtype=object)
        with pytest.raises(RationalOverflowError):
            lu_decomposition_with_full_pivoting(A, domain='rational64')


class TestInputValidation:
    """Test error handling on bad input."""

    def test_not_2d(self):
        """Test 1-D input is rejected."""
        with pytest.raises(ValueError, match="2-dimensional"):
            lu_decomposition_with_full_pivoting(np.array([1.0, 2.0]))

    def test_nan(self):
        """Test NaN is rejected."""
        with pytest.raises(ValueError, match="NaN or Inf"):
            lu_decomposition_with_full_pivoting(np.array([[1.0, np.nan]]))

    @pytest.mark.parametrize("bad", [np.nan, np.inf, complex(np.nan, 0)])
    def test_nan_in_object_array(self, bad):
        """Test non-finite entries of object arrays are rejected."""
        A = np.array([[bad, 1.0], [1.0, 1.0]], dtype=object)
        with pytest.raises(ValueError, match="NaN or Inf"):
            lu_decomposition_with_full_pivoting(A)

    def test_nan_beside_fraction(self):
        """Test NaN mixed with Fractions in nested lists is rejected."""
        with pytest.raises(ValueError, match="NaN or Inf"):
            lu_decomposition_with_full_pivoting([[F(1, 2), float("nan")]])

    def test_float_in_exact_domain(self):
        """Test floats are not silently approximated as rationals."""
        with pytest.raises(TypeError):
            lu_decomposition_with_full_pivoting(np.array([[0.1, 1.0]]), domain='fraction')

    def test_nested_lists(self):
        """Test plain nested lists are accepted."""
        lu = lu_decomposition_with_full_pivoting([[F(1, 2), 1], [1, 2]])
        assert lu.domain.name == 'fraction'
