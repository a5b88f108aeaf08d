"""Tests for the Frobenius and spectral norms."""

import math

import numpy as np
import pytest

from linmat import Matrix, frobenius_norm, make_zeros, spectral_norm


class TestFrobeniusNorm:
    """Test frobenius_norm()."""

    def test_two_three_matrix(self, two_three_matrix):
        """Test the norm of the 2/3 matrix is sqrt(66)."""
        assert two_three_matrix.frobenius_norm() == pytest.approx(8.1240384, abs=1e-6)

    def test_matches_numpy(self, random_matrix_factory):
        """Test agreement with numpy's Frobenius norm."""
        matrix = random_matrix_factory(4, 6, seed=7)
        assert frobenius_norm(matrix) == pytest.approx(np.linalg.norm(matrix.to_numpy(), "fro"))

    def test_zero_matrix(self):
        """Test the norm of a zero matrix is zero."""
        assert frobenius_norm(make_zeros(3, 2)) == 0.0

    def test_empty_matrix(self):
        """Test a matrix without elements has norm zero."""
        assert frobenius_norm(Matrix(0, 3)) == 0.0

    def test_negative_entries(self):
        """Test negative entries contribute their square."""
        assert frobenius_norm(Matrix([[-3, 4]])) == 5.0

    def test_keeps_dtype(self):
        """Test the result has the matrix scalar type."""
        assert frobenius_norm(Matrix([[3, 4]], dtype=np.float32)).dtype == np.float32


class TestSpectralNorm:
    """Test spectral_norm() by power iteration."""

    def test_two_three_matrix(self, two_three_matrix):
        """Test the largest singular value of the 2/3 matrix is 8."""
        assert two_three_matrix.spectral_norm(rng=0) == pytest.approx(8.0, rel=1e-12)

    def test_rectangular_matrix(self):
        """Test a non-square operand uses a seed of length cols."""
        matrix = Matrix([[3, 0], [0, 4], [0, 0]])
        assert spectral_norm(matrix, rng=1) == pytest.approx(4.0, rel=1e-9)

    def test_wide_matrix(self):
        """Test a wide operand agrees with numpy's 2-norm."""
        matrix = Matrix([[1, 2, 3], [4, 5, 6]])
        expected = np.linalg.norm(matrix.to_numpy(), 2)
        assert spectral_norm(matrix, rng=2) == pytest.approx(expected, rel=1e-9)

    def test_matches_numpy_on_random_matrix(self, random_matrix_factory):
        """Test agreement with the largest singular value from numpy."""
        matrix = random_matrix_factory(5, 5, seed=11)
        expected = np.linalg.norm(matrix.to_numpy(), 2)
        assert spectral_norm(matrix, rng=3) == pytest.approx(expected, rel=1e-6)

    def test_same_seed_is_deterministic(self, scenario_matrix):
        """Test a fixed seed reproduces the same estimate bit for bit."""
        first = spectral_norm(scenario_matrix, rng=42, max_iter=5)
        second = spectral_norm(scenario_matrix, rng=42, max_iter=5)
        assert first == second

    def test_accepts_generator(self, two_three_matrix):
        """Test an explicit numpy Generator can be supplied."""
        result = spectral_norm(two_three_matrix, rng=np.random.default_rng(5))
        assert result == pytest.approx(8.0, rel=1e-12)

    def test_max_iter_from_settings(self, monkeypatch, two_three_matrix):
        """Test the default iteration count comes from LINMAT_MAX_ITER."""
        monkeypatch.setenv("LINMAT_MAX_ITER", "3")
        from_settings = spectral_norm(two_three_matrix, rng=9)
        explicit = spectral_norm(two_three_matrix, rng=9, max_iter=3)
        assert from_settings == explicit

    def test_zero_matrix_is_nan(self):
        """Test the zero matrix degenerates to NaN instead of raising."""
        assert math.isnan(spectral_norm(make_zeros(3, 3), rng=0))
