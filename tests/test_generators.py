"""Tests for synthetic microstructure generators."""

import numpy as np
import pytest
from scipy.integrate import quad

from twopoint import matern_field, matern_spectrum, two_phase_field


class TestMaternGenerator:
    """Tests for Matérn random field generator."""

    @pytest.mark.parametrize("dim", [1, 2, 3])
    def test_shape(self, dim):
        """Test that the field has N samples along every axis."""
        N = 16
        field = matern_field(dim=dim, N=N)
        assert field.shape == (N,) * dim

    def test_real_valued(self):
        """Test that output is real-valued."""
        field = matern_field(dim=2, N=64)
        assert np.isreal(field).all()

    def test_zero_mean_unit_std(self):
        """Test that the field is centered and scaled to sigma."""
        field = matern_field(dim=2, N=64, sigma=2.0, rng=np.random.default_rng(0))
        np.testing.assert_almost_equal(field.mean(), 0.0, decimal=10)
        np.testing.assert_almost_equal(field.std(), 2.0, decimal=10)

    def test_reproducibility(self):
        """Test that RNG produces reproducible results."""
        field1 = matern_field(dim=2, N=64, rng=np.random.default_rng(42))
        field2 = matern_field(dim=2, N=64, rng=np.random.default_rng(42))
        np.testing.assert_array_equal(field1, field2)

    def test_different_seeds(self):
        """Test that different seeds produce different results."""
        field1 = matern_field(dim=2, N=64, rng=np.random.default_rng(42))
        field2 = matern_field(dim=2, N=64, rng=np.random.default_rng(123))
        assert not np.allclose(field1, field2)

    def test_spectrum_decreasing(self):
        """Test that the Matérn PSD decreases with the wavenumber."""
        k = np.linspace(0, 0.5, 50)
        S = matern_spectrum(k, sigma=1.0, dim=2, nu=1.5, cor_length=4.0)
        assert np.all(np.diff(S) < 0)

    @pytest.mark.parametrize("nu", [0.5, 1.5, 2.5])
    def test_spectrum_integrates_to_variance(self, nu):
        """Test that the 1D Matérn PSD integrates to sigma squared."""
        sigma = 1.7
        total, _ = quad(
            lambda k: matern_spectrum(k, sigma=sigma, dim=1, nu=nu, cor_length=3.0),
            -np.inf,
            np.inf,
        )
        np.testing.assert_allclose(total, sigma**2, rtol=1e-6)

    def test_spectrum_invalid_parameters(self):
        """Test that the PSD rejects non-positive nu and correlation length."""
        with pytest.raises(ValueError):
            matern_spectrum(0.1, sigma=1.0, dim=2, nu=0, cor_length=1.0)
        with pytest.raises(ValueError):
            matern_spectrum(0.1, sigma=1.0, dim=2, nu=1.5, cor_length=-1.0)

    def test_invalid_nu(self):
        """Test that non-positive nu raises error."""
        with pytest.raises(ValueError):
            matern_field(nu=0)
        with pytest.raises(ValueError):
            matern_field(nu=-1)

    def test_invalid_correlation_length(self):
        """Test that non-positive correlation length raises error."""
        with pytest.raises(ValueError):
            matern_field(correlation_length=0)

    def test_invalid_dimension(self):
        """Test that invalid dimension raises error."""
        with pytest.raises(ValueError):
            matern_field(dim=4)


class TestTwoPhaseGenerator:
    """Tests for two-phase indicator fields."""

    def test_indicator_values(self):
        """Test that only 0 and 1 occur."""
        phase = two_phase_field(dim=2, N=64, rng=np.random.default_rng(1))
        assert set(np.unique(phase)) <= {0.0, 1.0}

    @pytest.mark.parametrize("volume_fraction", [0.1, 0.35, 0.5, 0.8])
    def test_volume_fraction(self, volume_fraction):
        """Test that the phase fraction matches the target."""
        phase = two_phase_field(
            dim=2, N=64, volume_fraction=volume_fraction, rng=np.random.default_rng(2)
        )
        assert abs(phase.mean() - volume_fraction) < 1e-3

    def test_extreme_fractions(self):
        """Test empty and full phases."""
        assert two_phase_field(dim=1, N=32, volume_fraction=0.0).sum() == 0
        assert two_phase_field(dim=1, N=32, volume_fraction=1.0).sum() == 32

    def test_invalid_volume_fraction(self):
        """Test that fractions outside [0, 1] raise error."""
        with pytest.raises(ValueError):
            two_phase_field(volume_fraction=1.5)

    def test_verbose(self, capsys):
        """Test that verbose prints the generation parameters."""
        two_phase_field(dim=1, N=32, verbose=True)
        assert "Matérn Random Field" in capsys.readouterr().out
