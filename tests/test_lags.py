"""Tests for lag coordinates and cutoff truncation."""

import numpy as np
import pytest

from twopoint import lag_values, truncate, centered


class TestLagValues:
    """Tests for lag_values."""

    def test_even_length(self):
        """Test FFT order for an even axis."""
        np.testing.assert_array_equal(lag_values(6), [0, 1, 2, -3, -2, -1])

    def test_odd_length(self):
        """Test FFT order for an odd axis."""
        np.testing.assert_array_equal(lag_values(5), [0, 1, 2, -2, -1])

    def test_single_sample(self):
        """Test that a single sample only has the zero lag."""
        np.testing.assert_array_equal(lag_values(1), [0])

    @pytest.mark.parametrize("n", [2, 3, 8, 9, 64, 101])
    def test_matches_fft_frequencies(self, n):
        """Test that lags follow numpy's FFT bin ordering."""
        expected = np.rint(np.fft.fftfreq(n) * n).astype(int)
        lags = lag_values(n)
        assert len(lags) == n
        np.testing.assert_array_equal(lags, expected)

    def test_integer_dtype(self):
        """Test that lags are integers."""
        assert np.issubdtype(lag_values(10).dtype, np.integer)

    def test_invalid_length(self):
        """Test that non-positive lengths raise an error."""
        with pytest.raises(ValueError):
            lag_values(0)


class TestTruncate:
    """Tests for truncate."""

    def test_default_cutoff_keeps_everything(self):
        """Test that half the axis length truncates nothing."""
        T = np.arange(10 * 7, dtype=float).reshape(10, 7)
        T_cut, lags = truncate(T, (5.0, 3.5))
        np.testing.assert_array_equal(T_cut, T)
        np.testing.assert_array_equal(lags[0], lag_values(10))
        np.testing.assert_array_equal(lags[1], lag_values(7))

    def test_cutoff_drops_large_lags(self):
        """Test that only |lag| <= cutoff is kept, in FFT order."""
        T = np.arange(10, dtype=float)
        T_cut, (lags,) = truncate(T, (2,))
        np.testing.assert_array_equal(lags, [0, 1, 2, -2, -1])
        np.testing.assert_array_equal(T_cut, [0, 1, 2, 8, 9])

    def test_fractional_cutoff(self):
        """Test that a fractional cutoff rounds down in effect."""
        T_cut, (lags,) = truncate(np.zeros(10), (2.5,))
        np.testing.assert_array_equal(lags, [0, 1, 2, -2, -1])

    def test_zero_cutoff(self):
        """Test that a zero cutoff keeps only the origin."""
        T = np.random.default_rng(0).random((4, 5, 6))
        T_cut, lags = truncate(T, (0, 0, 0))
        assert T_cut.shape == (1, 1, 1)
        assert T_cut[0, 0, 0] == T[0, 0, 0]
        assert all(list(values) == [0] for values in lags)

    def test_axes_are_truncated_independently(self):
        """Test that each axis uses its own cutoff and keeps whole hyperplanes."""
        T = np.random.default_rng(1).random((12, 9, 8))
        T_cut, lags = truncate(T, (3, np.inf, 1))
        assert T_cut.shape == (7, 9, 3)
        assert [len(values) for values in lags] == [7, 9, 3]
        rows = [0, 1, 2, 3, 9, 10, 11]
        depth = [0, 1, 7]
        np.testing.assert_array_equal(T_cut, T[np.ix_(rows, np.arange(9), depth)])

    def test_wrong_number_of_cutoffs(self):
        """Test that a cutoff per axis is required."""
        with pytest.raises(ValueError):
            truncate(np.zeros((4, 4)), (1,))


class TestCentered:
    """Tests for centered."""

    def test_lags_become_ascending(self):
        """Test that centering sorts the lags and moves the origin to the middle."""
        T = np.arange(9, dtype=float)
        T_cut, lags = truncate(T, (3,))
        T_c, (lags_c,) = centered(T_cut, lags)
        np.testing.assert_array_equal(lags_c, [-3, -2, -1, 0, 1, 2, 3])
        np.testing.assert_array_equal(T_c, [6, 7, 8, 0, 1, 2, 3])

    def test_values_follow_their_lags(self):
        """Test that each value keeps its lag after centering in 2D."""
        T = np.random.default_rng(2).random((6, 5))
        T_cut, lags = truncate(T, (3, 2))
        T_c, lags_c = centered(T_cut, lags)
        for i, li in enumerate(lags_c[0]):
            for j, lj in enumerate(lags_c[1]):
                assert T_c[i, j] == T[li % 6, lj % 5]
