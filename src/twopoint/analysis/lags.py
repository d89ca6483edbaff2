"""
Lag coordinates and cutoff truncation for FFT-ordered correlation arrays.

Correlation arrays computed through FFTs are stored in FFT-native order:
zero lag first, then increasing positive lags, then the negative lags with
decreasing magnitude. The lag sequences returned here follow the same order
and are deliberately NOT sorted; use :func:`centered` to obtain a monotonic
layout for display.

License: BSD-3-Clause
"""

import numpy as np
from numpy.fft import fftshift


def lag_values(n: int) -> np.ndarray:
    """
    Signed lags represented by each position of an FFT-ordered axis.

    Parameters
    ----------
    n : int
        Axis length (n >= 1).

    Returns
    -------
    lags : ndarray of int
        ``[0, 1, ..., n//2 - 1, -n//2, ..., -1]`` for even n and
        ``[0, 1, ..., n//2, -n//2, ..., -1]`` for odd n.

    Examples
    --------
    >>> lag_values(4)
    array([ 0,  1, -2, -1])
    >>> lag_values(5)
    array([ 0,  1,  2, -2, -1])
    """
    if n < 1:
        raise ValueError(f"Axis length must be positive, got {n}")
    half = n // 2
    positive = np.arange(n - half)
    negative = -np.arange(half, 0, -1)
    return np.concatenate([positive, negative])


def truncate(
    T: np.ndarray,
    cutoff: tuple[float, ...],
) -> tuple[np.ndarray, tuple[np.ndarray, ...]]:
    """
    Compute lag coordinates of ``T`` and drop every lag beyond the cutoff.

    Parameters
    ----------
    T : ndarray
        Correlation array in FFT-native order.
    cutoff : tuple of float
        Maximum absolute lag retained along each axis.

    Returns
    -------
    T_cut : ndarray
        ``T`` with all hyperplanes where ``|lag| > cutoff[i]`` removed.
    lags : tuple of ndarray
        Retained lag values per axis, in the order of ``T_cut``.

    Raises
    ------
    ValueError
        If ``cutoff`` does not provide one value per axis of ``T``.
    """
    if len(cutoff) != T.ndim:
        raise ValueError(f"Expected {T.ndim} cutoff values, got {len(cutoff)}")

    # Keep masks come from the untouched lag sequences of every axis
    all_lags = [lag_values(n) for n in T.shape]
    keep = [np.abs(lags) <= c for lags, c in zip(all_lags, cutoff)]

    for axis, axis_keep in enumerate(keep):
        if not axis_keep.all():
            T = np.compress(axis_keep, T, axis=axis)

    return T, tuple(lags[k] for lags, k in zip(all_lags, keep))


def centered(
    T: np.ndarray,
    lags: tuple[np.ndarray, ...],
) -> tuple[np.ndarray, tuple[np.ndarray, ...]]:
    """
    Shift an FFT-ordered correlation array so that lags increase monotonically.

    Only valid for arrays whose lag sequences are contiguous, which is the
    case for the output of :func:`truncate`.

    Parameters
    ----------
    T : ndarray
        Correlation array in FFT-native order.
    lags : tuple of ndarray
        Lag values per axis, in the order of ``T``.

    Returns
    -------
    T_c : ndarray
        Shifted array with zero lag in the middle.
    lags_c : tuple of ndarray
        Ascending lag values per axis.
    """
    if len(lags) != T.ndim:
        raise ValueError(f"Expected {T.ndim} lag sequences, got {len(lags)}")
    return fftshift(T), tuple(fftshift(values) for values in lags)
