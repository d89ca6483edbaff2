"""
Boundary-aware FFT correlation of N-dimensional grid data.

The correlation sum

    T(r) = Σ_x a(x + r) · conj(b(x))

is evaluated as ``IFFT(FFT(a) · conj(FFT(b)))``. Along periodic axes the
transform has the natural axis length, so the sum wraps around exactly.
Along non-periodic axes the data are zero-padded to at least twice their
length before transforming, so that no pair ever wraps, and the result is
cropped back to the original length afterwards.

The output is always in FFT-native order (see :func:`twopoint.analysis.lags.lag_values`).

License: BSD-3-Clause
"""

import numpy as np
import scipy.fft

from .lags import lag_values


def _boundary_flags(periodic, ndim: int) -> tuple[bool, ...]:
    flags = np.asarray(periodic, dtype=bool)
    if flags.ndim == 0:
        return (bool(flags),) * ndim
    if flags.shape != (ndim,):
        raise ValueError(f"Expected {ndim} periodic flags, got {flags.size}")
    return tuple(bool(p) for p in flags)


def transform_shape(
    shape: tuple[int, ...],
    periodic: tuple[bool, ...],
    real: bool = True,
) -> tuple[int, ...]:
    """
    Transform lengths used for each axis.

    Periodic axes keep their length; non-periodic axes are padded to the next
    efficient FFT size of at least ``2 * n``.
    """
    return tuple(
        n if p else scipy.fft.next_fast_len(2 * n, real=real)
        for n, p in zip(shape, periodic)
    )


def convolve(
    periodic,
    a: np.ndarray,
    b: np.ndarray | None = None,
    workers: int | None = None,
) -> np.ndarray:
    """
    Correlate ``a`` with ``b`` (or with itself) under per-axis boundary conditions.

    Parameters
    ----------
    periodic : bool or sequence of bool
        Boundary condition per axis. A single bool applies to all axes.
    a : ndarray
        First operand (tail of the lag vector).
    b : ndarray, optional
        Second operand, same shape as ``a``. If None, ``a`` is correlated
        with itself.
    workers : int, optional
        Number of threads used by :mod:`scipy.fft`. Does not change the result.

    Returns
    -------
    T : ndarray
        Correlation sums with the shape of ``a``, in FFT-native lag order.
        Real-valued when both operands are real.

    Examples
    --------
    >>> import numpy as np
    >>> a = np.array([1.0, 0.0, 1.0, 1.0, 0.0])
    >>> np.round(convolve(True, a), 6)
    array([3., 1., 2., 2., 1.])
    """
    a = np.asarray(a)
    flags = _boundary_flags(periodic, a.ndim)
    real = np.isrealobj(a) and (b is None or np.isrealobj(b))
    s = transform_shape(a.shape, flags, real=real)
    axes = tuple(range(a.ndim))

    if real:
        fa = scipy.fft.rfftn(a.astype(float, copy=False), s=s, axes=axes, workers=workers)
        if b is None:
            fb = fa
        else:
            fb = scipy.fft.rfftn(np.asarray(b, dtype=float), s=s, axes=axes, workers=workers)
        T = scipy.fft.irfftn(fa * np.conj(fb), s=s, axes=axes, workers=workers)
    else:
        fa = scipy.fft.fftn(a, s=s, axes=axes, workers=workers)
        fb = fa if b is None else scipy.fft.fftn(np.asarray(b), s=s, axes=axes, workers=workers)
        T = scipy.fft.ifftn(fa * np.conj(fb), s=s, axes=axes, workers=workers)

    # Crop padded axes: positive lags sit at the start, negative lags at the end
    for axis, (n, p) in enumerate(zip(a.shape, flags)):
        if not p:
            T = np.take(T, lag_values(n) % s[axis], axis=axis)

    return T


def pair_counts(
    periodic,
    mask1: np.ndarray,
    mask2: np.ndarray | None = None,
    workers: int | None = None,
) -> np.ndarray:
    """
    Number of valid sample pairs separated by each lag.

    This is the same correlation as :func:`convolve` applied to indicator
    data. The counts are integers, so the FFT round-off is removed by
    rounding; offsets without any overlapping pair are exactly zero.

    Parameters
    ----------
    periodic : bool or sequence of bool
        Boundary condition per axis.
    mask1 : ndarray
        Indicator of populated samples at the tail of the lag vector. Pass
        ``np.ones(shape)`` for complete data.
    mask2 : ndarray, optional
        Indicator of populated samples at the head of the lag vector. If None,
        ``mask1`` is used for both ends.
    workers : int, optional
        Number of threads used by :mod:`scipy.fft`.

    Returns
    -------
    counts : ndarray of float
        Non-negative pair counts, in FFT-native lag order.
    """
    counts = np.real(convolve(periodic, mask1, mask2, workers=workers))
    return np.maximum(np.rint(counts), 0.0)
