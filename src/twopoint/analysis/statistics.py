"""
Normalized two-point spatial statistics of grid data.

For an indicator field the normalized autocorrelation at lag r is the
probability that two points separated by r both fall in the phase:

    f2(r) = Σ_x m1(x + r) a1(x + r) · m2(x) a2(x) / Σ_x m1(x + r) m2(x)

where m1, m2 mark the populated samples (all ones for complete data). The
numerator and the denominator are both evaluated with the boundary-aware
FFT correlation of :mod:`twopoint.analysis.convolution`.

Experimental data always have non-periodic boundaries, so this is the
default; periodic axes are meant for simulated microstructures.

License: BSD-3-Clause
"""

from typing import NamedTuple

import numpy as np

from .convolution import convolve, pair_counts
from .lags import truncate
from .options import ShapeMismatchError, StatisticsOptions, resolve_options


class SpatialStatistics(NamedTuple):
    """Truncated correlation array and the signed lags of each of its axes."""

    statistics: np.ndarray
    lags: tuple[np.ndarray, ...]


def is_autocorrelation(field1: np.ndarray, field2: np.ndarray | None) -> bool:
    """
    Decide whether a pair of fields is treated as an autocorrelation.

    The second field is ignored when it is missing, empty, or element-wise
    equal to the first one.

    Raises
    ------
    ShapeMismatchError
        If both fields are given and their shapes differ.
    """
    if field2 is None or field2.size == 0:
        return True
    if field1.shape != field2.shape:
        raise ShapeMismatchError(
            f"The input fields have different shapes: {field1.shape} and {field2.shape}"
        )
    return bool(np.array_equal(field1, field2))


def _masked(field: np.ndarray, mask: np.ndarray) -> np.ndarray:
    # Unsampled values may be NaN
    return np.where(mask > 0, field, 0)


def correlate(
    field1: np.ndarray,
    field2: np.ndarray | None,
    opts: StatisticsOptions,
) -> np.ndarray:
    """
    Full-size (untruncated) correlation array of one or two fields.

    Parameters
    ----------
    field1 : ndarray
        Field at the tail of the lag vector.
    field2 : ndarray or None
        Field at the head of the lag vector; None for an autocorrelation.
    opts : StatisticsOptions
        Resolved options, see :func:`twopoint.analysis.options.resolve_options`.

    Returns
    -------
    T : ndarray
        Correlation in FFT-native lag order, with the shape of ``field1``.
        Lags without any valid pair are NaN when normalizing.
    """
    auto = is_autocorrelation(field1, field2)
    periodic = opts.periodic

    if opts.verbose:
        print(f"Spatial statistics ({'auto' if auto else 'cross'}-correlation):")
        print(f"    shape = {field1.shape}")
        print(f"    periodic = {periodic}")
        print(f"    masked = {opts.masked}")
        print(f"    normalize = {opts.normalize}")

    # Numerator
    if auto:
        a1 = field1 if not opts.masked else _masked(field1, opts.mask1)
        T = convolve(periodic, a1, workers=opts.workers)
    else:
        if opts.masked:
            a1, a2 = _masked(field1, opts.mask1), _masked(field2, opts.mask2)
        else:
            a1, a2 = field1, field2
        T = convolve(periodic, a1, a2, workers=opts.workers)

    if not opts.normalize:
        return T

    # Denominator
    if not opts.masked:
        if all(periodic):
            return T / field1.size
        counts = pair_counts(periodic, np.ones(field1.shape), workers=opts.workers)
    elif auto:
        counts = pair_counts(periodic, opts.mask1, workers=opts.workers)
    else:
        counts = pair_counts(periodic, opts.mask1, opts.mask2, workers=opts.workers)

    with np.errstate(divide="ignore", invalid="ignore"):
        return np.where(counts > 0, T / counts, np.nan)


def compute_spatial_statistics(
    field1: np.ndarray,
    field2: np.ndarray | None = None,
    **options,
) -> SpatialStatistics:
    """
    Compute the two-point spatial statistics of one or two grid fields.

    Parameters
    ----------
    field1 : array_like
        1D, 2D or 3D field, at the tail of the lag vector.
    field2 : array_like, optional
        Field at the head of the lag vector, same shape as ``field1``. If
        None or empty, the autocorrelation of ``field1`` is computed. If it
        is element-wise equal to ``field1``, the autocorrelation is computed
        as well.
    normalize : bool, optional
        Divide by the number of sampled pairs at each lag. If False, only the
        correlation sums (numerator) are returned. Default is True.
    display : bool, optional
        Accepted for callers that plot the result; ignored here. Default is True.
    cutoff : float or sequence of float, optional
        Largest absolute lag retained along each axis. Infinite values fall
        back to the default, half the axis length.
    periodic : bool or sequence of bool, optional
        Periodic boundary condition per axis. Default is False for all axes.
    mask1, mask2 : array_like, optional
        Indicators of populated samples of the first and second field. When
        only one is given the other one is all ones.
    mask : array_like, optional
        Sets ``mask1`` and ``mask2`` to the same array.
    workers : int, optional
        Threads used by the FFTs.
    verbose : bool, optional
        Print diagnostics. Default is False.

    Returns
    -------
    result : SpatialStatistics
        ``(statistics, lags)``. ``statistics`` is in FFT-native order (zero lag
        first) and ``lags`` holds, for each axis, the signed lag of every
        position in that same order.

    Raises
    ------
    ShapeMismatchError
        If the fields, or the masks, do not share a shape.
    InvalidOptionError
        If an option is unknown or malformed.
    ValueError
        If the field is not 1D, 2D or 3D.

    Examples
    --------
    >>> import numpy as np
    >>> from twopoint import compute_spatial_statistics
    >>> rng = np.random.default_rng(0)
    >>> phase = (rng.random((64, 64)) < 0.3).astype(float)
    >>> T, lags = compute_spatial_statistics(phase, periodic=True, cutoff=10)
    >>> T.shape
    (21, 21)
    """
    field1 = np.asarray(field1)
    if field1.ndim not in (1, 2, 3):
        raise ValueError(f"Field must be 1D, 2D or 3D, got shape {field1.shape}")
    if field2 is not None:
        field2 = np.asarray(field2)

    opts = resolve_options(field1.shape, **options)
    T = correlate(field1, field2, opts)
    T, lags = truncate(T, opts.cutoff)

    if opts.verbose:
        print(f"    cutoff = {opts.cutoff}")
        print(f"    output shape = {T.shape}")

    return SpatialStatistics(T, lags)
