"""
Two-point statistics of grid data.

This module provides:

- Boundary-aware FFT correlation (periodic and non-periodic axes)
- Normalized auto- and cross-correlation of complete or masked fields
- Signed lag coordinates in FFT order and cutoff truncation
"""

from .convolution import (
    convolve,
    pair_counts,
)
from .lags import (
    lag_values,
    truncate,
    centered,
)
from .options import (
    StatisticsOptions,
    ShapeMismatchError,
    InvalidOptionError,
    resolve_options,
)
from .statistics import (
    SpatialStatistics,
    compute_spatial_statistics,
    correlate,
    is_autocorrelation,
)

__all__ = [
    # Convolution
    "convolve",
    "pair_counts",
    # Lags
    "lag_values",
    "truncate",
    "centered",
    # Options
    "StatisticsOptions",
    "ShapeMismatchError",
    "InvalidOptionError",
    "resolve_options",
    # Statistics
    "SpatialStatistics",
    "compute_spatial_statistics",
    "correlate",
    "is_autocorrelation",
]
