"""
twopoint - Two-Point Spatial Statistics of Grid Data.

A Python package for computing normalized two-point correlation functions
of 1D, 2D and 3D fields sampled on regular grids, using Fourier (FFT)
convolution.

    Features
    --------
    - Auto- and cross-correlation of scalar or indicator fields
    - Periodic or non-periodic boundaries, chosen per axis
    - Partial datasets with missing samples (masks)
    - Normalization by the number of sampled pairs at each lag
    - Cutoff on the largest lag returned
    - Synthetic two-phase microstructures for testing

Quick Start
-----------
>>> import numpy as np
>>> from twopoint import two_phase_field, compute_spatial_statistics
>>> rng = np.random.default_rng(42)
>>> phase = two_phase_field(dim=2, N=128, volume_fraction=0.4, rng=rng)
>>> T, lags = compute_spatial_statistics(phase, periodic=True, cutoff=20)

References
----------
Torquato, S., 2002. Random Heterogeneous Materials: Microstructure and
Macroscopic Properties. Springer, New York.

License
-------
BSD-3-Clause
"""

__version__ = "0.1.0"

# Statistics
from .analysis import (
    compute_spatial_statistics,
    SpatialStatistics,
    StatisticsOptions,
    ShapeMismatchError,
    InvalidOptionError,
    resolve_options,
    convolve,
    pair_counts,
    lag_values,
    truncate,
    centered,
)

# Generators
from .generators import (
    matern_spectrum,
    matern_field,
    two_phase_field,
)

__all__ = [
    # Version
    "__version__",
    # Statistics
    "compute_spatial_statistics",
    "SpatialStatistics",
    "StatisticsOptions",
    "ShapeMismatchError",
    "InvalidOptionError",
    "resolve_options",
    # Building blocks
    "convolve",
    "pair_counts",
    "lag_values",
    "truncate",
    "centered",
    # Generators
    "matern_spectrum",
    "matern_field",
    "two_phase_field",
]
