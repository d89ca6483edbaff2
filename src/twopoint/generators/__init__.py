"""
Synthetic microstructure generators.

This module provides periodic test data for the spatial statistics:

- Matérn covariance Gaussian random fields
- Two-phase indicator fields with a prescribed volume fraction
"""

from .microstructure import matern_spectrum, matern_field, two_phase_field

__all__ = [
    "matern_spectrum",
    "matern_field",
    "two_phase_field",
]
