"""
Options of the spatial statistics computation.

Keyword options are validated once, before any transform is computed, and
collected in an immutable :class:`StatisticsOptions` record.

License: BSD-3-Clause
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


class ShapeMismatchError(ValueError):
    """Fields or masks that must share a shape do not."""


class InvalidOptionError(ValueError):
    """An option name is not recognized or its value cannot be used."""


# Recognized option names and the kind of value each expects
OPTION_KINDS = {
    "normalize": "bool",
    "display": "bool",
    "cutoff": "float or sequence of float (one per axis)",
    "periodic": "bool or sequence of bool (one per axis)",
    "mask1": "array, same shape as the first field",
    "mask2": "array, same shape as the second field",
    "mask": "array, sets mask1 and mask2",
    "workers": "int or None",
    "verbose": "bool",
}


@dataclass(frozen=True)
class StatisticsOptions:
    """
    Resolved options for one statistics computation.

    Attributes
    ----------
    normalize : bool
        Divide the correlation sums by the number of valid pairs.
    display : bool
        Kept for callers that plot the result; not used by the computation.
    cutoff : tuple of float
        Maximum absolute lag retained per axis.
    periodic : tuple of bool
        Boundary condition per axis.
    mask1, mask2 : ndarray or None
        Float indicator arrays (0.0 or 1.0) of populated samples, or None for
        complete data. Either both are set or neither is.
    workers : int or None
        Threads used by the FFTs.
    verbose : bool
        Print diagnostics.
    """

    normalize: bool = True
    display: bool = True
    cutoff: tuple[float, ...] = ()
    periodic: tuple[bool, ...] = ()
    mask1: np.ndarray | None = None
    mask2: np.ndarray | None = None
    workers: int | None = None
    verbose: bool = False

    @property
    def masked(self) -> bool:
        return self.mask1 is not None


def _invalid_option_message(name: str) -> str:
    lines = [f"'{name}' is not a valid option. Accepted options are:"]
    lines += [f"    {key} : {kind}" for key, kind in OPTION_KINDS.items()]
    return "\n".join(lines)


def _per_axis(value, ndim: int, name: str, dtype) -> np.ndarray:
    try:
        values = np.asarray(value, dtype=dtype)
    except (TypeError, ValueError) as exc:
        raise InvalidOptionError(
            f"'{name}' expects {OPTION_KINDS[name]}, got {value!r}"
        ) from exc
    if values.ndim == 0:
        return np.full(ndim, values, dtype=dtype)
    if values.shape != (ndim,):
        raise InvalidOptionError(
            f"'{name}' needs a scalar or {ndim} values, got shape {values.shape}"
        )
    return values


def _as_mask(mask, shape: tuple[int, ...], name: str) -> np.ndarray:
    mask = np.asarray(mask)
    if mask.shape != shape:
        raise ShapeMismatchError(
            f"Shape of {name} {mask.shape} does not match the field shape {shape}"
        )
    return (mask != 0).astype(float)


def resolve_options(shape: tuple[int, ...], **options) -> StatisticsOptions:
    """
    Validate keyword options against a field shape and fill in defaults.

    Parameters
    ----------
    shape : tuple of int
        Shape of the input field(s).
    **options
        Any of the names in ``OPTION_KINDS``.

    Returns
    -------
    opts : StatisticsOptions

    Raises
    ------
    InvalidOptionError
        If an option name is unknown or a per-axis value has the wrong length.
    ShapeMismatchError
        If a mask does not have the field shape.

    Examples
    --------
    >>> opts = resolve_options((64, 32), periodic=True, cutoff=10)
    >>> opts.cutoff, opts.periodic
    ((10.0, 10.0), (True, True))
    """
    shape = tuple(shape)
    ndim = len(shape)

    for name in options:
        if name not in OPTION_KINDS:
            raise InvalidOptionError(_invalid_option_message(name))

    default_cutoff = np.asarray(shape, dtype=float) / 2
    cutoff = _per_axis(options.get("cutoff", default_cutoff), ndim, "cutoff", float)
    if np.any(np.isnan(cutoff)) or np.any(cutoff < 0):
        raise InvalidOptionError(f"'cutoff' must be non-negative, got {cutoff}")
    cutoff = np.where(np.isinf(cutoff), default_cutoff, cutoff)

    periodic = _per_axis(options.get("periodic", False), ndim, "periodic", bool)

    mask1 = options.get("mask1")
    mask2 = options.get("mask2")
    if options.get("mask") is not None:
        mask1 = mask2 = options["mask"]

    if mask1 is not None and mask2 is not None:
        if np.shape(mask1) != np.shape(mask2):
            raise ShapeMismatchError(
                f"The shapes of mask1 {np.shape(mask1)} and mask2 {np.shape(mask2)} differ"
            )
    if mask1 is not None:
        mask1 = _as_mask(mask1, shape, "mask1")
    if mask2 is not None:
        mask2 = _as_mask(mask2, shape, "mask2")
    if mask1 is None and mask2 is not None:
        mask1 = np.ones(shape)
    elif mask2 is None and mask1 is not None:
        mask2 = np.ones(shape)

    return StatisticsOptions(
        normalize=bool(options.get("normalize", True)),
        display=bool(options.get("display", True)),
        cutoff=tuple(float(c) for c in cutoff),
        periodic=tuple(bool(p) for p in periodic),
        mask1=mask1,
        mask2=mask2,
        workers=options.get("workers"),
        verbose=bool(options.get("verbose", False)),
    )
