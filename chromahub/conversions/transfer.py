"""
Transfer ("gamma") functions between encoded and linear-light channels.

Each function has a scalar form and an ``np_`` vectorized form. The scalar
forms accept values outside [0, 1] and extend the curve by odd symmetry so
that out-of-gamut shadow values survive the round trip unchanged.
"""
import math

import numpy as np
from numpy import ndarray as NDArray

ADOBE_GAMMA = 563.0 / 256.0
ROMM_GAMMA = 1.8
ROMM_LINEAR_CUTOFF = 2.0 ** -9
ROMM_ENCODED_CUTOFF = 16.0 * ROMM_LINEAR_CUTOFF


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    sign = -1.0 if c < 0 else 1.0
    a = abs(c)
    if a <= 0.04045:
        return c / 12.92
    return sign * ((a + 0.055) / 1.055) ** 2.4


def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    sign = -1.0 if c < 0 else 1.0
    a = abs(c)
    if a <= 0.0031308:
        return 12.92 * c
    return sign * (1.055 * (a ** (1 / 2.4)) - 0.055)


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    a = np.abs(c)
    return np.where(
        a <= 0.04045,
        c / 12.92,
        np.sign(c) * ((a + 0.055) / 1.055) ** 2.4,
    )


def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB (0..1) to nonlinear sRGB."""
    c = np.asarray(c, dtype=float)
    a = np.abs(c)
    return np.where(
        a <= 0.0031308,
        12.92 * c,
        np.sign(c) * (1.055 * (a ** (1 / 2.4)) - 0.055),
    )


def adobe_to_linear(c: float) -> float:
    return math.copysign(abs(c) ** ADOBE_GAMMA, c)


def linear_to_adobe(c: float) -> float:
    return math.copysign(abs(c) ** (1.0 / ADOBE_GAMMA), c)


def romm_to_linear(c: float) -> float:
    """Undo the ROMM RGB encoding (ISO 22028-2, without flare)."""
    a = abs(c)
    if a < ROMM_ENCODED_CUTOFF:
        return c / 16.0
    return math.copysign(a ** ROMM_GAMMA, c)


def linear_to_romm(c: float) -> float:
    a = abs(c)
    if a < ROMM_LINEAR_CUTOFF:
        return c * 16.0
    return math.copysign(a ** (1.0 / ROMM_GAMMA), c)
