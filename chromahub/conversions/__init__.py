"""
Chromahub Conversion Math
=========================

Pure numeric building blocks used by the color classes. Nothing here knows
about color objects; every function maps plain float triples to float
triples.

Modules
-------
matrices
    Constant 3x3 matrices (sRGB, Adobe RGB, ROMM RGB, Bradford) and their
    inverses, built once at import time and marked read-only.
transfer
    Encoding ("gamma") curves for sRGB, Adobe RGB and ROMM RGB, scalar and
    ``np_`` vectorized.
hexcone
    RGB <-> HSV and RGB <-> HSL on unit floats.
cie
    XYZ <-> CIELAB, XYZ <-> CIELUV, and the rectangular <-> polar step shared
    by CIELCH and CIELCHuv.

The object-level engine (``convert``) lives in ``chromahub.conversions.engine``
and is imported from the package root.
"""
from .matrices import (
    XYZ_TO_SRGB,
    SRGB_TO_XYZ,
    XYZ_TO_ADOBE_RGB,
    ADOBE_RGB_TO_XYZ,
    XYZ_TO_ROMM_RGB,
    ROMM_RGB_TO_XYZ,
    BRADFORD,
    BRADFORD_INV,
    apply,
)
from .transfer import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
    adobe_to_linear,
    linear_to_adobe,
    romm_to_linear,
    linear_to_romm,
)
from .hexcone import (
    unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
)
from .cie import (
    xyz_to_lab,
    lab_to_xyz,
    xyz_to_luv,
    luv_to_xyz,
    rectangular_to_polar,
    polar_to_rectangular,
)

__all__ = [
    "XYZ_TO_SRGB",
    "SRGB_TO_XYZ",
    "XYZ_TO_ADOBE_RGB",
    "ADOBE_RGB_TO_XYZ",
    "XYZ_TO_ROMM_RGB",
    "ROMM_RGB_TO_XYZ",
    "BRADFORD",
    "BRADFORD_INV",
    "apply",
    "srgb_to_linear",
    "linear_to_srgb",
    "np_srgb_to_linear",
    "np_linear_to_srgb",
    "adobe_to_linear",
    "linear_to_adobe",
    "romm_to_linear",
    "linear_to_romm",
    "unit_rgb_to_hsv",
    "hsv_to_unit_rgb",
    "unit_rgb_to_hsl",
    "hsl_to_unit_rgb",
    "xyz_to_lab",
    "lab_to_xyz",
    "xyz_to_luv",
    "luv_to_xyz",
    "rectangular_to_polar",
    "polar_to_rectangular",
]
