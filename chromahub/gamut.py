"""
Gamut checks and the two ways of getting back inside one.

``clamp`` and ``clamp_into`` are the axis-aligned policy used by the
conversion engine. ``map_into_gamut`` is the perceptual alternative: it keeps
CIELCH lightness and hue and gives up chroma until the color fits. It is
never applied implicitly.

``is_imaginary`` and ``closest_real_color`` work against the human gamut
instead: the CIE 1931 spectral locus.
"""
from __future__ import annotations

import logging
import math
import warnings
from typing import Optional, Tuple, TypeVar

from boundednumbers.functions import clamp as clamp_number

from .colors.color_base import ColorBase
from .colors.lch import CIELCHColor
from .colors.luv import CIELUVColor
from .colors.xyz import XYZColor
from .conversions.cie import uv_prime
from .conversions.engine import Target, carry_alpha, convert, convert_unclamped, resolve_target
from .conversions.spectral import inside_locus, nearest_on_locus
from .illuminants import Illuminant

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=ColorBase)

DEFAULT_GAMUT_TOLERANCE = 1e-4
MAX_BISECTION_STEPS = 64
LOCUS_ILLUMINANT = Illuminant.D50


def clamp(color: C) -> C:
    """Axis-aligned clamp of ``color`` in its own space. Idempotent."""
    return color.clamp()


def in_gamut(color: ColorBase, bounded_space: Optional[Target] = None) -> bool:
    """Whether ``color`` fits its own bounds, or those of ``bounded_space`` when given."""
    if bounded_space is None:
        return color.in_gamut
    return convert_unclamped(color, bounded_space).in_gamut


def clamp_into(color: C, bounded_space: Target) -> C:
    """
    Clamp ``color`` against another space's bounds and come back.

    Typical use is keeping a CIELAB color displayable:
    ``clamp_into(lab, ColorUnitRGB)``. Colors already inside
    ``bounded_space`` come back unchanged up to float rounding.
    """
    inside = convert_unclamped(color, bounded_space).clamp()
    return carry_alpha(color, convert(inside, type(color)))


def map_into_gamut(
    color: C,
    bounded_space: Target,
    tolerance: float = DEFAULT_GAMUT_TOLERANCE,
    max_steps: int = MAX_BISECTION_STEPS,
) -> C:
    """
    Bring ``color`` inside ``bounded_space`` by reducing CIELCH chroma.

    Lightness (clamped to [0, 100]) and hue are held fixed while chroma is
    bisected down to within ``tolerance`` of the gamut boundary. What little
    is left outside after bisection is removed with the axis-aligned clamp.
    """
    target = resolve_target(bounded_space)
    if convert_unclamped(color, target).in_gamut:
        return color

    l, c, h = convert_unclamped(color, CIELCHColor).raw
    l = clamp_number(l, 0.0, 100.0)
    lo, hi = 0.0, c
    for _ in range(max_steps):
        if hi - lo <= tolerance:
            break
        mid = (lo + hi) / 2
        if convert_unclamped(CIELCHColor((l, mid, h)), target).in_gamut:
            lo = mid
        else:
            hi = mid
    else:
        warnings.warn(
            f"map_into_gamut stopped after {max_steps} steps with chroma interval "
            f"[{lo}, {hi}] wider than {tolerance}",
            RuntimeWarning,
            stacklevel=2,
        )

    logger.debug("chroma reduced from %r to %r at L=%r h=%r", c, lo, l, h)
    inside = convert_unclamped(CIELCHColor((l, lo, h)), target).clamp()
    return carry_alpha(color, convert(inside, type(color)))


# u'v' distance by which a projected color is pulled back inside the locus
LOCUS_INSET = 1e-9


def _uv_chromaticity(color: ColorBase) -> Optional[Tuple[float, float]]:
    x, y, z = color.to_xyz(LOCUS_ILLUMINANT).raw
    if x == y == z == 0:
        return None
    if y < 0 or x + 15.0 * y + 3.0 * z <= 0:
        return (math.nan, math.nan)
    return uv_prime(x, y, z)


def _luv_to_uv_prime(luv, un: float, vn: float) -> Tuple[float, float]:
    l, u, v = luv
    return u / (13.0 * l) + un, v / (13.0 * l) + vn


def is_imaginary(color: ColorBase) -> bool:
    """
    Whether no light spectrum produces ``color``.

    The color's CIE 1976 u'v' chromaticity (under D50) is tested against the
    CIE 1931 2 degree spectral locus closed by the line of purples. Black is
    real; negative luminance never is.
    """
    uv = _uv_chromaticity(color)
    if uv is None:
        return False
    u, v = uv
    if math.isnan(u):
        return True
    return not inside_locus(u, v)


def closest_real_color(color: C) -> C:
    """
    The nearest color a human can see, or ``color`` itself when it is real.

    CIELUV lightness is kept and the u'v' chromaticity moves to the closest
    point of the spectral locus. The result is converted back into the class
    of ``color`` (clamped like any other conversion); an XYZ color keeps its
    illuminant.
    """
    if not is_imaginary(color):
        return color

    luv = convert_unclamped(color, CIELUVColor)
    l = luv.raw[0]
    if l <= 0:
        # negative luminance; black is the nearest real color
        real = CIELUVColor((0.0, 0.0, 0.0))
    else:
        un, vn = uv_prime(*LOCUS_ILLUMINANT.white_point)
        u, v = nearest_on_locus(*_luv_to_uv_prime(luv.raw, un, vn))
        # step towards the white so the projection tests as real
        du, dv = un - u, vn - v
        norm = math.hypot(du, dv)
        u += du / norm * LOCUS_INSET
        v += dv / norm * LOCUS_INSET
        logger.debug("moved %r onto the spectral locus at u'v' (%r, %r)", color, u, v)
        real = CIELUVColor((l, 13.0 * l * (u - un), 13.0 * l * (v - vn)))
    result = convert(real, type(color))
    if isinstance(color, XYZColor):
        result = result.color_adapt(color.illuminant)
    return carry_alpha(color, result)

