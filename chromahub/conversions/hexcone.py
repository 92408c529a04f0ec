"""
Hexcone models of sRGB: HSV and HSL.

All functions work on unit floats (r, g, b, s, v, l nominally in 0..1) and
hue in degrees. Achromatic inputs get hue 0.
"""
from typing import Tuple

HUE_MAX = 360.0
HUE_SECTOR = 60.0
EPS = 1e-12


def _hue_and_chroma(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin
    if delta <= EPS:
        return 0.0, 0.0, cmax, cmin
    if cmax == r:
        h = HUE_SECTOR * (((g - b) / delta) % 6)
    elif cmax == g:
        h = HUE_SECTOR * ((b - r) / delta + 2)
    else:
        h = HUE_SECTOR * ((r - g) / delta + 4)
    return h % HUE_MAX, delta, cmax, cmin


def _sector_rgb(h: float, c: float) -> Tuple[float, float, float]:
    h = h % HUE_MAX
    x = c * (1 - abs(((h / HUE_SECTOR) % 2) - 1))
    if h < 60:
        return c, x, 0.0
    if h < 120:
        return x, c, 0.0
    if h < 180:
        return 0.0, c, x
    if h < 240:
        return 0.0, x, c
    if h < 300:
        return x, 0.0, c
    return c, 0.0, x


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert unit RGB to HSV."""
    h, delta, cmax, _ = _hue_and_chroma(r, g, b)
    s = 0.0 if abs(cmax) <= EPS else delta / cmax
    return h, s, cmax


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert HSV to unit RGB."""
    c = v * s
    r_p, g_p, b_p = _sector_rgb(h, c)
    m = v - c
    return r_p + m, g_p + m, b_p + m


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert unit RGB to HSL."""
    h, delta, cmax, cmin = _hue_and_chroma(r, g, b)
    l = (cmax + cmin) / 2
    denom = 1 - abs(2 * l - 1)
    s = 0.0 if delta <= EPS or abs(denom) <= EPS else delta / denom
    return h, s, l


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """Convert HSL to unit RGB."""
    c = (1 - abs(2 * l - 1)) * s
    r_p, g_p, b_p = _sector_rgb(h, c)
    m = l - c / 2
    return r_p + m, g_p + m, b_p + m
