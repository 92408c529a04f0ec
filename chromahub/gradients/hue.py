"""
Hue interpolation on the 360 degree circle.
"""
from enum import IntEnum
from typing import Union

import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function

from ..types.format_type import HUE_360

ArrayLike = Union[float, np.ndarray]


class HueMode(IntEnum):
    """
    Hue interpolation modes for cyclical color space.

    CW:       Clockwise (increasing hue direction)
    CCW:      Counterclockwise (decreasing hue direction)
    SHORTEST: Shortest path (at most a 180 degree arc)
    LONGEST:  Longest path (at least a 180 degree arc)
    """
    CW = 0
    CCW = 1
    SHORTEST = 2
    LONGEST = 3


def _apply_bound(arr: np.ndarray, bound_type: BoundType) -> np.ndarray:
    if bound_type is BoundType.IGNORE:
        return arr
    return bound_type_to_np_function[bound_type](arr, 0.0, 1.0)


def hue_delta(h0: ArrayLike, h1: ArrayLike, mode: HueMode = HueMode.SHORTEST) -> np.ndarray:
    """Signed arc from ``h0`` to ``h1`` travelled under ``mode``."""
    h0 = np.mod(np.asarray(h0, dtype=np.float64), HUE_360)
    h1 = np.mod(np.asarray(h1, dtype=np.float64), HUE_360)
    d = h1 - h0
    if mode is HueMode.CW:
        return np.where(d < 0, d + HUE_360, d)
    if mode is HueMode.CCW:
        return np.where(d > 0, d - HUE_360, d)
    if mode is HueMode.SHORTEST:
        return np.where(d > 180.0, d - HUE_360, np.where(d < -180.0, d + HUE_360, d))
    if mode is HueMode.LONGEST:
        return np.where((d > 0) & (d < 180.0), d - HUE_360, np.where((d < 0) & (d > -180.0), d + HUE_360, d))
    raise ValueError(f"Invalid hue mode: {mode!r}")


def hue_lerp(
    h0: ArrayLike,
    h1: ArrayLike,
    coeffs: ArrayLike,
    mode: HueMode = HueMode.SHORTEST,
    bound_type: BoundType = BoundType.CLAMP,
) -> np.ndarray:
    """
    Interpolate hue angles in degrees.

    Args:
        h0: Start hue(s) in degrees
        h1: End hue(s) in degrees, broadcastable against ``h0``
        coeffs: Interpolation coefficients, 0 gives ``h0`` and 1 gives ``h1``
        mode: Which way round the circle to go
        bound_type: How coefficients outside [0, 1] are handled

    Returns:
        Interpolated hues, values in [0, 360)

    Example:
        >>> hue_lerp(350, 10, np.array([0.0, 0.5, 1.0]))
        array([350.,   0.,  10.])
    """
    coeffs = _apply_bound(np.asarray(coeffs, dtype=np.float64), bound_type)
    start = np.mod(np.asarray(h0, dtype=np.float64), HUE_360)
    out = np.mod(start + coeffs * hue_delta(h0, h1, mode), HUE_360)
    # np.mod can return 360.0 for tiny negative inputs
    return np.where(out >= HUE_360, 0.0, out)
