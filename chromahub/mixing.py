"""
Mixing colors the way light mixes.

Every input is taken to CIE XYZ under D65, where coordinates are linear in
light intensity, averaged with normalized weights, and converted back into
the class of the first input (clamped like any other conversion). An XYZ
result is adapted back to the first input's illuminant.
"""
from __future__ import annotations

import logging
import warnings
from typing import Iterable, List, Sequence, Tuple, TypeVar, Union

import numpy as np

from .colors.color_base import ColorBase
from .colors.xyz import XYZColor
from .conversions.engine import convert
from .illuminants import Illuminant

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=ColorBase)
MIX_ILLUMINANT = Illuminant.D65

WeightedColor = Tuple[ColorBase, float]


def _split(items: Iterable[Union[ColorBase, WeightedColor]]) -> Tuple[List[ColorBase], np.ndarray]:
    colors: List[ColorBase] = []
    weights: List[float] = []
    for item in items:
        if isinstance(item, ColorBase):
            colors.append(item)
            weights.append(1.0)
        else:
            color, weight = item
            colors.append(color)
            weights.append(float(weight))
    if not colors:
        raise ValueError("cannot mix an empty sequence of colors")
    w = np.asarray(weights, dtype=np.float64)
    if not np.all(np.isfinite(w)):
        raise ValueError(f"mix weights must be finite, got {weights}")
    if np.any(w < 0):
        raise ValueError(f"mix weights must be non-negative, got {weights}")
    total = w.sum()
    if total == 0:
        raise ValueError("mix weights sum to zero")
    return colors, w / total


def mix(items: Sequence[Union[ColorBase, WeightedColor]]):
    """
    Weighted mix of colors.

    ``items`` holds ``(color, weight)`` pairs or bare colors (weight 1).
    Weights need not sum to 1. Alpha, when the first color has it, is mixed
    with the same weights.
    """
    colors, weights = _split(items)
    first = colors[0]

    xyz_rows = []
    for color in colors:
        xyz = color.to_xyz(MIX_ILLUMINANT)
        if isinstance(color, XYZColor) and color.illuminant != MIX_ILLUMINANT:
            warnings.warn(
                f"mixing XYZ under {color.illuminant!r}; adapting to {MIX_ILLUMINANT!r}",
                stacklevel=2,
            )
        xyz_rows.append(xyz.raw)
    mean = weights @ np.asarray(xyz_rows, dtype=np.float64)
    logger.debug("mixed %d colors to XYZ %r", len(colors), mean)

    result = convert(XYZColor(tuple(mean), MIX_ILLUMINANT), type(first))
    if isinstance(first, XYZColor):
        # the mix is computed under D65 but reported under the first color's white
        result = result.color_adapt(first.illuminant)
    if first.has_alpha:
        alphas = np.asarray(
            [c.unit_alpha if c.has_alpha else 1.0 for c in colors],  # type: ignore[attr-defined]
            dtype=np.float64,
        )
        result = result.with_unit_alpha(float(weights @ alphas))  # type: ignore[attr-defined]
    return result


def average(colors: Iterable[C]) -> C:
    """Equal-weight mix."""
    return mix(list(colors))


def weighted_midpoint(a: C, b: ColorBase, weight: float) -> C:
    """Mix of two colors where ``weight`` (0..1) is the share of ``a``."""
    if not 0 <= weight <= 1:
        raise ValueError(f"weight must lie in [0, 1], got {weight}")
    return mix([(a, weight), (b, 1.0 - weight)])


def midpoint(a: C, b: ColorBase) -> C:
    return weighted_midpoint(a, b, 0.5)
