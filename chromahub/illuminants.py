"""
Standard illuminants and chromatic adaptation.

White points come from the CIE tables (ASTM E308), normalized so that the
luminance Y of every white is 1. Adaptation between whites uses the Bradford
cone-response transform; each adaptation matrix is built once per pair and
cached for the life of the process.
"""
from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Tuple, Union

import numpy as np

from .conversions.matrices import BRADFORD, BRADFORD_INV

WhitePoint = Tuple[float, float, float]


class Illuminant(str, Enum):
    D50 = "d50"
    D55 = "d55"
    D65 = "d65"
    D75 = "d75"

    @property
    def white_point(self) -> WhitePoint:
        return ILLUMINANT_WHITE_POINTS[self]


ILLUMINANT_WHITE_POINTS: dict[Illuminant, WhitePoint] = {
    Illuminant.D50: (0.96422, 1.00000, 0.82521),
    Illuminant.D55: (0.95682, 1.00000, 0.92129),
    Illuminant.D65: (0.95047, 1.00000, 1.08884),
    Illuminant.D75: (0.94972, 1.00000, 1.22638),
}


class CustomIlluminant:
    """A light source given by an arbitrary XYZ white, renormalized to Y = 1."""

    __slots__ = ("_white",)

    def __init__(self, xyz: Tuple[float, float, float]) -> None:
        x, y, z = (float(v) for v in xyz)
        if y <= 0:
            raise ValueError(f"white point luminance must be positive, got {y}")
        object.__setattr__(self, "_white", (x / y, 1.0, z / y))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    @property
    def white_point(self) -> WhitePoint:
        return self._white

    def __eq__(self, other) -> bool:
        return isinstance(other, CustomIlluminant) and other._white == self._white

    def __hash__(self) -> int:
        return hash(("custom", self._white))

    def __repr__(self) -> str:
        return f"CustomIlluminant({self._white!r})"


IlluminantLike = Union[Illuminant, CustomIlluminant]


def white_point(illuminant: IlluminantLike) -> WhitePoint:
    """Return the normalized XYZ white of ``illuminant``."""
    return illuminant.white_point


@lru_cache(maxsize=None)
def adaptation_matrix(source: IlluminantLike, target: IlluminantLike) -> np.ndarray:
    """
    Bradford von Kries matrix that maps XYZ under ``source`` to XYZ under ``target``.

    The returned array is read-only; callers must not try to modify it.
    """
    if source == target:
        mat = np.eye(3)
    else:
        src_cone = BRADFORD @ np.asarray(source.white_point)
        dst_cone = BRADFORD @ np.asarray(target.white_point)
        mat = BRADFORD_INV @ np.diag(dst_cone / src_cone) @ BRADFORD
    mat.setflags(write=False)
    return mat


def adapt(xyz: Tuple[float, float, float], source: IlluminantLike, target: IlluminantLike) -> Tuple[float, float, float]:
    """Chromatically adapt a raw XYZ triple from one white to another."""
    if source == target:
        return tuple(float(v) for v in xyz)  # type: ignore[return-value]
    out = adaptation_matrix(source, target) @ np.asarray(xyz, dtype=np.float64)
    return float(out[0]), float(out[1]), float(out[2])
