from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from typing import Iterator, List, Tuple, Union, overload

import numpy as np

from ..colors.color_base import ColorBase
from ..colors.lch import CIELCHColor
from ..conversions.engine import convert, convert_unclamped
from .hue import HueMode, hue_lerp

# Below this chroma a color has no meaningful hue.
ACHROMATIC_CHROMA = 1e-6

LCH = Tuple[float, float, float]


class Gradient1D(Sequence):
    """
    A finite, lazy run of colors through two or more anchors.

    Consecutive anchors are joined in CIELCH: lightness and chroma move
    linearly, hue follows ``hue_mode`` (shortest arc by default). Every
    anchor lands exactly on a step: anchor ``k`` of ``n`` sits at index
    ``round(k * (steps - 1) / (n - 1))``, so the first is index 0 and the
    last is ``steps - 1``. Colors are computed on access and converted into
    the class of the first anchor; iterating twice gives the same colors.
    """

    __slots__ = ('_lch', '_alphas', '_positions', '_steps', '_hue_mode', '_color_class', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, anchors: Sequence[ColorBase], steps: int, hue_mode: HueMode = HueMode.SHORTEST) -> None:
        anchors = list(anchors)
        if len(anchors) < 2:
            raise ValueError(f"a gradient needs at least two anchors, got {len(anchors)}")
        if int(steps) != steps or steps < max(2, len(anchors)):
            raise ValueError(
                f"steps must be an integer >= {max(2, len(anchors))} for {len(anchors)} anchors, got {steps}"
            )
        self._lch: Tuple[LCH, ...] = tuple(convert_unclamped(a, CIELCHColor).raw for a in anchors)
        self._alphas = tuple(a.unit_alpha if a.has_alpha else 1.0 for a in anchors)  # type: ignore[attr-defined]
        self._steps = int(steps)
        last = self._steps - 1
        n_segments = len(anchors) - 1
        self._positions = tuple(round(k * last / n_segments) / last for k in range(len(anchors)))
        self._hue_mode = HueMode(hue_mode)
        self._color_class = type(anchors[0])
        self._is_frozen = True

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def hue_mode(self) -> HueMode:
        return self._hue_mode

    @property
    def color_class(self) -> type:
        return self._color_class

    def _segment(self, u: float) -> Tuple[int, float]:
        k = bisect_right(self._positions, u) - 1
        k = min(max(k, 0), len(self._positions) - 2)
        lo, hi = self._positions[k], self._positions[k + 1]
        return k, (u - lo) / (hi - lo)

    def lch_at(self, u: float) -> LCH:
        """CIELCH coordinates at ``u`` in [0, 1] along the whole gradient."""
        k, t = self._segment(u)
        l0, c0, h0 = self._lch[k]
        l1, c1, h1 = self._lch[k + 1]
        # a gray endpoint takes the other end's hue instead of its arbitrary one
        if c0 < ACHROMATIC_CHROMA:
            h0 = h1
        elif c1 < ACHROMATIC_CHROMA:
            h1 = h0
        h = float(hue_lerp(h0, h1, t, self._hue_mode))
        return l0 + (l1 - l0) * t, c0 + (c1 - c0) * t, h

    def sample(self, u: float) -> ColorBase:
        """The color at ``u`` in [0, 1], converted into the first anchor's class."""
        u = min(max(float(u), 0.0), 1.0)
        color = convert(CIELCHColor(self.lch_at(u)), self._color_class)
        if color.has_alpha:
            k, t = self._segment(u)
            a0, a1 = self._alphas[k], self._alphas[k + 1]
            color = color.with_unit_alpha(a0 + (a1 - a0) * t)  # type: ignore[attr-defined]
        return color

    def _color_at(self, index: int) -> ColorBase:
        return self.sample(index / (self._steps - 1))

    def __len__(self) -> int:
        return self._steps

    @overload
    def __getitem__(self, index: int) -> ColorBase: ...

    @overload
    def __getitem__(self, index: slice) -> List[ColorBase]: ...

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return [self._color_at(i) for i in range(*index.indices(self._steps))]
        i = index.__index__()
        if i < 0:
            i += self._steps
        if not 0 <= i < self._steps:
            raise IndexError(f"gradient index {index} out of range for {self._steps} steps")
        return self._color_at(i)

    def __iter__(self) -> Iterator[ColorBase]:
        for i in range(self._steps):
            yield self._color_at(i)

    def to_array(self) -> np.ndarray:
        """Raw coordinates of every step, shape (steps, channels)."""
        return np.array([c.raw for c in self], dtype=np.float64)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(anchors={len(self._lch)}, steps={self._steps}, "
            f"hue_mode={self._hue_mode.name}, color_class={self._color_class.__name__})"
        )


def gradient(anchors: Sequence[ColorBase], steps: int, *, hue_mode: HueMode = HueMode.SHORTEST) -> Gradient1D:
    """
    Build a ``Gradient1D`` of ``steps`` colors through ``anchors``.

    >>> from chromahub import CIELABColor, gradient
    >>> g = gradient([CIELABColor((20, 10, 10)), CIELABColor((80, -10, 30))], steps=5)
    >>> len(g)
    5
    """
    return Gradient1D(anchors, steps, hue_mode)
