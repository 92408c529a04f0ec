from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, List, Sequence, Tuple, Union

import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function

from ..colors.color_base import ColorBase
from ..colors.rgb import ColorUnitRGB


class Normalization(str, Enum):
    LINEAR = "linear"
    CBRT = "cbrt"


NormalizationLike = Union[Normalization, Callable[[np.ndarray], np.ndarray]]


def _normalize(u: np.ndarray, normalization: NormalizationLike) -> np.ndarray:
    if normalization is Normalization.LINEAR:
        return u
    if normalization is Normalization.CBRT:
        return np.cbrt(u)
    if callable(normalization):
        return np.asarray(normalization(u), dtype=np.float64)
    raise ValueError(f"Invalid normalization: {normalization!r}")


class GradientColorMap:
    """
    Map numbers in [0, 1] to colors between ``start`` and ``end``.

    Interpolation is linear in the colors' own coordinates (``end`` is first
    converted into ``start``'s class). Inputs are bounded with ``bound_type``,
    then passed through ``normalization`` (linear, cube root, or any
    vectorized callable on [0, 1]), then squeezed into ``padding`` so that,
    for example, ``padding=(0.25, 0.75)`` uses only the middle half of the
    ramp.
    """

    def __init__(
        self,
        start: ColorBase,
        end: ColorBase,
        normalization: NormalizationLike = Normalization.LINEAR,
        padding: Tuple[float, float] = (0.0, 1.0),
        bound_type: BoundType = BoundType.CLAMP,
    ) -> None:
        lo, hi = padding
        if not (0.0 <= lo <= 1.0 and 0.0 <= hi <= 1.0):
            raise ValueError(f"padding must lie within [0, 1], got {padding}")
        self.start = start
        self.end = end.convert(type(start)) if type(end) is not type(start) else end
        self.normalization = normalization
        self.padding = (float(lo), float(hi))
        self.bound_type = bound_type

    def _coefficients(self, xs: np.ndarray) -> np.ndarray:
        if self.bound_type is not BoundType.IGNORE:
            xs = bound_type_to_np_function[self.bound_type](xs, 0.0, 1.0)
        u = _normalize(xs, self.normalization)
        lo, hi = self.padding
        return lo + (hi - lo) * u

    def transform(self, xs: Iterable[float]) -> List[ColorBase]:
        """Colors for every value in ``xs``."""
        xs = np.asarray(list(xs) if not isinstance(xs, np.ndarray) else xs, dtype=np.float64)
        u = self._coefficients(xs.ravel())[:, np.newaxis]
        start = np.asarray(self.start.raw, dtype=np.float64)
        end = np.asarray(self.end.raw, dtype=np.float64)
        coords = start + (end - start) * u
        cls = type(self.start)
        return [cls(tuple(row)).clamp() for row in coords]

    def transform_single(self, x: float) -> ColorBase:
        return self.transform([x])[0]

    def __call__(self, x: float) -> ColorBase:
        return self.transform_single(x)


class ListedColorMap:
    """
    Map numbers in [0, 1] onto a fixed table of colors.

    ``x`` is clamped to [0, 1] and scaled onto the table index range; values
    between two entries are interpolated linearly in the entries' own
    coordinates, so ``x = k / (n - 1)`` gives entry ``k`` exactly. Every entry
    is converted into the class of the first one.
    """

    def __init__(self, colors: Sequence[ColorBase]) -> None:
        colors = list(colors)
        if len(colors) < 2:
            raise ValueError(f"a listed colormap needs at least two colors, got {len(colors)}")
        cls = type(colors[0])
        self.colors = [c if type(c) is cls else c.convert(cls) for c in colors]
        self._table = np.array([c.raw for c in self.colors], dtype=np.float64)

    @classmethod
    def from_unit_rgb(cls, rows) -> ListedColorMap:
        """Build from an (n, 3) array-like of sRGB channels on 0..1."""
        return cls([ColorUnitRGB(tuple(float(c) for c in row[:3])) for row in rows])

    @classmethod
    def from_matplotlib(cls, name: str) -> ListedColorMap:
        """Sample one of matplotlib's registered colormaps at every table entry."""
        from matplotlib import colormaps

        mpl_cmap = colormaps[name]
        return cls.from_unit_rgb(mpl_cmap(np.linspace(0.0, 1.0, mpl_cmap.N)))

    @classmethod
    def viridis(cls) -> ListedColorMap:
        return cls.from_matplotlib("viridis")

    @classmethod
    def magma(cls) -> ListedColorMap:
        return cls.from_matplotlib("magma")

    @classmethod
    def inferno(cls) -> ListedColorMap:
        return cls.from_matplotlib("inferno")

    @classmethod
    def plasma(cls) -> ListedColorMap:
        return cls.from_matplotlib("plasma")

    def __len__(self) -> int:
        return len(self.colors)

    def transform(self, xs: Iterable[float]) -> List[ColorBase]:
        xs = np.asarray(list(xs) if not isinstance(xs, np.ndarray) else xs, dtype=np.float64)
        pos = np.clip(xs.ravel(), 0.0, 1.0) * (len(self.colors) - 1)
        lo = np.floor(pos).astype(int)
        hi = np.ceil(pos).astype(int)
        frac = (pos - lo)[:, np.newaxis]
        coords = self._table[lo] + (self._table[hi] - self._table[lo]) * frac
        cls = type(self.colors[0])
        return [cls(tuple(row)).clamp() for row in coords]

    def transform_single(self, x: float) -> ColorBase:
        return self.transform([x])[0]

    def __call__(self, x: float) -> ColorBase:
        return self.transform_single(x)
