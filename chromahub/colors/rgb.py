from __future__ import annotations

from typing import ClassVar, Self, Sequence, Tuple

import numpy as np
from boundednumbers.functions import clamp

from ..conversions.matrices import SRGB_TO_XYZ, XYZ_TO_SRGB, apply
from ..conversions.transfer import np_linear_to_srgb, np_srgb_to_linear
from ..illuminants import Illuminant, IlluminantLike
from ..types.color_types import Bound, FloatVector
from ..types.format_type import FormatType, max_non_hue
from .color_base import ColorBase, WithAlpha, build_registry


def srgb_unit_to_xyz(unit_rgb: Sequence[float]) -> FloatVector:
    """Encoded sRGB on 0..1 to D65 XYZ. Out-of-range channels pass through."""
    return apply(SRGB_TO_XYZ, np_srgb_to_linear(np.asarray(unit_rgb, dtype=np.float64)))


def xyz_to_srgb_unit(xyz: Sequence[float]) -> FloatVector:
    """D65 XYZ to encoded sRGB on 0..1, unclamped."""
    linear = XYZ_TO_SRGB @ np.asarray(xyz, dtype=np.float64)
    encoded = np_linear_to_srgb(linear)
    return float(encoded[0]), float(encoded[1]), float(encoded[2])


class ColorRGBINT(ColorBase):
    """
    sRGB with 8-bit channels.

    The integer view (``value``) is clamped and rounded; ``raw`` keeps the
    float shadow so that an out-of-gamut result can still be inspected before
    it is clamped.
    """
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "rgb"
    format_type: ClassVar[FormatType] = FormatType.INT
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 255.0),) * 3
    native_illuminant: ClassVar[IlluminantLike] = Illuminant.D65

    @property
    def scale(self) -> float:
        return float(max_non_hue[self.format_type])

    @property
    def unit(self) -> FloatVector:
        """Color channels rescaled to 0..1, unclamped."""
        s = self.scale
        return tuple(c / s for c in self.raw[:3])

    def _to_native_xyz(self) -> FloatVector:
        return srgb_unit_to_xyz(self.unit)

    @classmethod
    def _from_native_xyz(cls, xyz: FloatVector) -> FloatVector:
        s = float(max_non_hue[cls.format_type])
        return tuple(c * s for c in xyz_to_srgb_unit(xyz))

    @classmethod
    def from_unit(cls, unit_rgb: Sequence[float], unit_alpha: float = 1.0) -> Self:
        """Build from 0..1 channels; alpha is dropped for classes without it."""
        s = float(max_non_hue[cls.format_type])
        coords = tuple(float(c) * s for c in unit_rgb)
        if cls.has_alpha:
            coords += (unit_alpha * s,)
        return cls(coords)

    @classmethod
    def from_hex(cls, text: str) -> Self:
        """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``."""
        from ..parsing.parse import parse_hex

        parsed = parse_hex(text)
        return cls.from_unit(parsed.unit, parsed.unit_alpha)

    def to_hex(self) -> str:
        """Uppercase ``#RRGGBB`` (``#RRGGBBAA`` for classes with alpha), clamped."""
        units = list(self.unit)
        if self.has_alpha:
            units.append(self.unit_alpha)  # type: ignore[attr-defined]
        return "#" + "".join(f"{int(round(clamp(u, 0.0, 1.0) * 255)):02X}" for u in units)


class ColorRGBAINT(WithAlpha, ColorRGBINT):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = "rgba"
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "alpha")
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 255.0),) * 4
    alpha_max: ClassVar[float] = 255.0


class ColorUnitRGB(ColorRGBINT):
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 1.0),) * 3


class ColorUnitRGBA(WithAlpha, ColorUnitRGB):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = "rgba"
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "alpha")
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 1.0),) * 4
    alpha_max: ClassVar[float] = 1.0


class ColorPercentageRGB(ColorRGBINT):
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 100.0),) * 3


class ColorPercentageRGBA(WithAlpha, ColorPercentageRGB):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = "rgba"
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "alpha")
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 100.0),) * 4
    alpha_max: ClassVar[float] = 100.0


RGB = ColorRGBINT
RGBA = ColorRGBAINT


rgb_tuple_to_class = build_registry(
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
)
