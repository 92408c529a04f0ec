from typing import ClassVar, Tuple

from ..conversions.hexcone import hsl_to_unit_rgb, unit_rgb_to_hsl
from ..illuminants import Illuminant, IlluminantLike
from ..types.color_types import Bound, FloatVector
from ..types.format_type import FormatType, max_non_hue
from .color_base import ColorBase, WithAlpha, build_registry
from .rgb import srgb_unit_to_xyz, xyz_to_srgb_unit


class ColorHSLINT(ColorBase):
    """
    Hue, saturation and lightness over sRGB (double hexcone model).
    Hue in degrees, other channels 0-255.
    """
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "hsl"
    format_type: ClassVar[FormatType] = FormatType.INT
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "l")
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 360.0), (0.0, 255.0), (0.0, 255.0))
    hue_channels = frozenset({0})
    native_illuminant: ClassVar[IlluminantLike] = Illuminant.D65

    def _to_native_xyz(self) -> FloatVector:
        h, s, l = self.raw[:3]
        scale = max_non_hue[self.format_type]
        return srgb_unit_to_xyz(hsl_to_unit_rgb(h, s / scale, l / scale))

    @classmethod
    def _from_native_xyz(cls, xyz: FloatVector) -> FloatVector:
        h, s, l = unit_rgb_to_hsl(*xyz_to_srgb_unit(xyz))
        scale = max_non_hue[cls.format_type]
        return h, s * scale, l * scale


class ColorHSLAINT(WithAlpha, ColorHSLINT):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = "hsla"
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "l", "alpha")
    bounds: ClassVar[Tuple[Bound, ...]] = ColorHSLINT.bounds + ((0.0, 255.0),)
    alpha_max: ClassVar[float] = 255.0


class UnitHSL(ColorHSLINT):
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 360.0), (0.0, 1.0), (0.0, 1.0))


class UnitHSLA(WithAlpha, UnitHSL):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = "hsla"
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "l", "alpha")
    bounds: ClassVar[Tuple[Bound, ...]] = UnitHSL.bounds + ((0.0, 1.0),)
    alpha_max: ClassVar[float] = 1.0


class PercentageHSL(ColorHSLINT):
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 360.0), (0.0, 100.0), (0.0, 100.0))


class PercentageHSLA(WithAlpha, PercentageHSL):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = "hsla"
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "l", "alpha")
    bounds: ClassVar[Tuple[Bound, ...]] = PercentageHSL.bounds + ((0.0, 100.0),)
    alpha_max: ClassVar[float] = 100.0


HSL = ColorHSLINT
HSLA = ColorHSLAINT


hsl_tuple_to_class = build_registry(
    ColorHSLINT,
    ColorHSLAINT,
    UnitHSL,
    UnitHSLA,
    PercentageHSL,
    PercentageHSLA,
)
