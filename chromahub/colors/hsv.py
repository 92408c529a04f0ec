from typing import ClassVar, Tuple

from ..conversions.hexcone import hsv_to_unit_rgb, unit_rgb_to_hsv
from ..illuminants import Illuminant, IlluminantLike
from ..types.color_types import Bound, FloatVector
from ..types.format_type import FormatType, max_non_hue
from .color_base import ColorBase, WithAlpha, build_registry
from .rgb import srgb_unit_to_xyz, xyz_to_srgb_unit


class ColorHSVINT(ColorBase):
    """HSV over sRGB. Hue in degrees, saturation and value 0-255."""
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "hsv"
    format_type: ClassVar[FormatType] = FormatType.INT
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "v")
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 360.0), (0.0, 255.0), (0.0, 255.0))
    hue_channels = frozenset({0})
    native_illuminant: ClassVar[IlluminantLike] = Illuminant.D65

    def _to_native_xyz(self) -> FloatVector:
        h, s, v = self.raw[:3]
        scale = max_non_hue[self.format_type]
        return srgb_unit_to_xyz(hsv_to_unit_rgb(h, s / scale, v / scale))

    @classmethod
    def _from_native_xyz(cls, xyz: FloatVector) -> FloatVector:
        h, s, v = unit_rgb_to_hsv(*xyz_to_srgb_unit(xyz))
        scale = max_non_hue[cls.format_type]
        return h, s * scale, v * scale


class ColorHSVAINT(WithAlpha, ColorHSVINT):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = "hsva"
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "v", "alpha")
    bounds: ClassVar[Tuple[Bound, ...]] = ColorHSVINT.bounds + ((0.0, 255.0),)
    alpha_max: ClassVar[float] = 255.0


class UnitHSV(ColorHSVINT):
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 360.0), (0.0, 1.0), (0.0, 1.0))


class UnitHSVA(WithAlpha, UnitHSV):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = "hsva"
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "v", "alpha")
    bounds: ClassVar[Tuple[Bound, ...]] = UnitHSV.bounds + ((0.0, 1.0),)
    alpha_max: ClassVar[float] = 1.0


class PercentageHSV(ColorHSVINT):
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 360.0), (0.0, 100.0), (0.0, 100.0))


class PercentageHSVA(WithAlpha, PercentageHSV):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = "hsva"
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "v", "alpha")
    bounds: ClassVar[Tuple[Bound, ...]] = PercentageHSV.bounds + ((0.0, 100.0),)
    alpha_max: ClassVar[float] = 100.0


HSV = ColorHSVINT
HSVA = ColorHSVAINT


hsv_tuple_to_class = build_registry(
    ColorHSVINT,
    ColorHSVAINT,
    UnitHSV,
    UnitHSVA,
    PercentageHSV,
    PercentageHSVA,
)
