from typing import ClassVar, Tuple

from ..conversions.transfer import linear_to_srgb, srgb_to_linear
from ..illuminants import Illuminant, IlluminantLike
from ..types.color_types import Bound, FloatVector
from ..types.format_type import FormatType
from .color_base import ColorBase, build_registry


class GrayColor(ColorBase):
    """
    A single sRGB-encoded gray level in [0, 1].

    Converting a chromatic color to gray keeps its relative luminance Y and
    drops the chromaticity, so the trip back lands on the neutral axis.
    """
    num_channels: ClassVar[int] = 1
    mode: ClassVar[str] = "gray"
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("l",)
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 1.0),)
    native_illuminant: ClassVar[IlluminantLike] = Illuminant.D65

    def _to_native_xyz(self) -> FloatVector:
        y = srgb_to_linear(self.raw[0])
        xn, yn, zn = self.native_illuminant.white_point
        return xn * y, yn * y, zn * y

    @classmethod
    def _from_native_xyz(cls, xyz: FloatVector) -> FloatVector:
        return (linear_to_srgb(xyz[1] / cls.native_illuminant.white_point[1]),)


gray_tuple_to_class = build_registry(GrayColor)
