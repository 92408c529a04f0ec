from typing import ClassVar, Tuple

from ..conversions.matrices import ADOBE_RGB_TO_XYZ, XYZ_TO_ADOBE_RGB, apply
from ..conversions.transfer import adobe_to_linear, linear_to_adobe
from ..illuminants import Illuminant, IlluminantLike
from ..types.color_types import Bound, FloatVector
from ..types.format_type import FormatType
from .color_base import ColorBase, build_registry


class AdobeRGBColor(ColorBase):
    """Adobe RGB (1998): a wider green primary than sRGB, pure gamma 563/256, D65 white."""
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "adobe_rgb"
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 1.0),) * 3
    native_illuminant: ClassVar[IlluminantLike] = Illuminant.D65

    def _to_native_xyz(self) -> FloatVector:
        return apply(ADOBE_RGB_TO_XYZ, [adobe_to_linear(c) for c in self.raw])

    @classmethod
    def _from_native_xyz(cls, xyz: FloatVector) -> FloatVector:
        return tuple(linear_to_adobe(c) for c in apply(XYZ_TO_ADOBE_RGB, xyz))


adobe_rgb_tuple_to_class = build_registry(AdobeRGBColor)
