from typing import ClassVar, Tuple

from ..conversions.matrices import ROMM_RGB_TO_XYZ, XYZ_TO_ROMM_RGB, apply
from ..conversions.transfer import linear_to_romm, romm_to_linear
from ..illuminants import Illuminant, IlluminantLike
from ..types.color_types import Bound, FloatVector
from ..types.format_type import FormatType
from .color_base import ColorBase, build_registry


class ROMMRGBColor(ColorBase):
    """
    ROMM RGB, also known as ProPhoto RGB.

    Its primaries enclose nearly all surface colors, at the price of some
    imaginary colors. Encoded with the ISO 22028-2 curve, D50 white.
    """
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "romm_rgb"
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 1.0),) * 3
    native_illuminant: ClassVar[IlluminantLike] = Illuminant.D50

    def _to_native_xyz(self) -> FloatVector:
        return apply(ROMM_RGB_TO_XYZ, [romm_to_linear(c) for c in self.raw])

    @classmethod
    def _from_native_xyz(cls, xyz: FloatVector) -> FloatVector:
        return tuple(linear_to_romm(c) for c in apply(XYZ_TO_ROMM_RGB, xyz))


romm_rgb_tuple_to_class = build_registry(ROMMRGBColor)
