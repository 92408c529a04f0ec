import math
from typing import ClassVar, Tuple

from ..conversions.cie import lab_to_xyz, polar_to_rectangular, rectangular_to_polar, xyz_to_lab
from ..illuminants import Illuminant, IlluminantLike
from ..types.color_types import Bound, FloatVector
from ..types.format_type import FormatType
from .color_base import ColorBase, build_registry


class CIELCHColor(ColorBase):
    """CIELAB in cylindrical form: lightness, chroma, hue angle in degrees."""
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "lch"
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("l", "c", "h")
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 100.0), (0.0, math.inf), (0.0, 360.0))
    hue_channels = frozenset({2})
    native_illuminant: ClassVar[IlluminantLike] = Illuminant.D50

    def _to_native_xyz(self) -> FloatVector:
        lab = polar_to_rectangular(*self.raw)
        return lab_to_xyz(lab, self.native_illuminant.white_point)

    @classmethod
    def _from_native_xyz(cls, xyz: FloatVector) -> FloatVector:
        return rectangular_to_polar(*xyz_to_lab(xyz, cls.native_illuminant.white_point))


LCH = CIELCHColor

lch_tuple_to_class = build_registry(CIELCHColor)
