import math
from typing import ClassVar, Tuple

from ..conversions.cie import luv_to_xyz, polar_to_rectangular, rectangular_to_polar, xyz_to_luv
from ..illuminants import Illuminant, IlluminantLike
from ..types.color_types import Bound, FloatVector
from ..types.format_type import FormatType
from .color_base import ColorBase, build_registry


class CIELUVColor(ColorBase):
    """CIE 1976 L*u*v* relative to the D50 white."""
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "luv"
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("l", "u", "v")
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 100.0), None, None)
    native_illuminant: ClassVar[IlluminantLike] = Illuminant.D50

    def _to_native_xyz(self) -> FloatVector:
        return luv_to_xyz(self.raw, self.native_illuminant.white_point)

    @classmethod
    def _from_native_xyz(cls, xyz: FloatVector) -> FloatVector:
        return xyz_to_luv(xyz, cls.native_illuminant.white_point)


class CIELCHuvColor(ColorBase):
    """CIELUV in cylindrical form (L*, C*uv, h_uv in degrees)."""
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "lchuv"
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("l", "c", "h")
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 100.0), (0.0, math.inf), (0.0, 360.0))
    hue_channels = frozenset({2})
    native_illuminant: ClassVar[IlluminantLike] = Illuminant.D50

    def _to_native_xyz(self) -> FloatVector:
        return luv_to_xyz(polar_to_rectangular(*self.raw), self.native_illuminant.white_point)

    @classmethod
    def _from_native_xyz(cls, xyz: FloatVector) -> FloatVector:
        return rectangular_to_polar(*xyz_to_luv(xyz, cls.native_illuminant.white_point))


LUV = CIELUVColor
LCHUV = CIELCHuvColor

luv_tuple_to_class = build_registry(CIELUVColor, CIELCHuvColor)
