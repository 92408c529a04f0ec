from typing import ClassVar, Tuple

from ..conversions.cie import lab_to_xyz, xyz_to_lab
from ..illuminants import Illuminant, IlluminantLike
from ..types.color_types import Bound, FloatVector
from ..types.format_type import FormatType
from .color_base import ColorBase, build_registry


class CIELABColor(ColorBase):
    """
    CIE 1976 L*a*b* relative to the D50 white.

    L* is bounded to [0, 100]; a* and b* are open-ended, so many valid Lab
    coordinates describe colors no display (or eye) can produce.
    """
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "lab"
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("l", "a", "b")
    bounds: ClassVar[Tuple[Bound, ...]] = ((0.0, 100.0), None, None)
    native_illuminant: ClassVar[IlluminantLike] = Illuminant.D50

    def _to_native_xyz(self) -> FloatVector:
        return lab_to_xyz(self.raw, self.native_illuminant.white_point)

    @classmethod
    def _from_native_xyz(cls, xyz: FloatVector) -> FloatVector:
        return xyz_to_lab(xyz, cls.native_illuminant.white_point)


LAB = CIELABColor

lab_tuple_to_class = build_registry(CIELABColor)
