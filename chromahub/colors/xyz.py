from __future__ import annotations

from typing import ClassVar, Self, Tuple

from ..illuminants import Illuminant, IlluminantLike, adapt
from ..types.color_types import Bound, ColorElement, FloatVector
from ..types.format_type import FormatType
from .color_base import ColorBase, build_registry


class XYZColor(ColorBase):
    """
    CIE 1931 XYZ tristimulus values, the hub every conversion passes through.

    Values are scaled so the reference white has Y = 1. Unlike the other
    spaces, an XYZ color carries its own illuminant; comparing or mixing XYZ
    values under different whites requires an explicit ``color_adapt``.
    """

    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "xyz"
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("x", "y", "z")
    bounds: ClassVar[Tuple[Bound, ...]] = (None, None, None)

    def __init__(self, value: ColorElement | ColorBase, illuminant: IlluminantLike = Illuminant.D65) -> None:
        if isinstance(value, ColorBase):
            value = value.to_xyz(illuminant).raw
        self._illuminant = illuminant
        super().__init__(value)

    @property
    def illuminant(self) -> IlluminantLike:
        return self._illuminant

    def color_adapt(self, illuminant: IlluminantLike) -> XYZColor:
        """Bradford-adapt these values to another white. Same white returns self."""
        if illuminant == self._illuminant:
            return self
        return XYZColor(adapt(self.raw, self._illuminant, illuminant), illuminant)

    def approx_equal(self, other: XYZColor, tolerance: float = 1e-9) -> bool:
        """Compare coordinates after adapting ``other`` to this color's white."""
        theirs = other.color_adapt(self._illuminant).raw
        return all(abs(a - b) <= tolerance for a, b in zip(self.raw, theirs))

    def to_xyz(self, illuminant: IlluminantLike = Illuminant.D65) -> XYZColor:
        return self.color_adapt(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> Self:
        return cls(xyz.raw, xyz.illuminant)

    def _replace(self, raw: FloatVector) -> Self:
        return type(self)(raw, self._illuminant)

    def _key(self) -> tuple:
        return (type(self), self.raw, self._illuminant)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.raw!r}, {self._illuminant!r})"

    def __reduce__(self):
        return (type(self), (self.raw, self._illuminant))


xyz_tuple_to_class = build_registry(XYZColor)
