from __future__ import annotations

import math
from abc import ABC
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    ClassVar,
    FrozenSet,
    Iterator,
    Protocol,
    Self,
    Tuple,
    runtime_checkable,
)

from boundednumbers.functions import clamp, cyclic_wrap_float

from ..illuminants import Illuminant, IlluminantLike
from ..types.color_types import Bound, ColorElement, ColorMode, FloatVector, Scalar
from ..types.format_type import HUE_360, FormatType

if TYPE_CHECKING:
    from .xyz import XYZColor


@runtime_checkable
class Chromatic(Protocol):
    """
    Anything that can leave for and arrive from CIE XYZ.

    ``to_xyz`` returns the color as an ``XYZColor`` under the requested
    illuminant; ``from_xyz`` builds an instance from an ``XYZColor``, adapting
    it to the class's own white first. These two members are all the
    conversion engine relies on.
    """

    def to_xyz(self, illuminant: IlluminantLike = Illuminant.D65) -> XYZColor: ...

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> Any: ...


class ColorBase:
    __slots__ = ('_raw', '_is_frozen')

    num_channels: ClassVar[int] = 1
    mode: ClassVar[ColorMode]
    format_type: ClassVar[FormatType]
    channels: ClassVar[Tuple[str, ...]]
    bounds: ClassVar[Tuple[Bound, ...]]
    hue_channels: ClassVar[FrozenSet[int]] = frozenset()
    native_illuminant: ClassVar[IlluminantLike] = Illuminant.D65
    has_alpha: ClassVar[bool] = False

    # attached by .color once every class is registered
    convert: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorElement | ColorBase) -> None:
        if isinstance(value, ColorBase):
            value = value.convert(type(self)).raw
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            value = (value,)
        elif isinstance(value, (str, bytes)) or not hasattr(value, '__iter__'):
            raise TypeError(
                f"{self.__class__.__name__} expects a sequence of numbers or a color, "
                f"got {type(value).__name__}"
            )

        raw = tuple(float(v) for v in value)
        if len(raw) != self.num_channels:
            raise ValueError(
                f"{self.mode} expects {self.num_channels} channels {self.channels}, got {len(raw)}"
            )
        for name, v in zip(self.channels, raw):
            if not math.isfinite(v):
                raise ValueError(f"{self.mode} channel {name!r} must be finite, got {v}")

        # unbounded shadow coordinates; construction never clamps
        self._raw = raw
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def raw(self) -> FloatVector:
        """Coordinates exactly as stored, possibly out of gamut."""
        return self._raw

    @property
    def value(self) -> Tuple[Scalar, ...]:
        """
        Coordinates in the class's format.

        INT formats give the display view: ``clamp()`` coordinates rounded
        to ints, hue wrapped back into [0, 360) after rounding. FLOAT and
        PERCENTAGE formats give the raw floats.
        """
        if self.format_type is not FormatType.INT:
            return self._raw
        out = []
        for i, v in enumerate(self._clamped()):
            v = round(v)
            if i in self.hue_channels:
                v %= int(HUE_360)
            out.append(v)
        return tuple(out)

    @property
    def has_hue(self) -> bool:
        return bool(self.hue_channels)

    @property
    def in_gamut(self) -> bool:
        """Whether every bounded channel lies inside its bound. Hue is circular and always fits."""
        for i, (v, bound) in enumerate(zip(self._raw, self.bounds)):
            if bound is None or i in self.hue_channels:
                continue
            lo, hi = bound
            if v < lo or v > hi:
                return False
        return True

    def _clamped(self) -> FloatVector:
        out = []
        for i, (v, bound) in enumerate(zip(self._raw, self.bounds)):
            if i in self.hue_channels:
                v = cyclic_wrap_float(v, 0.0, HUE_360) % HUE_360
            elif bound is not None:
                v = clamp(v, bound[0], bound[1])
            out.append(float(v))
        return tuple(out)

    def clamp(self) -> Self:
        """
        Axis-aligned gamut clamp.

        Each bounded channel is clamped on its own and hue channels are wrapped
        into [0, 360). INT formats keep their fractional shadow so a round
        trip does not drift; ``value`` does the rounding. This is the
        simplest deterministic policy, not the perceptually nearest in-gamut
        color; see ``chromahub.gamut.map_into_gamut`` for that.
        """
        clamped = self._clamped()
        if clamped == self._raw:
            return self
        return self._replace(clamped)

    def _replace(self, raw: FloatVector) -> Self:
        """Build a sibling instance from new raw coordinates."""
        return type(self)(raw)

    # ------------------ XYZ CAPABILITY ------------------
    def _to_native_xyz(self) -> FloatVector:
        raise NotImplementedError(f"{self.__class__.__name__} does not define an XYZ mapping")

    @classmethod
    def _from_native_xyz(cls, xyz: FloatVector) -> FloatVector:
        raise NotImplementedError(f"{cls.__name__} does not define an XYZ mapping")

    def to_xyz(self, illuminant: IlluminantLike = Illuminant.D65) -> XYZColor:
        from .xyz import XYZColor

        native = XYZColor(self._to_native_xyz(), self.native_illuminant)
        return native.color_adapt(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> Self:
        coords = cls._from_native_xyz(xyz.color_adapt(cls.native_illuminant).raw)
        if cls.has_alpha:
            coords = coords + (cls.alpha_max,)  # type: ignore[attr-defined]
        return cls(coords)

    # ------------------ CONTAINER / VALUE SEMANTICS ------------------
    def __getattr__(self, name: str):
        channels = getattr(type(self), "channels", ())
        if name in channels:
            return self.value[channels.index(name)]
        raise AttributeError(f"{self.__class__.__name__} has no attribute {name!r}")

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self.value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self.value[index]

    def _key(self) -> tuple:
        return (type(self), self._raw)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._raw!r})"

    def __reduce__(self):
        return (type(self), (self._raw,))


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel and is not part of the XYZ mapping.
    """

    num_channels: ClassVar[int]
    mode: ClassVar[ColorMode]
    raw: FloatVector
    value: Tuple[Scalar, ...]

    has_alpha: ClassVar[bool] = True
    alpha_index: ClassVar[int] = -1
    alpha_max: ClassVar[float]

    @property
    def alpha(self) -> Scalar:
        return self.value[self.alpha_index]

    @property
    def unit_alpha(self) -> float:
        """Alpha rescaled to 0..1, whatever the format."""
        return self.raw[self.alpha_index] / self.alpha_max

    def with_alpha(self, alpha: Scalar) -> Self:
        """Return a new instance with alpha replaced (clamped to the format's range)."""
        a = clamp(float(alpha), 0.0, float(self.alpha_max))
        return self.__class__(self.raw[:-1] + (a,))  # type: ignore[call-arg]

    def with_unit_alpha(self, alpha: float) -> Self:
        return self.with_alpha(alpha * self.alpha_max)


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
