"""
Conversion between any two color types, through CIE XYZ.

``convert`` is ``target.from_xyz(source.to_xyz(target.native_illuminant))``
followed by the target's axis-aligned clamp. The clamp is the only lossy step
and it is applied once, on the typed result, never on the XYZ in between.
"""
from __future__ import annotations

import logging
from typing import Optional, TypeVar, Union

from ..colors.color import get_color_class
from ..colors.color_base import Chromatic
from ..illuminants import Illuminant
from ..types.format_type import FormatType

logger = logging.getLogger(__name__)

T = TypeVar("T")
Target = Union[type, str]


def resolve_target(target: Target, to_format: Optional[FormatType] = None) -> type:
    """Turn a class or a mode name into the class to convert into."""
    if isinstance(target, type):
        return target
    if isinstance(target, str):
        return get_color_class(target, to_format)
    raise TypeError(f"conversion target must be a color class or a mode name, got {type(target).__name__}")


def carry_alpha(source: Chromatic, result):
    """Copy the source opacity onto the result when both carry alpha."""
    if getattr(source, "has_alpha", False) and getattr(result, "has_alpha", False):
        return result.with_unit_alpha(source.unit_alpha)  # type: ignore[attr-defined]
    return result


def convert_unclamped(color: Chromatic, target: Target, to_format: Optional[FormatType] = None):
    """
    Convert without the final clamp.

    The result may hold coordinates outside the target's gamut; call
    ``.clamp()`` (or use ``convert``) before handing it to anything that
    expects displayable values.
    """
    cls = resolve_target(target, to_format)
    if type(color) is cls:
        return color
    illuminant = getattr(cls, "native_illuminant", Illuminant.D65)
    result = cls.from_xyz(color.to_xyz(illuminant))
    return carry_alpha(color, result)


def convert(color: Chromatic, target: Target, to_format: Optional[FormatType] = None):
    """
    Convert ``color`` into ``target`` and clamp the result into its gamut.

    Total for every valid input: out-of-gamut results are clamped channel by
    channel (hue wrapped), never rejected. Converting to the color's own class
    returns it unchanged.
    """
    cls = resolve_target(target, to_format)
    if type(color) is cls:
        return color
    result = convert_unclamped(color, cls)
    clamp = getattr(result, "clamp", None)
    if clamp is None:
        return result
    clamped = clamp()
    if clamped is not result and logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "clamped %s -> %s: %r -> %r",
            type(color).__name__,
            cls.__name__,
            result.raw,
            clamped.raw,
        )
    return clamped
