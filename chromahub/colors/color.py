from __future__ import annotations

from typing import Optional

from ..types.format_type import FormatType
from .adobe_rgb import adobe_rgb_tuple_to_class
from .color_base import ColorBase
from .gray import gray_tuple_to_class
from .hsl import hsl_tuple_to_class
from .hsv import hsv_tuple_to_class
from .lab import lab_tuple_to_class
from .lch import lch_tuple_to_class
from .luv import luv_tuple_to_class
from .rgb import rgb_tuple_to_class
from .romm_rgb import romm_rgb_tuple_to_class
from .xyz import xyz_tuple_to_class

unified_tuple_to_class: dict[tuple[str, FormatType], type[ColorBase]] = {
    **xyz_tuple_to_class,
    **rgb_tuple_to_class,
    **hsv_tuple_to_class,
    **hsl_tuple_to_class,
    **lab_tuple_to_class,
    **lch_tuple_to_class,
    **luv_tuple_to_class,
    **adobe_rgb_tuple_to_class,
    **romm_rgb_tuple_to_class,
    **gray_tuple_to_class,
}

# Preferred format when a mode is named without one.
_FORMAT_PREFERENCE = (FormatType.FLOAT, FormatType.INT, FormatType.PERCENTAGE)


def get_color_class(color_space: str, format_type: Optional[FormatType] = None) -> type[ColorBase]:
    """
    Look up the class registered for ``(color_space, format_type)``.

    With no format, the FLOAT class is preferred, then INT, then PERCENTAGE.
    """
    color_space = color_space.lower()
    if format_type is not None:
        color_class = unified_tuple_to_class.get((color_space, FormatType(format_type)))
        if color_class is None:
            raise ValueError(
                f"Unsupported color space/format combination: {color_space}/{format_type}"
            )
        return color_class
    for fmt in _FORMAT_PREFERENCE:
        color_class = unified_tuple_to_class.get((color_space, fmt))
        if color_class is not None:
            return color_class
    raise ValueError(f"Unsupported color space: {color_space}")


def color_convert(
    self: ColorBase,
    to_space: str | type | None = None,
    to_format: FormatType | None = None,
) -> ColorBase:
    """
    Convert this color to another space and/or format.

    ``to_space`` is a color class or a mode name (``"lab"``, ``"rgba"``, ...).
    A mode name with no ``to_format`` keeps this color's format when the target
    mode offers it. The result is clamped into the target's gamut.
    """
    from ..conversions.engine import convert

    if to_space is None:
        to_space = self.mode
    if isinstance(to_space, str) and to_format is None:
        to_space = to_space.lower()
        to_format = self.format_type if (to_space, self.format_type) in unified_tuple_to_class else None
    return convert(self, to_space, to_format)


ColorBase.convert = color_convert
