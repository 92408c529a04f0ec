"""
Chromahub Color Classes
=======================

Immutable value types, one family per color space. Every class stores its
raw (unbounded) coordinates and implements the XYZ capability, so any color
converts to any other through ``ColorBase.convert``.

Usage
-----
>>> from chromahub.colors import ColorRGBINT, CIELABColor
>>> red = ColorRGBINT((255, 0, 0))
>>> lab = red.convert(CIELABColor)
>>> lab.convert("rgb", "int").value
(255, 0, 0)

Color Classes
-------------
XYZ:
    - XYZColor: tristimulus values carrying their own illuminant
RGB variants (sRGB, D65):
    - ColorRGBINT / ColorRGBAINT: 0-255, float shadow kept in ``raw``
    - ColorUnitRGB / ColorUnitRGBA: 0.0-1.0
    - ColorPercentageRGB / ColorPercentageRGBA: 0-100
HSV and HSL variants:
    - ColorHSVINT, UnitHSV, PercentageHSV (+ alpha)
    - ColorHSLINT, UnitHSL, PercentageHSL (+ alpha)
CIE spaces (D50):
    - CIELABColor, CIELCHColor, CIELUVColor, CIELCHuvColor
Wide-gamut RGB:
    - AdobeRGBColor (D65), ROMMRGBColor (D50)
Gray:
    - GrayColor

Notes
-----
- Instances are frozen after ``__init__``; assignment raises AttributeError
- Construction never clamps; ``clamp()`` and conversion do
- INT formats expose a clamped, rounded ``value``
"""

from .color_base import ColorBase, Chromatic, WithAlpha
from .xyz import XYZColor
from .rgb import (
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
)
from .hsv import ColorHSVINT, ColorHSVAINT, UnitHSV, UnitHSVA, PercentageHSV, PercentageHSVA
from .hsl import ColorHSLINT, ColorHSLAINT, UnitHSL, UnitHSLA, PercentageHSL, PercentageHSLA
from .lab import CIELABColor
from .lch import CIELCHColor
from .luv import CIELUVColor, CIELCHuvColor
from .adobe_rgb import AdobeRGBColor
from .romm_rgb import ROMMRGBColor
from .gray import GrayColor
from .color import color_convert, get_color_class, unified_tuple_to_class


__all__ = [
    'ColorBase',
    'Chromatic',
    'WithAlpha',
    'XYZColor',
    'ColorRGBINT',
    'ColorRGBAINT',
    'ColorUnitRGB',
    'ColorUnitRGBA',
    'ColorPercentageRGB',
    'ColorPercentageRGBA',
    'ColorHSVINT',
    'ColorHSVAINT',
    'UnitHSV',
    'UnitHSVA',
    'PercentageHSV',
    'PercentageHSVA',
    'ColorHSLINT',
    'ColorHSLAINT',
    'UnitHSL',
    'UnitHSLA',
    'PercentageHSL',
    'PercentageHSLA',
    'CIELABColor',
    'CIELCHColor',
    'CIELUVColor',
    'CIELCHuvColor',
    'AdobeRGBColor',
    'ROMMRGBColor',
    'GrayColor',
    'color_convert',
    'get_color_class',
    'unified_tuple_to_class',
]
