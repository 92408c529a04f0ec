"""Chromahub: color conversion, difference, mixing and gradients through CIE XYZ."""
import logging

from .illuminants import Illuminant, CustomIlluminant, white_point, adaptation_matrix, adapt
from .colors.color_base import ColorBase, Chromatic, WithAlpha
from .colors.xyz import XYZColor
from .colors.rgb import (
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
)
from .colors.hsv import (
    ColorHSVINT,
    ColorHSVAINT,
    UnitHSV,
    UnitHSVA,
    PercentageHSV,
    PercentageHSVA,
)
from .colors.hsl import (
    ColorHSLINT,
    ColorHSLAINT,
    UnitHSL,
    UnitHSLA,
    PercentageHSL,
    PercentageHSLA,
)
from .colors.lab import CIELABColor
from .colors.lch import CIELCHColor
from .colors.luv import CIELUVColor, CIELCHuvColor
from .colors.adobe_rgb import AdobeRGBColor
from .colors.romm_rgb import ROMMRGBColor
from .colors.gray import GrayColor
from .colors.color import color_convert, get_color_class
from .types.format_type import FormatType
from .conversions.engine import convert, convert_unclamped
from .gamut import clamp, clamp_into, closest_real_color, in_gamut, is_imaginary, map_into_gamut
from .difference import JND_THRESHOLD, ciede2000, distance, euclidean_distance, visually_indistinguishable
from .mixing import average, midpoint, mix, weighted_midpoint
from .gradients import Gradient1D, GradientColorMap, HueMode, ListedColorMap, Normalization, gradient, hue_lerp
from .parsing import (
    ColorParseError,
    MalformedHexError,
    MalformedFunctionError,
    ChannelRangeError,
    UnknownColorNameError,
    NAMED_COLORS,
    MATERIAL_PALETTE,
    MaterialHue,
    material_color,
    parse_color,
    parse_hex,
    parse_function,
    parse_named,
)

# Friendly aliases for common integer variants
ColorRGB = ColorRGBINT
ColorRGBA = ColorRGBAINT

# Tolerance within which an in-gamut color survives a round trip through XYZ.
ROUND_TRIP_TOLERANCE = 1e-3

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Illuminant",
    "CustomIlluminant",
    "white_point",
    "adaptation_matrix",
    "adapt",
    "ColorBase",
    "Chromatic",
    "WithAlpha",
    "XYZColor",
    "ColorRGBINT",
    "ColorRGBAINT",
    "ColorUnitRGB",
    "ColorUnitRGBA",
    "ColorPercentageRGB",
    "ColorPercentageRGBA",
    "ColorRGB",
    "ColorRGBA",
    "ColorHSVINT",
    "ColorHSVAINT",
    "UnitHSV",
    "UnitHSVA",
    "PercentageHSV",
    "PercentageHSVA",
    "ColorHSLINT",
    "ColorHSLAINT",
    "UnitHSL",
    "UnitHSLA",
    "PercentageHSL",
    "PercentageHSLA",
    "CIELABColor",
    "CIELCHColor",
    "CIELUVColor",
    "CIELCHuvColor",
    "AdobeRGBColor",
    "ROMMRGBColor",
    "GrayColor",
    "FormatType",
    "color_convert",
    "get_color_class",
    "convert",
    "convert_unclamped",
    "clamp",
    "clamp_into",
    "in_gamut",
    "map_into_gamut",
    "is_imaginary",
    "closest_real_color",
    "JND_THRESHOLD",
    "ciede2000",
    "distance",
    "euclidean_distance",
    "visually_indistinguishable",
    "mix",
    "average",
    "midpoint",
    "weighted_midpoint",
    "gradient",
    "Gradient1D",
    "GradientColorMap",
    "ListedColorMap",
    "Normalization",
    "HueMode",
    "hue_lerp",
    "ColorParseError",
    "MalformedHexError",
    "MalformedFunctionError",
    "ChannelRangeError",
    "UnknownColorNameError",
    "NAMED_COLORS",
    "MATERIAL_PALETTE",
    "MaterialHue",
    "material_color",
    "parse_color",
    "parse_hex",
    "parse_function",
    "parse_named",
    "ROUND_TRIP_TOLERANCE",
]
