from .errors import (
    ColorParseError,
    MalformedHexError,
    MalformedFunctionError,
    ChannelRangeError,
    UnknownColorNameError,
)
from .named_colors import NAMED_COLORS
from .material_colors import MATERIAL_PALETTE, MaterialHue, material_color
from .parse import parse_color, parse_hex, parse_function, parse_named

__all__ = [
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
]
