"""
Text to color.

Accepted forms, case-insensitive, surrounding whitespace ignored:

- ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``
- ``rgb(r, g, b)`` and ``rgba(r, g, b, a)`` with integer channels 0-255;
  alpha is an integer 0-255 or a decimal 0-1
- CSS named colors and ``transparent``

Every parser returns a ``ColorRGBAINT`` or raises a ``ColorParseError``
subclass; nothing falls back to a default color.
"""
import re

from ..colors.rgb import ColorRGBAINT
from .errors import ChannelRangeError, MalformedFunctionError, MalformedHexError, UnknownColorNameError
from .named_colors import NAMED_COLORS

_HEX_RE = re.compile(r"#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})")
_FUNC_RE = re.compile(r"(rgba?)\((.*)\)", re.DOTALL)
_INT_RE = re.compile(r"[+-]?\d+")
_UNIT_RE = re.compile(r"[+-]?(\d+\.\d*|\.\d+)")
_CHANNEL_NAMES = ("r", "g", "b", "alpha")


def parse_hex(text: str) -> ColorRGBAINT:
    """Parse a hex code; a missing alpha byte means fully opaque."""
    s = text.strip().lower()
    match = _HEX_RE.fullmatch(s)
    if match is None:
        raise MalformedHexError(text, "expected #rgb, #rgba, #rrggbb or #rrggbbaa")
    digits = match.group(1)
    if len(digits) <= 4:
        digits = "".join(d * 2 for d in digits)
    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    if len(channels) == 3:
        channels.append(255)
    return ColorRGBAINT(tuple(channels))


def _parse_channel(text: str, token: str, index: int) -> float:
    name = _CHANNEL_NAMES[index]
    if _INT_RE.fullmatch(token):
        value = float(int(token))
        if not 0 <= value <= 255:
            raise ChannelRangeError(text, name, value, 0, 255)
        return value
    if index == 3 and _UNIT_RE.fullmatch(token):
        value = float(token)
        if not 0.0 <= value <= 1.0:
            raise ChannelRangeError(text, name, value, 0.0, 1.0)
        return value * 255
    raise MalformedFunctionError(text, f"channel {name} is not a valid number ({token!r})")


def parse_function(text: str) -> ColorRGBAINT:
    """Parse ``rgb(...)`` or ``rgba(...)`` function syntax."""
    s = text.strip().lower()
    match = _FUNC_RE.fullmatch(s)
    if match is None:
        raise MalformedFunctionError(text, "expected rgb(r, g, b) or rgba(r, g, b, a)")
    func, body = match.groups()
    tokens = [t.strip() for t in body.split(",")]
    expected = 4 if func == "rgba" else 3
    if len(tokens) != expected:
        raise MalformedFunctionError(text, f"{func}() takes {expected} channels, got {len(tokens)}")
    channels = [_parse_channel(text, token, i) for i, token in enumerate(tokens)]
    if expected == 3:
        channels.append(255.0)
    return ColorRGBAINT(tuple(channels))


def parse_named(text: str) -> ColorRGBAINT:
    """Look up a CSS color keyword."""
    name = text.strip().lower()
    try:
        rgba = NAMED_COLORS[name]
    except KeyError:
        raise UnknownColorNameError(text, "unknown color name") from None
    return ColorRGBAINT(rgba)


def parse_color(text: str) -> ColorRGBAINT:
    """Parse any supported form, dispatching on its leading characters."""
    if not isinstance(text, str):
        raise TypeError(f"parse_color expects a string, got {type(text).__name__}")
    s = text.strip()
    if s.startswith("#"):
        return parse_hex(text)
    if "(" in s:
        return parse_function(text)
    return parse_named(text)
