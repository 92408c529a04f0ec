"""
The Google Material Design color palette.

Each hue has tones 50 through 900; the chromatic hues also carry accent tones
A100, A200, A400 and A700. Brown, grey and blue grey have no accents. Black
and white take no tone.
"""
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from ..colors.color_base import ColorBase
from ..colors.rgb import ColorRGBINT
from .errors import UnknownColorNameError

NEUTRAL_TONES = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900")
ACCENT_TONES = ("A100", "A200", "A400", "A700")


class MaterialHue(str, Enum):
    RED = "red"
    PINK = "pink"
    PURPLE = "purple"
    DEEP_PURPLE = "deep_purple"
    INDIGO = "indigo"
    BLUE = "blue"
    LIGHT_BLUE = "light_blue"
    CYAN = "cyan"
    TEAL = "teal"
    GREEN = "green"
    LIGHT_GREEN = "light_green"
    LIME = "lime"
    YELLOW = "yellow"
    AMBER = "amber"
    ORANGE = "orange"
    DEEP_ORANGE = "deep_orange"
    BROWN = "brown"
    GREY = "grey"
    BLUE_GREY = "blue_grey"
    BLACK = "black"
    WHITE = "white"


# tones in NEUTRAL_TONES order, then ACCENT_TONES where the hue has them
_MATERIAL_HEX = {
    MaterialHue.RED: ("#FFEBEE", "#FFCDD2", "#EF9A9A", "#E57373", "#EF5350", "#F44336", "#E53935", "#D32F2F", "#C62828", "#B71C1C", "#FF8A80", "#FF5252", "#FF1744", "#D50000"),
    MaterialHue.PINK: ("#FCE4EC", "#F8BBD0", "#F48FB1", "#F06292", "#EC407A", "#E91E63", "#D81B60", "#C2185B", "#AD1457", "#880E4F", "#FF80AB", "#FF4081", "#F50057", "#C51162"),
    MaterialHue.PURPLE: ("#F3E5F5", "#E1BEE7", "#CE93D8", "#BA68C8", "#AB47BC", "#9C27B0", "#8E24AA", "#7B1FA2", "#6A1B9A", "#4A148C", "#EA80FC", "#E040FB", "#D500F9", "#AA00FF"),
    MaterialHue.DEEP_PURPLE: ("#EDE7F6", "#D1C4E9", "#B39DDB", "#9575CD", "#7E57C2", "#673AB7", "#5E35B1", "#512DA8", "#4527A0", "#311B92", "#B388FF", "#7C4DFF", "#651FFF", "#6200EA"),
    MaterialHue.INDIGO: ("#E8EAF6", "#C5CAE9", "#9FA8DA", "#7986CB", "#5C6BC0", "#3F51B5", "#3949AB", "#303F9F", "#283593", "#1A237E", "#8C9EFF", "#536DFE", "#3D5AFE", "#304FFE"),
    MaterialHue.BLUE: ("#E3F2FD", "#BBDEFB", "#90CAF9", "#64B5F6", "#42A5F5", "#2196F3", "#1E88E5", "#1976D2", "#1565C0", "#0D47A1", "#82B1FF", "#448AFF", "#2979FF", "#2962FF"),
    MaterialHue.LIGHT_BLUE: ("#E1F5FE", "#B3E5FC", "#81D4FA", "#4FC3F7", "#29B6F6", "#03A9F4", "#039BE5", "#0288D1", "#0277BD", "#01579B", "#80D8FF", "#40C4FF", "#00B0FF", "#0091EA"),
    MaterialHue.CYAN: ("#E0F7FA", "#B2EBF2", "#80DEEA", "#4DD0E1", "#26C6DA", "#00BCD4", "#00ACC1", "#0097A7", "#00838F", "#006064", "#84FFFF", "#18FFFF", "#00E5FF", "#00B8D4"),
    MaterialHue.TEAL: ("#E0F2F1", "#B2DFDB", "#80CBC4", "#4DB6AC", "#26A69A", "#009688", "#00897B", "#00796B", "#00695C", "#004D40", "#A7FFEB", "#64FFDA", "#1DE9B6", "#00BFA5"),
    MaterialHue.GREEN: ("#E8F5E9", "#C8E6C9", "#A5D6A7", "#81C784", "#66BB6A", "#4CAF50", "#43A047", "#388E3C", "#2E7D32", "#1B5E20", "#B9F6CA", "#69F0AE", "#00E676", "#00C853"),
    MaterialHue.LIGHT_GREEN: ("#F1F8E9", "#DCEDC8", "#C5E1A5", "#AED581", "#9CCC65", "#8BC34A", "#7CB342", "#689F38", "#558B2F", "#33691E", "#CCFF90", "#B2FF59", "#76FF03", "#64DD17"),
    MaterialHue.LIME: ("#F9FBE7", "#F0F4C3", "#E6EE9C", "#DCE775", "#D4E157", "#CDDC39", "#C0CA33", "#AFB42B", "#9E9D24", "#827717", "#F4FF81", "#EEFF41", "#C6FF00", "#AEEA00"),
    MaterialHue.YELLOW: ("#FFFDE7", "#FFF9C4", "#FFF59D", "#FFF176", "#FFEE58", "#FFEB3B", "#FDD835", "#FBC02D", "#F9A825", "#F57F17", "#FFFF8D", "#FFFF00", "#FFEA00", "#FFD600"),
    MaterialHue.AMBER: ("#FFF8E1", "#FFECB3", "#FFE082", "#FFD54F", "#FFCA28", "#FFC107", "#FFB300", "#FFA000", "#FF8F00", "#FF6F00", "#FFE57F", "#FFD740", "#FFC400", "#FFAB00"),
    MaterialHue.ORANGE: ("#FFF3E0", "#FFE0B2", "#FFCC80", "#FFB74D", "#FFA726", "#FF9800", "#FB8C00", "#F57C00", "#EF6C00", "#E65100", "#FFD180", "#FFAB40", "#FF9100", "#FF6D00"),
    MaterialHue.DEEP_ORANGE: ("#FBE9E7", "#FFCCBC", "#FFAB91", "#FF8A65", "#FF7043", "#FF5722", "#F4511E", "#E64A19", "#D84315", "#BF360C", "#FF9E80", "#FF6E40", "#FF3D00", "#DD2C00"),
    MaterialHue.BROWN: ("#EFEBE9", "#D7CCC8", "#BCAAA4", "#A1887F", "#8D6E63", "#795548", "#6D4C41", "#5D4037", "#4E342E", "#3E2723"),
    MaterialHue.GREY: ("#FAFAFA", "#F5F5F5", "#EEEEEE", "#E0E0E0", "#BDBDBD", "#9E9E9E", "#757575", "#616161", "#424242", "#212121"),
    MaterialHue.BLUE_GREY: ("#ECEFF1", "#CFD8DC", "#B0BEC5", "#90A4AE", "#78909C", "#607D8B", "#546E7A", "#455A64", "#37474F", "#263238"),
}

_SINGLE_HEX = {MaterialHue.BLACK: "#000000", MaterialHue.WHITE: "#FFFFFF"}


def _build_palette() -> Mapping[Tuple[MaterialHue, Optional[str]], str]:
    table = {}
    for hue, codes in _MATERIAL_HEX.items():
        for tone, code in zip(NEUTRAL_TONES + ACCENT_TONES, codes):
            table[(hue, tone)] = code
    for hue, code in _SINGLE_HEX.items():
        table[(hue, None)] = code
    return MappingProxyType(table)


MATERIAL_PALETTE = _build_palette()


def material_color(
    hue: Union[MaterialHue, str],
    tone: Union[str, int, None] = 500,
    color_class: type[ColorBase] = ColorRGBINT,
) -> ColorBase:
    """
    Look up a Material Design color.

    >>> material_color("blue", 50).to_hex()
    '#E3F2FD'
    >>> material_color(MaterialHue.RED, "A100").to_hex()
    '#FF8A80'
    """
    if not isinstance(hue, MaterialHue):
        try:
            hue = MaterialHue(str(hue).lower().replace(" ", "_").replace("-", "_"))
        except ValueError:
            raise UnknownColorNameError(str(hue), "unknown Material hue") from None
    if hue in _SINGLE_HEX:
        tone = None
    elif tone is not None:
        tone = str(tone).upper()
    code = MATERIAL_PALETTE.get((hue, tone))
    if code is None:
        raise UnknownColorNameError(f"{hue.value} {tone}", "no such Material tone")
    color = ColorRGBINT.from_hex(code)
    return color if color_class is ColorRGBINT else color.convert(color_class)
