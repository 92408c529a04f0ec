from .format_type import FormatType, max_non_hue, HUE_360
from .color_types import (
    Scalar,
    FloatVector,
    ColorElement,
    Bound,
    ColorMode,
)
