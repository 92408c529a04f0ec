from __future__ import annotations
from typing import Literal, Optional, Sequence, Tuple, Union

Scalar = int | float
FloatVector = Tuple[float, ...]
ColorElement = Union[Scalar, Sequence[Scalar]]
Bound = Optional[Tuple[float, float]]

ColorMode = Literal[
    "xyz",
    "rgb", "rgba",
    "hsv", "hsva",
    "hsl", "hsla",
    "lab", "lch",
    "luv", "lchuv",
    "adobe_rgb", "romm_rgb",
    "gray",
]
