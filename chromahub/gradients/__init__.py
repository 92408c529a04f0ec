"""
Chromahub Gradients
===================

- ``gradient`` / ``Gradient1D``: lazy CIELCH runs through anchor colors
- ``GradientColorMap``: continuous [0, 1] -> color maps in a color's own space
- ``ListedColorMap``: [0, 1] -> color over a table (viridis, magma, inferno, plasma)
- ``hue_lerp`` / ``HueMode``: circular hue interpolation
"""
from .hue import HueMode, hue_lerp, hue_delta
from .gradient1d import Gradient1D, gradient
from .colormap import GradientColorMap, ListedColorMap, Normalization

__all__ = [
    "HueMode",
    "hue_lerp",
    "hue_delta",
    "Gradient1D",
    "gradient",
    "GradientColorMap",
    "ListedColorMap",
    "Normalization",
]
