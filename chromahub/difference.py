"""
Color difference.

``distance`` is CIEDE2000 (Sharma, Wu and Dalal, 2005) computed on CIELAB
under D50. It is symmetric and zero only for identical Lab coordinates.
``euclidean_distance`` is plain coordinate distance and says nothing about
how different two colors look.
"""
from __future__ import annotations

import math
from typing import Tuple

from .colors.color_base import Chromatic, ColorBase
from .colors.lab import CIELABColor
from .conversions.engine import convert_unclamped

POW7_25 = 25 ** 7

# Largest CIEDE2000 difference still reported as indistinguishable (exclusive).
JND_THRESHOLD = 1.0

Lab = Tuple[float, float, float]


def _hue_deg(b: float, a: float) -> float:
    if a == 0 and b == 0:
        return 0.0
    return math.degrees(math.atan2(b, a)) % 360.0


def ciede2000(lab1: Lab, lab2: Lab, k_l: float = 1.0, k_c: float = 1.0, k_h: float = 1.0) -> float:
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2

    C1 = math.hypot(a1, b1)
    C2 = math.hypot(a2, b2)
    C_bar_7 = ((C1 + C2) / 2) ** 7
    G = 0.5 * (1 - math.sqrt(C_bar_7 / (C_bar_7 + POW7_25)))

    a1_prime = (1 + G) * a1
    a2_prime = (1 + G) * a2
    C1_prime = math.hypot(a1_prime, b1)
    C2_prime = math.hypot(a2_prime, b2)
    h1_prime = _hue_deg(b1, a1_prime)
    h2_prime = _hue_deg(b2, a2_prime)

    delta_L_prime = L2 - L1
    delta_C_prime = C2_prime - C1_prime
    chroma_product = C1_prime * C2_prime
    h_diff = h2_prime - h1_prime

    if chroma_product == 0:
        delta_h_prime = 0.0
    elif abs(h_diff) <= 180:
        delta_h_prime = h_diff
    elif h_diff > 180:
        delta_h_prime = h_diff - 360
    else:
        delta_h_prime = h_diff + 360
    delta_H_prime = 2 * math.sqrt(chroma_product) * math.sin(math.radians(delta_h_prime) / 2)

    L_bar_prime = (L1 + L2) / 2
    C_bar_prime = (C1_prime + C2_prime) / 2
    h_sum = h1_prime + h2_prime
    if chroma_product == 0:
        h_bar_prime = h_sum
    elif abs(h_diff) <= 180:
        h_bar_prime = h_sum / 2
    elif h_sum < 360:
        h_bar_prime = (h_sum + 360) / 2
    else:
        h_bar_prime = (h_sum - 360) / 2

    T = (
        1
        - 0.17 * math.cos(math.radians(h_bar_prime - 30))
        + 0.24 * math.cos(math.radians(2 * h_bar_prime))
        + 0.32 * math.cos(math.radians(3 * h_bar_prime + 6))
        - 0.20 * math.cos(math.radians(4 * h_bar_prime - 63))
    )

    L_offset_2 = (L_bar_prime - 50) ** 2
    S_L = 1 + 0.015 * L_offset_2 / math.sqrt(20 + L_offset_2)
    S_C = 1 + 0.045 * C_bar_prime
    S_H = 1 + 0.015 * C_bar_prime * T

    # rotation term, only significant in the blue region around 275 degrees
    delta_theta = 30 * math.exp(-(((h_bar_prime - 275) / 25) ** 2))
    C_bar_prime_7 = C_bar_prime ** 7
    R_C = 2 * math.sqrt(C_bar_prime_7 / (C_bar_prime_7 + POW7_25))
    R_T = -R_C * math.sin(math.radians(2 * delta_theta))

    l_term = delta_L_prime / (k_l * S_L)
    c_term = delta_C_prime / (k_c * S_C)
    h_term = delta_H_prime / (k_h * S_H)
    return math.sqrt(max(0.0, l_term ** 2 + c_term ** 2 + h_term ** 2 + R_T * c_term * h_term))


def _to_lab(color: Chromatic) -> Lab:
    return convert_unclamped(color, CIELABColor).raw


def distance(a: Chromatic, b: Chromatic, *, k_l: float = 1.0, k_c: float = 1.0, k_h: float = 1.0) -> float:
    """
    CIEDE2000 difference between two colors of any space.

    Both are taken to CIELAB without clamping, so out-of-gamut inputs are
    measured where they actually are.
    """
    return ciede2000(_to_lab(a), _to_lab(b), k_l, k_c, k_h)


def visually_indistinguishable(a: Chromatic, b: Chromatic) -> bool:
    """
    True when ``distance(a, b)`` is strictly below ``JND_THRESHOLD``.

    The threshold is conservative: pairs right at one just-noticeable
    difference are reported as distinguishable.
    """
    return distance(a, b) < JND_THRESHOLD


def euclidean_distance(a: ColorBase, b: Chromatic) -> float:
    """Straight-line distance between raw coordinates after moving ``b`` into ``a``'s class."""
    theirs = convert_unclamped(b, type(a)).raw
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a.raw, theirs)))
