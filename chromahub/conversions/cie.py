"""
CIE 1976 uniform color spaces: CIELAB, CIELUV and their cylindrical forms.

Functions take and return plain float triples. XYZ inputs are expected to be
normalized so the reference white has Y = 1; the white is passed explicitly.
"""
import math
from typing import Tuple

Triple = Tuple[float, float, float]

LAB_DELTA = 6.0 / 29.0
LAB_EPSILON = LAB_DELTA ** 3            # 216 / 24389
LAB_KAPPA = (29.0 / 3.0) ** 3           # 24389 / 27
HUE_MAX = 360.0


def _lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return math.copysign(abs(t) ** (1.0 / 3.0), t)
    return t / (3 * LAB_DELTA ** 2) + 4.0 / 29.0


def _lab_f_inv(f: float) -> float:
    if f > LAB_DELTA:
        return f ** 3
    return 3 * LAB_DELTA ** 2 * (f - 4.0 / 29.0)


def xyz_to_lab(xyz: Triple, white: Triple) -> Triple:
    x, y, z = xyz
    xn, yn, zn = white
    fx = _lab_f(x / xn)
    fy = _lab_f(y / yn)
    fz = _lab_f(z / zn)
    return 116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)


def lab_to_xyz(lab: Triple, white: Triple) -> Triple:
    l, a, b = lab
    xn, yn, zn = white
    fy = (l + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0
    return xn * _lab_f_inv(fx), yn * _lab_f_inv(fy), zn * _lab_f_inv(fz)


def rectangular_to_polar(l: float, a: float, b: float) -> Triple:
    """(L, a, b) -> (L, C, h) with h in degrees [0, 360)."""
    c = math.hypot(a, b)
    h = math.degrees(math.atan2(b, a)) % HUE_MAX
    return l, c, h


def polar_to_rectangular(l: float, c: float, h: float) -> Triple:
    rad = math.radians(h)
    return l, c * math.cos(rad), c * math.sin(rad)


def uv_prime(x: float, y: float, z: float) -> Tuple[float, float]:
    """CIE 1976 u'v' chromaticity of an XYZ triple; (0, 0) for black."""
    denom = x + 15.0 * y + 3.0 * z
    if denom == 0:
        return 0.0, 0.0
    return 4.0 * x / denom, 9.0 * y / denom


def xyz_to_luv(xyz: Triple, white: Triple) -> Triple:
    x, y, z = xyz
    un, vn = uv_prime(*white)
    y_r = y / white[1]
    if y_r <= LAB_EPSILON:
        l = LAB_KAPPA * y_r
    else:
        l = 116.0 * y_r ** (1.0 / 3.0) - 16.0
    if x + 15.0 * y + 3.0 * z == 0:
        return l, 0.0, 0.0
    u_p, v_p = uv_prime(x, y, z)
    return l, 13.0 * l * (u_p - un), 13.0 * l * (v_p - vn)


def luv_to_xyz(luv: Triple, white: Triple) -> Triple:
    l, u, v = luv
    if l == 0:
        return 0.0, 0.0, 0.0
    un, vn = uv_prime(*white)
    u_p = u / (13.0 * l) + un
    v_p = v / (13.0 * l) + vn
    if l <= 8.0:
        y = white[1] * l / LAB_KAPPA
    else:
        y = white[1] * ((l + 16.0) / 116.0) ** 3
    if v_p == 0:
        return 0.0, y, 0.0
    x = y * 9.0 * u_p / (4.0 * v_p)
    z = y * (12.0 - 3.0 * u_p - 20.0 * v_p) / (4.0 * v_p)
    return x, y, z
