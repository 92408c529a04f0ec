import pytest

from chromahub.colors.lab import CIELABColor
from chromahub.colors.lch import CIELCHColor
from chromahub.colors.rgb import ColorRGBINT, ColorUnitRGB, ColorUnitRGBA
from chromahub.conversions.engine import convert_unclamped
from chromahub.colors.xyz import XYZColor
from chromahub.conversions.cie import uv_prime
from chromahub.conversions.spectral import inside_locus, nearest_on_locus, spectral_locus_uv
from chromahub.gamut import (
    clamp,
    clamp_into,
    closest_real_color,
    in_gamut,
    is_imaginary,
    map_into_gamut,
)
from chromahub.illuminants import Illuminant
from .samples import shared_gamut_rgb


def test_clamp_is_idempotent():
    color = ColorUnitRGB((1.4, -0.2, 0.5))
    once = clamp(color)
    assert once.raw == (1.0, 0.0, 0.5)
    assert clamp(once) is once


def test_in_gamut_against_other_space():
    lab = CIELABColor((50.0, 100.0, 100.0))
    assert in_gamut(lab)
    assert not in_gamut(lab, ColorUnitRGB)
    assert in_gamut(CIELABColor((50.0, 5.0, 5.0)), ColorUnitRGB)
    assert in_gamut(CIELABColor((50.0, 5.0, 5.0)), "rgb")


def test_clamp_into():
    lab = CIELABColor((50.0, 100.0, 100.0))
    inside = clamp_into(lab, ColorUnitRGB)
    assert isinstance(inside, CIELABColor)
    rgb = convert_unclamped(inside, ColorUnitRGB)
    assert all(-1e-9 <= v <= 1 + 1e-9 for v in rgb.raw)

    already = CIELABColor((50.0, 5.0, 5.0))
    assert clamp_into(already, ColorUnitRGB).raw == pytest.approx(already.raw, abs=1e-9)


def test_map_into_gamut_keeps_lightness_and_hue():
    lch = CIELCHColor((60.0, 120.0, 40.0))
    mapped = map_into_gamut(lch, ColorUnitRGB)
    assert isinstance(mapped, CIELCHColor)
    l, c, h = mapped.raw
    assert c < 120.0
    assert l == pytest.approx(60.0, abs=0.5)
    assert h == pytest.approx(40.0, abs=0.5)
    rgb = convert_unclamped(mapped, ColorUnitRGB)
    assert all(-1e-3 <= v <= 1 + 1e-3 for v in rgb.raw)


def test_map_into_gamut_returns_inside_colors_untouched():
    lab = CIELABColor((50.0, 5.0, 5.0))
    assert map_into_gamut(lab, ColorRGBINT) is lab


def test_map_into_gamut_carries_alpha():
    rgba = ColorUnitRGBA((1.3, 0.2, -0.1, 0.4))
    mapped = map_into_gamut(rgba, ColorUnitRGB)
    assert mapped.in_gamut
    assert mapped.alpha == pytest.approx(0.4)


def test_map_into_gamut_warns_when_steps_run_out():
    with pytest.warns(RuntimeWarning):
        map_into_gamut(CIELCHColor((60.0, 120.0, 40.0)), ColorUnitRGB, tolerance=1e-12, max_steps=3)


def test_locus_polygon_contains_the_whites():
    assert spectral_locus_uv().shape == (65, 2)
    for illuminant in (Illuminant.D50, Illuminant.D65):
        assert inside_locus(*uv_prime(*illuminant.white_point))
    assert not inside_locus(0.0, 0.0)
    assert not inside_locus(0.3, 0.7)


@pytest.mark.parametrize(
    "unit_rgb",
    shared_gamut_rgb + [(1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0), (1.0, 1.0, 1.0), (0.0, 0.0, 0.0)],
)
def test_displayable_colors_are_real(unit_rgb):
    color = ColorUnitRGB(unit_rgb)
    assert not is_imaginary(color)
    assert closest_real_color(color) is color


def test_imaginary_colors():
    # chromaticity x=0.1, y=0.9 lies above the green end of the locus
    assert is_imaginary(XYZColor((0.1, 0.9, 0.0), Illuminant.D50))
    assert is_imaginary(XYZColor((0.2, -0.1, 0.3)))
    assert not is_imaginary(XYZColor((0.0, 0.0, 0.0)))
    assert not is_imaginary(CIELABColor((50.0, 20.0, -10.0)))


def test_closest_real_color_keeps_lightness_and_lands_on_the_locus():
    color = XYZColor((0.1, 0.9, 0.0), Illuminant.D50)
    real = closest_real_color(color)
    assert isinstance(real, XYZColor)
    assert real.illuminant == Illuminant.D50
    assert not is_imaginary(real)
    assert real.raw[1] == pytest.approx(0.9, rel=1e-9)

    x, y, z = real.raw
    u, v = uv_prime(x, y, z)
    nu, nv = nearest_on_locus(u, v)
    assert abs(u - nu) + abs(v - nv) < 1e-6


def test_closest_real_color_of_negative_luminance_is_black():
    real = closest_real_color(XYZColor((0.2, -0.1, 0.3)))
    assert real.raw == pytest.approx((0.0, 0.0, 0.0), abs=1e-12)
    assert not is_imaginary(real)


def test_closest_real_color_returns_the_input_class():
    lab = convert_unclamped(XYZColor((0.1, 0.9, 0.0), Illuminant.D50), CIELABColor)
    assert is_imaginary(lab)
    real = closest_real_color(lab)
    assert isinstance(real, CIELABColor)
    assert not is_imaginary(real)
    assert real.raw[0] == pytest.approx(lab.raw[0], abs=1e-9)
