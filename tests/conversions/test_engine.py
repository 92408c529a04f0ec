import logging

import pytest

from chromahub.colors.rgb import ColorRGBINT, ColorRGBAINT, ColorUnitRGB, ColorUnitRGBA
from chromahub.colors.hsv import UnitHSVA
from chromahub.colors.lab import CIELABColor
from chromahub.colors.lch import CIELCHColor
from chromahub.colors.xyz import XYZColor
from chromahub.colors.color_base import Chromatic
from chromahub.conversions.engine import convert, convert_unclamped, resolve_target
from chromahub.illuminants import Illuminant
from chromahub.types.format_type import FormatType


def test_out_of_gamut_lab_is_clamped_to_rgb():
    lab = CIELABColor((0.0, 100.0, 100.0))
    rgb = convert(lab, ColorRGBINT)
    assert rgb.value == (105, 0, 0)
    assert rgb.to_hex() == "#690000"

    back = convert(ColorRGBINT(rgb.value), CIELABColor)
    assert back.raw == pytest.approx((20.60, 42.10, 31.82), abs=0.02)


def test_unclamped_result_keeps_shadow_coordinates():
    lab = CIELABColor((0.0, 100.0, 100.0))
    raw_rgb = convert_unclamped(lab, ColorRGBINT)
    assert not raw_rgb.in_gamut
    assert raw_rgb.raw[0] > 105
    assert raw_rgb.raw[1] < 0
    assert raw_rgb.clamp() == convert(lab, ColorRGBINT)


def test_clamp_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="chromahub.conversions.engine")
    convert(CIELABColor((0.0, 100.0, 100.0)), ColorUnitRGB)
    assert any("clamped CIELABColor -> ColorUnitRGB" in r.getMessage() for r in caplog.records)

    caplog.clear()
    convert(ColorUnitRGB((0.2, 0.4, 0.6)), CIELABColor)
    assert not caplog.records


def test_identity():
    lab = CIELABColor((150.0, 0.0, 0.0))
    # same class returns the very same object, even out of gamut
    assert convert(lab, CIELABColor) is lab
    assert convert_unclamped(lab, CIELABColor) is lab


def test_mode_names_and_formats():
    rgb = ColorUnitRGB((0.2, 0.4, 0.6))
    assert isinstance(convert(rgb, "lab"), CIELABColor)
    assert isinstance(convert(rgb, "rgb", FormatType.INT), ColorRGBINT)
    assert resolve_target("LCH") is CIELCHColor
    with pytest.raises(ValueError):
        convert(rgb, "cmyk")
    with pytest.raises(TypeError):
        convert(rgb, 42)


def test_alpha_carried():
    rgba = ColorRGBAINT((200, 100, 50, 64))
    hsva = convert(rgba, UnitHSVA)
    assert hsva.unit_alpha == pytest.approx(64 / 255)
    assert convert(hsva, ColorRGBAINT).alpha == 64


def test_every_color_is_chromatic():
    for color in (ColorUnitRGBA((0.1, 0.2, 0.3, 1.0)), CIELABColor((50, 0, 0)), XYZColor((0.2, 0.3, 0.4))):
        assert isinstance(color, Chromatic)


def test_conversion_to_xyz_uses_requested_white():
    rgb = ColorUnitRGB((1.0, 1.0, 1.0))
    d65 = rgb.to_xyz()
    assert d65.illuminant is Illuminant.D65
    assert d65.raw == pytest.approx(Illuminant.D65.white_point, abs=1e-3)

    d50 = rgb.to_xyz(Illuminant.D50)
    assert d50.illuminant is Illuminant.D50
    assert d50.raw == pytest.approx(Illuminant.D50.white_point, abs=1e-3)


def test_white_is_neutral_in_lab():
    lab = convert(ColorUnitRGB((1.0, 1.0, 1.0)), CIELABColor)
    l, a, b = lab.raw
    assert l == pytest.approx(100.0, abs=0.05)
    assert abs(a) < 0.1
    assert abs(b) < 0.1
