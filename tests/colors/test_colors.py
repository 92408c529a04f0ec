import math
import pickle

import pytest

from chromahub.colors.rgb import ColorRGBINT, ColorRGBAINT, ColorUnitRGB, ColorPercentageRGB
from chromahub.colors.hsv import ColorHSVINT, UnitHSV, PercentageHSV
from chromahub.colors.hsl import ColorHSLINT, UnitHSL, PercentageHSL
from chromahub.colors.lab import CIELABColor
from chromahub.colors.lch import CIELCHColor
from chromahub.colors.color import get_color_class, unified_tuple_to_class
from chromahub.types.format_type import FormatType
from ..samples import samples_rgb_hsv, samples_rgb_hsl, hue_gap


def test_class_conversion_rgb_to_hsv():
    for rgb, hsv_expected in samples_rgb_hsv.items():
        h_exp, s_exp, v_exp = hsv_expected

        rgb = ColorUnitRGB(rgb)
        hsv = rgb.convert("hsv", FormatType.INT)
        assert isinstance(hsv, ColorHSVINT)
        assert hsv.value == (round(h_exp) % 360, round(s_exp * 255), round(v_exp * 255))

        hsv = rgb.convert("hsv", FormatType.FLOAT)
        assert isinstance(hsv, UnitHSV)
        h, s, v = hsv.value
        assert hue_gap(h, h_exp) < 1e-6
        assert abs(s - s_exp) < 1e-6
        assert abs(v - v_exp) < 1e-6

        hsv = rgb.convert("hsv", FormatType.PERCENTAGE)
        assert isinstance(hsv, PercentageHSV)
        h, s, v = hsv.value
        assert hue_gap(h, h_exp) < 1e-6
        assert abs(s - s_exp * 100) < 1e-4
        assert abs(v - v_exp * 100) < 1e-4


def test_class_conversion_rgb_to_hsl():
    for rgb, hsl_expected in samples_rgb_hsl.items():
        h_exp, s_exp, l_exp = hsl_expected

        rgb = ColorUnitRGB(rgb)
        hsl = rgb.convert("hsl")
        assert isinstance(hsl, UnitHSL)
        h, s, l = hsl.value
        assert hue_gap(h, h_exp) < 1e-6
        assert abs(s - s_exp) < 1e-6
        assert abs(l - l_exp) < 1e-6

        assert isinstance(rgb.convert("hsl", FormatType.INT), ColorHSLINT)
        assert isinstance(rgb.convert("hsl", FormatType.PERCENTAGE), PercentageHSL)


def test_lavender_hsv_to_hex():
    lavender = UnitHSV((243.5, 0.568, 0.925))
    assert lavender.convert(ColorRGBINT).to_hex() == "#6E66EC"


def test_immutable():
    color = ColorRGBINT((10, 20, 30))
    with pytest.raises(AttributeError):
        color.r = 40
    with pytest.raises(AttributeError):
        color._raw = (1.0, 2.0, 3.0)
    assert color.value == (10, 20, 30)


def test_construction_errors():
    with pytest.raises(ValueError):
        ColorRGBINT((1, 2))
    with pytest.raises(ValueError):
        ColorUnitRGB((0.1, float("nan"), 0.3))
    with pytest.raises(ValueError):
        CIELABColor((50.0, float("inf"), 0.0))
    with pytest.raises(TypeError):
        ColorRGBINT("#ff0000")
    with pytest.raises(TypeError):
        ColorRGBINT(None)


def test_construction_never_clamps():
    color = ColorUnitRGB((1.2, -0.1, 0.5))
    assert color.raw == (1.2, -0.1, 0.5)
    assert not color.in_gamut
    assert color.clamp().raw == (1.0, 0.0, 0.5)
    assert color.clamp().in_gamut


def test_int_value_is_rounded_and_clamped():
    color = ColorRGBINT((12.4, 12.6, 300.0))
    assert color.raw == (12.4, 12.6, 300.0)
    assert color.value == (12, 13, 255)
    assert all(isinstance(v, int) for v in color.value)
    assert color.clamp().raw == (12.4, 12.6, 255.0)
    assert color.clamp().value == (12, 13, 255)


def test_clamp_is_idempotent_and_returns_self_when_inside():
    inside = ColorPercentageRGB((10.0, 50.0, 90.0))
    assert inside.clamp() is inside

    outside = ColorUnitRGB((1.5, 0.5, -3.0))
    once = outside.clamp()
    assert once.clamp() is once


def _out_of_gamut_coords(cls):
    coords = []
    for i, bound in enumerate(cls.bounds):
        if i in cls.hue_channels:
            coords.append(-30.0)
        elif bound is None:
            coords.append(12.5)
        elif math.isinf(bound[1]):
            coords.append(bound[0] - 5.0)
        else:
            lo, hi = bound
            coords.append(hi + (hi - lo))
    return tuple(coords)


@pytest.mark.parametrize(
    "cls", list(unified_tuple_to_class.values()), ids=lambda cls: cls.__name__
)
def test_clamp_is_idempotent_for_every_class(cls):
    color = cls(_out_of_gamut_coords(cls))
    once = color.clamp()
    assert once.in_gamut
    assert once.clamp() is once
    assert once.value == once.clamp().value


@pytest.mark.parametrize(
    "color, expected_raw",
    [
        (ColorHSVINT((359.7, 300.0, -4.0)), (359.7, 255.0, 0.0)),
        (CIELABColor((-5.0, 20.0, 20.0)), (0.0, 20.0, 20.0)),
        (CIELABColor((130.0, -20.0, 20.0)), (100.0, -20.0, 20.0)),
        (CIELCHColor((120.0, 30.0, 400.0)), (100.0, 30.0, 40.0)),
        (CIELCHColor((50.0, -3.0, 90.0)), (50.0, 0.0, 90.0)),
    ],
)
def test_clamp_edges(color, expected_raw):
    once = color.clamp()
    assert once.raw == pytest.approx(expected_raw)
    assert once.in_gamut
    assert once.clamp() is once


def test_int_hue_rounding_wraps_to_zero():
    once = ColorHSVINT((359.7, 300.0, -4.0)).clamp()
    assert once.value == (0, 255, 0)
    assert once.clamp().value == (0, 255, 0)


def test_hue_wraps_instead_of_clamping():
    hsv = UnitHSV((-30.0, 0.5, 0.5))
    assert hsv.in_gamut
    assert hsv.clamp().raw == pytest.approx((330.0, 0.5, 0.5))

    lch = CIELCHColor((50.0, 30.0, 725.0))
    assert lch.clamp().raw == pytest.approx((50.0, 30.0, 5.0))

    hsv_int = ColorHSVINT((359.7, 100, 100))
    assert hsv_int.value == (0, 100, 100)


def test_unbounded_channels_are_left_alone():
    lab = CIELABColor((120.0, 300.0, -300.0))
    assert not lab.in_gamut
    assert lab.clamp().raw == (100.0, 300.0, -300.0)


def test_channel_access():
    color = ColorRGBINT((1, 2, 3))
    assert color.r == 1
    assert color.g == 2
    assert color.b == 3
    assert color[1] == 2
    assert list(color) == [1, 2, 3]
    assert len(color) == 3
    with pytest.raises(AttributeError):
        color.h


def test_equality_hash_and_pickle():
    a = CIELABColor((50.0, 10.0, -10.0))
    b = CIELABColor((50.0, 10.0, -10.0))
    assert a == b
    assert hash(a) == hash(b)
    assert a != CIELCHColor((50.0, 10.0, -10.0))
    assert len({a, b}) == 1
    assert pickle.loads(pickle.dumps(a)) == a


def test_hex():
    color = ColorRGBINT.from_hex("#1a2B3c")
    assert color.value == (0x1A, 0x2B, 0x3C)
    assert color.to_hex() == "#1A2B3C"

    rgba = ColorRGBAINT.from_hex("#11223380")
    assert rgba.value == (0x11, 0x22, 0x33, 0x80)
    assert rgba.to_hex() == "#11223380"

    unit = ColorUnitRGB.from_hex("#ff0000")
    assert unit.value == (1.0, 0.0, 0.0)
    assert ColorUnitRGB((1.3, 0.5, -0.2)).to_hex() == "#FF8000"


def test_get_color_class():
    assert get_color_class("rgb") is ColorUnitRGB
    assert get_color_class("RGB", FormatType.INT) is ColorRGBINT
    assert get_color_class("lab") is CIELABColor
    assert get_color_class("hsv", FormatType.PERCENTAGE) is PercentageHSV
    with pytest.raises(ValueError):
        get_color_class("cmyk")
    with pytest.raises(ValueError):
        get_color_class("lab", FormatType.INT)


def test_convert_keeps_format_for_mode_names():
    rgb = ColorRGBINT((200, 100, 50))
    assert isinstance(rgb.convert("hsv"), ColorHSVINT)
    # lab only exists as FLOAT
    assert isinstance(rgb.convert("lab"), CIELABColor)
    assert isinstance(rgb.convert(to_format=FormatType.FLOAT), ColorUnitRGB)


def test_construct_from_other_color():
    rgb = ColorUnitRGB((0.2, 0.4, 0.6))
    hsv = UnitHSV(rgb)
    assert hsv == rgb.convert(UnitHSV)
