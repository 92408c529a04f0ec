import pytest

from chromahub.colors.rgb import ColorRGBINT, ColorRGBAINT, ColorUnitRGBA, ColorPercentageRGBA
from chromahub.colors.hsv import ColorHSVAINT, UnitHSVA
from chromahub.colors.hsl import UnitHSLA, PercentageHSLA
from chromahub.colors.lab import CIELABColor
from chromahub.types.format_type import FormatType


def test_alpha_scales_between_formats():
    rgba = ColorRGBAINT((255, 0, 0, 51))
    assert rgba.alpha == 51
    assert rgba.unit_alpha == pytest.approx(0.2)

    unit = rgba.convert("rgba", FormatType.FLOAT)
    assert isinstance(unit, ColorUnitRGBA)
    assert unit.alpha == pytest.approx(0.2)

    percent = rgba.convert("rgba", FormatType.PERCENTAGE)
    assert isinstance(percent, ColorPercentageRGBA)
    assert percent.alpha == pytest.approx(20.0)


def test_alpha_survives_space_changes():
    rgba = ColorUnitRGBA((0.2, 0.4, 0.6, 0.35))
    for target in (ColorHSVAINT, UnitHSVA, UnitHSLA, PercentageHSLA):
        converted = rgba.convert(target)
        assert converted.unit_alpha == pytest.approx(0.35, abs=1 / 255)
        back = converted.convert(ColorUnitRGBA)
        assert back.unit_alpha == pytest.approx(0.35, abs=1 / 255)


def test_alpha_dropped_and_defaulted():
    rgba = ColorUnitRGBA((0.2, 0.4, 0.6, 0.5))
    rgb = rgba.convert(ColorRGBINT)
    assert len(rgb) == 3

    # no source alpha means fully opaque
    lab = CIELABColor((50.0, 20.0, -20.0))
    opaque = lab.convert(ColorUnitRGBA)
    assert opaque.alpha == 1.0


def test_with_alpha():
    rgba = ColorRGBAINT((10, 20, 30, 255))
    half = rgba.with_alpha(128)
    assert half.value == (10, 20, 30, 128)
    assert rgba.alpha == 255

    assert rgba.with_alpha(999).alpha == 255
    assert rgba.with_alpha(-4).alpha == 0
    assert rgba.with_unit_alpha(0.0).alpha == 0


def test_alpha_channel_is_bounded():
    rgba = ColorUnitRGBA((0.5, 0.5, 0.5, 1.5))
    assert not rgba.in_gamut
    assert rgba.clamp().alpha == 1.0
