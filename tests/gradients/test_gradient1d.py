import pytest

from chromahub.colors.lab import CIELABColor
from chromahub.colors.lch import CIELCHColor
from chromahub.colors.rgb import ColorRGBINT, ColorUnitRGBA
from chromahub.gradients.gradient1d import Gradient1D, gradient
from chromahub.gradients.hue import HueMode
from ..samples import hue_gap


def test_endpoints_and_length():
    start = CIELABColor((20.0, 10.0, 10.0))
    end = CIELABColor((80.0, -10.0, 30.0))
    g = gradient([start, end], steps=5)
    assert len(g) == 5
    assert g[0].raw == pytest.approx(start.raw, abs=1e-9)
    assert g[4].raw == pytest.approx(end.raw, abs=1e-9)
    assert g[-1] == g[4]
    assert all(isinstance(c, CIELABColor) for c in g)


def test_lightness_is_monotonic():
    g = gradient([CIELABColor((10.0, 20.0, -30.0)), CIELABColor((90.0, -20.0, 40.0))], steps=12)
    lightness = [c.raw[0] for c in g]
    assert lightness == sorted(lightness)
    assert lightness[0] < lightness[-1]


def test_hue_takes_the_shortest_arc():
    g = gradient([CIELCHColor((50.0, 30.0, 350.0)), CIELCHColor((50.0, 30.0, 10.0))], steps=3)
    assert hue_gap(g[1].raw[2], 0.0) < 1e-6
    for color in g:
        assert hue_gap(color.raw[2], 0.0) <= 10.0 + 1e-6


def test_longest_hue_mode():
    g = gradient(
        [CIELCHColor((50.0, 30.0, 350.0)), CIELCHColor((50.0, 30.0, 10.0))],
        steps=3,
        hue_mode=HueMode.LONGEST,
    )
    assert g.hue_mode is HueMode.LONGEST
    assert g[1].raw[2] == pytest.approx(180.0)


def test_multiple_anchors():
    anchors = [
        CIELABColor((30.0, 0.0, 40.0)),
        CIELABColor((60.0, 40.0, 0.0)),
        CIELABColor((90.0, 0.0, -40.0)),
    ]
    g = gradient(anchors, steps=5)
    assert g[2].raw == pytest.approx(anchors[1].raw, abs=1e-9)
    assert g[4].raw == pytest.approx(anchors[2].raw, abs=1e-9)


def test_middle_anchor_lands_on_a_step_when_segments_are_uneven():
    anchors = [
        CIELABColor((30.0, 0.0, 40.0)),
        CIELABColor((60.0, 40.0, 0.0)),
        CIELABColor((90.0, 0.0, -40.0)),
    ]
    g = gradient(anchors, steps=4)
    assert g[0].raw == pytest.approx(anchors[0].raw, abs=1e-9)
    assert g[2].raw == pytest.approx(anchors[1].raw, abs=1e-9)
    assert g[3].raw == pytest.approx(anchors[2].raw, abs=1e-9)
    # the first segment spans two steps, the second one
    assert 30.0 < g[1].raw[0] < 60.0


@pytest.mark.parametrize("steps", range(3, 13))
def test_every_anchor_is_produced(steps):
    anchors = [
        CIELABColor((20.0, 10.0, 10.0)),
        CIELABColor((50.0, -20.0, 30.0)),
        CIELABColor((80.0, 5.0, -25.0)),
    ]
    produced = [c.raw for c in gradient(anchors, steps=steps)]
    for anchor in anchors:
        assert any(raw == pytest.approx(anchor.raw, abs=1e-9) for raw in produced), (steps, anchor)


def test_gray_anchor_borrows_hue():
    gray = CIELABColor((50.0, 0.0, 0.0))
    orange = CIELCHColor((70.0, 40.0, 60.0))
    g = gradient([gray, orange], steps=6)
    for i in range(1, 6):
        assert g.lch_at(i / 5)[2] == pytest.approx(60.0)


def test_alpha_is_interpolated():
    g = gradient([ColorUnitRGBA((1.0, 0.0, 0.0, 0.0)), ColorUnitRGBA((0.0, 0.0, 1.0, 1.0))], steps=3)
    assert [c.alpha for c in g] == pytest.approx([0.0, 0.5, 1.0])


def test_restartable_and_sliceable():
    g = gradient([ColorRGBINT((255, 0, 0)), ColorRGBINT((0, 0, 255))], steps=7)
    first = list(g)
    assert list(g) == first
    assert g[1:4] == first[1:4]
    assert g[::-1] == first[::-1]
    assert all(c.in_gamut for c in first)
    assert g.to_array().shape == (7, 3)


def test_lazy():
    g = gradient([CIELABColor((0.0, 0.0, 0.0)), CIELABColor((100.0, 0.0, 0.0))], steps=10 ** 9)
    assert len(g) == 10 ** 9
    assert g[10 ** 9 - 1].raw[0] == pytest.approx(100.0)
    assert g[(10 ** 9 - 1) // 2].raw[0] == pytest.approx(50.0, abs=1e-6)


def test_invalid_arguments():
    red = ColorRGBINT((255, 0, 0))
    blue = ColorRGBINT((0, 0, 255))
    with pytest.raises(ValueError):
        gradient([red], steps=4)
    with pytest.raises(ValueError):
        gradient([red, blue], steps=1)
    with pytest.raises(ValueError):
        gradient([red, blue, red], steps=2)
    with pytest.raises(ValueError):
        gradient([red, blue], steps=2.5)

    g = Gradient1D([red, blue], 4)
    with pytest.raises(IndexError):
        g[4]
    with pytest.raises(IndexError):
        g[-5]
    with pytest.raises(AttributeError):
        g._steps = 10
