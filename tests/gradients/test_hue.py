import numpy as np
import pytest
from boundednumbers import BoundType

from chromahub.gradients.hue import HueMode, hue_delta, hue_lerp


def test_shortest_crosses_zero():
    assert float(hue_lerp(350, 10, 0.5)) == pytest.approx(0.0)
    assert float(hue_lerp(10, 350, 0.5)) == pytest.approx(0.0)
    assert float(hue_lerp(350, 10, 0.25)) == pytest.approx(355.0)


def test_modes():
    assert float(hue_lerp(350, 10, 0.5, HueMode.CW)) == pytest.approx(0.0)
    assert float(hue_lerp(350, 10, 0.5, HueMode.CCW)) == pytest.approx(180.0)
    assert float(hue_lerp(350, 10, 0.5, HueMode.LONGEST)) == pytest.approx(180.0)
    assert float(hue_lerp(10, 350, 0.5, HueMode.CW)) == pytest.approx(180.0)
    assert float(hue_lerp(10, 350, 0.5, HueMode.CCW)) == pytest.approx(0.0)


def test_shortest_never_exceeds_half_turn():
    h0 = np.linspace(0, 359, 37)
    h1 = h0[::-1]
    delta = hue_delta(h0, h1, HueMode.SHORTEST)
    assert np.all(np.abs(delta) <= 180.0)
    longest = hue_delta(h0, h1, HueMode.LONGEST)
    assert np.all((np.abs(longest) >= 180.0) | (longest == 0))


def test_vectorized_and_in_range():
    coeffs = np.linspace(0, 1, 11)
    out = hue_lerp(300, 60, coeffs)
    assert out.shape == (11,)
    assert np.all((out >= 0) & (out < 360))
    assert out[0] == pytest.approx(300.0)
    assert out[-1] == pytest.approx(60.0)


def test_coefficients_are_bounded():
    assert float(hue_lerp(0, 90, 1.5)) == pytest.approx(90.0)
    assert float(hue_lerp(0, 90, -0.5)) == pytest.approx(0.0)
    # ignore lets the coefficient run past the end hue
    assert float(hue_lerp(0, 90, 1.5, bound_type=BoundType.IGNORE)) == pytest.approx(135.0)
