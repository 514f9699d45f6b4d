from rainbow_creator.conversions.to_rgb import hsv_to_unit_rgb, np_hsv_to_unit_rgb
import numpy as np
import pytest
from tests.samples import samples_hsv_rgb

def test_hsv_to_unit_rgb():
    for (h, s, v), (r_exp, g_exp, b_exp) in samples_hsv_rgb.items():
        r, g, b = hsv_to_unit_rgb(h, s, v)

        assert abs(r - r_exp) < 1e-9
        assert abs(g - g_exp) < 1e-9
        assert abs(b - b_exp) < 1e-9


def test_hsv_to_unit_rgb_numpy():
    the_matrix = np.array(list(samples_hsv_rgb.keys()))
    expected = np.array(list(samples_hsv_rgb.values()))
    result = np_hsv_to_unit_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert result.shape == expected.shape
    assert np.allclose(result, expected)

def test_full_turn_is_red():
    assert hsv_to_unit_rgb(1.0, 1.0, 1.0) == pytest.approx((1.0, 0.0, 0.0))
    assert np.allclose(np_hsv_to_unit_rgb(1.0, 1.0, 1.0), [1.0, 0.0, 0.0])

def test_out_of_range_fractions_are_bounded():
    # above 1 behaves like 1, below 0 like 0
    assert hsv_to_unit_rgb(0.0, 2.0, 1.5) == pytest.approx((1.0, 0.0, 0.0))
    assert hsv_to_unit_rgb(-0.5, 1.0, 1.0) == pytest.approx((1.0, 0.0, 0.0))
    assert hsv_to_unit_rgb(0.0, 1.0, -1.0) == pytest.approx((0.0, 0.0, 0.0))

    result = np_hsv_to_unit_rgb([0.0, -0.5], [2.0, 1.0], [1.5, -1.0])
    assert np.allclose(result, [[1.0, 0.0, 0.0], [0.0, 0.0, 0.0]])

def test_numpy_broadcasts_scalars():
    hues = np.array([0.0, 1 / 3, 2 / 3])
    result = np_hsv_to_unit_rgb(hues, 1.0, 1.0)
    assert np.allclose(result, np.eye(3))

def test_nan_component_gives_nan_in_both_forms():
    for hsv in [(np.nan, 1.0, 1.0), (0.0, np.nan, 1.0), (0.0, 1.0, np.nan)]:
        assert all(np.isnan(c) for c in hsv_to_unit_rgb(*hsv))
        assert np.isnan(np_hsv_to_unit_rgb(*hsv)).all()

    result = np_hsv_to_unit_rgb([np.nan, 0.0], 1.0, 1.0)
    assert np.isnan(result[0]).all()
    assert np.allclose(result[1], [1.0, 0.0, 0.0])
