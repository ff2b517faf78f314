import numpy as np

from chromaradix.conversions import (
    unit_rgb_to_hsv,
    np_unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
)
from samples import samples_rgb_hsv


def test_unit_rgb_to_hsv():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h_out, s_out, v_out = unit_rgb_to_hsv(r, g, b)

        assert abs(h_out - h_exp) < 1e-6
        assert abs(s_out - s_exp) < 1e-6
        assert abs(v_out - v_exp) < 1e-6

def test_unit_rgb_to_hsv_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.keys()))
    expected = np.array(list(samples_rgb_hsv.values()))
    hsv = np_unit_rgb_to_hsv(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert hsv.shape == expected.shape
    assert np.allclose(hsv, expected, atol=1e-6)

def test_hsv_to_unit_rgb():
    for (r, g, b), (h, s, v) in samples_rgb_hsv.items():
        r_out, g_out, b_out = hsv_to_unit_rgb(h, s, v)

        assert abs(r_out - r) < 1e-6
        assert abs(g_out - g) < 1e-6
        assert abs(b_out - b) < 1e-6

def test_hsv_to_unit_rgb_hue_360_is_red():
    assert hsv_to_unit_rgb(360.0, 1.0, 1.0) == (1.0, 0.0, 0.0)

def test_hsv_to_unit_rgb_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.values()))
    expected = np.array(list(samples_rgb_hsv.keys()))
    rgb = np_hsv_to_unit_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(rgb, expected, atol=1e-6)

def test_numpy_broadcasts_scalars():
    rgb = np_hsv_to_unit_rgb(np.array([0.0, 120.0, 240.0]), 1.0, 1.0)
    assert np.allclose(rgb, np.eye(3))
