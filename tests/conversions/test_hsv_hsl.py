import numpy as np

from chromaradix.conversions import (
    hsl_to_hsv,
    hsv_to_hsl,
    np_hsl_to_hsv,
    np_hsv_to_hsl,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
)
from samples import samples_hsl_hsv


def test_hsl_to_hsv():
    for (h, s, l), (h_exp, s_exp, v_exp) in samples_hsl_hsv.items():
        h_out, s_out, v_out = hsl_to_hsv(h, s, l)

        assert h_out == h
        assert abs(float(s_out) - s_exp) < 1e-6
        assert abs(float(v_out) - v_exp) < 1e-6

def test_hsv_to_hsl():
    for (h_exp, s_exp, l_exp), (h, s, v) in samples_hsl_hsv.items():
        h_out, s_out, l_out = hsv_to_hsl(h, s, v)

        assert h_out == h
        assert abs(float(s_out) - s_exp) < 1e-6
        assert abs(float(l_out) - l_exp) < 1e-6

def test_hsl_to_hsv_numpy():
    the_matrix = np.array(list(samples_hsl_hsv.keys()))
    expected = np.array(list(samples_hsl_hsv.values()))
    result = np_hsl_to_hsv(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected, atol=1e-6)

def test_hsv_to_hsl_numpy():
    the_matrix = np.array(list(samples_hsl_hsv.values()))
    expected = np.array(list(samples_hsl_hsv.keys()))
    result = np_hsv_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected, atol=1e-6)

def test_hue_survives_black_and_white():
    # going through RGB would lose the hue of black and white
    assert hsv_to_hsl(200.0, 0.5, 0.0)[0] == 200.0
    assert hsl_to_hsv(200.0, 0.5, 1.0)[0] == 200.0

def test_rgb_path_agrees_with_direct_path():
    for (h, s, l), (_, s_v, v) in samples_hsl_hsv.items():
        via_hsl = hsl_to_unit_rgb(h, s, l)
        via_hsv = hsv_to_unit_rgb(h, s_v, v)
        assert np.allclose(via_hsl, via_hsv, atol=1e-6)

        # each path, scaled to 8 bits, lands within one step of the other
        for channel_hsl, channel_hsv in zip(via_hsl, via_hsv):
            assert abs(round(channel_hsl * 255) - round(channel_hsv * 255)) <= 1

def test_rgb_mediated_hsv_to_hsl():
    for (h, s, l), (_, s_v, v) in samples_hsl_hsv.items():
        if l in (0.0, 1.0) or s == 0.0:
            continue
        _, s_out, l_out = unit_rgb_to_hsl(*hsv_to_unit_rgb(h, s_v, v))
        assert abs(s_out - s) < 1e-6
        assert abs(l_out - l) < 1e-6

        _, s_v_out, v_out = unit_rgb_to_hsv(*hsl_to_unit_rgb(h, s, l))
        assert abs(s_v_out - s_v) < 1e-6
        assert abs(v_out - v) < 1e-6
