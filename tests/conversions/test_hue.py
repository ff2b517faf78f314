import numpy as np

from chromaradix.conversions import (
    hue_from_rgb,
    np_hue_from_rgb,
    rgb_from_hue_chroma,
    unit_rgb_from_hue_chroma,
    np_unit_rgb_from_hue_chroma,
)


def _hue(r, g, b):
    max_, min_ = max(r, g, b), min(r, g, b)
    return hue_from_rgb(r, g, b, max_, max_ - min_)

def test_primary_hues():
    assert _hue(1.0, 0.0, 0.0) == 0.0
    assert _hue(0.0, 1.0, 0.0) == 120.0
    assert _hue(0.0, 0.0, 1.0) == 240.0
    assert _hue(1.0, 0.0, 1.0) == 300.0

def test_black_and_grey_have_hue_zero():
    assert _hue(0.0, 0.0, 0.0) == 0.0
    assert _hue(0.3, 0.3, 0.3) == 0.0
    assert _hue(1.0, 1.0, 1.0) == 0.0

def test_hue_stays_below_360():
    # red with a touch of blue wraps to just under 360
    hue = _hue(1.0, 0.0, 0.1)
    assert 350.0 < hue < 360.0

def test_np_hue_matches_scalar():
    rgb = np.array([
        [1.0, 0.0, 0.0],
        [0.0, 0.0, 0.0],
        [0.5, 0.5, 0.5],
        [0.2, 0.4, 0.6],
        [1.0, 0.0, 0.1],
    ])
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    max_ = rgb.max(axis=-1)
    delta = max_ - rgb.min(axis=-1)
    expected = [_hue(*row) for row in rgb.tolist()]
    assert np.allclose(np_hue_from_rgb(r, g, b, max_, delta), expected)

def test_unit_rgb_from_hue_chroma_sectors():
    assert unit_rgb_from_hue_chroma(0.0, 1.0, 0.0, 0.0) == (1.0, 0.0, 0.0)
    assert unit_rgb_from_hue_chroma(90.0, 1.0, 0.5, 0.0) == (0.5, 1.0, 0.0)
    assert unit_rgb_from_hue_chroma(150.0, 1.0, 0.5, 0.0) == (0.0, 1.0, 0.5)
    assert unit_rgb_from_hue_chroma(210.0, 1.0, 0.5, 0.0) == (0.0, 0.5, 1.0)
    assert unit_rgb_from_hue_chroma(270.0, 1.0, 0.5, 0.0) == (0.5, 0.0, 1.0)
    assert unit_rgb_from_hue_chroma(330.0, 1.0, 0.5, 0.0) == (1.0, 0.0, 0.5)

def test_rgb_from_hue_chroma_adds_match():
    assert rgb_from_hue_chroma(0.0, 0.5, 0.0, 0.25) == (191, 64, 64)
    assert rgb_from_hue_chroma(120.0, 0.0, 0.0, 1.0) == (255, 255, 255)

def test_np_unit_rgb_from_hue_chroma():
    hue = np.array([0.0, 90.0, 150.0, 210.0, 270.0, 330.0])
    chroma = np.ones_like(hue)
    secondary = np.full_like(hue, 0.5)
    match = np.zeros_like(hue)
    result = np_unit_rgb_from_hue_chroma(hue, chroma, secondary, match)
    expected = [unit_rgb_from_hue_chroma(h, 1.0, 0.5, 0.0) for h in hue.tolist()]
    assert result.shape == (6, 3)
    assert np.allclose(result, expected)
