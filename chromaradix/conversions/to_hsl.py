import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple
from boundednumbers import clamp01

from .hue import hue_from_rgb, np_hue_from_rgb


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert normalised RGB to HSL.

    Args:
        r, g, b: channels in [0, 1]

    Returns:
        (h, s, l) with h in [0, 360) and s, l in [0, 1]
    """
    max_ = max(r, g, b)
    min_ = min(r, g, b)
    delta = max_ - min_

    h = hue_from_rgb(r, g, b, max_, delta)
    l = (max_ + min_) / 2.0
    denominator = 1.0 - abs(2.0 * l - 1.0)
    if max_ == min_ or denominator <= 0.0:
        s = 0.0
    else:
        s = clamp01(delta / denominator)
    return h, s, l

def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3)
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)
    r, g, b = np.broadcast_arrays(r, g, b)

    max_ = np.maximum.reduce([r, g, b])
    min_ = np.minimum.reduce([r, g, b])
    delta = max_ - min_

    h = np_hue_from_rgb(r, g, b, max_, delta)
    l = (max_ + min_) / 2.0
    denominator = 1.0 - np.abs(2.0 * l - 1.0)
    s = np.divide(delta, denominator, out=np.zeros_like(delta), where=(delta > 0) & (denominator > 0))
    return np.stack([h, np.clip(s, 0, 1), l], axis=-1)


def hsv_to_hsl(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Direct HSV to HSL, no RGB round trip. Hue passes through untouched.

    l = (2 - s) * v / 2; s_l = s * v / (2l) below half lightness,
    s * v / (2 - 2l) above it, and 0 for pure black or white.
    """
    l = (2 - s) * v / 2
    s_l = 0.0
    if l != 0 and l != 1:
        if l < 0.5:
            s_l = s * v / (l * 2)
        else:
            s_l = s * v / (2 - l * 2)
    return h, clamp01(s_l), clamp01(l)

def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized :func:`hsv_to_hsl`."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)
    h, s, v = np.broadcast_arrays(h, s, v)

    l = (2 - s) * v / 2
    with np.errstate(divide="ignore", invalid="ignore"):
        s_l = np.where(l < 0.5, s * v / (l * 2), s * v / (2 - l * 2))
    s_l = np.where((l == 0) | (l == 1), 0.0, s_l)
    return np.stack([h, np.clip(s_l, 0, 1), np.clip(l, 0, 1)], axis=-1)
