import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple
from boundednumbers import clamp01

from .hue import hue_from_rgb, np_hue_from_rgb


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert normalised RGB to HSV.

    Args:
        r, g, b: channels in [0, 1]

    Returns:
        (h, s, v) with h in [0, 360) and s, v in [0, 1]
    """
    max_ = max(r, g, b)
    min_ = min(r, g, b)
    delta = max_ - min_

    h = hue_from_rgb(r, g, b, max_, delta)
    s = 0.0 if max_ == 0.0 else delta / max_
    return h, s, max_

def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsv: array of shape (..., 3)
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)
    r, g, b = np.broadcast_arrays(r, g, b)

    max_ = np.maximum.reduce([r, g, b])
    min_ = np.minimum.reduce([r, g, b])
    delta = max_ - min_

    h = np_hue_from_rgb(r, g, b, max_, delta)
    s = np.divide(delta, max_, out=np.zeros_like(max_), where=max_ > 0)
    return np.stack([h, s, max_], axis=-1)


def hsl_to_hsv(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Direct HSL to HSV, no RGB round trip. Hue passes through untouched.

    v = l + s * min(l, 1 - l); s_v = 2 - 2l / v (0 for black).
    """
    v = l + s * (l if l < 0.5 else 1 - l)
    s_v = 0.0 if v == 0 else 2 - 2 * l / v
    return h, clamp01(s_v), clamp01(v)

def np_hsl_to_hsv(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized :func:`hsl_to_hsv`."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)
    h, s, l = np.broadcast_arrays(h, s, l)

    v = l + s * np.minimum(l, 1 - l)
    with np.errstate(divide="ignore", invalid="ignore"):
        s_v = np.where(v == 0, 0.0, 2 - 2 * l / v)
    return np.stack([h, np.clip(s_v, 0, 1), np.clip(v, 0, 1)], axis=-1)
