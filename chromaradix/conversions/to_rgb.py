import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from .hue import unit_rgb_from_hue_chroma, np_unit_rgb_from_hue_chroma


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV to normalised RGB using the six-sector method.

    Args:
        h: hue in degrees
        s, v: saturation and value in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    sector = h / 60
    i = math.floor(sector)
    f = sector - i
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    return (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[i % 6]

def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV to RGB.

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)
    h, s, v = np.broadcast_arrays(h, s, v)

    sector = h / 60
    i = np.floor(sector)
    f = sector - i
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    i = np.mod(i, 6).astype(int)
    conditions = [i == 0, i == 1, i == 2, i == 3, i == 4]
    r = np.select(conditions, [v, q, p, p, t], default=v)
    g = np.select(conditions, [t, v, v, q, p], default=p)
    b = np.select(conditions, [p, p, t, v, v], default=q)
    return np.stack([r, g, b], axis=-1)


def hsl_chroma(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """Chroma, secondary component and match offset of an HSL triple."""
    chroma = (1.0 - abs(2.0 * l - 1.0)) * s
    secondary = chroma * (1.0 - abs(((h / 60.0) % 2.0) - 1.0))
    match = l - chroma / 2.0
    return chroma, secondary, match

def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL to normalised RGB through chroma and the hue sector.

    Args:
        h: hue in degrees
        s, l: saturation and lightness in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    chroma, secondary, match = hsl_chroma(h, s, l)
    return unit_rgb_from_hue_chroma(h, chroma, secondary, match)

def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized :func:`hsl_to_unit_rgb`."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)
    h, s, l = np.broadcast_arrays(h, s, l)

    chroma = (1.0 - np.abs(2.0 * l - 1.0)) * s
    secondary = chroma * (1.0 - np.abs(np.mod(h / 60.0, 2.0) - 1.0))
    match = l - chroma / 2.0
    return np_unit_rgb_from_hue_chroma(h, chroma, secondary, match)
