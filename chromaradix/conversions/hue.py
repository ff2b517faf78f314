"""Shared pieces of every RGB <-> hue-based conversion."""
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from ..radix.channels import fraction_to_channel
from ..utils.num_utils import nan_to_zero


def hue_from_rgb(r: float, g: float, b: float, max_: float, delta: float) -> float:
    """
    Hue in degrees from normalised (0-1) channels.

    ``max_`` and ``delta`` are the largest channel and the spread between the
    largest and smallest one. A black input (``max_ == 0``) and a grey input
    (``delta == 0``, where every branch is 0/0) both give hue 0.
    """
    if max_ == 0.0 or delta == 0.0:
        return 0.0
    if max_ == r:
        hue = 60.0 * (((g - b) / delta) % 6)
    elif max_ == g:
        hue = 60.0 * (((b - r) / delta) + 2)
    else:
        hue = 60.0 * (((r - g) / delta) + 4)
    return nan_to_zero(hue)

def np_hue_from_rgb(r: NDArray, g: NDArray, b: NDArray, max_: NDArray, delta: NDArray) -> NDArray:
    """Vectorized :func:`hue_from_rgb`."""
    with np.errstate(divide="ignore", invalid="ignore"):
        hue = np.select(
            [max_ == r, max_ == g],
            [
                60.0 * np.mod((g - b) / delta, 6),
                60.0 * ((b - r) / delta + 2),
            ],
            default=60.0 * ((r - g) / delta + 4),
        )
    hue = np.where((max_ == 0) | (delta == 0), 0.0, hue)
    return np.where(np.isnan(hue), 0.0, hue)


def unit_rgb_from_hue_chroma(
    hue: float, chroma: float, secondary: float, match: float
) -> Tuple[float, float, float]:
    """
    Rebuild normalised RGB from a hue, its chroma, the secondary (middle)
    component and the lightness offset ``match`` added to every channel.
    """
    if hue < 60.0:
        r, g, b = chroma, secondary, 0.0
    elif hue < 120.0:
        r, g, b = secondary, chroma, 0.0
    elif hue < 180.0:
        r, g, b = 0.0, chroma, secondary
    elif hue < 240.0:
        r, g, b = 0.0, secondary, chroma
    elif hue < 300.0:
        r, g, b = secondary, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, secondary
    return r + match, g + match, b + match

def rgb_from_hue_chroma(
    hue: float, chroma: float, secondary: float, match: float
) -> Tuple[int, int, int]:
    """Same as :func:`unit_rgb_from_hue_chroma`, scaled to 0-255 integers."""
    r, g, b = unit_rgb_from_hue_chroma(hue, chroma, secondary, match)
    return fraction_to_channel(r), fraction_to_channel(g), fraction_to_channel(b)

def np_unit_rgb_from_hue_chroma(hue: NDArray, chroma: NDArray, secondary: NDArray, match: NDArray) -> NDArray:
    """Vectorized :func:`unit_rgb_from_hue_chroma`; returns shape ``(..., 3)``."""
    zero = np.zeros_like(chroma)
    conditions = [hue < 60.0, hue < 120.0, hue < 180.0, hue < 240.0, hue < 300.0]
    r = np.select(conditions, [chroma, secondary, zero, zero, secondary], default=chroma)
    g = np.select(conditions, [secondary, chroma, chroma, secondary, zero], default=zero)
    b = np.select(conditions, [zero, zero, secondary, chroma, chroma], default=secondary)
    return np.stack([r + match, g + match, b + match], axis=-1)
