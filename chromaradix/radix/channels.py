"""Helpers that squeeze arbitrary numbers into an 8-bit colour channel."""
from boundednumbers import clamp, clamp01

from ..types.format_type import CHANNEL_MAX
from ..utils.num_utils import round_half_up


def clamp_to_channel(value: float) -> int:
    """Clamp ``value`` to ``[0, 255]`` and round it to the nearest integer.

    >>> clamp_to_channel(128.7)
    129
    """
    return round_half_up(clamp(value, 0, CHANNEL_MAX))

def fraction_to_channel(value: float) -> int:
    """Map a ``0.0-1.0`` fraction onto ``0-255``."""
    return round_half_up(clamp01(value) * CHANNEL_MAX)

def percent_to_channel(value: float) -> int:
    """Map a ``0-100`` percentage onto ``0-255``."""
    return round_half_up(clamp(value, 0.0, 100.0) / 100 * CHANNEL_MAX)
