from typing import Iterable

from ..radix import to_decimal


def channels_to_decimal(channels: Iterable[int]) -> str:
    """Comma-separated base-10 channels, e.g. ``"255,10,20,30"``."""
    return ",".join(to_decimal(channel) for channel in channels)
