import math

from ..utils.num_utils import round_half_up
from .colour_space import ColourSpace


def perceived_brightness(colour: ColourSpace) -> int:
    """Weighted (ITU-R BT.601) brightness of ``colour`` on the 0-255 scale."""
    rgba = colour.to_rgba()
    return round_half_up(math.sqrt(
        rgba.red ** 2 * 0.299
        + rgba.green ** 2 * 0.587
        + rgba.blue ** 2 * 0.114
    ))

def use_white_foreground(background: ColourSpace, bias: float = 0.0) -> bool:
    """
    Whether white text reads better than black on ``background``.

    A positive ``bias`` favours white more aggressively.

    >>> use_white_foreground(Colour.from_hex("000"))
    True
    >>> use_white_foreground(Colour.from_hex("FFF"))
    False
    """
    return perceived_brightness(background) < 130 + bias
