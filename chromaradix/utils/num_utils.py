import math
from boundednumbers.functions import cyclic_wrap_float

from ..types.format_type import HUE_360


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero (``0.5 -> 1``, ``-0.5 -> -1``).

    ``round()`` uses banker's rounding, which would map ``127.5`` to ``128``
    but ``128.5`` to ``128`` as well.
    """
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))

def nan_to_zero(value: float) -> float:
    return 0.0 if math.isnan(value) else value

def wrap_hue(hue: float) -> float:
    """Wrap ``hue`` into ``[0, 360)``.

    A tiny negative hue wraps to exactly 360.0 in floating point, so that
    case folds back to 0.
    """
    wrapped = float(cyclic_wrap_float(hue, 0.0, HUE_360))
    return 0.0 if wrapped >= HUE_360 else wrapped
