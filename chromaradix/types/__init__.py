from .format_type import FormatType, max_non_hue, HUE_360, CHANNEL_MAX
from .color_types import ColourMode, element_to_array
from .base import Base

__all__ = [
    "FormatType",
    "max_non_hue",
    "HUE_360",
    "CHANNEL_MAX",
    "ColourMode",
    "element_to_array",
    "Base",
]
