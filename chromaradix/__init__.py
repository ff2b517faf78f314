"""Chromaradix: colour value types and an arbitrary-radix numeral codec."""

from .errors import ChromaRadixError, FormatError, RangeViolation
from .types import Base, ColourMode, FormatType
from .colours import (
    ColourSpace,
    Colour,
    HSVColour,
    HSLColour,
    perceived_brightness,
    use_white_foreground,
    palette,
)
from .radix import (
    ALPHABET,
    encode,
    decode,
    to_int,
    rebase,
    to_octal,
    to_binary,
    to_hex,
    to_decimal,
    to_base256,
    clamp_to_channel,
    fraction_to_channel,
    percent_to_channel,
)
from .conversions import (
    hue_from_rgb,
    rgb_from_hue_chroma,
    unit_rgb_to_hsv,
    unit_rgb_to_hsl,
    hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    hsv_to_hsl,
    hsl_to_hsv,
    np_unit_rgb_to_hsv,
    np_unit_rgb_to_hsl,
    np_hsv_to_unit_rgb,
    np_hsl_to_unit_rgb,
    np_hsv_to_hsl,
    np_hsl_to_hsv,
    convert,
    np_convert,
)

__version__ = "1.0.0"

__all__ = [
    # errors
    "ChromaRadixError",
    "FormatError",
    "RangeViolation",
    # enums
    "Base",
    "ColourMode",
    "FormatType",
    # colour types
    "ColourSpace",
    "Colour",
    "HSVColour",
    "HSLColour",
    "perceived_brightness",
    "use_white_foreground",
    "palette",
    # numeral codec
    "ALPHABET",
    "encode",
    "decode",
    "to_int",
    "rebase",
    "to_octal",
    "to_binary",
    "to_hex",
    "to_decimal",
    "to_base256",
    "clamp_to_channel",
    "fraction_to_channel",
    "percent_to_channel",
    # conversions
    "hue_from_rgb",
    "rgb_from_hue_chroma",
    "unit_rgb_to_hsv",
    "unit_rgb_to_hsl",
    "hsv_to_unit_rgb",
    "hsl_to_unit_rgb",
    "hsv_to_hsl",
    "hsl_to_hsv",
    "np_unit_rgb_to_hsv",
    "np_unit_rgb_to_hsl",
    "np_hsv_to_unit_rgb",
    "np_hsl_to_unit_rgb",
    "np_hsv_to_hsl",
    "np_hsl_to_hsv",
    "convert",
    "np_convert",
    "__version__",
]
