"""
Chromaradix Color Space Conversions
===================================

Pure conversion routines between RGB, HSV and HSL, in scalar and vectorized
(numpy) flavours. All scalar functions work on normalised channels: RGB,
saturation, value and lightness in [0, 1], hue in degrees.

RGB -> HSV:      unit_rgb_to_hsv, np_unit_rgb_to_hsv
RGB -> HSL:      unit_rgb_to_hsl, np_unit_rgb_to_hsl
HSV -> RGB:      hsv_to_unit_rgb, np_hsv_to_unit_rgb
HSL -> RGB:      hsl_to_unit_rgb, np_hsl_to_unit_rgb
HSV <-> HSL:     hsv_to_hsl, hsl_to_hsv, np_hsv_to_hsl, np_hsl_to_hsv

Shared helpers:  hue_from_rgb, rgb_from_hue_chroma

High-level API:  convert, np_convert (tuples/arrays in any FormatType)

>>> from chromaradix.conversions import unit_rgb_to_hsv, hsv_to_unit_rgb
>>> h, s, v = unit_rgb_to_hsv(1.0, 0.5, 0.0)
>>> r, g, b = hsv_to_unit_rgb(h, s, v)
"""

from .hue import (
    hue_from_rgb,
    np_hue_from_rgb,
    rgb_from_hue_chroma,
    unit_rgb_from_hue_chroma,
    np_unit_rgb_from_hue_chroma,
)

# RGB -> HSV, HSL -> HSV
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv, hsl_to_hsv, np_hsl_to_hsv

# RGB -> HSL, HSV -> HSL
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl, hsv_to_hsl, np_hsv_to_hsl

# HSV/HSL -> RGB
from .to_rgb import (
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    np_hsl_to_unit_rgb,
    hsl_chroma,
)

from .wrapper import convert, np_convert

from ..types.format_type import FormatType
from ..types.color_types import ColourMode

__all__ = [
    'hue_from_rgb',
    'np_hue_from_rgb',
    'rgb_from_hue_chroma',
    'unit_rgb_from_hue_chroma',
    'np_unit_rgb_from_hue_chroma',

    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'hsl_to_hsv',
    'np_hsl_to_hsv',

    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'hsv_to_hsl',
    'np_hsv_to_hsl',

    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'hsl_chroma',

    'convert',
    'np_convert',

    'FormatType',
    'ColourMode',
]
