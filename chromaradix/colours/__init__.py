"""
Chromaradix Colour Types
========================

Three immutable colour representations sharing one conversion contract:

- :class:`Colour`     8-bit ARGB (0-255 integer channels)
- :class:`HSVColour`  alpha, hue (degrees), saturation, value
- :class:`HSLColour`  alpha, hue (degrees), saturation, lightness

Each is a :class:`ColourSpace` and converts with ``to_rgba()``,
``to_hsv()`` and ``to_hsl()``:

>>> from chromaradix.colours import Colour
>>> red = Colour.from_hex("#FF0000")
>>> red.to_hsv().hue
0.0
>>> red.to_hsl().lightness
0.5

Values handed to any constructor are clamped (and hue wrapped) into range
instead of being rejected. HSV/HSL round trips through :class:`Colour` are
exact to within one step per 8-bit channel.
"""

from .colour_space import ColourSpace
from .rgba import Colour
from .hsv import HSVColour
from .hsl import HSLColour
from .contrast import perceived_brightness, use_white_foreground
from . import palette

__all__ = [
    "ColourSpace",
    "Colour",
    "HSVColour",
    "HSLColour",
    "perceived_brightness",
    "use_white_foreground",
    "palette",
]
