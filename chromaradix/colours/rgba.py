from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Optional, Tuple

from ..conversions import unit_rgb_to_hsv, unit_rgb_to_hsl
from ..formats import channels_to_b256, channels_to_decimal, channels_to_hex, parse_b256, parse_hex
from ..radix import clamp_to_channel, fraction_to_channel, percent_to_channel
from ..types.color_types import ColourMode
from ..types.format_type import CHANNEL_MAX
from ..utils.num_utils import round_half_up
from .colour_space import ColourSpace

if TYPE_CHECKING:
    from .hsv import HSVColour
    from .hsl import HSLColour


class Colour(ColourSpace):
    """
    An 8-bit ARGB colour.

    Channels are integers in [0, 255]; anything else handed to a constructor
    is clamped and rounded into range. Equality and hashing use the packed
    32-bit value, so two colours are equal exactly when their hex strings are.

    Constructors
    ------------
    ======================  ==========================================
    ``Colour()``            ARGB integers (0-255)
    ``from_rgb``            RGB integers, fully opaque
    ``from_argb``           RGB integers, opacity as a percentage
    ``from_hex``            ``#F00``, ``F00F``, ``FF0000``, ``FFFF0000``
    ``from_hsv``            hue (0-360), saturation, value (0-1)
    ``from_hsl``            hue (0-360), saturation, lightness (0-1)
    ``from_percent``        ARGB percentages (0-100)
    ``from_fraction``       ARGB fractions (0-1)
    ``from_b256``           4-character base-256 string
    ``from_value``          packed 32-bit ARGB integer
    ``from_colour_space``   any :class:`ColourSpace`
    ======================  ==========================================

    Output
    ------
    >>> red = Colour.from_hex("#FF0000")
    >>> red.hex
    'FFFF0000'
    >>> red.argb
    '255,255,0,0'
    >>> red.rgb
    '255,0,0'
    >>> Colour.from_b256(red.b256) == red
    True
    """
    __slots__ = ()

    mode: ClassVar[ColourMode] = ColourMode.RGBA

    def __init__(self, alpha: int = 255, red: int = 255, green: int = 255, blue: int = 255) -> None:
        self._freeze((
            clamp_to_channel(alpha),
            clamp_to_channel(red),
            clamp_to_channel(green),
            clamp_to_channel(blue),
        ))

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Colour:
        return cls(CHANNEL_MAX, red, green, blue)

    @classmethod
    def from_argb(cls, opacity: float = 100.0, red: int = 255, green: int = 255, blue: int = 255) -> Colour:
        """RGB channels with the alpha given as an opacity percentage (0-100)."""
        return cls(percent_to_channel(opacity), red, green, blue)

    @classmethod
    def from_hex(cls, hex_string: str, enable_alpha: bool = True) -> Colour:
        """
        Parse a hex string (see :mod:`chromaradix.formats.hex`).

        With ``enable_alpha=False`` any alpha digits are ignored and the
        result is fully opaque.

        Raises:
            FormatError: malformed hex string.
        """
        return cls(*parse_hex(hex_string, enable_alpha))

    @classmethod
    def from_percent(cls, a: float = 100.0, r: float = 100.0, g: float = 100.0, b: float = 100.0) -> Colour:
        return cls(
            percent_to_channel(a),
            percent_to_channel(r),
            percent_to_channel(g),
            percent_to_channel(b),
        )

    @classmethod
    def from_fraction(cls, alpha: float = 1.0, red: float = 1.0, green: float = 1.0, blue: float = 1.0) -> Colour:
        return cls(
            fraction_to_channel(alpha),
            fraction_to_channel(red),
            fraction_to_channel(green),
            fraction_to_channel(blue),
        )

    @classmethod
    def from_b256(cls, data: str) -> Colour:
        """
        Parse a 4-character base-256 string.

        Raises:
            FormatError: wrong length or a symbol outside the alphabet.
        """
        return cls(*parse_b256(data))

    @classmethod
    def from_value(cls, value: int) -> Colour:
        """Unpack a 32-bit ``0xAARRGGBB`` integer."""
        return cls(
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
        )

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, a: float = 1.0) -> Colour:
        from .hsv import HSVColour
        return HSVColour(a, h, s, v).to_rgba()

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> Colour:
        from .hsl import HSLColour
        return HSLColour(a, h, s, l).to_rgba()

    @classmethod
    def from_colour_space(cls, colour: ColourSpace) -> Colour:
        return colour.to_rgba()

    # ------------------ CHANNELS ------------------
    @property
    def alpha(self) -> int:
        return self._value[0]

    @property
    def red(self) -> int:
        return self._value[1]

    @property
    def green(self) -> int:
        return self._value[2]

    @property
    def blue(self) -> int:
        return self._value[3]

    @property
    def value(self) -> int:
        """The packed ``0xAARRGGBB`` integer."""
        return (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue

    @property
    def a(self) -> float:
        return self.alpha / CHANNEL_MAX

    @property
    def r(self) -> float:
        return self.red / CHANNEL_MAX

    @property
    def g(self) -> float:
        return self.green / CHANNEL_MAX

    @property
    def b(self) -> float:
        return self.blue / CHANNEL_MAX

    @property
    def opacity(self) -> float:
        return self.a

    # ------------------ FORMATS ------------------
    @property
    def hex(self) -> str:
        """8 uppercase hex digits, ``AARRGGBB``."""
        return channels_to_hex(self._value)

    @property
    def b256(self) -> str:
        """4 symbols of the numeral alphabet, one per channel (alpha first)."""
        return channels_to_b256(self._value)

    @property
    def argb(self) -> str:
        return channels_to_decimal(self._value)

    @property
    def rgb(self) -> str:
        return channels_to_decimal(self._value[1:])

    def to_hex(self, include_hash_sign: bool = False, enable_alpha: bool = True, upper_case: bool = True) -> str:
        return channels_to_hex(
            self._value,
            include_hash_sign=include_hash_sign,
            enable_alpha=enable_alpha,
            upper_case=upper_case,
        )

    # ------------------ COLOUR SPACES ------------------
    def to_rgba(self) -> Colour:
        return self

    def to_hsv(self) -> HSVColour:
        from .hsv import HSVColour
        h, s, v = unit_rgb_to_hsv(self.r, self.g, self.b)
        return HSVColour(self.a, h, s, v)

    def to_hsl(self) -> HSLColour:
        from .hsl import HSLColour
        h, s, l = unit_rgb_to_hsl(self.r, self.g, self.b)
        return HSLColour(self.a, h, s, l)

    @property
    def hsv(self) -> HSVColour:
        return self.to_hsv()

    @property
    def hsl(self) -> HSLColour:
        return self.to_hsl()

    @property
    def hue(self) -> float:
        return self.hsv.hue

    @property
    def saturation(self) -> float:
        """HSV saturation."""
        return self.hsv.saturation

    @property
    def hsv_value(self) -> float:
        return self.hsv.value

    @property
    def lightness(self) -> float:
        return self.hsl.lightness

    # ------------------ MODIFIERS ------------------
    def with_alpha(self, alpha: int) -> Colour:
        return Colour(alpha, self.red, self.green, self.blue)

    def with_red(self, red: int) -> Colour:
        return Colour(self.alpha, red, self.green, self.blue)

    def with_green(self, green: int) -> Colour:
        return Colour(self.alpha, self.red, green, self.blue)

    def with_blue(self, blue: int) -> Colour:
        return Colour(self.alpha, self.red, self.green, blue)

    def with_opacity(self, opacity: float) -> Colour:
        """Replace alpha from a 0-1 opacity."""
        return self.with_alpha(fraction_to_channel(opacity))

    def with_hue(self, hue: float) -> Colour:
        return self.hsv.with_hue(hue).to_rgba()

    def with_saturation(self, saturation: float) -> Colour:
        return self.hsv.with_saturation(saturation).to_rgba()

    def with_hsv_value(self, value: float) -> Colour:
        return self.hsv.with_value(value).to_rgba()

    def with_lightness(self, lightness: float) -> Colour:
        return self.hsl.with_lightness(lightness).to_rgba()

    def _scale_alpha(self, factor: float) -> Colour:
        return self.with_alpha(round_half_up(self.alpha * factor))

    @staticmethod
    def lerp(a: Optional[Colour], b: Optional[Colour], t: float) -> Optional[Colour]:
        """
        Channel-wise linear interpolation between ``a`` and ``b``.

        A missing endpoint stands for "transparent": ``lerp(None, b, t)``
        fades ``b`` in, ``lerp(a, None, t)`` fades ``a`` out.
        """
        if a is b:
            return a
        if a is None:
            return b._scale_alpha(t)  # type: ignore[union-attr]
        if b is None:
            return a._scale_alpha(1.0 - t)
        return Colour(*(x + (y - x) * t for x, y in zip(a.channels, b.channels)))

    # ------------------ DUNDER ------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Colour(alpha={self.alpha}, red={self.red}, green={self.green}, blue={self.blue})"

    def __str__(self) -> str:
        return self.hex
