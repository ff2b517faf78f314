from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Optional
from boundednumbers import clamp01

from ..conversions import hsl_chroma, hsl_to_hsv, rgb_from_hue_chroma
from ..radix import fraction_to_channel
from ..types.color_types import ColourMode
from ..utils.num_utils import wrap_hue
from .colour_space import ColourSpace

if TYPE_CHECKING:
    from .rgba import Colour
    from .hsv import HSVColour


class HSLColour(ColourSpace):
    """
    A colour in the HSL (hue, saturation, lightness) space.

    - alpha: 0-1 opacity
    - hue: 0-360 degrees, wrapped into [0, 360)
    - saturation: 0-1, clamped
    - lightness: 0 (black) through 0.5 (pure hue) to 1 (white), clamped

    The defaults give opaque white, as lightness 1 is white for any hue.
    """
    __slots__ = ()

    mode: ClassVar[ColourMode] = ColourMode.HSLA

    def __init__(self, alpha: float = 1.0, hue: float = 0.0, saturation: float = 1.0, lightness: float = 1.0) -> None:
        self._freeze((
            float(clamp01(alpha)),
            wrap_hue(hue),
            float(clamp01(saturation)),
            float(clamp01(lightness)),
        ))

    @classmethod
    def from_rgba(cls, colour: Colour) -> HSLColour:
        return colour.to_hsl()

    @classmethod
    def from_colour_space(cls, colour: ColourSpace) -> HSLColour:
        return colour.to_hsl()

    @property
    def alpha(self) -> float:
        return self._value[0]

    @property
    def hue(self) -> float:
        return self._value[1]

    @property
    def saturation(self) -> float:
        return self._value[2]

    @property
    def lightness(self) -> float:
        return self._value[3]

    def to_rgba(self) -> Colour:
        from .rgba import Colour
        chroma, secondary, match = hsl_chroma(self.hue, self.saturation, self.lightness)
        red, green, blue = rgb_from_hue_chroma(self.hue, chroma, secondary, match)
        return Colour(fraction_to_channel(self.alpha), red, green, blue)

    def to_hsv(self) -> HSVColour:
        from .hsv import HSVColour
        h, s, v = hsl_to_hsv(self.hue, self.saturation, self.lightness)
        return HSVColour(self.alpha, h, s, v)

    def to_hsl(self) -> HSLColour:
        return self

    def with_alpha(self, alpha: float) -> HSLColour:
        return HSLColour(alpha, self.hue, self.saturation, self.lightness)

    def with_hue(self, hue: float) -> HSLColour:
        return HSLColour(self.alpha, hue, self.saturation, self.lightness)

    def with_saturation(self, saturation: float) -> HSLColour:
        return HSLColour(self.alpha, self.hue, saturation, self.lightness)

    def with_lightness(self, lightness: float) -> HSLColour:
        return HSLColour(self.alpha, self.hue, self.saturation, lightness)

    @staticmethod
    def lerp(a: Optional[HSLColour], b: Optional[HSLColour], t: float) -> Optional[HSLColour]:
        """
        Component-wise interpolation.

        ``None`` endpoints fade the other colour's alpha; hue is interpolated
        numerically and wrapped, not along the shortest arc.
        """
        if a is b:
            return a
        if a is None:
            return b.with_alpha(b.alpha * t)  # type: ignore[union-attr]
        if b is None:
            return a.with_alpha(a.alpha * (1.0 - t))
        return HSLColour(*(x + (y - x) * t for x, y in zip(a.channels, b.channels)))

    def __eq__(self, other) -> bool:
        if not isinstance(other, HSLColour):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((HSLColour, self._value))

    def __repr__(self) -> str:
        return (
            f"HSLColour(alpha={self.alpha!r}, hue={self.hue!r}, "
            f"saturation={self.saturation!r}, lightness={self.lightness!r})"
        )

    def __str__(self) -> str:
        return ",".join(str(round(component, 2)) for component in self._value)
