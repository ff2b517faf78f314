from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Optional
from boundednumbers import clamp01

from ..conversions import hsv_to_unit_rgb, hsv_to_hsl
from ..types.color_types import ColourMode
from ..utils.num_utils import wrap_hue
from .colour_space import ColourSpace

if TYPE_CHECKING:
    from .rgba import Colour
    from .hsl import HSLColour


class HSVColour(ColourSpace):
    """
    A colour in the HSV (hue, saturation, value) space.

    - alpha: 0-1 opacity
    - hue: 0-360 degrees; values outside wrap around (``360 -> 0``, ``-30 -> 330``)
    - saturation, value: 0-1, clamped

    >>> HSVColour(hue=120, saturation=1.0, value=1.0).to_rgba().rgb
    '0,255,0'
    """
    __slots__ = ()

    mode: ClassVar[ColourMode] = ColourMode.HSVA

    def __init__(self, alpha: float = 1.0, hue: float = 0.0, saturation: float = 1.0, value: float = 1.0) -> None:
        self._freeze((
            float(clamp01(alpha)),
            wrap_hue(hue),
            float(clamp01(saturation)),
            float(clamp01(value)),
        ))

    @classmethod
    def from_rgba(cls, colour: Colour) -> HSVColour:
        return colour.to_hsv()

    @classmethod
    def from_colour_space(cls, colour: ColourSpace) -> HSVColour:
        return colour.to_hsv()

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
    def value(self) -> float:
        return self._value[3]

    def to_rgba(self) -> Colour:
        from .rgba import Colour
        r, g, b = hsv_to_unit_rgb(self.hue, self.saturation, self.value)
        return Colour.from_fraction(self.alpha, r, g, b)

    def to_hsv(self) -> HSVColour:
        return self

    def to_hsl(self) -> HSLColour:
        from .hsl import HSLColour
        h, s, l = hsv_to_hsl(self.hue, self.saturation, self.value)
        return HSLColour(self.alpha, h, s, l)

    def with_alpha(self, alpha: float) -> HSVColour:
        return HSVColour(alpha, self.hue, self.saturation, self.value)

    def with_hue(self, hue: float) -> HSVColour:
        return HSVColour(self.alpha, hue, self.saturation, self.value)

    def with_saturation(self, saturation: float) -> HSVColour:
        return HSVColour(self.alpha, self.hue, saturation, self.value)

    def with_value(self, value: float) -> HSVColour:
        return HSVColour(self.alpha, self.hue, self.saturation, value)

    @staticmethod
    def lerp(a: Optional[HSVColour], b: Optional[HSVColour], t: float) -> Optional[HSVColour]:
        """Component-wise interpolation; hue goes the plain numeric way, then wraps."""
        if a is b:
            return a
        if a is None:
            return b.with_alpha(b.alpha * t)  # type: ignore[union-attr]
        if b is None:
            return a.with_alpha(a.alpha * (1.0 - t))
        return HSVColour(*(x + (y - x) * t for x, y in zip(a.channels, b.channels)))

    def __eq__(self, other) -> bool:
        if not isinstance(other, HSVColour):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((HSVColour, self._value))

    def __repr__(self) -> str:
        return (
            f"HSVColour(alpha={self.alpha!r}, hue={self.hue!r}, "
            f"saturation={self.saturation!r}, value={self.value!r})"
        )

    def __str__(self) -> str:
        return ",".join(str(round(component, 2)) for component in self._value)
