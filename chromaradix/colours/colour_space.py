from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Tuple, Union

from ..errors import RangeViolation
from ..types.color_types import ColourMode

if TYPE_CHECKING:
    from .rgba import Colour
    from .hsv import HSVColour
    from .hsl import HSLColour

# The only classes allowed to derive from ColourSpace. Adding a space means
# touching every conversion, so the set is closed here rather than left open.
VARIANTS = frozenset({"Colour", "HSVColour", "HSLColour"})


class ColourSpace(ABC):
    """
    Closed base of the three colour representations: :class:`Colour` (RGBA),
    :class:`HSVColour` and :class:`HSLColour`.

    Every variant converts to every other one through ``to_rgba``,
    ``to_hsv`` and ``to_hsl``. Instances are immutable: attribute assignment
    after ``__init__`` raises ``AttributeError``.

    >>> any_colour = HSVColour(hue=120)
    >>> any_colour.to_rgba().hex
    'FF00FF00'
    """
    __slots__ = ('_value', '_is_frozen')

    mode: ClassVar[ColourMode]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__qualname__ not in VARIANTS or not cls.__module__.startswith(__package__ or ""):
            raise TypeError(
                f"ColourSpace is closed to {sorted(VARIANTS)}; cannot define {cls.__qualname__}"
            )

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def _freeze(self, value: Tuple) -> None:
        object.__setattr__(self, '_value', value)
        object.__setattr__(self, '_is_frozen', True)

    @property
    def channels(self) -> Tuple:
        """The stored components, alpha first."""
        return self._value

    @abstractmethod
    def to_rgba(self) -> Colour:
        """This colour as a :class:`Colour` (8-bit ARGB)."""

    @abstractmethod
    def to_hsv(self) -> HSVColour:
        """This colour as an :class:`HSVColour`."""

    @abstractmethod
    def to_hsl(self) -> HSLColour:
        """This colour as an :class:`HSLColour`."""

    def convert(self, to_space: Union[ColourMode, str]) -> ColourSpace:
        """
        Convert to the variant named by ``to_space``.

        Alpha-less names are accepted (``"hsv"`` and ``"hsva"`` both give an
        :class:`HSVColour`), since every variant carries alpha.
        """
        try:
            mode = ColourMode(str(getattr(to_space, "value", to_space)).lower())
        except ValueError:
            raise RangeViolation(f"Unknown colour space: {to_space!r}") from None

        if mode.base == "rgb":
            return self.to_rgba()
        if mode.base == "hsv":
            return self.to_hsv()
        return self.to_hsl()
