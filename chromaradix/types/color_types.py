from __future__ import annotations
from enum import Enum
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

IntVector = Tuple[int, ...]
IntElement = Union[int, IntVector]
FloatElement = Union[float, Tuple[float, ...]]
ColorElement = Union[IntElement, FloatElement]


class ColourMode(str, Enum):
    RGB = "rgb"
    RGBA = "rgba"
    HSV = "hsv"
    HSVA = "hsva"
    HSL = "hsl"
    HSLA = "hsla"

    @property
    def has_alpha(self) -> bool:
        return self.value.endswith("a")

    @property
    def base(self) -> str:
        """The space without its alpha suffix (``"hsva"`` -> ``"hsv"``)."""
        return self.value[:3]


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a numpy array.

    Args:
        element: Scalar, tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element
    if isinstance(element, (int, float)):
        return np.array([element], dtype=float)
    return np.array(element, dtype=float)

