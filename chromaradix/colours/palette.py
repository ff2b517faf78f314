"""
Named colours, mirroring the Material palette.

The ``BLACKnn`` / ``WHITEnn`` entries are black or white at roughly ``nn``
percent opacity.
"""
from .rgba import Colour

TRANSPARENT = Colour(0x00, 0x00, 0x00, 0x00)
BLACK = Colour(0xFF, 0x00, 0x00, 0x00)
BLACK87 = Colour(0xDD, 0x00, 0x00, 0x00)
BLACK54 = Colour(0x8A, 0x00, 0x00, 0x00)
BLACK45 = Colour(0x73, 0x00, 0x00, 0x00)
BLACK38 = Colour(0x61, 0x00, 0x00, 0x00)
BLACK26 = Colour(0x42, 0x00, 0x00, 0x00)
BLACK12 = Colour(0x1F, 0x00, 0x00, 0x00)
WHITE = Colour(0xFF, 0xFF, 0xFF, 0xFF)
WHITE70 = Colour(0xB3, 0xFF, 0xFF, 0xFF)
WHITE60 = Colour(0x99, 0xFF, 0xFF, 0xFF)
WHITE54 = Colour(0x8A, 0xFF, 0xFF, 0xFF)
WHITE38 = Colour(0x62, 0xFF, 0xFF, 0xFF)
WHITE30 = Colour(0x4D, 0xFF, 0xFF, 0xFF)
WHITE24 = Colour(0x3D, 0xFF, 0xFF, 0xFF)
WHITE12 = Colour(0x1F, 0xFF, 0xFF, 0xFF)
WHITE10 = Colour(0x1A, 0xFF, 0xFF, 0xFF)
PINK = Colour(0xFF, 0xE9, 0x1E, 0x63)
PURPLE = Colour(0xFF, 0x9C, 0x27, 0xB0)
DEEP_PURPLE = Colour(0xFF, 0x67, 0x3A, 0xB7)
INDIGO = Colour(0xFF, 0x3F, 0x51, 0xB5)
LIGHT_BLUE = Colour(0xFF, 0x03, 0xA9, 0xF4)
CYAN = Colour(0xFF, 0x00, 0xBC, 0xD4)
TEAL = Colour(0xFF, 0x00, 0x96, 0x88)
LIGHT_GREEN = Colour(0xFF, 0x8B, 0xC3, 0x4A)
LIME = Colour(0xFF, 0xCD, 0xDC, 0x39)
YELLOW = Colour(0xFF, 0xFF, 0xEB, 0x3B)
AMBER = Colour(0xFF, 0xFF, 0xC1, 0x07)
ORANGE = Colour(0xFF, 0xFF, 0x98, 0x00)
DEEP_ORANGE = Colour(0xFF, 0xFF, 0x57, 0x22)
BROWN = Colour(0xFF, 0x79, 0x55, 0x48)
GREY = Colour(0xFF, 0x9E, 0x9E, 0x9E)
BLUE_GREY = Colour(0xFF, 0x60, 0x7D, 0x8B)
RED_ACCENT = Colour(0xFF, 0xFF, 0x52, 0x52)
PINK_ACCENT = Colour(0xFF, 0xFF, 0x40, 0x81)
PURPLE_ACCENT = Colour(0xFF, 0xE0, 0x40, 0xFB)
DEEP_PURPLE_ACCENT = Colour(0xFF, 0x7C, 0x4D, 0xFF)
INDIGO_ACCENT = Colour(0xFF, 0x53, 0x6D, 0xFE)
BLUE_ACCENT = Colour(0xFF, 0x44, 0x8A, 0xFF)
LIGHT_BLUE_ACCENT = Colour(0xFF, 0x40, 0xC4, 0xFF)
CYAN_ACCENT = Colour(0xFF, 0x18, 0xFF, 0xFF)
TEAL_ACCENT = Colour(0xFF, 0x64, 0xFF, 0xDA)
GREEN_ACCENT = Colour(0xFF, 0x69, 0xF0, 0xAE)
LIGHT_GREEN_ACCENT = Colour(0xFF, 0xB2, 0xFF, 0x59)
LIME_ACCENT = Colour(0xFF, 0xFF, 0xF0, 0x00)
YELLOW_ACCENT = Colour(0xFF, 0xFF, 0xEA, 0x00)
AMBER_ACCENT = Colour(0xFF, 0xFF, 0xAB, 0x40)
ORANGE_ACCENT = Colour(0xFF, 0xFF, 0xAB, 0x40)
DEEP_ORANGE_ACCENT = Colour(0xFF, 0xFF, 0x6E, 0x40)

PALETTE = {
    name.lower(): colour
    for name, colour in globals().items()
    if isinstance(colour, Colour)
}
