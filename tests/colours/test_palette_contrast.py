from chromaradix.colours import Colour, HSVColour, perceived_brightness, use_white_foreground
from chromaradix.colours import palette


def test_palette_constants():
    assert palette.BLACK.hex == "FF000000"
    assert palette.WHITE.hex == "FFFFFFFF"
    assert palette.TRANSPARENT.alpha == 0
    assert palette.BLACK87.alpha == 0xDD
    assert palette.PINK.hex == "FFE91E63"

def test_palette_map():
    assert palette.PALETTE["black"] == palette.BLACK
    assert palette.PALETTE["deep_orange"] == palette.DEEP_ORANGE
    assert all(isinstance(colour, Colour) for colour in palette.PALETTE.values())
    assert "palette" not in palette.PALETTE

def test_perceived_brightness():
    assert perceived_brightness(palette.BLACK) == 0
    assert perceived_brightness(palette.WHITE) == 255
    assert perceived_brightness(Colour.from_hex("F00")) == 139

def test_use_white_foreground():
    assert use_white_foreground(palette.BLACK)
    assert not use_white_foreground(palette.WHITE)
    assert not use_white_foreground(palette.YELLOW)
    assert use_white_foreground(palette.INDIGO)

def test_bias_favours_white():
    red = Colour.from_hex("F00")
    assert not use_white_foreground(red)
    assert use_white_foreground(red, bias=20)

def test_accepts_any_colour_space():
    assert use_white_foreground(HSVColour(value=0.1))
    assert not use_white_foreground(HSVColour(saturation=0.0))
