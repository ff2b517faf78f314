import pytest

from chromaradix.colours import Colour, HSVColour, HSLColour
from chromaradix.errors import FormatError
from samples import samples_argb


def test_channels_are_clamped():
    colour = Colour(300, -5, 128.5, 128.4)
    assert colour.channels == (255, 0, 129, 128)

def test_defaults_to_opaque_white():
    assert Colour().hex == "FFFFFFFF"

def test_from_rgb_is_opaque():
    assert Colour.from_rgb(1, 2, 3).channels == (255, 1, 2, 3)

def test_from_argb_uses_opacity_percentage():
    assert Colour.from_argb(50, 10, 20, 30).channels == (128, 10, 20, 30)
    assert Colour.from_argb(0, 10, 20, 30).alpha == 0

def test_from_percent():
    assert Colour.from_percent(100, 100, 0, 0) == Colour(255, 255, 0, 0)
    assert Colour.from_percent(50, 0, 50, 100).channels == (128, 0, 128, 255)

def test_from_fraction():
    assert Colour.from_fraction(0.5, 1.0, 0.0, 0.0).channels == (128, 255, 0, 0)

def test_from_value_and_value():
    colour = Colour.from_value(0xFF102030)
    assert colour.channels == (0xFF, 0x10, 0x20, 0x30)
    assert colour.value == 0xFF102030

def test_from_hex():
    assert Colour.from_hex("#FF0000").channels == (255, 255, 0, 0)
    assert Colour.from_hex("ff0000") == Colour.from_hex("#FF0000")
    assert Colour.from_hex("F00") == Colour(255, 255, 0, 0)
    assert Colour.from_hex("80FF0000").alpha == 128

def test_from_hex_short_alpha_form():
    assert Colour.from_hex("#8F00").channels == (0x88, 0xFF, 0x00, 0x00)

def test_from_hex_without_alpha():
    assert Colour.from_hex("80FF0000", enable_alpha=False).alpha == 255

def test_from_hex_rejects_garbage():
    for bad in ("GG0000", "#12345", "", "#", "FF00000000"):
        with pytest.raises(FormatError):
            Colour.from_hex(bad)

def test_from_hsv():
    assert Colour.from_hsv(120, 1.0, 1.0).channels == (255, 0, 255, 0)
    assert Colour.from_hsv(0, 1.0, 1.0, 0.5).channels == (128, 255, 0, 0)

def test_from_hsl():
    assert Colour.from_hsl(240, 1.0, 0.5).channels == (255, 0, 0, 255)
    assert Colour.from_hsl(0, 0.0, 1.0) == Colour.from_hex("FFF")

def test_from_colour_space():
    assert Colour.from_colour_space(HSVColour(hue=120)) == Colour(255, 0, 255, 0)
    red = Colour(255, 255, 0, 0)
    assert Colour.from_colour_space(red) is red

def test_hex_is_padded():
    assert Colour(255, 1, 2, 3).hex == "FF010203"
    assert Colour(0, 0, 0, 0).hex == "00000000"

def test_to_hex_options():
    colour = Colour(255, 171, 205, 239)
    assert colour.to_hex() == "FFABCDEF"
    assert colour.to_hex(include_hash_sign=True) == "#FFABCDEF"
    assert colour.to_hex(enable_alpha=False) == "ABCDEF"
    assert colour.to_hex(include_hash_sign=True, enable_alpha=False, upper_case=False) == "#abcdef"

def test_decimal_strings():
    colour = Colour(255, 10, 20, 30)
    assert colour.argb == "255,10,20,30"
    assert colour.rgb == "10,20,30"

def test_b256():
    assert Colour(255, 0, 0, 0).b256 == "#000"
    assert Colour.from_b256("#000") == Colour(255, 0, 0, 0)
    assert len(Colour(255, 10, 20, 30).b256) == 4

def test_round_trips():
    for channels in samples_argb:
        colour = Colour(*channels)
        assert Colour.from_hex(colour.hex) == colour
        assert Colour.from_b256(colour.b256) == colour
        assert Colour.from_value(colour.value) == colour

def test_unit_accessors():
    colour = Colour(51, 255, 0, 102)
    assert colour.a == pytest.approx(0.2)
    assert colour.opacity == pytest.approx(0.2)
    assert colour.r == 1.0
    assert colour.g == 0.0
    assert colour.b == pytest.approx(0.4)

def test_hsv_and_hsl_properties():
    red = Colour.from_hex("F00")
    assert red.hue == 0.0
    assert red.saturation == 1.0
    assert red.hsv_value == 1.0
    assert red.lightness == 0.5
    assert isinstance(red.hsv, HSVColour)
    assert isinstance(red.hsl, HSLColour)

def test_channel_modifiers():
    colour = Colour(255, 10, 20, 30)
    assert colour.with_alpha(0).channels == (0, 10, 20, 30)
    assert colour.with_red(99).channels == (255, 99, 20, 30)
    assert colour.with_green(99).channels == (255, 10, 99, 30)
    assert colour.with_blue(999).channels == (255, 10, 20, 255)
    assert colour.with_opacity(0.5).alpha == 128
    # the source colour is unchanged
    assert colour.channels == (255, 10, 20, 30)

def test_space_modifiers():
    red = Colour.from_hex("F00")
    assert red.with_hue(120) == Colour.from_hex("0F0")
    assert red.with_saturation(0.0) == Colour.from_hex("FFF")
    assert red.with_hsv_value(0.0) == Colour.from_hex("000")
    assert red.with_lightness(0.25).channels == (255, 128, 0, 0)

def test_space_modifiers_keep_alpha():
    colour = Colour(100, 255, 0, 0)
    assert colour.with_hue(240).alpha == 100
    assert colour.with_lightness(0.75).alpha == 100

def test_lerp():
    black = Colour.from_hex("000")
    white = Colour.from_hex("FFF")
    assert Colour.lerp(black, white, 0.0) == black
    assert Colour.lerp(black, white, 1.0) == white
    assert Colour.lerp(black, white, 0.5).channels == (255, 128, 128, 128)

def test_lerp_with_missing_endpoint():
    red = Colour.from_hex("F00")
    assert Colour.lerp(None, red, 0.5).channels == (128, 255, 0, 0)
    assert Colour.lerp(red, None, 0.25).alpha == 191
    assert Colour.lerp(None, None, 0.5) is None

def test_equality_and_hash():
    assert Colour(255, 1, 2, 3) == Colour.from_hex("010203")
    assert hash(Colour(255, 1, 2, 3)) == hash(Colour.from_hex("010203"))
    assert len({Colour(255, 1, 2, 3), Colour.from_value(0xFF010203)}) == 1
    assert Colour(255, 1, 2, 3) != Colour(254, 1, 2, 3)
    assert Colour(255, 255, 0, 0) != HSVColour()

def test_repr_and_str():
    colour = Colour(255, 10, 20, 30)
    assert repr(colour) == "Colour(alpha=255, red=10, green=20, blue=30)"
    assert str(colour) == "FF0A141E"
