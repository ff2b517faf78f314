"""
String encodings of an RGBA colour.

- hex:     ``AARRGGBB`` (parse_hex / channels_to_hex)
- b256:    4 symbols of the numeral alphabet (parse_b256 / channels_to_b256)
- decimal: ``a,r,g,b`` or ``r,g,b`` (channels_to_decimal)

These functions work on plain channel tuples; :class:`chromaradix.Colour`
exposes them as ``from_hex``/``hex``, ``from_b256``/``b256``, ``argb`` and
``rgb``.
"""

from .hex import (
    VALID_HEX_PATTERN,
    COMPLETE_VALID_HEX_PATTERN,
    is_valid_hex,
    is_complete_hex,
    normalize_hex,
    parse_hex,
    channel_to_hex,
    channels_to_hex,
)
from .b256 import B256_LENGTH, channels_to_b256, parse_b256
from .decimal_text import channels_to_decimal

__all__ = [
    "VALID_HEX_PATTERN",
    "COMPLETE_VALID_HEX_PATTERN",
    "is_valid_hex",
    "is_complete_hex",
    "normalize_hex",
    "parse_hex",
    "channel_to_hex",
    "channels_to_hex",
    "B256_LENGTH",
    "channels_to_b256",
    "parse_b256",
    "channels_to_decimal",
]
