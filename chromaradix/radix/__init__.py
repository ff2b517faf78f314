"""
Chromaradix Numeral Codec
=========================

Converts non-negative integers between numeral bases, from binary up to
base-256, over one fixed alphabet of 256 symbols (digits, Latin letters,
punctuation, Greek and Cyrillic).

>>> from chromaradix.radix import to_hex, to_binary, encode, to_int
>>> to_hex(255)
'FF'
>>> to_binary(42)
'101010'
>>> to_int(encode(1000, 36), 36)
1000

The module also carries the channel helpers used by the colour types:

>>> clamp_to_channel(128.7)
129
>>> fraction_to_channel(0.5)
128
>>> percent_to_channel(50.0)
128
"""

from .alphabet import ALPHABET, MIN_BASE, MAX_BASE, alphabet_for
from .codec import (
    check_base,
    crypt,
    encode,
    decode,
    to_int,
    rebase,
    change,
    to_octal,
    to_binary,
    to_hex,
    to_decimal,
    to_base256,
)
from .channels import clamp_to_channel, fraction_to_channel, percent_to_channel
from ..types.base import Base

__all__ = [
    "ALPHABET",
    "MIN_BASE",
    "MAX_BASE",
    "alphabet_for",
    "Base",
    "check_base",
    "crypt",
    "encode",
    "decode",
    "to_int",
    "rebase",
    "change",
    "to_octal",
    "to_binary",
    "to_hex",
    "to_decimal",
    "to_base256",
    "clamp_to_channel",
    "fraction_to_channel",
    "percent_to_channel",
]
