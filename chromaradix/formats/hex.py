"""
Hexadecimal colour strings.

Accepted input (a single leading ``#`` is optional, case is ignored):

=========  ==========================================================
Length     Meaning
=========  ==========================================================
3          ``RGB``, each nibble doubled, fully opaque
4          ``ARGB`` nibbles, each doubled
6          ``RRGGBB``, fully opaque
8          ``AARRGGBB``
=========  ==========================================================

Output is always ``AARRGGBB`` in uppercase unless asked otherwise.
"""
import re
from typing import Iterable, Tuple

from ..errors import FormatError
from ..radix import to_hex, to_int, Base

# A hex string that is still being typed (1-8 digits).
VALID_HEX_PATTERN = r"#?[0-9a-fA-F]{1,8}"
COMPLETE_VALID_HEX_PATTERN = r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})"

_VALID_HEX = re.compile(VALID_HEX_PATTERN)
_COMPLETE_HEX = re.compile(COMPLETE_VALID_HEX_PATTERN)


def is_valid_hex(text: str) -> bool:
    """True for a possibly incomplete hex string such as ``"#F0"``."""
    return _VALID_HEX.fullmatch(text) is not None

def is_complete_hex(text: str) -> bool:
    """True for a hex string :func:`parse_hex` will accept."""
    return _COMPLETE_HEX.fullmatch(text) is not None


def normalize_hex(text: str, enable_alpha: bool = True) -> str:
    """
    Expand a hex colour string to its 8-digit uppercase ``AARRGGBB`` form.

    Raises:
        FormatError: wrong length or a non-hex character.
    """
    if not isinstance(text, str) or not is_complete_hex(text):
        raise FormatError(f"Invalid hex colour {text!r}; expected 3, 4, 6 or 8 hex digits")

    digits = text[1:] if text.startswith("#") else text
    digits = digits.upper()

    if len(digits) in (3, 4):
        digits = "".join(nibble * 2 for nibble in digits)
    if len(digits) == 6:
        digits = "FF" + digits
    if not enable_alpha:
        digits = "FF" + digits[2:]
    return digits

def parse_hex(text: str, enable_alpha: bool = True) -> Tuple[int, int, int, int]:
    """Parse a hex colour string into ``(alpha, red, green, blue)``."""
    digits = normalize_hex(text, enable_alpha)
    return (
        to_int(digits[0:2], Base.HEXADECIMAL),
        to_int(digits[2:4], Base.HEXADECIMAL),
        to_int(digits[4:6], Base.HEXADECIMAL),
        to_int(digits[6:8], Base.HEXADECIMAL),
    )


def channel_to_hex(value: int) -> str:
    """Two uppercase hex digits for one 0-255 channel."""
    return to_hex(value).rjust(2, "0")

def channels_to_hex(
    channels: Iterable[int],
    include_hash_sign: bool = False,
    enable_alpha: bool = True,
    upper_case: bool = True,
) -> str:
    """
    Format ``(alpha, red, green, blue)`` as a hex string.

    Args:
        channels: the four ARGB channels, 0-255 each
        include_hash_sign: prefix the result with ``#``
        enable_alpha: emit ``AARRGGBB``; otherwise ``RRGGBB``
        upper_case: uppercase digits (the default)
    """
    alpha, red, green, blue = channels
    parts = [red, green, blue]
    if enable_alpha:
        parts.insert(0, alpha)
    result = "".join(channel_to_hex(part) for part in parts)
    if not upper_case:
        result = result.lower()
    return ("#" if include_hash_sign else "") + result
