"""
Base-256 colour strings: one alphabet symbol per channel, in the order
alpha, red, green, blue. Every 0-255 value is a single base-256 digit, so the
string is always exactly four characters long.
"""
from typing import Iterable, Tuple

from ..errors import FormatError
from ..radix import to_base256, to_int, Base

B256_LENGTH = 4


def channels_to_b256(channels: Iterable[int]) -> str:
    return "".join(to_base256(channel) for channel in channels)

def parse_b256(data: str) -> Tuple[int, int, int, int]:
    """
    Parse a 4-character base-256 string into ``(alpha, red, green, blue)``.

    Raises:
        FormatError: not exactly four characters, or a symbol outside the alphabet.
    """
    if not isinstance(data, str) or len(data) != B256_LENGTH:
        raise FormatError(f"Base-256 colour must be exactly {B256_LENGTH} characters, got {data!r}")
    alpha, red, green, blue = (to_int(symbol, Base.BASE256) for symbol in data)
    return alpha, red, green, blue
