"""
Arbitrary-radix numeral codec.

Every base is a prefix of :data:`~chromaradix.radix.alphabet.ALPHABET`, so
base-16 uses ``0-9A-F`` and base-256 uses the whole table. Conversion is
plain long division over the digit list, so any base from 2 to 256 works,
not only powers of two.

>>> encode(255, 16)
'FF'
>>> encode(42, Base.BINARY)
'101010'
>>> decode("10", 8)
'8'
"""
from __future__ import annotations

import warnings
from typing import List, Union

from ..errors import FormatError, RangeViolation
from ..types.base import Base
from .alphabet import DIGITS, MIN_BASE, MAX_BASE, alphabet_for

BaseLike = Union[int, Base]


def check_base(base: BaseLike) -> int:
    """Validate ``base`` and return it as a plain ``int``."""
    if isinstance(base, bool) or not isinstance(base, int):
        raise TypeError(f"base must be an int or Base, got {type(base).__name__}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise RangeViolation(f"base must be between {MIN_BASE} and {MAX_BASE}, got {base}")
    return int(base)


def _digit_values(data: str, source: str) -> List[int]:
    lookup = {symbol: index for index, symbol in enumerate(source)}
    values = []
    for symbol in data:
        index = lookup.get(symbol)
        if index is None:
            raise FormatError(
                f'Source "{data}" contains character "{symbol}" which is outside '
                f'of the defined source alphabet "{source}"'
            )
        values.append(index)
    return values


def crypt(data: str, source: str, destination: str) -> str:
    """
    Transcode the numeral ``data`` from the ``source`` alphabet to ``destination``.

    Both alphabets are strings of unique symbols whose length is the radix.
    The source digits are repeatedly divided by the destination radix; each
    pass yields one output symbol (the remainder) and a shorter quotient.

    Args:
        data: Numeral written with symbols of ``source``.
        source: Source alphabet.
        destination: Destination alphabet.

    Returns:
        The same number written with symbols of ``destination``.

    Raises:
        FormatError: ``data`` is empty or holds a symbol outside ``source``.
        RangeViolation: either alphabet has fewer than two symbols.
    """
    if not data:
        raise FormatError("Cannot convert an empty numeral")
    source_base = len(source)
    destination_base = len(destination)
    if source_base < MIN_BASE or destination_base < MIN_BASE:
        raise RangeViolation("alphabets need at least two symbols")

    digits = _digit_values(data, source)
    symbols: List[str] = []

    while True:
        divide = 0
        quotient: List[int] = []
        for digit in digits:
            divide = divide * source_base + digit
            if divide >= destination_base:
                quotient.append(divide // destination_base)
                divide = divide % destination_base
            elif quotient:
                # interior zero of the quotient
                quotient.append(0)
        symbols.append(destination[divide])
        digits = quotient
        if not digits:
            break

    return "".join(reversed(symbols))


def encode(value: int, base: BaseLike) -> str:
    """Write the non-negative integer ``value`` in ``base``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, got {type(value).__name__}")
    if value < 0:
        raise RangeViolation(f"value must be non-negative, got {value}")
    return crypt(str(value), DIGITS, alphabet_for(check_base(base)))


def decode(digits: str, base: BaseLike) -> str:
    """Read ``digits`` written in ``base`` and return the decimal numeral as a string."""
    return crypt(digits, alphabet_for(check_base(base)), DIGITS)


def to_int(digits: str, base: BaseLike) -> int:
    """Read ``digits`` written in ``base`` as an ``int``."""
    return int(decode(digits, base))


def rebase(digits: str, from_base: BaseLike, to_base: BaseLike) -> str:
    """Rewrite a numeral from one base to another without going through ``int``."""
    return crypt(digits, alphabet_for(check_base(from_base)), alphabet_for(check_base(to_base)))


def change(data: Union[int, str], base: BaseLike) -> Union[str, int]:
    """
    Two-way conversion: an ``int`` is encoded in ``base``, a ``str`` is decoded from it.

    Deprecated: use :func:`encode` or :func:`to_int` instead.
    """
    warnings.warn(
        "change is deprecated. Use encode or to_int instead.",
        DeprecationWarning,
        stacklevel=2
    )
    if isinstance(data, int):
        return encode(data, base)
    return to_int(data, base)


def to_octal(value: int) -> str:
    return encode(value, Base.OCTAL)

def to_binary(value: int) -> str:
    return encode(value, Base.BINARY).upper()

def to_hex(value: int) -> str:
    return encode(value, Base.HEXADECIMAL).upper()

def to_decimal(value: int) -> str:
    return encode(value, Base.DECIMAL)

def to_base256(value: int) -> str:
    return encode(value, Base.BASE256)
