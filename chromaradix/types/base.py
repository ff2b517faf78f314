from enum import IntEnum


class Base(IntEnum):
    """Named radices understood by the numeral codec.

    Any integer between 2 and the alphabet length is accepted wherever a
    ``Base`` is; the members are only convenient names.
    """

    BINARY = 2
    TERNARY = 3
    QUATERNARY = 4
    OCTAL = 8
    DECIMAL = 10
    DUODECIMAL = 12
    HEXADECIMAL = 16
    VIGESIMAL = 20
    BASE32 = 32
    BASE36 = 36
    BASE62 = 62
    BASE64 = 64
    BASE85 = 85
    BASE128 = 128
    BASE256 = 256
