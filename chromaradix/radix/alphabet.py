"""
The numeral alphabet.

A fixed, ordered table of 256 unique symbols. The symbol at index ``i``
stands for the digit value ``i``; a base-``n`` numeral uses the first ``n``
symbols. Two implementations only interoperate when they share this exact
table, so it must never be reordered or extended in place.
"""

DIGITS = "0123456789"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
PUNCTUATION = "+/!@%^$&*()-_=[]{}|;:,.<>?~`'\"\\"
GREEK_UPPERCASE = "ΑΒΓΔΕΖΗΘΙΚΛΜΝΞΟΠΡΣΤΥΦΧΨΩ"
GREEK_LOWERCASE = "αβγδεζηθικλμνξοπρστυφχψ"
# U+03CF to U+03FF
GREEK_EXTENDED = "ϏϐϑϒϓϔϕϖϗϘϙϚϛϜϝϞϟϠϡϢϣϤϥϦϧϨϩϪϫϬϭϮϯϰϱϲϳϴϵ϶ϷϸϹϺϻϼϽϾϿ"
CYRILLIC = "ЀЏАБВГДЕЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯабвгдежзийклмнопрстуфхцчшщъыьэюя"
TERMINATOR = "#"

ALPHABET = (
    DIGITS
    + UPPERCASE
    + LOWERCASE
    + PUNCTUATION
    + GREEK_UPPERCASE
    + GREEK_LOWERCASE
    + GREEK_EXTENDED
    + CYRILLIC
    + TERMINATOR
)

MIN_BASE = 2
MAX_BASE = len(ALPHABET)


def alphabet_for(base: int) -> str:
    """Return the symbols used by a base-``base`` numeral."""
    return ALPHABET[:base]
