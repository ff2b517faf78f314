"""Exceptions raised by chromaradix."""


class ChromaRadixError(Exception):
    """Base class for every error raised by this package."""


class FormatError(ChromaRadixError, ValueError):
    """A string could not be parsed: bad hex, bad base-256 or a symbol outside the alphabet."""


class RangeViolation(ChromaRadixError, ValueError):
    """A value lies outside the domain an operation accepts."""


__all__ = ["ChromaRadixError", "FormatError", "RangeViolation"]
