from __future__ import annotations


class CipherError(Exception):
    """Base class for every failure raised by the cipher engine."""


class EncodingError(CipherError):
    """Translated bytes could not be reassembled into text."""


class ParseError(CipherError, ValueError):
    """A caller-supplied number (e.g. a shift amount) is not an integer."""


class DecodeError(CipherError):
    """Numeric decode produced at least one unreadable group."""
