from __future__ import annotations

import logging
from typing import Dict, Iterable

from ciphers.core.errors import EncodingError, ParseError

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 26
A_ORD = ord("a")
Z_ORD = ord("z")

Table = Dict[int, int]


def alphabet() -> bytes:
    """The 26 lowercase ASCII letters, in order."""
    return bytes(range(A_ORD, Z_ORD + 1))


def is_az(byte: int) -> bool:
    return A_ORD <= byte <= Z_ORD


def normalize_shift(shift: int) -> int:
    """Reduce any integer shift into [0, 26); negative shifts wrap (-3 -> 23)."""
    return shift % ALPHABET_SIZE


def build_shift_table(shift: int) -> Table:
    """Map every letter to the letter 'shift' positions ahead, wrapping."""
    letters = alphabet()
    n = normalize_shift(shift)
    rotated = letters[n:] + letters[:n]
    logger.debug("Built shift table for %d (normalized %d)", shift, n)
    return dict(zip(letters, rotated))


def build_atbash_table() -> Table:
    letters = alphabet()
    return dict(zip(letters, reversed(letters)))


def decode_text(data: bytes) -> str:
    """Reassemble translated bytes into text, raising EncodingError if they are not UTF-8."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError(f"Translated bytes are not valid text: {e}") from e


def translate(data: Iterable[int], table: Table) -> str:
    """
    Apply 'table' byte by byte; bytes absent from the table are copied.

    Raises EncodingError if the resulting bytes are not valid UTF-8.
    """
    return decode_text(bytes(table.get(b, b) for b in data))


def parse_shift(raw: str) -> int:
    """
    Parse shift amounts like "3", "-5" or "+12".
    Any integer is accepted; it is reduced modulo 26 later.
    """
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ParseError(f"Shift amount must be an integer, got {raw!r}.") from e
