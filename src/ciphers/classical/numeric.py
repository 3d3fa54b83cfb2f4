from __future__ import annotations

import logging
from typing import Optional

from ciphers.core.errors import DecodeError, EncodingError
from ciphers.classical.common import Table, alphabet, translate

logger = logging.getLogger(__name__)

ERROR_MARKER = "ERROR"


def _position_table() -> Table:
    return {index: letter for index, letter in enumerate(alphabet())}


def _parse_numeral(raw: str) -> Optional[int]:
    # Unsigned byte only: "-1", "256", "x" are all unreadable
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if 0 <= value <= 0xFF else None


def _decode_group(group: str, table: Table) -> str:
    values = [_parse_numeral(part) for part in group.split("-")]
    if any(v is None for v in values):
        return ERROR_MARKER
    try:
        return translate(values, table)
    except EncodingError:
        return ERROR_MARKER


def numeric_decrypt(text: str) -> str:
    """
    Decode groups like "7-4-11-11-14 23-14-17-11-3" into "hello world".

    Numerals are zero-based alphabet positions; groups are separated by
    whitespace and re-joined with single spaces. Positions past 'z' pass
    through as raw bytes.

    Unreadable groups are replaced by ERROR_MARKER and the joined output is
    scanned for it afterwards. NOTE: a group whose raw bytes spell the
    marker (69-82-82-79-82) is therefore also reported as a failure.
    """
    table = _position_table()
    decoded = " ".join(_decode_group(group, table) for group in text.split())

    if ERROR_MARKER in decoded:
        logger.debug("Numeric decode failed for input %r", text)
        raise DecodeError("Something has gone wrong")
    return decoded
