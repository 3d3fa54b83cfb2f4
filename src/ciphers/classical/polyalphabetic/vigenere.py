from __future__ import annotations

import logging
from itertools import cycle

from ciphers.core.registry import register_plugin
from ciphers.core.selection import CipherSelection
from ciphers.classical.common import Table, alphabet, build_shift_table, decode_text

logger = logging.getLogger(__name__)


def _key_shifts(key: str) -> list[int]:
    """Alphabet positions of the key's a-z bytes; anything else is dropped."""
    positions = {letter: index for index, letter in enumerate(alphabet())}
    return [positions[b] for b in key.encode("utf-8") if b in positions]


def vigenere(text: str, key: str, encrypt: bool) -> str:
    """
    Shift each letter of 'text' by the alphabet position of the next key letter.

    The key is expected lowercased. Non-letters in 'text' are copied as-is
    and do not advance the key. A key without any a-z letters leaves the
    text unchanged.
    """
    shifts = _key_shifts(key)
    if not shifts:
        logger.warning("Vigenère key %r has no a-z letters; text left unchanged.", key)
        return text

    letters = set(alphabet())
    key_stream = cycle(shifts)
    tables: dict[int, Table] = {}

    out = bytearray()
    for b in text.encode("utf-8"):
        if b not in letters:
            out.append(b)
            continue

        shift = next(key_stream)
        if not encrypt:
            shift = -shift

        table = tables.get(shift)
        if table is None:
            table = tables[shift] = build_shift_table(shift)
        out.append(table[b])

    return decode_text(bytes(out))


class VigenereCipher:
    name = "vigenere"

    def encrypt(self, plaintext: str, selection: CipherSelection) -> str:
        return vigenere(plaintext, selection.key, True)

    def decrypt(self, ciphertext: str, selection: CipherSelection) -> str:
        return vigenere(ciphertext, selection.key, False)


register_plugin(VigenereCipher())
