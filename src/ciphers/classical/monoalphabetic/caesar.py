from __future__ import annotations

from ciphers.core.registry import register_plugin
from ciphers.core.selection import CipherSelection
from ciphers.classical.common import build_shift_table, translate

CAESAR_SHIFT = 3


def shift(text: str, by: int) -> str:
    return translate(text.encode("utf-8"), build_shift_table(by))


def caesar(text: str, encrypt: bool) -> str:
    # Caesar is just a shift of 3 (backwards to decrypt)
    return shift(text, CAESAR_SHIFT if encrypt else -CAESAR_SHIFT)


class CaesarCipher:
    name = "caesar"

    def encrypt(self, plaintext: str, selection: CipherSelection) -> str:
        return caesar(plaintext, True)

    def decrypt(self, ciphertext: str, selection: CipherSelection) -> str:
        return caesar(ciphertext, False)


class ShiftCipher:
    """
    Shift by an explicit amount. The direction is carried by the sign of the
    amount, so encrypt and decrypt apply the same shift.
    """

    name = "shift"

    def encrypt(self, plaintext: str, selection: CipherSelection) -> str:
        return shift(plaintext, selection.by)

    def decrypt(self, ciphertext: str, selection: CipherSelection) -> str:
        return shift(ciphertext, selection.by)


register_plugin(CaesarCipher())
register_plugin(ShiftCipher())
