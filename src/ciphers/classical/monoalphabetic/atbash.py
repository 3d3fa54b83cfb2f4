from __future__ import annotations

from ciphers.core.registry import register_plugin
from ciphers.core.selection import CipherSelection
from ciphers.classical.common import build_atbash_table, translate


def atbash(text: str) -> str:
    return translate(text.encode("utf-8"), build_atbash_table())


class AtbashCipher:
    name = "atbash"

    # Atbash is its own inverse; selection carries no key
    def encrypt(self, plaintext: str, selection: CipherSelection) -> str:
        return atbash(plaintext)

    def decrypt(self, ciphertext: str, selection: CipherSelection) -> str:
        return atbash(ciphertext)


register_plugin(AtbashCipher())
