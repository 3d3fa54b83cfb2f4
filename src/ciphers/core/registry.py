from __future__ import annotations

import logging
from typing import Optional, Protocol

from .errors import CipherError
from .selection import CipherSelection

logger = logging.getLogger(__name__)


class CipherPlugin(Protocol):
    name: str

    def encrypt(self, plaintext: str, selection: CipherSelection) -> str:
        ...

    def decrypt(self, ciphertext: str, selection: CipherSelection) -> str:
        ...


_PLUGINS: dict[str, CipherPlugin] = {}


def register_plugin(plugin: CipherPlugin) -> None:
    key = plugin.name.lower().strip()
    if not key:
        raise ValueError("Plugin must have a non-empty name.")
    _PLUGINS[key] = plugin


def list_plugins() -> list[str]:
    return sorted(_PLUGINS.keys())


def get_plugin(cipher_name: str) -> CipherPlugin:
    name = cipher_name.lower().strip()
    if name not in _PLUGINS:
        raise CipherError(f"Unknown cipher '{cipher_name}'. Available: {', '.join(list_plugins())}")
    return _PLUGINS[name]


def apply_cipher(text: str, selection: Optional[CipherSelection], *, encrypt: bool = False) -> str:
    """
    Run the single selected cipher over 'text'.

    With no selection the text is returned unchanged, so the CLI can be used
    as a plain lowercasing filter.
    """
    if selection is None:
        return text

    plugin = get_plugin(selection.name)
    logger.debug("Dispatching to %s (encrypt=%s)", plugin.name, encrypt)
    if encrypt:
        return plugin.encrypt(text, selection)
    return plugin.decrypt(text, selection)
