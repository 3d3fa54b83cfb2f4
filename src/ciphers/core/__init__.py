from .errors import CipherError, DecodeError, EncodingError, ParseError
from .selection import Atbash, Caesar, CipherSelection, Shift, Vigenere
from .registry import register_plugin, list_plugins, apply_cipher

__all__ = [
    "CipherError",
    "DecodeError",
    "EncodingError",
    "ParseError",
    "Atbash",
    "Caesar",
    "CipherSelection",
    "Shift",
    "Vigenere",
    "register_plugin",
    "list_plugins",
    "apply_cipher",
]
