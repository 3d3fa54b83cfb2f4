from __future__ import annotations

import string
from typing import Iterable, Optional, TextIO

# ASCII-only lowercasing: non-ASCII characters are left alone
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(s: str) -> str:
    return s.translate(_ASCII_LOWER)


def join_words(words: Optional[Iterable[str]]) -> str:
    """Join command-line words with single spaces, lowercased."""
    if not words:
        return ""
    return " ".join(ascii_lower(w) for w in words)


def read_stream(stream: TextIO) -> str:
    """Read all of 'stream', trimmed and lowercased."""
    return ascii_lower(stream.read().strip())
