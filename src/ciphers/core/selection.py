from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class Caesar:
    name: ClassVar[str] = "caesar"


@dataclass(frozen=True)
class Atbash:
    name: ClassVar[str] = "atbash"


@dataclass(frozen=True)
class Vigenere:
    name: ClassVar[str] = "vigenere"

    key: str


@dataclass(frozen=True)
class Shift:
    name: ClassVar[str] = "shift"

    by: int


# Exactly one cipher per invocation; None means "no cipher selected".
CipherSelection = Union[Caesar, Atbash, Vigenere, Shift]
