from __future__ import annotations

import logging
import sys
from typing import List, Optional

import typer

from ciphers import __version__
from ciphers.classical import register_all
from ciphers.classical.common import parse_shift
from ciphers.core.errors import CipherError
from ciphers.core.registry import apply_cipher
from ciphers.core.selection import Atbash, Caesar, CipherSelection, Shift, Vigenere
from ciphers.core.utils import ascii_lower, join_words, read_stream

app = typer.Typer(
    help="Offers decryption and encryption of simple substitution ciphers.",
    add_completion=False,
)

logger = logging.getLogger(__name__)


def _configure_logging(log_level: str) -> None:
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level '{log_level}'.", param_hint="--log-level")
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _select_cipher(
    caesar: bool, atbash: bool, vigenere: Optional[str], shift: Optional[str]
) -> Optional[CipherSelection]:
    chosen = [
        name
        for name, on in (
            ("--caesar", caesar),
            ("--atbash", atbash),
            ("--vigenere", vigenere is not None),
            ("--shift", shift is not None),
        )
        if on
    ]
    if len(chosen) > 1:
        raise typer.BadParameter(f"Choose at most one cipher, got: {', '.join(chosen)}.")

    if caesar:
        return Caesar()
    if atbash:
        return Atbash()
    if vigenere is not None:
        return Vigenere(key=ascii_lower(vigenere))
    if shift is not None:
        return Shift(by=parse_shift(shift))
    return None


@app.command(epilog="Use pipes to apply multiple ciphers!")
def run(
    text: Optional[List[str]] = typer.Argument(None, help="The text to apply the ciphers to (stdin if omitted)."),
    encrypt: bool = typer.Option(False, "--encrypt", "-e", help="Applies the encryption process to the text."),
    caesar: bool = typer.Option(False, "--caesar", "-c", help="Uses the caesar cipher, which is a shift cipher of 3."),
    atbash: bool = typer.Option(False, "--atbash", "-a", help="Uses the atbash cipher."),
    vigenere: Optional[str] = typer.Option(None, "--vigenere", "-v", metavar="KEY", help="Uses the vigenere cipher."),
    shift: Optional[str] = typer.Option(
        None, "--shift", "-s", metavar="BY", help="Shift cipher with custom value (may be negative)."
    ),
    log_level: str = typer.Option("WARNING", "--log-level", envvar="CIPHERS_LOG_LEVEL", help="Logging level."),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
):
    """Encrypt or decrypt TEXT with one classical substitution cipher."""
    _configure_logging(log_level)
    # Register plugins exactly once per CLI run
    register_all()

    try:
        selection = _select_cipher(caesar, atbash, vigenere, shift)

        ciphertext = join_words(text)
        if not ciphertext:
            ciphertext = read_stream(sys.stdin)

        result = apply_cipher(ciphertext, selection, encrypt=encrypt)
    except CipherError as e:
        logger.debug("Cipher failed", exc_info=True)
        typer.echo(f"Application error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(result)


def main():
    app()


if __name__ == "__main__":
    main()
