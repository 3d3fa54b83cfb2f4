import string

import pytest

from ciphers.classical.monoalphabetic.atbash import atbash
from ciphers.classical.monoalphabetic.caesar import caesar, shift


def test_shift_simple():
    assert shift("abc", 1) == "bcd"


def test_shift_wraps():
    assert shift("xyz", 1) == "yza"


def test_shift_leaves_non_letters_alone():
    assert shift("hello, world! 123", 3) == "khoor, zruog! 123"


@pytest.mark.parametrize("n", range(-25, 26))
def test_shift_is_undone_by_opposite_shift(n):
    s = string.ascii_lowercase + "thequickbrownfox"
    assert shift(shift(s, n), -n) == s


def test_shift_by_large_amount_reduces_mod_26():
    assert shift("abc", 27) == shift("abc", 1)


def test_caesar_encrypt_and_decrypt():
    assert caesar("attack at dawn", True) == "dwwdfn dw gdzq"
    assert caesar("dwwdfn dw gdzq", False) == "attack at dawn"


def test_caesar_roundtrip():
    s = "veni vidi vici"
    assert caesar(caesar(s, True), False) == s


def test_atbash_known_value():
    assert atbash("attack") == "zggzxp"


def test_atbash_is_an_involution():
    for s in ("attack", "hello, world! 123", string.ascii_lowercase):
        assert atbash(atbash(s)) == s


def test_empty_text():
    assert shift("", 5) == ""
    assert atbash("") == ""
