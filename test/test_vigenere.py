import logging

import pytest

from ciphers.classical.polyalphabetic.vigenere import vigenere


def test_vigenere_known_value():
    assert vigenere("attackatdawn", "lemon", True) == "lxfopvefrnhr"
    assert vigenere("lxfopvefrnhr", "lemon", False) == "attackatdawn"


def test_key_does_not_advance_on_non_letters():
    # 'a' takes x, the space is skipped, 'b' takes y (not x again)
    assert vigenere("a b", "xy", True) == "x z"


def test_punctuation_and_digits_unchanged():
    assert vigenere("attack at dawn!", "lemon", True) == "lxfopv ef rnhr!"


@pytest.mark.parametrize("key", ["a", "key", "lemon", "zzz", "abcdefghijklmnopqrstuvwxyz"])
def test_roundtrip(key):
    s = "the quick brown fox jumps over the lazy dog"
    assert vigenere(vigenere(s, key, True), key, False) == s


def test_key_of_a_is_identity():
    assert vigenere("hello", "a", True) == "hello"


def test_non_letter_key_bytes_are_ignored():
    assert vigenere("attack", "le mon!", True) == vigenere("attack", "lemon", True)


@pytest.mark.parametrize("key", ["", "123", "!!"])
def test_key_without_letters_leaves_text_unchanged(key, caplog):
    with caplog.at_level(logging.WARNING):
        assert vigenere("hello world", key, True) == "hello world"
    assert "no a-z letters" in caplog.text


def test_shift_tables_are_cached_per_call(monkeypatch):
    from ciphers.classical.polyalphabetic import vigenere as module

    built = []
    real = module.build_shift_table

    def counting(shift):
        built.append(shift)
        return real(shift)

    monkeypatch.setattr(module, "build_shift_table", counting)
    module.vigenere("aaaaaaaaaa", "ab", True)
    assert sorted(built) == [0, 1]


def test_non_ascii_text_passes_through():
    assert vigenere("café", "b", True) == "dbgé"
