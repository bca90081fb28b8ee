import string

import pytest

from minengine.keycodes import Key


def test_documented_values():
    assert Key(32) is Key.SPACE
    assert Key(256) is Key.ESCAPE
    assert Key(348) is Key.MENU


@pytest.mark.parametrize("letter", list(string.ascii_uppercase))
def test_letters_match_ascii(letter):
    assert Key(ord(letter)) is Key[letter]


@pytest.mark.parametrize("digit", list(string.digits))
def test_digits_match_ascii(digit):
    assert Key(ord(digit)) is Key[f"D{digit}"]


@pytest.mark.parametrize(
    "name, char",
    [
        ("APOSTROPHE", "'"), ("COMMA", ","), ("MINUS", "-"), ("PERIOD", "."),
        ("SLASH", "/"), ("SEMICOLON", ";"), ("EQUAL", "="), ("LEFT_BRACKET", "["),
        ("BACKSLASH", "\\"), ("RIGHT_BRACKET", "]"), ("GRAVE_ACCENT", "`"),
    ],
)
def test_punctuation_matches_ascii(name, char):
    assert Key(ord(char)) is Key[name]


def test_function_keys_consecutive():
    by_value = [Key(Key.F1.value + offset) for offset in range(25)]
    assert by_value == [Key[f"F{n}"] for n in range(1, 26)]


def test_keypad_digits_consecutive():
    by_value = [Key(Key.KP_0.value + offset) for offset in range(10)]
    assert by_value == [Key[f"KP_{n}"] for n in range(10)]


def test_lookup_by_value():
    assert Key(Key.LEFT_SHIFT.value) is Key.LEFT_SHIFT
    with pytest.raises(ValueError):
        Key(1)


def test_values_unique():
    members = Key.__members__
    canonical = {Key(member.value) for member in members.values()}
    assert len(canonical) == len(members)