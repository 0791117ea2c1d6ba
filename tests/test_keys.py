import string

import pytest

from versionview import keys
from versionview.keys import key_name, rune_key


@pytest.mark.parametrize(
    ("key", "name"),
    [
        (keys.KEY_HELP, "?"),
        (keys.KEY_SLASH, "/"),
        (keys.KEY_SPACE, "space"),
        (keys.KEY_COLON, ":"),
        (keys.KEY_COLON_Q, ":q"),
    ],
)
def test_custom_key_names(key, name):
    assert key_name(key) == name


@pytest.mark.parametrize("char", list(string.ascii_lowercase + string.digits))
def test_plain_characters_round_trip(char):
    assert key_name(rune_key(char)) == char


@pytest.mark.parametrize("char", list(string.ascii_uppercase))
def test_shift_letters_are_named(char):
    assert key_name(rune_key(char)) == "Shift-" + char


def test_letter_constants_match_typed_characters():
    assert rune_key("a") == keys.KEY_A
    assert rune_key("z") == keys.KEY_Z
    assert rune_key("G") == keys.KEY_SHIFT_G
    assert rune_key("0") == keys.KEY_0
    assert rune_key("9") == keys.KEY_9


def test_unknown_key_has_empty_name():
    assert key_name(100000) == ""


@pytest.mark.parametrize("bad", ["", "ab"])
def test_rune_key_rejects_non_single_characters(bad):
    with pytest.raises(ValueError):
        rune_key(bad)


def test_logo_line_count_within_limits():
    line_count = len(keys.LOGO.split("\n"))
    assert 2 <= line_count <= 6