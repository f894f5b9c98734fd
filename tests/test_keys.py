"""Tests for mapping terminal key names onto the logical key alphabet."""

import pytest

from checklist_tui.keys import Key, KeyCode


@pytest.mark.parametrize(
    "name, character, expected",
    [
        ("a", "a", Key(KeyCode.CHAR, "a")),
        ("space", " ", Key(KeyCode.CHAR, " ")),
        ("enter", "\r", Key(KeyCode.ENTER)),
        ("escape", "\x1b", Key(KeyCode.ESCAPE)),
        ("backspace", "\x08", Key(KeyCode.BACKSPACE)),
        ("home", None, Key(KeyCode.HOME)),
        ("shift+left", None, Key(KeyCode.LEFT, shift=True)),
        ("shift+up", None, Key(KeyCode.UP, shift=True)),
        ("ctrl+right", None, Key(KeyCode.RIGHT, ctrl=True)),
        ("ctrl+a", "\x01", Key(KeyCode.CHAR, "a", ctrl=True)),
        ("ü", "ü", Key(KeyCode.CHAR, "ü")),
    ],
)
def test_parse(name, character, expected):
    assert Key.parse(name, character) == expected


def test_parse_unknown_key():
    assert Key.parse("f5", None) is None
    assert Key.parse("tab", "\t") is None


def test_is_char():
    assert Key.char_key("d").is_char("d")
    assert not Key.char_key("d").is_char("x")
    assert not Key(KeyCode.CHAR, "d", ctrl=True).is_char("d")
