"""Logical key alphabet consumed by the entry wizard."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from textual import events


class KeyCode(Enum):
    """Logical keys, independent of the terminal's key names."""

    CHAR = "char"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"


_NAMED = {code.value: code for code in KeyCode if code is not KeyCode.CHAR}


@dataclass(frozen=True)
class Key:
    """A key press. ``shift`` is the secondary modifier, ``ctrl`` the primary."""

    code: KeyCode
    char: str = ""
    shift: bool = False
    ctrl: bool = False

    @classmethod
    def char_key(cls, char: str) -> Key:
        return cls(KeyCode.CHAR, char)

    @classmethod
    def parse(cls, name: str, character: str | None = None) -> Key | None:
        """Build a Key from a Textual key name such as ``shift+left``.

        Returns None for keys outside the alphabet.
        """
        *mods, base = name.split("+")
        shift = "shift" in mods
        ctrl = "ctrl" in mods
        if base in _NAMED:
            return cls(_NAMED[base], shift=shift, ctrl=ctrl)
        if ctrl and len(base) == 1:
            return cls(KeyCode.CHAR, base, ctrl=True)
        if character and character.isprintable():
            return cls.char_key(character)
        if base == "space":
            return cls.char_key(" ")
        return None

    @classmethod
    def from_event(cls, event: events.Key) -> Key | None:
        return cls.parse(event.key, event.character)

    def is_char(self, char: str) -> bool:
        return self.code is KeyCode.CHAR and not self.ctrl and self.char == char
