"""Editable single-line text with a cursor and an optional selection.

All positions are character indices (code points), never byte offsets.
Out-of-range positions are clamped rather than rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Cursor movement direction."""

    LEFT = -1
    RIGHT = 1


@dataclass
class Selection:
    """A selection anchored at *anchor*, reaching *extent* characters away.

    The extent is signed so the selection can grow in either direction
    from the same anchor.
    """

    anchor: int
    extent: int = 0

    @property
    def range(self) -> tuple[int, int]:
        end = self.anchor + self.extent
        return min(self.anchor, end), max(self.anchor, end)


class TextBuffer:
    """One editable string plus cursor and selection state."""

    def __init__(self, content: str = "", cursor: int | None = None) -> None:
        self.content = content
        self.cursor = len(content) if cursor is None else cursor
        self.selection: Selection | None = None
        self._clamp()

    def __repr__(self) -> str:
        return f"TextBuffer({self.content!r}, cursor={self.cursor})"

    def __len__(self) -> int:
        return len(self.content)

    def _clamp(self) -> None:
        self.cursor = max(0, min(self.cursor, len(self.content)))

    @property
    def has_selection(self) -> bool:
        """True when a non-empty selection is active."""
        return self.selection is not None and self.selection.extent != 0

    @property
    def selected_range(self) -> tuple[int, int] | None:
        if not self.has_selection:
            return None
        start, end = self.selection.range
        length = len(self.content)
        return max(0, min(start, length)), max(0, min(end, length))

    @property
    def selected_text(self) -> str:
        rng = self.selected_range
        if rng is None:
            return ""
        return self.content[rng[0]:rng[1]]

    # ── Editing ──

    def _delete_selection(self) -> bool:
        rng = self.selected_range
        self.selection = None
        if rng is None:
            return False
        start, end = rng
        self.content = self.content[:start] + self.content[end:]
        self.cursor = start
        return True

    def insert_char(self, char: str) -> None:
        """Insert *char* at the cursor, replacing any selection first."""
        self._delete_selection()
        self._clamp()
        self.content = self.content[:self.cursor] + char + self.content[self.cursor:]
        self.cursor += len(char)

    def delete_backward(self) -> None:
        """Delete the selection, or the character before the cursor."""
        if self._delete_selection():
            return
        self._clamp()
        if self.cursor > 0:
            self.content = self.content[:self.cursor - 1] + self.content[self.cursor:]
            self.cursor -= 1

    # ── Movement ──

    def move_left(self) -> None:
        rng = self.selected_range
        self.selection = None
        if rng is not None:
            self.cursor = rng[0]
        else:
            self.cursor -= 1
        self._clamp()

    def move_right(self) -> None:
        rng = self.selected_range
        self.selection = None
        if rng is not None:
            self.cursor = rng[1]
        else:
            self.cursor += 1
        self._clamp()

    def move_home(self) -> None:
        self.selection = None
        self.cursor = 0

    def move_end(self) -> None:
        self.selection = None
        self.cursor = len(self.content)

    # ── Selection ──

    def extend_selection(self, direction: Direction) -> None:
        """Grow or shrink the selection by one character in *direction*."""
        if self.selection is None:
            self.selection = Selection(anchor=self.cursor)
        self.cursor += direction.value
        self._clamp()
        self.selection.extent = self.cursor - self.selection.anchor

    def select_all(self) -> None:
        self.selection = Selection(anchor=0, extent=len(self.content))
        self.cursor = 0

    # ── Whole-content ──

    def set_content(self, content: str) -> None:
        """Replace the content and put the cursor at its end."""
        self.content = content
        self.cursor = len(content)
        self.selection = None

    def clear(self) -> None:
        self.set_content("")
