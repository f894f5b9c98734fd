"""Word wrapping for the entry fields.

The same wrap is used to paint a field and to find where the cursor
lands, so both always agree on which row a character is on.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class TokenKind(Enum):
    """Kinds of token a wrapped row is built from."""

    WORD = "word"
    SPACE = "space"
    OVERFLOW = "overflow"  # cell left empty by a word pushed to the next row
    BREAK = "break"  # space swallowed at the end of a row


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str = ""

    @classmethod
    def word(cls, text: str) -> Token:
        return cls(TokenKind.WORD, text)

    @property
    def display(self) -> str:
        """What the token paints on screen."""
        if self.kind is TokenKind.WORD:
            return self.text
        if self.kind is TokenKind.SPACE:
            return " "
        return ""

    @property
    def char_count(self) -> int:
        """How many characters of the source text the token stands for."""
        if self.kind is TokenKind.WORD:
            return len(self.text)
        if self.kind is TokenKind.OVERFLOW:
            return 0
        return 1


SPACE = Token(TokenKind.SPACE, " ")
OVERFLOW = Token(TokenKind.OVERFLOW)
BREAK = Token(TokenKind.BREAK)


class WrappedText(NamedTuple):
    """Result of wrap(): tokens per visual row, and the index of the last row."""

    line_map: dict[int, list[Token]]
    final_line: int

    def rows(self) -> list[str]:
        """Rendered text of each row, top to bottom."""
        return [
            "".join(t.display for t in self.line_map[r])
            for r in range(self.final_line + 1)
        ]

    def row_counts(self) -> list[int]:
        """Number of source characters on each row."""
        return [
            sum(t.char_count for t in self.line_map[r])
            for r in range(self.final_line + 1)
        ]

    def row_starts(self) -> list[int]:
        """Source index of the first character on each row."""
        starts: list[int] = []
        offset = 0
        for count in self.row_counts():
            starts.append(offset)
            offset += count
        return starts


def wrap(text: str, width: int) -> WrappedText:
    """Wrap *text* into rows of at most *width* cells.

    A space that would start a new row is swallowed. A word that runs
    past the end of a row is moved whole to the next row, leaving one
    OVERFLOW placeholder per moved character behind. A word longer than
    a full row is broken where the row ends.
    """
    width = max(1, width)
    line_map: dict[int, list[Token]] = {0: []}
    row = 0
    col = 0
    word = ""

    for ch in text:
        if ch == " ":
            if word:
                line_map[row].append(Token.word(word))
                word = ""
            line_map[row].append(SPACE)
        else:
            word += ch
        col += 1

        next_row = (row * width + col) // width
        if next_row in line_map:
            continue
        line_map[next_row] = []

        if ch == " ":
            line_map[row][-1] = BREAK
            col = 0
        elif len(word) < col:
            line_map[row].extend([OVERFLOW] * len(word))
            col = len(word)
        else:
            line_map[row].append(Token.word(word))
            word = ""
            col = 0
        row = next_row

    if word:
        line_map[row].append(Token.word(word))
    return WrappedText(line_map, row)


def cursor_position(index: int, wrapped: WrappedText) -> tuple[int, int]:
    """Map a source character index to a (row, column) on screen.

    Walks the rows subtracting each row's character count. An index on a
    row boundary lands at the start of the next row, so the cursor never
    paints past *width*. Anything past the last row is clamped to its end.
    """
    remaining = max(0, index)
    counts = wrapped.row_counts()
    for row, count in enumerate(counts[:-1]):
        if remaining < count:
            return row, remaining
        remaining -= count
    return wrapped.final_line, min(remaining, counts[-1])
