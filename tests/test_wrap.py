"""Tests for word wrapping and cursor placement."""

import pytest

from checklist_tui.wrap import TokenKind, cursor_position, wrap


def _assert_round_trip(text: str, width: int) -> None:
    wrapped = wrap(text, width)
    rows = wrapped.rows()
    for i, ch in enumerate(text):
        row, col = cursor_position(i, wrapped)
        assert 0 <= row <= wrapped.final_line
        if col < len(rows[row]):
            assert rows[row][col] == ch, (text, width, i)
        else:
            # Only a space swallowed at a row end has no cell of its own.
            assert ch == " ", (text, width, i)


class TestWrap:
    def test_empty(self):
        wrapped = wrap("", 10)
        assert wrapped.rows() == [""]
        assert wrapped.final_line == 0
        assert cursor_position(0, wrapped) == (0, 0)

    def test_fits_on_one_row(self):
        assert wrap("hi there", 20).rows() == ["hi there"]

    def test_space_at_row_end_is_swallowed(self):
        wrapped = wrap("abcd efgh", 5)
        assert wrapped.rows() == ["abcd", "efgh"]
        assert wrapped.line_map[0][-1].kind is TokenKind.BREAK
        assert wrapped.row_counts() == [5, 4]

    def test_word_moves_to_next_row(self):
        wrapped = wrap("ab cd", 5)
        assert wrapped.rows() == ["ab ", "cd"]
        kinds = [t.kind for t in wrapped.line_map[0]]
        assert kinds == [
            TokenKind.WORD,
            TokenKind.SPACE,
            TokenKind.OVERFLOW,
            TokenKind.OVERFLOW,
        ]

    def test_long_word_is_broken(self):
        assert wrap("abcdefg", 5).rows() == ["abcde", "fg"]

    def test_width_below_one_is_treated_as_one(self):
        assert wrap("abc", 0).rows() == ["a", "b", "c", ""]

    def test_row_starts(self):
        assert wrap("abcd efgh", 5).row_starts() == [0, 5]


class TestCursorPosition:
    def test_boundary_goes_to_next_row(self):
        wrapped = wrap("abcdefg", 5)
        assert cursor_position(4, wrapped) == (0, 4)
        assert cursor_position(5, wrapped) == (1, 0)

    def test_swallowed_space(self):
        wrapped = wrap("abcd efgh", 5)
        assert cursor_position(4, wrapped) == (0, 4)
        assert cursor_position(5, wrapped) == (1, 0)

    def test_end_of_text(self):
        wrapped = wrap("abcd efgh", 5)
        assert cursor_position(9, wrapped) == (1, 4)

    def test_past_end_is_clamped(self):
        wrapped = wrap("abc", 10)
        assert cursor_position(50, wrapped) == (0, 3)
        assert cursor_position(-2, wrapped) == (0, 0)

    def test_word_exactly_filling_row_leaves_empty_last_row(self):
        wrapped = wrap("abcde", 5)
        assert cursor_position(5, wrapped) == (1, 0)

    @pytest.mark.parametrize("width", [1, 2, 3, 5, 8, 13])
    @pytest.mark.parametrize(
        "text",
        [
            "the quick brown fox jumps over the lazy dog",
            "a bcdefghij k",
            "supercalifragilistic word",
            "two  spaces   here",
            "ünïcödé wörds wräp tóo",
        ],
    )
    def test_round_trip(self, text, width):
        _assert_round_trip(text, width)
