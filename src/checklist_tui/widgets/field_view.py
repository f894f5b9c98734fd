"""Wrapped rendering of the field being edited in the entry wizard."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text
from textual.geometry import Size
from textual.widget import Widget

from checklist_tui import theme
from checklist_tui.text_buffer import TextBuffer
from checklist_tui.wrap import cursor_position, wrap


def render_buffer(
    buffer: TextBuffer,
    width: int,
    cursor_style: Style,
    selection_style: Style,
    show_cursor: bool = True,
) -> Text:
    """Paint *buffer* wrapped to *width*, with its selection and a cursor cell."""
    wrapped = wrap(buffer.content, width)
    rows = wrapped.rows()
    starts = wrapped.row_starts()
    cursor_row, cursor_col = cursor_position(buffer.cursor, wrapped)
    selected = buffer.selected_range

    text = Text(no_wrap=True)
    for r, row_text in enumerate(rows):
        if r:
            text.append("\n")
        line = Text(row_text)
        if selected is not None:
            start, end = selected
            lo = max(start, starts[r]) - starts[r]
            hi = min(end, starts[r] + len(row_text)) - starts[r]
            if lo < hi:
                line.stylize(selection_style, lo, hi)
        if show_cursor and r == cursor_row:
            if cursor_col < len(row_text):
                line.stylize(cursor_style, cursor_col, cursor_col + 1)
            else:
                line.append(" ", cursor_style)
        text.append_text(line)
    return text


class FieldView(Widget):
    """Shows one TextBuffer with word wrap, cursor and selection."""

    DEFAULT_CSS = """
    FieldView {
        height: auto;
        min-height: 1;
        padding: 0 1;
        background: $boost;
    }
    """

    def __init__(self, id: str | None = None) -> None:
        super().__init__(id=id)
        self.buffer: TextBuffer | None = None

    def show(self, buffer: TextBuffer | None) -> None:
        self.buffer = buffer
        self.display = buffer is not None
        self.refresh(layout=True)

    def get_content_height(self, container: Size, viewport: Size, width: int) -> int:
        if self.buffer is None:
            return 1
        return wrap(self.buffer.content, width).final_line + 1

    def render(self) -> Text:
        if self.buffer is None:
            return Text()
        dark = self.app.current_theme.dark
        return render_buffer(
            self.buffer,
            self.content_size.width,
            Style.parse(theme.CURSOR.resolve(dark)),
            Style.parse(theme.SELECTION.resolve(dark)),
        )
