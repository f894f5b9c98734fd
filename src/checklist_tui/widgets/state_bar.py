"""Bar showing the active display filter, sort order and tag filter."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text
from textual.widget import Widget

from checklist_tui import theme
from checklist_tui.models import Settings
from checklist_tui.view import TaskView


class StateBar(Widget):
    """Display filter, sort and tag filter as chips."""

    DEFAULT_CSS = """
    StateBar {
        height: 3;
        padding: 0 1;
        background: $surface;
        border: round $surface-lighten-2;
        border-title-align: left;
    }
    """

    def __init__(self, settings: Settings, view: TaskView, id: str | None = None) -> None:
        super().__init__(id=id)
        self._settings = settings
        self._view = view

    def on_mount(self) -> None:
        self.border_title = "State"

    def render(self) -> Text:
        dark = self.app.current_theme.dark
        display = self._settings.display_filter
        arrow = "↓" if self._settings.urgency_sort_desc else "↑"

        text = Text(no_wrap=True, overflow="ellipsis")
        text.append("Show: ", Style(dim=True))
        text.append(
            f" {display.value} ",
            Style.parse(theme.FILTER_COLORS[display].resolve(dark)) + Style(reverse=True),
        )
        text.append("  Sort: ", Style(dim=True))
        text.append(f" Urgency {arrow} ", Style(reverse=True))
        if self._view.tag_filter:
            text.append("  Tag: ", Style(dim=True))
            text.append(
                f" {self._view.tag_filter} ",
                Style.parse(theme.TAG_HIGHLIGHT.resolve(dark)),
            )
        return text
