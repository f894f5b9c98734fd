"""Task list pane."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text
from textual.widget import Widget

from checklist_tui import theme
from checklist_tui.view import TaskView


class TaskList(Widget):
    """Renders the visible tasks, keeping the selected row on screen."""

    can_focus = True

    DEFAULT_CSS = """
    TaskList {
        height: 1fr;
        width: 50%;
        border: round $surface-lighten-2;
        border-title-align: left;
        padding: 0 1;
    }
    TaskList:focus {
        border: round $accent;
        border-title-color: $accent;
    }
    """

    def __init__(self, view: TaskView, id: str | None = None) -> None:
        super().__init__(id=id)
        self._view = view
        self._offset = 0

    def on_mount(self) -> None:
        self.update_title()

    def update_title(self) -> None:
        self.border_title = f"Tasks ({len(self._view)})"

    def _scroll_window(self, height: int) -> int:
        selected = self._view.selected_index
        if selected is None or height <= 0:
            self._offset = 0
            return 0
        if selected < self._offset:
            self._offset = selected
        elif selected >= self._offset + height:
            self._offset = selected - height + 1
        self._offset = max(0, min(self._offset, max(0, len(self._view) - height)))
        return self._offset

    def render(self) -> Text:
        dark = self.app.current_theme.dark
        tasks = self._view.tasks
        if not tasks:
            return Text("  No tasks  (a: add)", style="dim")

        height = self.content_size.height
        start = self._scroll_window(height)
        text = Text(no_wrap=True, overflow="ellipsis")
        for i, task in enumerate(tasks[start:start + max(height, 1)], start=start):
            if i > start:
                text.append("\n")
            line = Text()
            line.append(
                f"{task.status_icon} ",
                Style.parse(theme.STATUS_COLORS[task.status].resolve(dark)),
            )
            line.append(
                f"{task.urgency_icon} ",
                Style.parse(theme.URGENCY_COLORS[task.urgency].resolve(dark)),
            )
            line.append(task.name, Style(strike=task.is_completed, dim=task.is_completed))
            if i == self._view.selected_index:
                line.stylize(Style(reverse=True, bold=True))
            text.append_text(line)
        return text
