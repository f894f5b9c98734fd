"""Details of the selected task."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text
from textual.widget import Widget

from checklist_tui import theme
from checklist_tui.models import format_datetime
from checklist_tui.view import TaskView


class TaskInfo(Widget):
    """Shows every field of the selected task."""

    DEFAULT_CSS = """
    TaskInfo {
        height: 1fr;
        border: round $surface-lighten-2;
        border-title-align: left;
        padding: 0 1;
    }
    """

    def __init__(self, view: TaskView, id: str | None = None) -> None:
        super().__init__(id=id)
        self._view = view

    def on_mount(self) -> None:
        self.border_title = "Info"

    def render(self) -> Text:
        task = self._view.selected
        if task is None:
            return Text("Nothing selected", style="dim")
        dark = self.app.current_theme.dark
        label = Style(bold=True)

        text = Text()
        text.append(task.name + "\n", Style(bold=True, underline=True))
        text.append("Status:   ", label)
        text.append(
            f"{task.status_icon} {task.status.value}\n",
            Style.parse(theme.STATUS_COLORS[task.status].resolve(dark)),
        )
        text.append("Urgency:  ", label)
        text.append(
            f"{task.urgency_icon} {task.urgency.value}\n",
            Style.parse(theme.URGENCY_COLORS[task.urgency].resolve(dark)),
        )
        text.append("Added:    ", label)
        text.append(format_datetime(task.created_at) + "\n")
        if task.completed_at is not None:
            text.append("Done:     ", label)
            text.append(format_datetime(task.completed_at) + "\n")
        text.append("Tags:     ", label)
        tag_style = Style.parse(theme.TAG.resolve(dark))
        for tag in task.sorted_tags:
            text.append(f"[{tag}] ", tag_style)
        text.append("\n\n")
        text.append("Description\n", label)
        text.append((task.description or "-") + "\n\n")
        text.append("Latest\n", label)
        text.append(task.latest or "-")
        return text
