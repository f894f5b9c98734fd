"""Input for the tag substring filter."""

from __future__ import annotations

from textual.message import Message
from textual.widgets import Input


class TagFilterInput(Input):
    """Docked input; Enter closes it, Escape clears the filter and closes it."""

    BINDINGS = [("escape", "clear_filter", "Clear")]

    DEFAULT_CSS = """
    TagFilterInput {
        dock: bottom;
        height: 1;
        border: none;
        padding: 0 1;
        display: none;
    }
    """

    class Closed(Message):
        """Emitted when the input should be hidden."""

    def open(self, value: str) -> None:
        self.value = value
        self.display = True
        self.focus()

    def action_clear_filter(self) -> None:
        self.value = ""
        self.post_message(self.Closed())
