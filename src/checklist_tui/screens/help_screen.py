"""Help modal screen showing keybindings."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import OptionList, Static
from textual.widgets.option_list import Option


HELP_ITEMS: list[tuple[str, str, str]] = [
    # (key_display, description, action_name_or_empty)
    # -- List --
    ("↑ / k", "Previous task", ""),
    ("↓ / j", "Next task", ""),
    ("g / Home", "First task", ""),
    ("G / End", "Last task", ""),
    ("h", "This help", ""),
    ("x", "Quit", "quit_app"),
    # -- Tasks --
    ("a", "Add task", "add_task"),
    ("u", "Update selected task", "update_task"),
    ("d", "Delete selected task", "delete_task"),
    ("q a", "Quick add (name only)", "quick_add"),
    ("q c", "Toggle completed", "toggle_complete"),
    # -- View --
    ("f", "Cycle display filter", "cycle_filter"),
    ("s", "Toggle urgency sort", "toggle_sort"),
    ("/", "Filter by tag", "tag_filter"),
    ("v", "Cycle layout", "cycle_layout"),
    ("Ctrl+← / →", "Shrink / grow list pane", ""),
    # -- Entry wizard --
    ("Enter", "Next field / add tag", ""),
    ("Shift+↑", "Previous field", ""),
    ("Shift+← / →", "Extend selection", ""),
    ("Ctrl+A", "Select all", ""),
    ("1-4", "Choose urgency / status", ""),
    ("↓ (tags)", "Pick a tag to delete", ""),
    ("Esc", "Cancel / Close modal", ""),
]


class HelpScreen(ModalScreen[str]):
    """Modal screen showing keybindings as a selectable list."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("h", "close", "Close"),
    ]

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }
    #help-container {
        width: 64;
        max-height: 80%;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }
    #help-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }
    #help-list {
        height: auto;
        max-height: 100%;
    }
    #help-list > .option-list--option-highlighted {
        background: $accent;
        color: $text;
    }
    """

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="help-container"):
            yield Static(
                "[bold]Keybindings[/bold]  (Enter to execute)", id="help-title"
            )
            ol = OptionList(id="help-list")
            for key_display, desc, action in HELP_ITEMS:
                label = f"  {key_display:<14} {desc}"
                ol.add_option(Option(label, id=action if action else None))
            yield ol

    def on_mount(self) -> None:
        self.set_timer(0.01, self._focus_list)

    def _focus_list(self) -> None:
        self.query_one("#help-list", OptionList).focus()

    def on_option_list_option_selected(
        self, event: OptionList.OptionSelected
    ) -> None:
        self.dismiss(event.option.id or "")

    def action_close(self) -> None:
        self.dismiss("")
