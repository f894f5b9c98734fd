"""Quick action chooser opened by the ``q`` prefix key."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Static

QUICK_ACTIONS: list[tuple[str, str, str]] = [
    # (key, action, label)
    ("a", "quick_add", "Quick add"),
    ("c", "toggle_complete", "Toggle completed"),
]


class QuickActionScreen(ModalScreen[str]):
    """Waits for one key and dismisses with the matching action name ("" to cancel)."""

    BINDINGS = [
        *((key, f"choose('{action}')", label) for key, action, label in QUICK_ACTIONS),
        ("escape", "choose('')", "Cancel"),
        ("q", "choose('')", "Cancel"),
    ]

    DEFAULT_CSS = """
    QuickActionScreen {
        align: center bottom;
    }
    #quick-container {
        width: 40;
        height: auto;
        background: $surface;
        border: round $accent;
        padding: 0 1;
        margin-bottom: 2;
    }
    """

    def compose(self) -> ComposeResult:
        lines = [f"[bold]{key}[/bold]  {label}" for key, _, label in QUICK_ACTIONS]
        with Vertical(id="quick-container"):
            yield Static("[dim]Quick action[/dim]")
            yield Static("\n".join(lines))

    def action_choose(self, action: str) -> None:
        self.dismiss(action)
