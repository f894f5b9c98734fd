"""Command Palette provider for Checklist TUI."""

from __future__ import annotations

from dataclasses import dataclass

from textual.command import Hit, Hits, Provider


@dataclass(frozen=True)
class CommandDef:
    """A single command entry for the palette."""

    display: str
    action: str
    help: str = ""
    category: str = ""


COMMANDS: list[CommandDef] = [
    # -- Tasks --
    CommandDef("Add Task", "add_task", "Add a task field by field (a)", "Tasks"),
    CommandDef("Quick Add", "quick_add", "Add a task by name only (q a)", "Tasks"),
    CommandDef("Update Task", "update_task", "Edit the selected task (u)", "Tasks"),
    CommandDef("Delete Task", "delete_task", "Delete the selected task (d)", "Tasks"),
    CommandDef("Toggle Completed", "toggle_complete", "Completed ↔ Open (q c)", "Tasks"),
    # -- View --
    CommandDef("Cycle Display Filter", "cycle_filter", "All → Completed → Not completed (f)", "View"),
    CommandDef("Toggle Sort", "toggle_sort", "Urgency ascending / descending (s)", "View"),
    CommandDef("Filter by Tag", "tag_filter", "Show tasks with a matching tag (/)", "View"),
    CommandDef("Cycle Layout", "cycle_layout", "Smart → Horizontal → Vertical (v)", "View"),
    CommandDef("Help", "help", "Show keybindings (h)", "View"),
    # -- App --
    CommandDef("Init Theme", "init_theme", "Copy the default theme to the config directory", "App"),
    CommandDef("Quit", "quit_app", "Save settings and quit (x)", "App"),
]


class ChecklistCommandProvider(Provider):
    """Textual Command Palette provider for Checklist actions."""

    async def discover(self) -> Hits:
        """Yield every command."""
        for cmd in COMMANDS:
            yield Hit(
                1.0,
                cmd.display,
                self._make_callback(cmd.action),
                help=cmd.help,
            )

    async def search(self, query: str) -> Hits:
        """Search commands with fuzzy matching."""
        query = query.lower()
        for cmd in COMMANDS:
            searchable = f"{cmd.display} {cmd.help} {cmd.category}".lower()
            if self._fuzzy_match(query, searchable):
                yield Hit(
                    self._score(query, cmd.display.lower()),
                    cmd.display,
                    self._make_callback(cmd.action),
                    help=cmd.help,
                )

    def _make_callback(self, action: str):
        """Create a callback that runs the given action on the app."""
        async def callback() -> None:
            await self.app.run_action(action)
        return callback

    @staticmethod
    def _fuzzy_match(query: str, text: str) -> bool:
        """Check if all characters of query appear in order in text."""
        it = iter(text)
        return all(ch in it for ch in query)

    @staticmethod
    def _score(query: str, text: str) -> float:
        """Score a match: higher is better (closer to 1.0)."""
        if not query:
            return 0.5
        if text == query:
            return 1.0
        if text.startswith(query):
            return 0.9
        if query in text:
            return 0.8
        return 0.7
