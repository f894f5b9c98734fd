"""Main Textual App for Checklist TUI."""

from __future__ import annotations

from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.screen import ModalScreen
from textual.widgets import Footer, Header, Input, Static

from checklist_tui import theme
from checklist_tui.commands import ChecklistCommandProvider
from checklist_tui.config import save_config
from checklist_tui.errors import ChecklistError
from checklist_tui.models import LIST_WIDTH_STEP, Layout
from checklist_tui.screens.confirm_screen import ConfirmScreen
from checklist_tui.screens.entry_screen import EntryScreen
from checklist_tui.screens.help_screen import HelpScreen
from checklist_tui.screens.quick_screen import QuickActionScreen
from checklist_tui.session import SessionState
from checklist_tui.widgets.state_bar import StateBar
from checklist_tui.widgets.tag_filter import TagFilterInput
from checklist_tui.widgets.task_info import TaskInfo
from checklist_tui.widgets.task_list import TaskList


class ChecklistApp(App):
    """Checklist TUI Application."""

    TITLE = "Checklist"
    CSS = """
    #main {
        height: 1fr;
        layout: horizontal;
    }
    #side {
        width: 1fr;
        height: 1fr;
    }
    #status-bar {
        dock: bottom;
        height: 1;
        padding: 0 1;
        background: $primary-background;
        color: $text;
    }
    """

    COMMANDS = App.COMMANDS | {ChecklistCommandProvider}

    BINDINGS = [
        Binding("h", "help", "Help"),
        Binding("x", "quit_app", "Quit"),
        # Tasks
        Binding("a", "add_task", "Add"),
        Binding("u", "update_task", "Update"),
        Binding("d", "delete_task", "Delete"),
        Binding("q", "quick_actions", "Quick"),
        # View
        Binding("f", "cycle_filter", "Filter"),
        Binding("s", "toggle_sort", "Sort"),
        Binding("slash", "tag_filter", "Tags"),
        Binding("v", "cycle_layout", "Layout", show=False),
        Binding("ctrl+left", "shrink_list", show=False),
        Binding("ctrl+right", "grow_list", show=False),
        # Selection
        Binding("j,down", "cursor_down", show=False),
        Binding("k,up", "cursor_up", show=False),
        Binding("g,home", "cursor_first", show=False),
        Binding("G,end", "cursor_last", show=False),
    ]

    # Actions that only make sense on the task list, not inside a dialog.
    _LIST_ACTIONS = frozenset({
        "help", "quit_app", "add_task", "update_task", "delete_task",
        "quick_actions", "cycle_filter", "toggle_sort", "tag_filter",
        "cycle_layout", "shrink_list", "grow_list", "cursor_down",
        "cursor_up", "cursor_first", "cursor_last",
    })

    def __init__(self, session: SessionState, config_dir: Path | None = None) -> None:
        super().__init__()
        self.session = session
        self.config_dir = config_dir

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="main"):
            yield TaskList(self.session.view, id="task-list")
            with Vertical(id="side"):
                yield StateBar(self.session.settings, self.session.view, id="state-bar")
                yield TaskInfo(self.session.view, id="task-info")
        yield TagFilterInput(placeholder="Tag filter (Enter: close, Esc: clear)", id="tag-filter")
        yield Static("", id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        if self.config_dir is not None:
            theme.load_theme(self.config_dir)
        self._apply_layout()
        self.query_one(TaskList).focus()
        self._refresh_ui()

    def on_resize(self) -> None:
        self._apply_layout()

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        if action in self._LIST_ACTIONS and (
            self.session.is_editing or isinstance(self.screen, ModalScreen)
        ):
            return False
        return True

    # ── UI Refresh ──

    def _refresh_ui(self) -> None:
        try:
            self.query_one(TaskList).update_title()
        except Exception:
            pass
        for widget_type in (TaskList, TaskInfo, StateBar):
            try:
                self.query_one(widget_type).refresh()
            except Exception:
                pass
        self._update_status_bar()

    def _update_status_bar(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except Exception:
            return
        view = self.session.view
        parts = [f"{len(view)} shown"]
        if view.selected_index is not None:
            parts[0] = f"{view.selected_index + 1}/{len(view)}"
        parts.append("a add  u update  d delete  q quick  f filter  s sort  / tags  h help  x quit")
        bar.update(" | ".join(parts))

    def _apply_layout(self) -> None:
        try:
            main = self.query_one("#main", Container)
            task_list = self.query_one(TaskList)
        except Exception:
            return
        settings = self.session.settings
        if settings.layout is Layout.SMART:
            horizontal = self.size.width >= self.size.height * 2
        else:
            horizontal = settings.layout is Layout.HORIZONTAL
        main.styles.layout = "horizontal" if horizontal else "vertical"
        if horizontal:
            task_list.styles.width = f"{settings.list_width}%"
            task_list.styles.height = "1fr"
        else:
            task_list.styles.width = "100%"
            task_list.styles.height = f"{settings.list_width}%"

    def _save_settings(self) -> None:
        if self.config_dir is None:
            return
        try:
            save_config(self.config_dir, self.session.settings)
        except ChecklistError as e:
            self.notify(str(e), severity="error")

    # ── Event handlers ──

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "tag-filter":
            self._guarded(self.session.set_tag_filter, event.value)
            self._refresh_ui()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "tag-filter":
            self._close_tag_filter()

    def on_tag_filter_input_closed(self, event: TagFilterInput.Closed) -> None:
        self._close_tag_filter()

    def _close_tag_filter(self) -> None:
        self.query_one(TagFilterInput).display = False
        self.query_one(TaskList).focus()
        self._refresh_ui()

    def _guarded(self, func, *args):
        """Run a session operation, reporting store failures instead of raising."""
        try:
            return func(*args)
        except ChecklistError as e:
            self.notify(str(e), severity="error")
            return None

    # ── Actions ──

    def action_help(self) -> None:
        self.push_screen(HelpScreen(), callback=self._on_chosen_action)

    async def _on_chosen_action(self, action: str) -> None:
        if action:
            await self.run_action(action)

    def action_quit_app(self) -> None:
        self._save_settings()
        self.exit()

    # Selection
    def action_cursor_down(self) -> None:
        self.session.view.select_next()
        self._refresh_ui()

    def action_cursor_up(self) -> None:
        self.session.view.select_previous()
        self._refresh_ui()

    def action_cursor_first(self) -> None:
        self.session.view.select_first()
        self._refresh_ui()

    def action_cursor_last(self) -> None:
        self.session.view.select_last()
        self._refresh_ui()

    # Entry wizard
    def action_add_task(self) -> None:
        self.session.start_add()
        self.push_screen(EntryScreen(self.session), callback=self._on_entry_closed)

    def action_quick_add(self) -> None:
        self.session.start_quick_add()
        self.push_screen(EntryScreen(self.session), callback=self._on_entry_closed)

    def action_update_task(self) -> None:
        if not self.session.start_update():
            self.notify("No task selected", severity="warning")
            return
        self.push_screen(EntryScreen(self.session), callback=self._on_entry_closed)

    def _on_entry_closed(self, saved: bool) -> None:
        if saved and self.session.error:
            self.notify(self.session.error, severity="warning")
        elif saved:
            self.notify("Task saved")
        else:
            self.session.cancel()
        self._refresh_ui()

    # Task actions
    def action_delete_task(self) -> None:
        task = self.session.view.selected
        if task is None:
            return
        self.push_screen(
            ConfirmScreen(f"Delete '{task.name}'?"),
            callback=lambda confirmed: self._delete_selected() if confirmed else None,
        )

    def _delete_selected(self) -> None:
        task = self._guarded(self.session.delete_selected)
        if task is not None:
            self.notify(f"Deleted '{task.name}'")
        self._refresh_ui()

    def action_quick_actions(self) -> None:
        self.push_screen(QuickActionScreen(), callback=self._on_chosen_action)

    def action_toggle_complete(self) -> None:
        self._guarded(self.session.toggle_complete)
        self._refresh_ui()

    # View
    def action_cycle_filter(self) -> None:
        self._guarded(self.session.cycle_display_filter)
        self._save_settings()
        self._refresh_ui()

    def action_toggle_sort(self) -> None:
        self._guarded(self.session.toggle_sort)
        self._save_settings()
        self._refresh_ui()

    def action_tag_filter(self) -> None:
        self.query_one(TagFilterInput).open(self.session.view.tag_filter)

    def action_cycle_layout(self) -> None:
        settings = self.session.settings
        settings.layout = settings.layout.next()
        self._apply_layout()
        self._save_settings()
        self.notify(f"Layout: {settings.layout.value}")

    def action_shrink_list(self) -> None:
        self.session.settings.resize_list(-LIST_WIDTH_STEP)
        self._apply_layout()
        self._save_settings()

    def action_grow_list(self) -> None:
        self.session.settings.resize_list(LIST_WIDTH_STEP)
        self._apply_layout()
        self._save_settings()

    def action_init_theme(self) -> None:
        if self.config_dir is None:
            self.notify("No config directory (in-memory session)", severity="warning")
            return
        try:
            dest = theme.init_theme(self.config_dir)
        except FileExistsError:
            self.notify("theme.yaml already exists", severity="warning")
            return
        self.notify(f"Created {dest}")
