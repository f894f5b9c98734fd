"""Modal task entry wizard."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Static

from checklist_tui import theme
from checklist_tui.keys import Key
from checklist_tui.models import STATUS_KEYS, URGENCY_KEYS
from checklist_tui.session import SessionState, WizardOutcome
from checklist_tui.stages import STAGE_TITLES, STAGING_KEYS, TEXT_STAGES, EntryMode, Stage
from checklist_tui.widgets.field_view import FieldView

_MODE_TITLES = {
    EntryMode.ADD: "New task",
    EntryMode.QUICK_ADD: "Quick add",
    EntryMode.UPDATE: "Update task",
}

_TEXT_HINT = "Enter: next  Shift+↑: back  Shift+←/→: select  Ctrl+A: select all  Esc: cancel"
_CHOICE_HINT = "Press a number to choose  Enter: keep  ←: back  Esc: cancel"
_TAGS_HINT = "Enter: add tag (empty: finish)  ↓: pick tag to delete  Esc: cancel"
_TAGS_HIGHLIGHT_HINT = "←/→: move  d: delete  ↑: back to typing  Enter: finish"
_STAGING_HINT = "Press a number to edit that field  Esc: cancel"


class EntryScreen(ModalScreen[bool]):
    """Feeds key presses to the session's wizard and draws the active stage.

    Dismisses with True once the task is saved, False when cancelled.
    """

    DEFAULT_CSS = """
    EntryScreen {
        align: center middle;
    }
    #entry-container {
        width: 70;
        height: auto;
        max-height: 80%;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }
    #entry-title {
        text-style: bold;
    }
    #entry-steps {
        color: $text-muted;
        margin-bottom: 1;
    }
    #entry-body {
        height: auto;
    }
    #entry-hint {
        color: $text-muted;
        margin-top: 1;
    }
    #entry-error {
        height: auto;
    }
    """

    def __init__(self, session: SessionState) -> None:
        super().__init__()
        self.session = session

    def compose(self) -> ComposeResult:
        with Vertical(id="entry-container"):
            yield Static("", id="entry-title")
            yield Static("", id="entry-steps")
            yield Static("", id="entry-body")
            yield FieldView(id="entry-field")
            yield Static("", id="entry-hint")
            yield Static("", id="entry-error")

    def on_mount(self) -> None:
        self._refresh()

    def on_key(self, event: events.Key) -> None:
        key = Key.from_event(event)
        if key is None:
            return
        event.stop()
        event.prevent_default()
        outcome = self.session.handle_key(key)
        if outcome is WizardOutcome.COMMITTED:
            self.dismiss(True)
        elif outcome is WizardOutcome.CANCELLED:
            self.dismiss(False)
        else:
            self._refresh()

    # ── Rendering ──

    def _refresh(self) -> None:
        wizard, fields = self.session.wizard, self.session.fields
        if wizard is None or fields is None:
            return
        stage = wizard.stage
        self.query_one("#entry-title", Static).update(
            f"{_MODE_TITLES[wizard.mode]}: {STAGE_TITLES[stage]}"
        )
        self.query_one("#entry-steps", Static).update(self._steps_text())
        self._show_error()

        body = self.query_one("#entry-body", Static)
        field_view = self.query_one("#entry-field", FieldView)
        hint = self.query_one("#entry-hint", Static)

        if stage == Stage.STAGING:
            body.update(self._staging_text())
            body.display = True
            field_view.show(None)
            hint.update(_STAGING_HINT)
        elif stage in (Stage.URGENCY, Stage.STATUS):
            body.update(self._choice_text(stage))
            body.display = True
            field_view.show(None)
            hint.update(_CHOICE_HINT)
        elif stage == Stage.TAGS:
            body.update(self._tags_text())
            body.display = True
            field_view.show(None if fields.tags.is_highlighting else fields.tags.typed)
            hint.update(_TAGS_HIGHLIGHT_HINT if fields.tags.is_highlighting else _TAGS_HINT)
        elif stage in TEXT_STAGES:
            body.display = False
            field_view.show(fields.buffer_for(stage))
            hint.update(_TEXT_HINT)

    def _show_error(self) -> None:
        error = self.query_one("#entry-error", Static)
        message = self.session.error
        error.display = bool(message)
        if message:
            style = Style.parse(theme.ERROR.resolve(self.app.current_theme.dark))
            error.update(Text(message, style))

    def _steps_text(self) -> Text:
        wizard = self.session.wizard
        text = Text()
        for i, stage in enumerate(s for s in wizard.sequence if s != Stage.FINISHED):
            if i:
                text.append(" › ")
            style = Style(bold=True, reverse=True) if stage == wizard.stage else Style()
            text.append(STAGE_TITLES[stage], style)
        return text

    def _choice_text(self, stage: Stage) -> Text:
        fields = self.session.fields
        dark = self.app.current_theme.dark
        if stage == Stage.URGENCY:
            options = [(k, u, u.value, theme.URGENCY_COLORS[u]) for k, u in URGENCY_KEYS.items()]
            current = fields.urgency
        else:
            options = [(k, s, s.value, theme.STATUS_COLORS[s]) for k, s in STATUS_KEYS.items()]
            current = fields.status
        text = Text()
        for key, value, label, color in options:
            style = Style.parse(color.resolve(dark))
            if value == current:
                style += Style(reverse=True, bold=True)
            text.append(f" {key} {label} ", style)
            text.append("  ")
        return text

    def _tags_text(self) -> Text:
        tags = self.session.fields.tags
        dark = self.app.current_theme.dark
        text = Text()
        ordered = tags.sorted_tags
        if not ordered:
            text.append("No tags yet", Style(dim=True))
            return text
        highlighted = tags.highlighted_tag
        for tag in ordered:
            if tag == highlighted:
                style = Style.parse(theme.TAG_HIGHLIGHT.resolve(dark))
            else:
                style = Style.parse(theme.TAG.resolve(dark))
            text.append(f"[{tag}]", style)
            text.append(" ")
        return text

    def _staging_text(self) -> Text:
        fields = self.session.fields
        values = {
            Stage.NAME: fields.name.content,
            Stage.STATUS: fields.status.value,
            Stage.URGENCY: fields.urgency.value,
            Stage.DESCRIPTION: fields.description.content,
            Stage.LATEST: fields.latest.content,
            Stage.TAGS: ", ".join(fields.tags.sorted_tags),
        }
        text = Text()
        for key, stage in STAGING_KEYS.items():
            text.append(f" {key} ", Style(bold=True, reverse=True))
            text.append(f" {STAGE_TITLES[stage]:<14}", Style(bold=True))
            text.append(f"{values[stage] or '-'}\n", Style(dim=not values[stage]))
        return text
