"""Task entry wizard: stage navigation and per-stage key handling."""

from __future__ import annotations

from enum import Enum

from checklist_tui.fields import FieldSet
from checklist_tui.keys import Key, KeyCode
from checklist_tui.models import STATUS_KEYS, URGENCY_KEYS
from checklist_tui.stages import (
    FIELD,
    FIELD_STAGES,
    STAGING_KEYS,
    TEXT_STAGES,
    TRANSITIONS,
    EntryMode,
    Stage,
)
from checklist_tui.text_buffer import Direction, TextBuffer


class KeyResult(Enum):
    """What a key press did to the wizard."""

    IGNORED = "ignored"
    HANDLED = "handled"
    CANCELLED = "cancelled"
    FINISHED = "finished"


class StageWizard:
    """Walks the stage sequence for one entry mode.

    next() and back() step along TRANSITIONS and do nothing at either end.
    In Update mode the middle slot is whichever field was picked from the
    staging menu with jump().
    """

    def __init__(self, mode: EntryMode) -> None:
        self.mode = mode
        self.field_stage: Stage | None = None
        self.stage: Stage = TRANSITIONS[mode][0]

    def __repr__(self) -> str:
        return f"StageWizard({self.mode.value}, {self.stage.value})"

    @property
    def sequence(self) -> tuple[Stage, ...]:
        stages = TRANSITIONS[self.mode]
        if FIELD in stages:
            if self.field_stage is None:
                return (Stage.STAGING,)
            return tuple(self.field_stage if s is FIELD else s for s in stages)
        return stages

    @property
    def is_finished(self) -> bool:
        return self.stage == Stage.FINISHED

    def next(self) -> None:
        seq = self.sequence
        if self.stage not in seq:
            return
        i = seq.index(self.stage)
        if i + 1 < len(seq):
            self.stage = seq[i + 1]

    def back(self) -> None:
        seq = self.sequence
        if self.stage not in seq:
            return
        i = seq.index(self.stage)
        if i > 0:
            self.stage = seq[i - 1]
        if self.stage == Stage.STAGING:
            self.field_stage = None

    def jump(self, stage: Stage) -> bool:
        """Go straight to a field stage. Returns False if *stage* is not reachable."""
        if self.mode == EntryMode.UPDATE and stage in FIELD_STAGES:
            self.field_stage = stage
        if stage not in self.sequence:
            return False
        self.stage = stage
        return True


# ── Key handling ──


def edit_text(buffer: TextBuffer, key: Key) -> bool:
    """Apply an editing key to *buffer*. Returns False if the key is not an edit."""
    code = key.code
    if code is KeyCode.CHAR:
        if key.ctrl:
            if key.char == "a":
                buffer.select_all()
                return True
            return False
        buffer.insert_char(key.char)
    elif code is KeyCode.BACKSPACE:
        buffer.delete_backward()
    elif code is KeyCode.LEFT:
        if key.shift:
            buffer.extend_selection(Direction.LEFT)
        else:
            buffer.move_left()
    elif code is KeyCode.RIGHT:
        if key.shift:
            buffer.extend_selection(Direction.RIGHT)
        else:
            buffer.move_right()
    elif code is KeyCode.HOME:
        buffer.move_home()
    elif code is KeyCode.END:
        buffer.move_end()
    else:
        return False
    return True


def _advance(wizard: StageWizard) -> KeyResult:
    wizard.next()
    return KeyResult.FINISHED if wizard.is_finished else KeyResult.HANDLED


def _back(wizard: StageWizard) -> KeyResult:
    wizard.back()
    return KeyResult.HANDLED


def _handle_staging(wizard: StageWizard, fields: FieldSet, key: Key) -> KeyResult:
    if key.code is KeyCode.CHAR and not key.ctrl and key.char in STAGING_KEYS:
        stage = STAGING_KEYS[key.char]
        wizard.jump(stage)
        buffer = fields.buffer_for(stage)
        if buffer is not None:
            buffer.move_end()
        return KeyResult.HANDLED
    return KeyResult.IGNORED


def _handle_choice(
    wizard: StageWizard, fields: FieldSet, key: Key, stage: Stage
) -> KeyResult:
    if key.code is KeyCode.LEFT:
        return _back(wizard)
    if key.code is KeyCode.ENTER:
        return _advance(wizard)
    if key.code is not KeyCode.CHAR or key.ctrl:
        return KeyResult.IGNORED
    if stage == Stage.URGENCY and key.char in URGENCY_KEYS:
        fields.urgency = URGENCY_KEYS[key.char]
        return _advance(wizard)
    if stage == Stage.STATUS and key.char in STATUS_KEYS:
        fields.status = STATUS_KEYS[key.char]
        return _advance(wizard)
    return KeyResult.IGNORED


def _handle_tags(wizard: StageWizard, fields: FieldSet, key: Key) -> KeyResult:
    tags = fields.tags
    if tags.is_highlighting:
        if key.code is KeyCode.LEFT:
            tags.highlight_left()
        elif key.code is KeyCode.RIGHT:
            tags.highlight_right()
        elif key.code is KeyCode.UP:
            tags.exit_highlight()
        elif key.code is KeyCode.BACKSPACE or key.is_char("d"):
            tags.delete_highlighted()
        elif key.code is KeyCode.ENTER:
            tags.exit_highlight()
            return _advance(wizard)
        else:
            return KeyResult.IGNORED
        return KeyResult.HANDLED

    if key.code is KeyCode.DOWN:
        return KeyResult.HANDLED if tags.enter_highlight() else KeyResult.IGNORED
    if key.code is KeyCode.ENTER:
        if tags.commit_typed():
            return KeyResult.HANDLED
        return _advance(wizard)
    return KeyResult.HANDLED if edit_text(tags.typed, key) else KeyResult.IGNORED


def handle_key(wizard: StageWizard, fields: FieldSet, key: Key) -> KeyResult:
    """Dispatch *key* by the wizard's current stage."""
    if key.code is KeyCode.ESCAPE:
        return KeyResult.CANCELLED
    if key.shift and key.code is KeyCode.UP:
        return _back(wizard)

    stage = wizard.stage
    if stage == Stage.STAGING:
        return _handle_staging(wizard, fields, key)
    if stage in (Stage.URGENCY, Stage.STATUS):
        return _handle_choice(wizard, fields, key, stage)
    if stage == Stage.TAGS:
        return _handle_tags(wizard, fields, key)
    if stage in TEXT_STAGES:
        if key.code is KeyCode.ENTER:
            return _advance(wizard)
        buffer = fields.buffer_for(stage)
        return KeyResult.HANDLED if edit_text(buffer, key) else KeyResult.IGNORED
    return KeyResult.IGNORED
