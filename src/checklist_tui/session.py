"""Session state: everything one interactive session mutates, in one place."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from checklist_tui.errors import FieldError, StoreError
from checklist_tui.fields import FieldSet
from checklist_tui.keys import Key
from checklist_tui.models import Settings, Status, Task
from checklist_tui.stages import EntryMode
from checklist_tui.store import TaskStore
from checklist_tui.view import TaskView
from checklist_tui.wizard import KeyResult, StageWizard, handle_key

logger = logging.getLogger(__name__)


class WizardOutcome(Enum):
    """Result of feeding one key to an open wizard."""

    CONTINUE = "continue"
    CANCELLED = "cancelled"
    COMMITTED = "committed"
    REJECTED = "rejected"


@dataclass
class SessionState:
    """The store, settings, visible list, and the entry in progress (if any)."""

    store: TaskStore
    settings: Settings
    view: TaskView = field(default_factory=TaskView)
    wizard: StageWizard | None = None
    fields: FieldSet | None = None
    editing: Task | None = None
    error: str | None = None

    @classmethod
    def open(cls, store: TaskStore, settings: Settings) -> SessionState:
        session = cls(store=store, settings=settings)
        session.refresh()
        return session

    @property
    def is_editing(self) -> bool:
        return self.wizard is not None

    def refresh(self, select_id: str | None = None) -> None:
        """Recompute the visible list from the store."""
        self.view.recompute(self.store.fetch_all(), self.settings, select_id)

    # ── Entry wizard ──

    def start_add(self) -> None:
        self._start(EntryMode.ADD, FieldSet())

    def start_quick_add(self) -> None:
        self._start(EntryMode.QUICK_ADD, FieldSet())

    def start_update(self) -> bool:
        """Open the wizard on the selected task. Returns False if nothing is selected."""
        task = self.view.selected
        if task is None:
            return False
        self._start(EntryMode.UPDATE, FieldSet.from_task(task))
        self.editing = task
        return True

    def _start(self, mode: EntryMode, fields: FieldSet) -> None:
        self.wizard = StageWizard(mode)
        self.fields = fields
        self.editing = None
        self.error = None

    def cancel(self) -> None:
        self.wizard = None
        self.fields = None
        self.editing = None

    def handle_key(self, key: Key) -> WizardOutcome:
        """Feed *key* to the wizard, committing when it reaches Finished."""
        if self.wizard is None or self.fields is None:
            return WizardOutcome.CANCELLED
        self.error = None
        result = handle_key(self.wizard, self.fields, key)
        if result is KeyResult.CANCELLED:
            self.cancel()
            return WizardOutcome.CANCELLED
        if result is KeyResult.FINISHED:
            return self._commit()
        return WizardOutcome.CONTINUE

    def _commit(self) -> WizardOutcome:
        wizard, fields = self.wizard, self.fields
        now = datetime.now()
        try:
            if wizard.mode == EntryMode.UPDATE:
                task = fields.apply_to(self.editing, now)
                self.store.update(task)
            else:
                task = fields.build_task(now)
                self.store.create(task)
        except FieldError as e:
            wizard.jump(e.stage)
            self.error = str(e)
            return WizardOutcome.REJECTED
        except StoreError as e:
            logger.warning("Commit failed: %s", e)
            wizard.back()
            self.error = f"Could not save task: {e}"
            return WizardOutcome.REJECTED

        self.cancel()
        try:
            self.refresh(select_id=task.id)
        except StoreError as e:
            logger.warning("Reload after commit failed: %s", e)
            self.error = f"Task saved, but the list could not be reloaded: {e}"
        return WizardOutcome.COMMITTED

    # ── List actions ──

    def delete_selected(self) -> Task | None:
        task = self.view.selected
        if task is None:
            return None
        self.store.delete(task.id)
        self.refresh()
        return task

    def toggle_complete(self) -> Task | None:
        """Flip the selected task between Completed and Open."""
        task = self.view.selected
        if task is None:
            return None
        status = Status.OPEN if task.is_completed else Status.COMPLETED
        updated = task.with_status(status)
        self.store.update(updated)
        self.refresh(select_id=updated.id)
        return updated

    def toggle_sort(self) -> None:
        self.settings.urgency_sort_desc = not self.settings.urgency_sort_desc
        self.refresh()

    def cycle_display_filter(self) -> None:
        self.settings.display_filter = self.settings.display_filter.next()
        self.refresh()

    def set_tag_filter(self, text: str) -> None:
        self.view.tag_filter = text
        self.refresh()
