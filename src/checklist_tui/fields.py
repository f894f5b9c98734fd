"""The in-progress values of a task being added or updated."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime

from checklist_tui.errors import FieldError
from checklist_tui.models import Status, Task, Urgency
from checklist_tui.stages import Stage
from checklist_tui.tags import TagEditor
from checklist_tui.text_buffer import TextBuffer


@dataclass
class FieldSet:
    """Editable copies of every task field.

    Seeded empty for a new task, or copied once from the selected task
    for an update. Nothing is written back until build_task()/apply_to().
    """

    name: TextBuffer = field(default_factory=TextBuffer)
    description: TextBuffer = field(default_factory=TextBuffer)
    latest: TextBuffer = field(default_factory=TextBuffer)
    tags: TagEditor = field(default_factory=TagEditor)
    urgency: Urgency = Urgency.LOW
    status: Status = Status.OPEN

    @classmethod
    def from_task(cls, task: Task) -> FieldSet:
        return cls(
            name=TextBuffer(task.name),
            description=TextBuffer(task.description),
            latest=TextBuffer(task.latest),
            tags=TagEditor(task.tags),
            urgency=task.urgency,
            status=task.status,
        )

    def buffer_for(self, stage: Stage) -> TextBuffer | None:
        """The text buffer edited at *stage*, if it is a text stage."""
        if stage == Stage.NAME:
            return self.name
        if stage == Stage.DESCRIPTION:
            return self.description
        if stage == Stage.LATEST:
            return self.latest
        if stage == Stage.TAGS:
            return self.tags.typed
        return None

    def _validate(self) -> str:
        name = self.name.content.strip()
        if not name:
            raise FieldError("Name cannot be empty", Stage.NAME)
        return name

    def build_task(self, now: datetime | None = None) -> Task:
        """Create a new task from the fields. Raises FieldError."""
        return Task.new(
            name=self._validate(),
            description=self.description.content,
            latest=self.latest.content,
            urgency=self.urgency,
            status=self.status,
            tags=frozenset(self.tags.tags),
            now=now,
        )

    def apply_to(self, task: Task, now: datetime | None = None) -> Task:
        """Copy the fields onto *task*, keeping its id and created_at. Raises FieldError."""
        updated = replace(
            task,
            name=self._validate(),
            description=self.description.content,
            latest=self.latest.content,
            urgency=self.urgency,
            tags=frozenset(self.tags.tags),
        )
        return updated.with_status(self.status, now)
