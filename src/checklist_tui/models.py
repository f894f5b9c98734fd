"""Data models for Checklist TUI."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from pathlib import Path


class Urgency(Enum):
    """Task urgency, ordered Low < Medium < High < Critical."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"

    @property
    def rank(self) -> int:
        return _URGENCY_RANK[self]


class Status(Enum):
    """Task status."""

    OPEN = "Open"
    WORKING = "Working"
    PAUSED = "Paused"
    COMPLETED = "Completed"


class DisplayFilter(Enum):
    """Which tasks the list shows, by completion."""

    ALL = "All"
    COMPLETED = "Completed"
    NOT_COMPLETED = "NotCompleted"

    def next(self) -> DisplayFilter:
        members = list(DisplayFilter)
        return members[(members.index(self) + 1) % len(members)]

    def matches(self, status: Status) -> bool:
        if self is DisplayFilter.ALL:
            return True
        if self is DisplayFilter.COMPLETED:
            return status == Status.COMPLETED
        return status != Status.COMPLETED


class Layout(Enum):
    """How the list and info panes share the screen."""

    SMART = "smart"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def next(self) -> Layout:
        members = list(Layout)
        return members[(members.index(self) + 1) % len(members)]


_URGENCY_RANK = {u: i for i, u in enumerate(Urgency)}

# Selector keys used by the entry wizard, one per variant.
URGENCY_KEYS: dict[str, Urgency] = {str(i + 1): u for i, u in enumerate(Urgency)}
STATUS_KEYS: dict[str, Status] = {str(i + 1): s for i, s in enumerate(Status)}

STATUS_ICONS = {
    Status.OPEN: "○",
    Status.WORKING: "◐",
    Status.PAUSED: "◌",
    Status.COMPLETED: "●",
}

URGENCY_ICONS = {
    Urgency.LOW: "▽",
    Urgency.MEDIUM: "▲",
    Urgency.HIGH: "◆",
    Urgency.CRITICAL: "‼",
}

DATE_FORMAT = "%Y-%m-%d %H:%M"


def format_datetime(value: datetime | None) -> str:
    """Format a timestamp for display. Returns empty string for None."""
    if value is None:
        return ""
    return value.strftime(DATE_FORMAT)


@dataclass(frozen=True)
class Task:
    """A single task. Immutable; use with_status() or dataclasses.replace()."""

    name: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    description: str = ""
    latest: str = ""
    urgency: Urgency = Urgency.LOW
    status: Status = Status.OPEN
    tags: frozenset[str] = frozenset()
    created_at: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None

    @classmethod
    def new(
        cls,
        name: str,
        description: str = "",
        latest: str = "",
        urgency: Urgency = Urgency.LOW,
        status: Status = Status.OPEN,
        tags: frozenset[str] | set[str] = frozenset(),
        now: datetime | None = None,
    ) -> Task:
        """Create a task with a fresh id, keeping completed_at consistent with status."""
        now = now or datetime.now()
        return cls(
            name=name,
            description=description,
            latest=latest,
            urgency=urgency,
            tags=frozenset(tags),
            created_at=now,
        ).with_status(status, now)

    def with_status(self, status: Status, now: datetime | None = None) -> Task:
        """Return a copy with *status*, setting or clearing completed_at with it."""
        if status == Status.COMPLETED:
            if self.status == Status.COMPLETED and self.completed_at is not None:
                completed_at = self.completed_at
            else:
                completed_at = now or datetime.now()
        else:
            completed_at = None
        return replace(self, status=status, completed_at=completed_at)

    @property
    def is_completed(self) -> bool:
        return self.status == Status.COMPLETED

    @property
    def sorted_tags(self) -> list[str]:
        return sorted(self.tags)

    @property
    def status_icon(self) -> str:
        return STATUS_ICONS[self.status]

    @property
    def urgency_icon(self) -> str:
        return URGENCY_ICONS[self.urgency]


LIST_WIDTH_MIN = 20
LIST_WIDTH_MAX = 90
LIST_WIDTH_STEP = 5


@dataclass
class Settings:
    """Persisted user settings."""

    db_path: Path | None = None
    display_filter: DisplayFilter = DisplayFilter.ALL
    urgency_sort_desc: bool = True
    layout: Layout = Layout.SMART
    list_width: int = 50

    def resize_list(self, delta: int) -> None:
        """Grow or shrink the list pane, clamped to the allowed range."""
        self.list_width = max(
            LIST_WIDTH_MIN, min(LIST_WIDTH_MAX, self.list_width + delta)
        )
