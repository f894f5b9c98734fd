"""Exception types for Checklist TUI."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from checklist_tui.stages import Stage


class ChecklistError(Exception):
    """Base class for errors surfaced to the user."""


class StoreError(ChecklistError):
    """The task store rejected an operation."""


class ConfigError(ChecklistError):
    """Configuration could not be read or written."""


class FieldError(ChecklistError):
    """A required field is missing at commit time."""

    def __init__(self, message: str, stage: Stage) -> None:
        super().__init__(message)
        self.stage = stage
