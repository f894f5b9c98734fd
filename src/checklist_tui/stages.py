"""Entry wizard stages and the table of transitions between them."""

from __future__ import annotations

from enum import Enum


class Stage(Enum):
    """One step of the task entry wizard."""

    STAGING = "Staging"
    NAME = "Name"
    URGENCY = "Urgency"
    STATUS = "Status"
    DESCRIPTION = "Description"
    LATEST = "Latest"
    TAGS = "Tags"
    FINISHED = "Finished"


class EntryMode(Enum):
    """How the wizard was entered."""

    ADD = "Add"
    UPDATE = "Update"
    QUICK_ADD = "QuickAdd"


TEXT_STAGES = frozenset({Stage.NAME, Stage.DESCRIPTION, Stage.LATEST})
FIELD_STAGES = (
    Stage.NAME,
    Stage.URGENCY,
    Stage.STATUS,
    Stage.DESCRIPTION,
    Stage.LATEST,
    Stage.TAGS,
)

# Ordered stage sequence per mode. Update visits Staging, then whichever
# field was picked from the staging menu (the "FIELD" slot), then Finished.
FIELD = None
TRANSITIONS: dict[EntryMode, tuple[Stage | None, ...]] = {
    EntryMode.ADD: (*FIELD_STAGES, Stage.FINISHED),
    EntryMode.QUICK_ADD: (Stage.NAME, Stage.FINISHED),
    EntryMode.UPDATE: (Stage.STAGING, FIELD, Stage.FINISHED),
}

# Staging menu: selector key -> field stage.
STAGING_KEYS: dict[str, Stage] = {
    "1": Stage.NAME,
    "2": Stage.STATUS,
    "3": Stage.URGENCY,
    "4": Stage.DESCRIPTION,
    "5": Stage.LATEST,
    "6": Stage.TAGS,
}

STAGE_TITLES = {
    Stage.STAGING: "Choose a field to update",
    Stage.NAME: "Name",
    Stage.URGENCY: "Urgency",
    Stage.STATUS: "Status",
    Stage.DESCRIPTION: "Description",
    Stage.LATEST: "Latest update",
    Stage.TAGS: "Tags",
    Stage.FINISHED: "Saving",
}
