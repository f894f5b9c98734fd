"""Filtered, sorted projection of the task store."""

from __future__ import annotations

from collections.abc import Iterable

from checklist_tui.models import DisplayFilter, Settings, Task


def filter_tasks(
    tasks: Iterable[Task],
    display_filter: DisplayFilter,
    tag_filter: str = "",
    required_tags: Iterable[str] = (),
) -> list[Task]:
    """Keep tasks matching the display filter and the tag filters.

    *tag_filter* is a case-sensitive substring that at least one tag must
    contain. *required_tags* must all be present exactly.
    """
    required = set(required_tags)
    result = []
    for task in tasks:
        if not display_filter.matches(task.status):
            continue
        if tag_filter and not any(tag_filter in tag for tag in task.tags):
            continue
        if not required <= task.tags:
            continue
        result.append(task)
    return result


def sort_tasks(tasks: Iterable[Task], descending: bool = True) -> list[Task]:
    """Sort by urgency, breaking ties on creation time in the same direction.

    Descending puts the most urgent, then newest, first; ascending puts the
    least urgent, then oldest, first.
    """
    return sorted(
        tasks, key=lambda t: (t.urgency.rank, t.created_at), reverse=descending
    )


class TaskView:
    """The visible task list and the selected row.

    Rebuilt from scratch by recompute(); never edited in place.
    """

    def __init__(self) -> None:
        self.tasks: list[Task] = []
        self.selected_index: int | None = None
        self.tag_filter = ""

    def __len__(self) -> int:
        return len(self.tasks)

    def recompute(
        self,
        tasks: Iterable[Task],
        settings: Settings,
        select_id: str | None = None,
    ) -> None:
        """Filter then sort *tasks*, keeping the selection on the same task if visible."""
        keep_id = select_id or (self.selected.id if self.selected else None)
        self.tasks = sort_tasks(
            filter_tasks(tasks, settings.display_filter, self.tag_filter),
            settings.urgency_sort_desc,
        )
        if not self.tasks:
            self.selected_index = None
            return
        if keep_id is not None:
            for i, task in enumerate(self.tasks):
                if task.id == keep_id:
                    self.selected_index = i
                    return
        self._select(self.selected_index or 0)

    @property
    def selected(self) -> Task | None:
        if self.selected_index is None or not self.tasks:
            return None
        return self.tasks[self.selected_index]

    def _select(self, index: int) -> None:
        if not self.tasks:
            self.selected_index = None
            return
        self.selected_index = max(0, min(index, len(self.tasks) - 1))

    def select_next(self) -> None:
        self._select((self.selected_index if self.selected_index is not None else -1) + 1)

    def select_previous(self) -> None:
        self._select((self.selected_index or 0) - 1)

    def select_first(self) -> None:
        self._select(0)

    def select_last(self) -> None:
        self._select(len(self.tasks) - 1)
