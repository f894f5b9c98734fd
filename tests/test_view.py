"""Tests for filtering, sorting and selection of the task list."""

from datetime import datetime, timedelta

from checklist_tui.models import DisplayFilter, Settings, Status, Task, Urgency
from checklist_tui.view import TaskView, filter_tasks, sort_tasks

T0 = datetime(2024, 1, 1, 12, 0)


def _task(name, urgency=Urgency.LOW, status=Status.OPEN, tags=(), minutes=0):
    return Task.new(
        name,
        urgency=urgency,
        status=status,
        tags=set(tags),
        now=T0 + timedelta(minutes=minutes),
    )


class TestFilter:
    def test_display_and_tag_filter(self):
        open_x = _task("open", tags={"x"})
        done = _task("done", status=Status.COMPLETED)
        result = filter_tasks([open_x, done], DisplayFilter.NOT_COMPLETED, "x")
        assert result == [open_x]

    def test_tag_filter_is_case_sensitive_substring(self):
        task = _task("a", tags={"Work-items"})
        assert filter_tasks([task], DisplayFilter.ALL, "work") == []
        assert filter_tasks([task], DisplayFilter.ALL, "-it") == [task]

    def test_untagged_never_matches_tag_filter(self):
        assert filter_tasks([_task("a")], DisplayFilter.ALL, "a") == []

    def test_empty_tag_filter_keeps_all(self):
        tasks = [_task("a"), _task("b", tags={"t"})]
        assert filter_tasks(tasks, DisplayFilter.ALL, "") == tasks

    def test_required_tags(self):
        both = _task("both", tags={"x", "y"})
        one = _task("one", tags={"x"})
        assert filter_tasks([both, one], DisplayFilter.ALL, required_tags=["x", "y"]) == [both]

    def test_completed_only(self):
        done = _task("done", status=Status.COMPLETED)
        assert filter_tasks([_task("a"), done], DisplayFilter.COMPLETED) == [done]


class TestSort:
    def test_same_urgency_tie_break(self):
        a = _task("A", minutes=0)
        b = _task("B", minutes=5)
        assert sort_tasks([a, b], descending=True) == [b, a]
        assert sort_tasks([a, b], descending=False) == [a, b]

    def test_by_urgency(self):
        low = _task("low", Urgency.LOW)
        crit = _task("crit", Urgency.CRITICAL)
        mid = _task("mid", Urgency.MEDIUM)
        assert sort_tasks([low, crit, mid]) == [crit, mid, low]
        assert sort_tasks([low, crit, mid], descending=False) == [low, mid, crit]


class TestTaskView:
    def _tasks(self):
        return [
            _task("a", Urgency.CRITICAL),
            _task("b", Urgency.HIGH),
            _task("c", Urgency.LOW, status=Status.COMPLETED),
        ]

    def test_empty(self):
        view = TaskView()
        view.recompute([], Settings())
        assert view.selected is None
        view.select_next()
        assert view.selected_index is None

    def test_recompute_selects_first(self):
        view = TaskView()
        view.recompute(self._tasks(), Settings())
        assert [t.name for t in view.tasks] == ["a", "b", "c"]
        assert view.selected.name == "a"

    def test_navigation_clamped(self):
        view = TaskView()
        view.recompute(self._tasks(), Settings())
        view.select_previous()
        assert view.selected_index == 0
        view.select_last()
        view.select_next()
        assert view.selected.name == "c"
        view.select_first()
        assert view.selected.name == "a"

    def test_selection_follows_task_after_resort(self):
        tasks = self._tasks()
        view = TaskView()
        view.recompute(tasks, Settings())
        view.select_next()
        view.recompute(tasks, Settings(urgency_sort_desc=False))
        assert [t.name for t in view.tasks] == ["c", "b", "a"]
        assert view.selected.name == "b"

    def test_selection_clamped_when_task_hidden(self):
        tasks = self._tasks()
        view = TaskView()
        view.recompute(tasks, Settings())
        view.select_last()
        view.recompute(tasks, Settings(display_filter=DisplayFilter.NOT_COMPLETED))
        assert len(view) == 2
        assert view.selected.name == "b"

    def test_select_id(self):
        tasks = self._tasks()
        view = TaskView()
        view.recompute(tasks, Settings(), select_id=tasks[2].id)
        assert view.selected.name == "c"

    def test_tag_filter_applied(self):
        tasks = self._tasks() + [_task("tagged", tags={"home"})]
        view = TaskView()
        view.tag_filter = "ho"
        view.recompute(tasks, Settings())
        assert [t.name for t in view.tasks] == ["tagged"]
