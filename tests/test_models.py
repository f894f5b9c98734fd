"""Tests for data models."""

from datetime import datetime

import pytest

from checklist_tui.models import (
    LIST_WIDTH_MAX,
    LIST_WIDTH_MIN,
    DisplayFilter,
    Layout,
    Settings,
    Status,
    Task,
    Urgency,
    format_datetime,
)

T1 = datetime(2024, 3, 1, 9, 30)
T2 = datetime(2024, 3, 2, 17, 0)


class TestUrgency:
    def test_rank_order(self):
        ranks = [u.rank for u in (Urgency.LOW, Urgency.MEDIUM, Urgency.HIGH, Urgency.CRITICAL)]
        assert ranks == sorted(ranks)
        assert len(set(ranks)) == 4


class TestDisplayFilter:
    def test_cycle(self):
        assert DisplayFilter.ALL.next() == DisplayFilter.COMPLETED
        assert DisplayFilter.COMPLETED.next() == DisplayFilter.NOT_COMPLETED
        assert DisplayFilter.NOT_COMPLETED.next() == DisplayFilter.ALL

    @pytest.mark.parametrize(
        "display, status, expected",
        [
            (DisplayFilter.ALL, Status.COMPLETED, True),
            (DisplayFilter.ALL, Status.OPEN, True),
            (DisplayFilter.COMPLETED, Status.COMPLETED, True),
            (DisplayFilter.COMPLETED, Status.PAUSED, False),
            (DisplayFilter.NOT_COMPLETED, Status.WORKING, True),
            (DisplayFilter.NOT_COMPLETED, Status.COMPLETED, False),
        ],
    )
    def test_matches(self, display, status, expected):
        assert display.matches(status) is expected


def test_layout_cycle():
    assert [Layout.SMART.next(), Layout.HORIZONTAL.next(), Layout.VERTICAL.next()] == [
        Layout.HORIZONTAL,
        Layout.VERTICAL,
        Layout.SMART,
    ]


class TestTask:
    def test_defaults(self):
        task = Task(name="a")
        assert task.status == Status.OPEN
        assert task.urgency == Urgency.LOW
        assert task.tags == frozenset()
        assert task.completed_at is None
        assert len(task.id) == 32

    def test_ids_unique(self):
        assert Task(name="a").id != Task(name="a").id

    def test_new_completed_sets_completed_at(self):
        task = Task.new("a", status=Status.COMPLETED, now=T1)
        assert task.created_at == T1
        assert task.completed_at == T1

    def test_completed_then_open_clears_completed_at(self):
        task = Task.new("a", now=T1).with_status(Status.COMPLETED, T2)
        assert task.completed_at == T2
        task = task.with_status(Status.OPEN, T2)
        assert task.completed_at is None

    def test_staying_completed_keeps_timestamp(self):
        task = Task.new("a", status=Status.COMPLETED, now=T1)
        assert task.with_status(Status.COMPLETED, T2).completed_at == T1

    def test_sorted_tags(self):
        assert Task.new("a", tags={"z", "b"}).sorted_tags == ["b", "z"]

    def test_icons(self):
        task = Task.new("a", urgency=Urgency.CRITICAL, status=Status.WORKING)
        assert task.urgency_icon
        assert task.status_icon
        assert task.urgency_icon != Task.new("b").urgency_icon


class TestSettings:
    def test_resize_clamped(self):
        settings = Settings()
        settings.resize_list(1000)
        assert settings.list_width == LIST_WIDTH_MAX
        settings.resize_list(-1000)
        assert settings.list_width == LIST_WIDTH_MIN


def test_format_datetime():
    assert format_datetime(T1) == "2024-03-01 09:30"
    assert format_datetime(None) == ""
