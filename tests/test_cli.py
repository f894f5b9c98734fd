"""Tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from checklist_tui.cli import main
from checklist_tui.models import Status, Task, Urgency
from checklist_tui.store import TaskStore


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("CHECKLIST_HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def runner():
    return CliRunner()


def _tasks(home):
    with TaskStore(home / "checklist.db") as store:
        return store.fetch_all()


class TestInit:
    def test_creates_config_and_database(self, runner, home):
        result = runner.invoke(main, ["init"])
        assert result.exit_code == 0, result.output
        assert (home / "config.toml").exists()
        assert (home / "checklist.db").exists()

    def test_custom_database_path(self, runner, home):
        target = home / "data" / "mine.db"
        result = runner.invoke(main, ["init", "--set", str(target)])
        assert result.exit_code == 0, result.output
        assert target.exists()
        assert str(target.resolve()) in (home / "config.toml").read_text(encoding="utf-8")


class TestAdd:
    def test_add(self, runner, home):
        result = runner.invoke(
            main,
            ["add", "Write report", "-u", "high", "-s", "Working", "-t", "work", "-t", " "],
        )
        assert result.exit_code == 0, result.output
        [task] = _tasks(home)
        assert task.name == "Write report"
        assert task.urgency == Urgency.HIGH
        assert task.status == Status.WORKING
        assert task.tags == frozenset({"work"})

    def test_blank_name_rejected(self, runner, home):
        result = runner.invoke(main, ["add", "   "])
        assert result.exit_code == 2
        assert "Name cannot be empty" in result.output

    def test_memory_database_leaves_no_file(self, runner, home):
        result = runner.invoke(main, ["--memory", "add", "scratch"])
        assert result.exit_code == 0, result.output
        assert not (home / "checklist.db").exists()


class TestList:
    @pytest.fixture
    def populated(self, home):
        with TaskStore(home / "checklist.db") as store:
            store.create(Task.new("open one", urgency=Urgency.CRITICAL, tags={"home"}))
            store.create(Task.new("finished one", status=Status.COMPLETED))
        return home

    def test_default_hides_completed(self, runner, populated):
        result = runner.invoke(main, ["list"])
        assert result.exit_code == 0, result.output
        assert "open one" in result.output
        assert "finished one" not in result.output

    def test_all(self, runner, populated):
        result = runner.invoke(main, ["list", "--display", "all"])
        assert "open one" in result.output
        assert "finished one" in result.output

    def test_tag(self, runner, populated):
        result = runner.invoke(main, ["list", "--display", "all", "--tag", "home"])
        assert "open one" in result.output
        assert "finished one" not in result.output


class TestWipe:
    def test_yes(self, runner, home):
        runner.invoke(main, ["add", "doomed"])
        result = runner.invoke(main, ["wipe", "--yes"])
        assert result.exit_code == 0, result.output
        assert _tasks(home) == []

    def test_declined(self, runner, home):
        runner.invoke(main, ["add", "survivor"])
        result = runner.invoke(main, ["wipe"], input="n\n")
        assert result.exit_code == 0
        assert len(_tasks(home)) == 1

    def test_hard(self, runner, home):
        runner.invoke(main, ["add", "doomed"])
        result = runner.invoke(main, ["wipe", "--yes", "--hard"])
        assert result.exit_code == 0, result.output
        assert _tasks(home) == []


class TestImport:
    def test_import_twice(self, runner, home):
        other = home / "other.db"
        with TaskStore(other) as store:
            store.create(Task.new("imported"))

        first = runner.invoke(main, ["import", str(other)])
        assert first.exit_code == 0, first.output
        assert "Imported 1 task(s)." in first.output

        second = runner.invoke(main, ["import", str(other)])
        assert second.exit_code == 0, second.output
        assert "Imported 0 task(s)." in second.output
        assert "Skipped 1" in second.output
        assert [t.name for t in _tasks(home)] == ["imported"]

    def test_missing_file(self, runner, home):
        result = runner.invoke(main, ["import", str(home / "nope.db")])
        assert result.exit_code == 2


class TestInitTheme:
    def test_creates_once(self, runner, home):
        first = runner.invoke(main, ["init-theme"])
        assert first.exit_code == 0, first.output
        assert (home / "theme.yaml").exists()
        second = runner.invoke(main, ["init-theme"])
        assert second.exit_code == 1
