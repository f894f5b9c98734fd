"""Tests for theme loading and user overrides."""

import pytest

from checklist_tui import theme
from checklist_tui.models import DisplayFilter, Status, Urgency


@pytest.fixture(autouse=True)
def reset_theme():
    yield
    theme.load_theme()


def test_defaults_cover_every_variant():
    assert set(theme.URGENCY_COLORS) == set(Urgency)
    assert set(theme.STATUS_COLORS) == set(Status)
    assert set(theme.FILTER_COLORS) == set(DisplayFilter)
    assert theme.ERROR.dark


def test_resolve():
    pair = theme.ColorPair("red", "blue")
    assert pair.resolve(True) == "red"
    assert pair.resolve(False) == "blue"


def test_override_merges(tmp_path):
    default_light = theme.URGENCY_COLORS[Urgency.LOW].light
    (tmp_path / "theme.yaml").write_text(
        "urgency:\n  low:\n    dark: \"bold magenta\"\n", encoding="utf-8"
    )
    theme.load_theme(tmp_path)
    assert theme.URGENCY_COLORS[Urgency.LOW].dark == "bold magenta"
    assert theme.URGENCY_COLORS[Urgency.LOW].light == default_light


def test_broken_override_ignored(tmp_path):
    default = theme.TAG
    (tmp_path / "theme.yaml").write_text("ui: [unclosed\n", encoding="utf-8")
    theme.load_theme(tmp_path)
    assert theme.TAG == default


def test_deep_merge():
    base = {"a": {"x": 1, "y": 2}, "b": 3}
    merged = theme._deep_merge(base, {"a": {"y": 20}, "c": 4})
    assert merged == {"a": {"x": 1, "y": 20}, "b": 3, "c": 4}
    assert base["a"]["y"] == 2


def test_init_theme(tmp_path):
    dest = theme.init_theme(tmp_path)
    assert dest.read_text(encoding="utf-8") == theme.DEFAULT_THEME.read_text(encoding="utf-8")
    with pytest.raises(FileExistsError):
        theme.init_theme(tmp_path)
