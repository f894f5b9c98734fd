"""YAML-based color theme for Checklist TUI.

Loads colors from default_theme.yaml and optionally merges user
overrides from {config_dir}/theme.yaml.
"""

from __future__ import annotations

import logging
import shutil
import sys
from pathlib import Path
from typing import NamedTuple

import yaml

from checklist_tui.models import DisplayFilter, Status, Urgency

logger = logging.getLogger(__name__)

THEME_FILE = "theme.yaml"
DEFAULT_THEME = Path(__file__).parent / "default_theme.yaml"


class ColorPair(NamedTuple):
    """A pair of rich styles for dark and light themes."""

    dark: str
    light: str

    def resolve(self, is_dark: bool) -> str:
        return self.dark if is_dark else self.light


# ── Module-level variables (populated by _apply) ──────────────────

URGENCY_COLORS: dict[Urgency, ColorPair]
STATUS_COLORS: dict[Status, ColorPair]
FILTER_COLORS: dict[DisplayFilter, ColorPair]

CURSOR: ColorPair
SELECTION: ColorPair
TAG: ColorPair
TAG_HIGHLIGHT: ColorPair
ERROR: ColorPair


# ── Internal helpers ──────────────────────────────────────────────

def _load_yaml(path: Path) -> dict:
    """Load a YAML file and return a dict (empty dict on error)."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (returns a new dict)."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _pair(d: dict) -> ColorPair:
    """Convert a {dark: ..., light: ...} dict to a ColorPair."""
    return ColorPair(str(d.get("dark", "white")), str(d.get("light", "black")))


def _apply(data: dict) -> None:
    """Map parsed YAML data onto module-level constants."""
    mod = sys.modules[__name__]

    urgency = data.get("urgency", {})
    mod.URGENCY_COLORS = {u: _pair(urgency.get(u.name.lower(), {})) for u in Urgency}

    status = data.get("status", {})
    mod.STATUS_COLORS = {s: _pair(status.get(s.name.lower(), {})) for s in Status}

    display = data.get("display_filter", {})
    mod.FILTER_COLORS = {
        f: _pair(display.get(f.name.lower(), {})) for f in DisplayFilter
    }

    ui = data.get("ui", {})
    mod.CURSOR = _pair(ui.get("cursor", {}))
    mod.SELECTION = _pair(ui.get("selection", {}))
    mod.TAG = _pair(ui.get("tag", {}))
    mod.TAG_HIGHLIGHT = _pair(ui.get("tag_highlight", {}))
    mod.ERROR = _pair(ui.get("error", {}))


# ── Public API ────────────────────────────────────────────────────

def init_theme(directory: Path) -> Path:
    """Copy default_theme.yaml → {directory}/theme.yaml.

    Raises FileExistsError if the destination already exists.
    """
    dest = directory / THEME_FILE
    if dest.exists():
        raise FileExistsError(str(dest))
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(DEFAULT_THEME, dest)
    return dest


def load_theme(directory: Path | None = None) -> None:
    """Load the default theme and merge ``{directory}/theme.yaml`` over it."""
    data = _load_yaml(DEFAULT_THEME)

    if directory is not None:
        override_path = directory / THEME_FILE
        if override_path.is_file():
            override = _load_yaml(override_path)
            if override:
                data = _deep_merge(data, override)

    _apply(data)


# Apply default theme on module import
load_theme()
