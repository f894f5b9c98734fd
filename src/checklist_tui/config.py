"""User configuration management using tomlkit."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

from checklist_tui.errors import ConfigError
from checklist_tui.models import DisplayFilter, Layout, Settings

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "CHECKLIST_HOME"
CONFIG_FILE = "config.toml"
DB_FILE = "checklist.db"
LOG_FILE = "checklist.log"
TABLE = "checklist"


def config_dir() -> Path:
    """Directory holding config.toml, theme.yaml, the log and the default database."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "checklist"


def _get_config_path(directory: Path) -> Path:
    return directory / CONFIG_FILE


def resolve_db_path(directory: Path, settings: Settings) -> Path:
    return settings.db_path or directory / DB_FILE


def _read_document(path: Path) -> tomlkit.TOMLDocument | None:
    if not path.exists():
        return None
    try:
        return tomlkit.parse(path.read_text(encoding="utf-8"))
    except (OSError, TOMLKitError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return None


def load_config(directory: Path) -> Settings:
    """Load settings from config.toml. Missing or bad values fall back to defaults."""
    settings = Settings()
    doc = _read_document(_get_config_path(directory))
    if doc is None:
        return settings

    section = doc.get(TABLE, {})
    if not isinstance(section, dict):
        logger.warning("Ignoring [%s]: expected a table, got %r", TABLE, section)
        section = {}
    if "db_path" in section and str(section["db_path"]).strip():
        settings.db_path = Path(str(section["db_path"])).expanduser()
    try:
        settings.display_filter = DisplayFilter(
            str(section.get("display_filter", settings.display_filter.value))
        )
    except ValueError:
        logger.warning("Unknown display_filter %r", section.get("display_filter"))
    sort_desc = section.get("urgency_sort_desc", settings.urgency_sort_desc)
    if isinstance(sort_desc, bool):
        settings.urgency_sort_desc = sort_desc
    else:
        logger.warning("urgency_sort_desc must be true or false, got %r", sort_desc)
    try:
        settings.layout = Layout(str(section.get("layout", settings.layout.value)))
    except ValueError:
        logger.warning("Unknown layout %r", section.get("layout"))
    try:
        width = int(section.get("list_width", settings.list_width))
    except (TypeError, ValueError):
        width = settings.list_width
    settings.resize_list(width - settings.list_width)
    return settings


def save_config(directory: Path, settings: Settings) -> Path:
    """Write settings to config.toml, keeping other keys and comments intact.

    The file is written to a temporary sibling first and then renamed
    over the original.
    """
    config_path = _get_config_path(directory)
    doc = _read_document(config_path) or tomlkit.document()

    if TABLE in doc and not isinstance(doc[TABLE], dict):
        del doc[TABLE]
    if TABLE not in doc:
        doc.add(TABLE, tomlkit.table())
    section = doc[TABLE]
    section["db_path"] = str(settings.db_path) if settings.db_path else ""
    section["display_filter"] = settings.display_filter.value
    section["urgency_sort_desc"] = settings.urgency_sort_desc
    section["layout"] = settings.layout.value
    section["list_width"] = settings.list_width

    tmp_path = config_path.with_suffix(".toml.tmp")
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
        os.replace(tmp_path, config_path)
    except OSError as e:
        raise ConfigError(f"Cannot write {config_path}: {e}") from e
    logger.debug("Saved config to %s", config_path)
    return config_path
