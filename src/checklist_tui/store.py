"""SQLite task store.

A single ``task`` table keyed by task id. Every sqlite3 failure is
re-raised as StoreError so callers never see driver exceptions.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from checklist_tui.errors import StoreError
from checklist_tui.models import Status, Task, Urgency

logger = logging.getLogger(__name__)

MEMORY = ":memory:"

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS task (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    latest TEXT NOT NULL DEFAULT '',
    urgency TEXT NOT NULL,
    status TEXT NOT NULL,
    tags TEXT NOT NULL DEFAULT '[]',
    created_at TEXT NOT NULL,
    completed_at TEXT
)
"""

COLUMNS = (
    "id",
    "name",
    "description",
    "latest",
    "urgency",
    "status",
    "tags",
    "created_at",
    "completed_at",
)


def _task_to_row(task: Task) -> tuple:
    return (
        task.id,
        task.name,
        task.description,
        task.latest,
        task.urgency.value,
        task.status.value,
        json.dumps(sorted(task.tags)),
        task.created_at.isoformat(),
        task.completed_at.isoformat() if task.completed_at else None,
    )


def _row_to_task(row: sqlite3.Row) -> Task:
    try:
        return Task(
            id=row["id"],
            name=row["name"],
            description=row["description"] or "",
            latest=row["latest"] or "",
            urgency=Urgency(row["urgency"]),
            status=Status(row["status"]),
            tags=frozenset(json.loads(row["tags"] or "[]")),
            created_at=datetime.fromisoformat(row["created_at"]),
            completed_at=(
                datetime.fromisoformat(row["completed_at"])
                if row["completed_at"]
                else None
            ),
        )
    except (ValueError, TypeError) as e:
        raise StoreError(f"Corrupt task row {row['id']!r}: {e}") from e


@dataclass
class ImportResult:
    """Outcome of merging another database into this one."""

    imported: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


class TaskStore:
    """CRUD over the task table."""

    def __init__(self, path: Path | str = MEMORY) -> None:
        self.path = str(path)
        try:
            self._conn = sqlite3.connect(self.path)
            self._conn.row_factory = sqlite3.Row
            with self._conn:
                self._conn.execute(CREATE_TABLE_SQL)
        except sqlite3.Error as e:
            raise StoreError(f"Cannot open database {self.path}: {e}") from e
        logger.debug("Opened task store at %s", self.path)

    def __enter__(self) -> TaskStore:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    @contextmanager
    def _transaction(self, action: str) -> Iterator[sqlite3.Connection]:
        try:
            with self._conn:
                yield self._conn
        except sqlite3.IntegrityError as e:
            raise StoreError(f"Cannot {action}: {e}") from e
        except sqlite3.Error as e:
            logger.error("Database error during %s: %s", action, e)
            raise StoreError(f"Cannot {action}: {e}") from e

    # ── CRUD ──

    def create(self, task: Task) -> None:
        placeholders = ", ".join("?" for _ in COLUMNS)
        with self._transaction(f"create task {task.id}") as conn:
            conn.execute(
                f"INSERT INTO task ({', '.join(COLUMNS)}) VALUES ({placeholders})",
                _task_to_row(task),
            )
        logger.info("Created task %s", task.id)

    def update(self, task: Task) -> None:
        assignments = ", ".join(f"{c} = ?" for c in COLUMNS[1:])
        row = _task_to_row(task)
        with self._transaction(f"update task {task.id}") as conn:
            cur = conn.execute(
                f"UPDATE task SET {assignments} WHERE id = ?", (*row[1:], row[0])
            )
        if cur.rowcount == 0:
            raise StoreError(f"Task {task.id} does not exist")
        logger.info("Updated task %s", task.id)

    def delete(self, task_id: str) -> None:
        with self._transaction(f"delete task {task_id}") as conn:
            cur = conn.execute("DELETE FROM task WHERE id = ?", (task_id,))
        if cur.rowcount == 0:
            raise StoreError(f"Task {task_id} does not exist")
        logger.info("Deleted task %s", task_id)

    def get(self, task_id: str) -> Task | None:
        with self._transaction(f"read task {task_id}") as conn:
            row = conn.execute("SELECT * FROM task WHERE id = ?", (task_id,)).fetchone()
        return _row_to_task(row) if row is not None else None

    def fetch_all(self) -> list[Task]:
        """Every task, in no particular order."""
        with self._transaction("read tasks") as conn:
            rows = conn.execute("SELECT * FROM task").fetchall()
        return [_row_to_task(r) for r in rows]

    # ── Maintenance ──

    def wipe(self, hard: bool = False) -> None:
        """Delete every task. With *hard*, drop and recreate the table."""
        with self._transaction("wipe tasks") as conn:
            if hard:
                conn.execute("DROP TABLE IF EXISTS task")
                conn.execute(CREATE_TABLE_SQL)
            else:
                conn.execute("DELETE FROM task")
        logger.warning("Wiped task store %s (hard=%s)", self.path, hard)

    def import_from(self, path: Path) -> ImportResult:
        """Copy tasks from the database at *path*; ids already present are skipped."""
        if not path.is_file():
            raise StoreError(f"No database at {path}")
        result = ImportResult()
        with TaskStore(path) as other:
            for task in other.fetch_all():
                try:
                    self.create(task)
                except StoreError:
                    logger.warning("Skipped importing task %s", task.id)
                    result.skipped.append(task.id)
                else:
                    result.imported.append(task.id)
        return result
