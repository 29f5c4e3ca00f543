"""SQLite database operations for tasks."""

import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Iterator

from ulid import ULID

from ..errors import TaskNotFoundError
from ..models import Task
from .base import check_field

logger = logging.getLogger(__name__)


class SqliteTaskRepository:
    """Task repository backed by a local SQLite file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def get_connection(self) -> sqlite3.Connection:
        """Get a database connection with WAL mode enabled."""
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    @contextmanager
    def get_db(self) -> Iterator[sqlite3.Connection]:
        """Context manager for database connections."""
        conn = self.get_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_db(self) -> None:
        """Initialize the database schema."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.get_db() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS tasks (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL,
                    priority TEXT NOT NULL DEFAULT 'medium',
                    due_date TEXT,
                    completed INTEGER NOT NULL DEFAULT 0,
                    created_at TEXT NOT NULL
                )
            """)
            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_tasks_created_at
                ON tasks(created_at)
            """)
        logger.info("SQLite task store ready at %s", self.path)

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=row["id"],
            title=row["title"],
            priority=row["priority"],
            due_date=row["due_date"],
            completed=bool(row["completed"]),
            created_at=datetime.fromisoformat(row["created_at"]),
        )

    def add(
        self,
        *,
        title: str,
        priority: str,
        due_date: str | None,
        completed: bool,
        created_at: datetime,
    ) -> Task:
        task_id = str(ULID())
        with self.get_db() as conn:
            conn.execute(
                """
                INSERT INTO tasks (id, title, priority, due_date, completed, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    task_id,
                    title,
                    priority,
                    due_date,
                    int(completed),
                    # Fixed width so lexical order matches time order.
                    created_at.isoformat(timespec="microseconds"),
                ),
            )
        return Task(
            id=task_id,
            title=title,
            priority=priority,
            due_date=due_date,
            completed=completed,
            created_at=created_at,
        )

    def list_all(self) -> list[Task]:
        with self.get_db() as conn:
            cursor = conn.execute("SELECT * FROM tasks ORDER BY created_at DESC")
            return [self._row_to_task(row) for row in cursor.fetchall()]

    def update_field(self, task_id: str, field: str, value: Any) -> None:
        check_field(field)
        if field == "completed":
            value = int(value)
        with self.get_db() as conn:
            cursor = conn.execute(
                f"UPDATE tasks SET {field} = ? WHERE id = ?",
                (value, task_id),
            )
            if cursor.rowcount == 0:
                raise TaskNotFoundError(task_id)

    def delete(self, task_id: str) -> None:
        with self.get_db() as conn:
            conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
