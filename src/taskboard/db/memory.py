"""In-process task repository. Data is lost when the process exits."""

import threading
from datetime import datetime
from typing import Any

from ulid import ULID

from ..errors import TaskNotFoundError
from ..models import Task
from .base import check_field


class InMemoryTaskRepository:
    """
    Dict-backed store for tests and local demos.
    Swap for SqliteTaskRepository/MongoTaskRepository without touching routes.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        # Guards read-modify-write in update_field; routes run in a threadpool.
        self._lock = threading.Lock()

    def init_db(self) -> None:
        pass

    def add(
        self,
        *,
        title: str,
        priority: str,
        due_date: str | None,
        completed: bool,
        created_at: datetime,
    ) -> Task:
        task = Task(
            id=str(ULID()),
            title=title,
            priority=priority,
            due_date=due_date,
            completed=completed,
            created_at=created_at,
        )
        with self._lock:
            self._tasks[task.id] = task
        return task.model_copy()

    def list_all(self) -> list[Task]:
        # newest first
        with self._lock:
            snapshot = list(self._tasks.values())
        tasks = sorted(snapshot, key=lambda t: t.created_at, reverse=True)
        return [t.model_copy() for t in tasks]

    def update_field(self, task_id: str, field: str, value: Any) -> None:
        check_field(field)
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            self._tasks[task_id] = Task.model_validate({**task.model_dump(), field: value})

    def delete(self, task_id: str) -> None:
        with self._lock:
            self._tasks.pop(task_id, None)
