"""Task store gateway: validated operations over a task repository."""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any

from .db import TaskRepository
from .errors import TaskServiceError
from .models import Priority, Task
from .validation import (
    require_priority,
    validate_completed,
    validate_due_date,
    validate_priority,
    validate_title,
)

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@contextmanager
def _service_call(message: str) -> Iterator[None]:
    """Turn any repository failure into a TaskServiceError with ``message``."""
    try:
        yield
    except Exception as e:
        logger.exception("%s: %s", message, e)
        raise TaskServiceError(message) from e


class TaskGateway:
    """One method per API operation.

    Validation always runs before the repository is touched, so a rejected
    request never causes a partial write.
    """

    def __init__(self, repository: TaskRepository, clock: Callable[[], datetime] = utc_now):
        self.repository = repository
        self.clock = clock

    def list_tasks(self) -> list[Task]:
        with _service_call("Failed to fetch tasks"):
            return self.repository.list_all()

    def create_task(self, title: Any, priority: Any = None, due_date: Any = None) -> Task:
        title = validate_title(title)
        priority = validate_priority(priority)
        due_date = validate_due_date(due_date)

        with _service_call("Failed to create task"):
            task = self.repository.add(
                title=title,
                priority=priority.value,
                due_date=due_date,
                completed=False,
                created_at=self.clock(),
            )
        logger.info("Created task %s (%s)", task.id, task.priority.value)
        return task

    def set_completed(self, task_id: str, completed: Any) -> bool:
        completed = validate_completed(completed)
        with _service_call("Failed to update task"):
            self.repository.update_field(task_id, "completed", completed)
        return completed

    def rename(self, task_id: str, title: Any) -> str:
        title = validate_title(title)
        with _service_call("Failed to update title"):
            self.repository.update_field(task_id, "title", title)
        return title

    def reprioritize(self, task_id: str, priority: Any) -> Priority:
        priority = require_priority(priority)
        with _service_call("Failed to update priority"):
            self.repository.update_field(task_id, "priority", priority.value)
        return priority

    def reschedule(self, task_id: str, due_date: Any) -> str | None:
        due_date = validate_due_date(due_date)
        with _service_call("Failed to update dueDate"):
            self.repository.update_field(task_id, "due_date", due_date)
        return due_date

    def delete(self, task_id: str) -> None:
        with _service_call("Failed to delete task"):
            self.repository.delete(task_id)
        logger.info("Deleted task %s", task_id)
