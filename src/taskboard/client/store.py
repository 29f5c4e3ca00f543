"""Client-side task state: an in-memory mirror of the server's task list."""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from typing import Any

from ..models import Priority
from .api import TaskApiClient, TaskApiError

logger = logging.getLogger(__name__)

ALL = "all"
FILTERS = [ALL] + [p.value for p in Priority]

TaskDict = dict[str, Any]


def task_priority(task: TaskDict) -> str:
    """Priority of a mirrored task; records without one count as medium."""
    return (task.get("priority") or Priority.MEDIUM.value).lower()


class BoardStore:
    """Holds the task list and funnels every change through an action method.

    Actions other than :meth:`add` are optimistic: local state changes first,
    then the API call is made. If the call fails the list is restored from a
    snapshot and the message is kept in :attr:`error`.
    """

    def __init__(self, api: TaskApiClient) -> None:
        self.api = api
        self.tasks: list[TaskDict] = []
        self.error: str = ""

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def load(self) -> bool:
        """Fetch the full list once. Returns False (and sets error) on failure."""
        try:
            self.tasks = list(self.api.list_tasks())
        except TaskApiError as e:
            self.error = e.message
            return False
        return True

    def visible(self, priority_filter: str = ALL) -> list[TaskDict]:
        """Tasks matching ``priority_filter``, in list order. Never re-fetches."""
        key = priority_filter.lower()
        if key == ALL:
            return list(self.tasks)
        wanted = Priority(key).value
        return [t for t in self.tasks if task_priority(t) == wanted]

    def counts(self, priority_filter: str = ALL) -> tuple[int, int]:
        return len(self.visible(priority_filter)), len(self.tasks)

    def find(self, task_id: str) -> TaskDict | None:
        for task in self.tasks:
            if task["id"] == task_id:
                return task
        return None

    def clear_error(self) -> None:
        self.error = ""

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def add(self, title: str, priority: str = "medium", due_date: str | None = None) -> TaskDict | None:
        """Create a task. Waits for the server so the new id is known."""
        self.clear_error()
        trimmed = title.strip()
        if not trimmed:
            self.error = "Title is required"
            return None
        try:
            task = self.api.create_task(trimmed, priority, due_date or None)
        except TaskApiError as e:
            self.error = e.message
            return None
        self.tasks.insert(0, task)
        return task

    def toggle(self, task_id: str, completed: bool) -> bool:
        return self._optimistic(
            task_id,
            lambda t: t.update(completed=completed),
            lambda: self.api.set_completed(task_id, completed),
        )

    def rename(self, task_id: str, title: str) -> bool:
        trimmed = title.strip()
        if not trimmed:
            self.error = "Title is required"
            return False
        return self._optimistic(
            task_id,
            lambda t: t.update(title=trimmed),
            lambda: self.api.rename(task_id, trimmed),
        )

    def reprioritize(self, task_id: str, priority: str) -> bool:
        return self._optimistic(
            task_id,
            lambda t: t.update(priority=priority.lower()),
            lambda: self.api.reprioritize(task_id, priority),
        )

    def reschedule(self, task_id: str, due_date: str | None) -> bool:
        task = self.find(task_id)
        if task is not None and task.get("completed"):
            self.error = "You can't edit completed tasks"
            return False
        due_date = due_date or None
        return self._optimistic(
            task_id,
            lambda t: t.update(dueDate=due_date),
            lambda: self.api.reschedule(task_id, due_date),
        )

    def remove(self, task_id: str) -> bool:
        def drop(_: TaskDict) -> None:
            self.tasks = [t for t in self.tasks if t["id"] != task_id]

        return self._optimistic(task_id, drop, lambda: self.api.delete(task_id))

    def _optimistic(
        self,
        task_id: str,
        mutate: Callable[[TaskDict], None],
        call: Callable[[], Any],
    ) -> bool:
        self.clear_error()
        task = self.find(task_id)
        if task is None:
            self.error = "Task not found"
            return False

        snapshot = copy.deepcopy(self.tasks)
        mutate(task)
        try:
            call()
        except TaskApiError as e:
            logger.info("Rolling back change to task %s: %s", task_id, e.message)
            self.tasks = snapshot
            self.error = e.message
            return False
        return True
