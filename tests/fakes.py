# tests/fakes.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from taskboard.client.api import TaskApiError


class FakeClock:
    """Deterministic clock: every call is one second after the previous one."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


class FailingRepository:
    """Repository whose every data call blows up, like an unreachable store."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def init_db(self) -> None:
        pass

    def _fail(self, name: str) -> Any:
        self.calls.append(name)
        raise ConnectionError("store unreachable: secret-host:27017")

    def add(self, **fields: Any):
        return self._fail("add")

    def list_all(self):
        return self._fail("list_all")

    def update_field(self, task_id: str, field: str, value: Any) -> None:
        self._fail("update_field")

    def delete(self, task_id: str) -> None:
        self._fail("delete")


class FakeApi:
    """
    In-memory stand-in for TaskApiClient used by BoardStore tests.

    Set ``fail_with`` to make the next mutating call raise TaskApiError.
    """

    def __init__(self, tasks: list[dict[str, Any]] | None = None) -> None:
        self.tasks = tasks or []
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.fail_with: str | None = None

    def _call(self, name: str, *args: Any) -> dict[str, Any]:
        self.calls.append((name, args))
        if self.fail_with is not None:
            message, self.fail_with = self.fail_with, None
            raise TaskApiError(message, 500)
        return {"id": args[0] if args else None}

    def list_tasks(self) -> list[dict[str, Any]]:
        self.calls.append(("list_tasks", ()))
        if self.fail_with is not None:
            raise TaskApiError(self.fail_with)
        return [dict(t) for t in self.tasks]

    def create_task(self, title: str, priority: str = "medium", due_date: str | None = None):
        self._call("create_task", title, priority, due_date)
        return {
            "id": f"t{len(self.calls)}",
            "title": title,
            "priority": priority,
            "dueDate": due_date,
            "completed": False,
            "createdAt": "2025-01-01T12:00:00Z",
        }

    def set_completed(self, task_id: str, completed: bool):
        return self._call("set_completed", task_id, completed)

    def rename(self, task_id: str, title: str):
        return self._call("rename", task_id, title)

    def reprioritize(self, task_id: str, priority: str):
        return self._call("reprioritize", task_id, priority)

    def reschedule(self, task_id: str, due_date: str | None):
        return self._call("reschedule", task_id, due_date)

    def delete(self, task_id: str):
        return self._call("delete", task_id)
