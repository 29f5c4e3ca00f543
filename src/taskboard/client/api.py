"""HTTP client for the task API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class TaskApiError(Exception):
    """A request failed: non-2xx status or transport error."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class TaskApiClient:
    """Thin wrapper: one method per API route, JSON dicts in and out.

    Pass ``http_client`` to reuse an existing ``httpx.Client`` (for example a
    FastAPI ``TestClient``); otherwise one is created for ``base_url``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if http_client is None:
            if base_url is None:
                raise ValueError("base_url or http_client is required")
            http_client = httpx.Client(base_url=base_url, timeout=timeout)
        self._http = http_client

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "TaskApiClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def _request(self, method: str, path: str, fallback: str, json: Any = None) -> Any:
        try:
            resp = self._http.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise TaskApiError(fallback) from e

        if resp.is_success:
            try:
                return resp.json()
            except ValueError as e:
                logger.warning("%s %s returned a non-JSON body", method, path)
                raise TaskApiError(fallback, resp.status_code) from e

        message = fallback
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            message = str(body["error"])
        logger.debug("%s %s -> %d %s", method, path, resp.status_code, message)
        raise TaskApiError(message, resp.status_code)

    def list_tasks(self) -> list[dict[str, Any]]:
        return self._request("GET", "/tasks", "Failed to load tasks")

    def create_task(
        self, title: str, priority: str = "medium", due_date: str | None = None
    ) -> dict[str, Any]:
        payload = {"title": title, "priority": priority, "dueDate": due_date}
        return self._request("POST", "/tasks", "Failed to create task", payload)

    def set_completed(self, task_id: str, completed: bool) -> dict[str, Any]:
        return self._request(
            "PATCH", f"/tasks/{task_id}", "Failed to update task", {"completed": completed}
        )

    def rename(self, task_id: str, title: str) -> dict[str, Any]:
        return self._request(
            "PATCH", f"/tasks/{task_id}/title", "Failed to update title", {"title": title}
        )

    def reprioritize(self, task_id: str, priority: str) -> dict[str, Any]:
        return self._request(
            "PATCH",
            f"/tasks/{task_id}/priority",
            "Failed to update priority",
            {"priority": priority},
        )

    def reschedule(self, task_id: str, due_date: str | None) -> dict[str, Any]:
        return self._request(
            "PATCH",
            f"/tasks/{task_id}/dueDate",
            "Failed to update due date",
            {"dueDate": due_date},
        )

    def delete(self, task_id: str) -> dict[str, Any]:
        return self._request("DELETE", f"/tasks/{task_id}", "Failed to delete task")

    def health(self) -> bool:
        try:
            resp = self._http.get("/health")
        except httpx.HTTPError:
            return False
        return resp.status_code == 200 and resp.text == "ok"
