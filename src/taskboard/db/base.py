"""Repository boundary between the gateway and the concrete task stores."""

from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from ..models import Task

# Fields a single targeted update may touch. Keys are Task attribute names.
UPDATABLE_FIELDS = frozenset({"title", "priority", "due_date", "completed"})


def check_field(field: str) -> None:
    if field not in UPDATABLE_FIELDS:
        raise ValueError(f"Field {field!r} cannot be updated")


@runtime_checkable
class TaskRepository(Protocol):
    """Persistence capability used by the gateway.

    Implementations assign ids, keep ``created_at`` immutable and return
    tasks newest first from :meth:`list_all`.
    """

    def init_db(self) -> None:
        """Prepare schema/indexes. Called once at startup."""

    def add(
        self,
        *,
        title: str,
        priority: str,
        due_date: str | None,
        completed: bool,
        created_at: datetime,
    ) -> Task:
        """Persist a new task and return it with its assigned id."""

    def list_all(self) -> list[Task]:
        """Return every task ordered by ``created_at`` descending."""

    def update_field(self, task_id: str, field: str, value: Any) -> None:
        """Set one field. Raises TaskNotFoundError for an unknown id."""

    def delete(self, task_id: str) -> None:
        """Remove a task. Unknown ids are ignored."""
