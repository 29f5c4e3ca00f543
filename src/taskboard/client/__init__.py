"""Client package: API wrapper, in-memory board store and terminal UI."""

from .api import TaskApiClient, TaskApiError
from .store import FILTERS, BoardStore

__all__ = ["TaskApiClient", "TaskApiError", "BoardStore", "FILTERS"]
