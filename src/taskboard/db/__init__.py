"""Database package."""

from ..config import Settings
from .base import UPDATABLE_FIELDS, TaskRepository
from .memory import InMemoryTaskRepository
from .mongo import MongoTaskRepository
from .sqlite import SqliteTaskRepository


def create_repository(settings: Settings) -> TaskRepository:
    """Build the repository selected by ``settings.store``."""
    if settings.store == "memory":
        return InMemoryTaskRepository()
    if settings.store == "mongo":
        return MongoTaskRepository.from_url(settings.mongo_url, settings.mongo_db)
    return SqliteTaskRepository(settings.db_path)


__all__ = [
    "UPDATABLE_FIELDS",
    "TaskRepository",
    "InMemoryTaskRepository",
    "MongoTaskRepository",
    "SqliteTaskRepository",
    "create_repository",
]
