"""MongoDB-backed task repository (hosted document store)."""

import logging
from datetime import datetime
from typing import Any

from pymongo import DESCENDING, MongoClient
from pymongo.collection import Collection
from ulid import ULID

from ..errors import TaskNotFoundError
from ..models import Task
from .base import check_field

logger = logging.getLogger(__name__)

COLLECTION_NAME = "tasks"

# Task attribute -> document key. Documents keep the API's camelCase keys.
DOCUMENT_KEYS = {
    "title": "title",
    "priority": "priority",
    "due_date": "dueDate",
    "completed": "completed",
}


class MongoTaskRepository:
    """Task documents stored in one collection, keyed by a ULID ``_id``."""

    def __init__(self, collection: Collection):
        self.collection = collection

    @classmethod
    def from_url(cls, url: str, database: str) -> "MongoTaskRepository":
        client: MongoClient = MongoClient(url, tz_aware=True)
        return cls(client[database][COLLECTION_NAME])

    def init_db(self) -> None:
        self.collection.create_index([("createdAt", DESCENDING)])
        logger.info("Mongo task collection ready: %s", self.collection.full_name)

    @staticmethod
    def _doc_to_task(doc: dict[str, Any]) -> Task:
        return Task(
            id=str(doc["_id"]),
            title=doc["title"],
            priority=doc.get("priority") or "medium",
            due_date=doc.get("dueDate"),
            completed=bool(doc.get("completed", False)),
            created_at=doc["createdAt"],
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
        doc = {
            "_id": str(ULID()),
            "title": title,
            "priority": priority,
            "dueDate": due_date,
            "completed": completed,
            "createdAt": created_at,
        }
        self.collection.insert_one(doc)
        return self._doc_to_task(doc)

    def list_all(self) -> list[Task]:
        cursor = self.collection.find({}).sort("createdAt", DESCENDING)
        return [self._doc_to_task(doc) for doc in cursor]

    def update_field(self, task_id: str, field: str, value: Any) -> None:
        check_field(field)
        result = self.collection.update_one(
            {"_id": task_id}, {"$set": {DOCUMENT_KEYS[field]: value}}
        )
        if result.matched_count == 0:
            raise TaskNotFoundError(task_id)

    def delete(self, task_id: str) -> None:
        self.collection.delete_one({"_id": task_id})
