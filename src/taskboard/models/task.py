"""Pydantic models for task API."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Priority(str, Enum):
    """Task priority enumeration."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys (dueDate, createdAt)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Request bodies
#
# Fields are untyped: the validation layer owns the rules and
# the error messages, so pydantic must not coerce "yes" into True.
# =============================================================================


class TaskCreate(CamelModel):
    """Request model for creating a task."""

    title: Any = None
    priority: Any = None
    due_date: Any = None


class CompletedUpdate(CamelModel):
    completed: Any = None


class TitleUpdate(CamelModel):
    title: Any = None


class PriorityUpdate(CamelModel):
    priority: Any = None


class DueDateUpdate(CamelModel):
    due_date: Any = None


# =============================================================================
# Stored entity / responses
# =============================================================================


class Task(CamelModel):
    """A stored task as returned by the repositories and the API."""

    id: str
    title: str
    priority: Priority = Priority.MEDIUM
    due_date: str | None = None
    completed: bool = False
    created_at: datetime


class CompletedResponse(CamelModel):
    id: str
    completed: bool


class TitleResponse(CamelModel):
    id: str
    title: str


class PriorityResponse(CamelModel):
    id: str
    priority: Priority


class DueDateResponse(CamelModel):
    id: str
    due_date: str | None


class DeletedResponse(CamelModel):
    id: str
