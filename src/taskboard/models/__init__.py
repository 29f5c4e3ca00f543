"""Models package."""

from .task import (
    CompletedResponse,
    CompletedUpdate,
    DeletedResponse,
    DueDateResponse,
    DueDateUpdate,
    Priority,
    PriorityResponse,
    PriorityUpdate,
    Task,
    TaskCreate,
    TitleResponse,
    TitleUpdate,
)

__all__ = [
    "Priority",
    "Task",
    "TaskCreate",
    "CompletedUpdate",
    "TitleUpdate",
    "PriorityUpdate",
    "DueDateUpdate",
    "CompletedResponse",
    "TitleResponse",
    "PriorityResponse",
    "DueDateResponse",
    "DeletedResponse",
]
