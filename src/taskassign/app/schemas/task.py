"""Task-related Pydantic schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Mapping

from pydantic import ConfigDict, Field, field_validator

from ..models import Task, TaskPriority, TaskStatus
from .base import CamelModel

TASK_READ_EXAMPLE = {
    "id": "665f1c2e9b1d4a7f0c3e2a10",
    "title": "Prepare quarterly report",
    "description": "Collect figures from finance and draft the summary.",
    "dueDate": "2030-01-15T17:00:00Z",
    "status": TaskStatus.PENDING.value,
    "priority": TaskPriority.HIGH.value,
    "assignedTo": "665f1c2e9b1d4a7f0c3e2a0b",
    "assignedBy": "665f1c2e9b1d4a7f0c3e2a01",
    "createdAt": "2029-12-01T09:00:00Z",
    "updatedAt": "2029-12-01T09:00:00Z",
}


class TaskAssignRequest(CamelModel):
    """Payload for creating and assigning a new task."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Prepare quarterly report",
                "description": "Collect figures from finance and draft the summary.",
                "dueDate": "2030-01-15T17:00:00Z",
                "priority": TaskPriority.HIGH.value,
                "assignedTo": "665f1c2e9b1d4a7f0c3e2a0b",
            }
        },
    )

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    due_date: datetime
    priority: TaskPriority | None = None
    assigned_to: str = Field(min_length=1)


class TaskStatusUpdate(CamelModel):
    """Payload for moving a task to another status."""

    status: TaskStatus


class TaskUpdate(CamelModel):
    """Payload for partially updating an existing task.

    Omitted and empty values leave the stored field unchanged.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"title": "Prepare annual report", "priority": "Medium"}},
    )

    title: str | None = Field(default=None, max_length=255)
    description: str | None = None
    due_date: datetime | None = None
    priority: TaskPriority | None = None
    assigned_to: str | None = None

    @field_validator("due_date", "priority", mode="before")
    @classmethod
    def _blank_as_missing(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PartySummary(CamelModel):
    """Name and email of an admin or user referenced by a task."""

    id: str
    name: str
    email: str


class TaskRead(CamelModel):
    """Public representation of a task."""

    model_config = ConfigDict(
        json_schema_extra={"example": TASK_READ_EXAMPLE},
    )

    id: str
    title: str
    description: str
    due_date: datetime
    status: TaskStatus
    priority: TaskPriority
    assigned_to: PartySummary | str
    assigned_by: PartySummary | str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_document(
        cls,
        task: Task,
        *,
        parties: Mapping[str, PartySummary] | None = None,
        populate: tuple[str, ...] = (),
    ) -> "TaskRead":
        """Build the public view, swapping referenced ids for summaries in ``populate``."""

        lookup = parties or {}
        references: dict[str, PartySummary | str] = {}
        for field_name in ("assigned_to", "assigned_by"):
            ref = str(getattr(task, field_name))
            references[field_name] = lookup.get(ref, ref) if field_name in populate else ref
        return cls(
            id=str(task.id),
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            status=task.status,
            priority=task.priority,
            created_at=task.created_at,
            updated_at=task.updated_at,
            **references,
        )


class TaskUpdateResponse(CamelModel):
    """Acknowledgement returned after a field update."""

    message: str = "Task updated successfully"
    task: TaskRead


__all__ = [
    "PartySummary",
    "TaskAssignRequest",
    "TaskRead",
    "TaskStatusUpdate",
    "TaskUpdate",
    "TaskUpdateResponse",
]
