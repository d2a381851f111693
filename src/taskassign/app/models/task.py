"""Task documents and the explicit construction/update rules applied to them."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Any

from beanie import Document, Indexed, PydanticObjectId
from pydantic import Field

from .common import ensure_tzaware, utcnow


class TaskStatus(str, Enum):
    """Enumeration of possible task states."""

    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"

    @classmethod
    def _missing_(cls, value: object) -> "TaskStatus | None":
        if not isinstance(value, str):
            return None
        key = value.replace(" ", "").replace("_", "").lower()
        for member in cls:
            if member.value.replace(" ", "").lower() == key:
                return member
        return None


class TaskPriority(str, Enum):
    """Enumeration of task priorities."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def _missing_(cls, value: object) -> "TaskPriority | None":
        if not isinstance(value, str):
            return None
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        return None


class Task(Document):
    """Persistent task assigned by an admin to a user."""

    title: str = Field(max_length=255)
    description: str
    due_date: datetime
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    assigned_to: Annotated[PydanticObjectId, Indexed()]
    assigned_by: Annotated[PydanticObjectId, Indexed()]
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "tasks"


class DueDateInPastError(ValueError):
    """Raised when a task is created with a due date before its creation time."""


# Fields the partial update may touch; status has its own transition.
EDITABLE_FIELDS = ("title", "description", "due_date", "priority", "assigned_to")


def new_task(
    *,
    title: str,
    description: str,
    due_date: datetime,
    assigned_to: PydanticObjectId,
    assigned_by: PydanticObjectId,
    priority: TaskPriority | None = None,
    now: datetime | None = None,
) -> Task:
    """Build a task, enforcing the creation-time due date rule."""

    created_at = ensure_tzaware(now or utcnow())
    due = ensure_tzaware(due_date)
    if due < created_at:
        raise DueDateInPastError("Due date cannot be in the past")
    return Task(
        title=title,
        description=description,
        due_date=due,
        priority=priority or TaskPriority.MEDIUM,
        status=TaskStatus.PENDING,
        assigned_to=assigned_to,
        assigned_by=assigned_by,
        created_at=created_at,
        updated_at=created_at,
    )


def collect_field_updates(values: dict[str, Any]) -> dict[str, Any]:
    """Keep only editable fields carrying a truthy value.

    Empty strings and other falsy values leave the stored field untouched, so a
    partial update cannot clear a field.
    """

    return {name: values[name] for name in EDITABLE_FIELDS if values.get(name)}


def stamp_update(changes: dict[str, Any], now: datetime | None = None) -> dict[str, Any]:
    """Return ``changes`` with a refreshed ``updated_at`` timestamp."""

    return {**changes, "updated_at": now or utcnow()}


__all__ = [
    "DueDateInPastError",
    "EDITABLE_FIELDS",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "collect_field_updates",
    "new_task",
    "stamp_update",
]
