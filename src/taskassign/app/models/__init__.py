"""Document models exposed for the task assignment service."""

from __future__ import annotations

from .admin import Admin
from .common import Role, parse_object_id, utcnow
from .task import Task, TaskPriority, TaskStatus
from .user import User

DOCUMENT_MODELS = [Admin, User, Task]

__all__ = [
    "Admin",
    "DOCUMENT_MODELS",
    "Role",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "User",
    "parse_object_id",
    "utcnow",
]
