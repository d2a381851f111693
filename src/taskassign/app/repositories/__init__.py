"""Document repositories encapsulating persistence logic."""

from __future__ import annotations

from .identities import AdminRepository, UserRepository
from .tasks import TaskRepository

__all__ = ["AdminRepository", "TaskRepository", "UserRepository"]
