"""Domain service layer package."""

from __future__ import annotations

from .auth import AuthService
from .credentials import CredentialStore
from .tasks import TaskRegistry

__all__ = ["AuthService", "CredentialStore", "TaskRegistry"]
