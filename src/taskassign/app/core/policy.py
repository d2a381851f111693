"""Role policy deciding whether an authenticated identity may run an operation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..models.common import Role
from .guard import Identity


class Operation(str, Enum):
    """Protected operations exposed by the service."""

    LIST_ALL_TASKS = "list_all_tasks"
    LIST_OWN_TASKS = "list_own_tasks"
    ASSIGN_TASK = "assign_task"
    UPDATE_TASK_STATUS = "update_task_status"
    UPDATE_TASK_FIELDS = "update_task_fields"
    DELETE_TASK = "delete_task"
    READ_ADMIN_PROFILE = "read_admin_profile"
    READ_OWN_PROFILE = "read_own_profile"
    LIST_USERS = "list_users"
    READ_ROLE = "read_role"


@dataclass(frozen=True, slots=True)
class PolicyDecision:
    """Outcome of the authorization stage."""

    permitted: bool
    reason: str | None = None


PERMIT = PolicyDecision(permitted=True)

# Operations restricted to a role, with the message returned on denial.
_ROLE_REQUIREMENTS: dict[Operation, tuple[Role, str]] = {
    Operation.LIST_ALL_TASKS: (Role.ADMIN, "Only admins can fetch all tasks"),
    Operation.ASSIGN_TASK: (Role.ADMIN, "Only admins can assign tasks"),
}


def authorize(identity: Identity, operation: Operation) -> PolicyDecision:
    """Map ``(identity.role, operation)`` to permit or deny."""

    if not identity.role:
        return PolicyDecision(permitted=False, reason="Role not found")
    requirement = _ROLE_REQUIREMENTS.get(operation)
    if requirement is None:
        return PERMIT
    required_role, reason = requirement
    if identity.role is not required_role:
        return PolicyDecision(permitted=False, reason=reason)
    return PERMIT


__all__ = ["Operation", "PERMIT", "PolicyDecision", "authorize"]
