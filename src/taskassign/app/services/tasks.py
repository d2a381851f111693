"""Task registry: the only place tasks are created, transitioned and removed."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from beanie import PydanticObjectId

from ..errors import NotFoundError, ValidationError
from ..models import Task, TaskPriority, TaskStatus, parse_object_id
from ..models.task import DueDateInPastError, collect_field_updates, new_task, stamp_update
from ..repositories import TaskRepository
from ..schemas.task import PartySummary
from .credentials import CredentialStore

logger = logging.getLogger(__name__)


def _task_id(task_id: object) -> PydanticObjectId:
    object_id = parse_object_id(task_id)
    if object_id is None:
        raise NotFoundError("Task not found")
    return object_id


class TaskRegistry:
    """High-level business orchestration for ``Task`` entities."""

    def __init__(self, credentials: CredentialStore) -> None:
        self._credentials = credentials
        self._repository = TaskRepository()

    async def assign_task(
        self,
        *,
        admin_id: str,
        assigned_to: str,
        title: str,
        description: str,
        due_date: datetime,
        priority: TaskPriority | None = None,
    ) -> Task:
        """Create a task once both the assigning admin and the assignee resolve."""
        admin = await self._credentials.get_admin(admin_id)
        user = await self._credentials.get_user(assigned_to)
        try:
            task = new_task(
                title=title,
                description=description,
                due_date=due_date,
                priority=priority,
                assigned_to=user.id,
                assigned_by=admin.id,
            )
        except DueDateInPastError as exc:
            raise ValidationError(str(exc), details={"field": "dueDate"}) from exc
        await self._repository.add(task)
        logger.info(
            "Task assigned",
            extra={"task_id": str(task.id), "assigned_to": str(user.id), "assigned_by": str(admin.id)},
        )
        return task

    async def list_tasks(self) -> list[Task]:
        """Return all tasks in the system."""
        return await self._repository.list()

    async def list_tasks_for_user(self, user_id: str) -> list[Task]:
        """Return tasks assigned to ``user_id``; unknown ids simply have none."""
        object_id = parse_object_id(user_id)
        if object_id is None:
            return []
        return await self._repository.list_for_assignee(object_id)

    async def update_status(self, task_id: str, status: TaskStatus) -> Task:
        """Overwrite the status of a task; any status may follow any other."""
        task = await self._repository.update_fields(
            _task_id(task_id),
            stamp_update({"status": TaskStatus(status)}),
        )
        if task is None:
            raise NotFoundError("Task not found")
        return task

    async def update_fields(self, task_id: str, values: dict[str, Any]) -> Task:
        """Replace the editable fields carrying a truthy value; the rest stay as stored."""
        object_id = _task_id(task_id)
        changes = collect_field_updates(values)
        if "assigned_to" in changes:
            assignee = parse_object_id(changes["assigned_to"])
            if assignee is None:
                raise ValidationError("Invalid user id", details={"field": "assignedTo"})
            changes["assigned_to"] = assignee
        if "priority" in changes:
            changes["priority"] = TaskPriority(changes["priority"])
        task = await self._repository.update_fields(object_id, stamp_update(changes))
        if task is None:
            raise NotFoundError("Task not found")
        return task

    async def delete_task(self, task_id: str) -> None:
        """Remove a task; no other records are touched."""
        if not await self._repository.remove(_task_id(task_id)):
            raise NotFoundError("Task not found")
        logger.info("Task deleted", extra={"task_id": str(task_id)})

    async def summarise_parties(self, tasks: list[Task]) -> dict[str, PartySummary]:
        """Resolve the admins and users referenced by ``tasks`` into summaries keyed by id."""
        admins = await self._credentials.list_admins_by_ids([task.assigned_by for task in tasks])
        users = await self._credentials.list_users_by_ids([task.assigned_to for task in tasks])
        return {
            str(party.id): PartySummary(id=str(party.id), name=party.name, email=party.email)
            for party in [*admins, *users]
        }


__all__ = ["TaskRegistry"]
