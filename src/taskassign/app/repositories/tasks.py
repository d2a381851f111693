"""Repository for interacting with task documents."""

from __future__ import annotations

from typing import Any

from beanie import PydanticObjectId, UpdateResponse
from beanie.operators import Set

from ..models import Task
from .base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """Concrete repository encapsulating ``Task`` persistence operations.

    Mutations go through single-document atomic primitives so concurrent
    requests cannot lose each other's writes between a load and a save.
    """

    def __init__(self) -> None:
        super().__init__(Task)

    async def list_for_assignee(self, user_id: PydanticObjectId) -> list[Task]:
        """Return all tasks assigned to the given user."""
        return await Task.find(Task.assigned_to == user_id).to_list()

    async def update_fields(self, task_id: PydanticObjectId, changes: dict[str, Any]) -> Task | None:
        """Atomically apply ``changes`` and return the updated task, or ``None`` if absent."""
        return await Task.find_one(Task.id == task_id).update(
            Set(changes),
            response_type=UpdateResponse.NEW_DOCUMENT,
        )

    async def remove(self, task_id: PydanticObjectId) -> bool:
        """Atomically find and delete a task, returning ``True`` iff one was removed."""
        removed = await Task.get_motor_collection().find_one_and_delete({"_id": task_id})
        return removed is not None
