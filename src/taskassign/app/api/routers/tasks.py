"""Task listing, assignment and mutation routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Header, status

from ...core.guard import Identity
from ...core.policy import Operation
from ...deps import TaskRegistryDependency, require
from ...errors import BadRequestError
from ...schemas import (
    MessageResponse,
    TaskAssignRequest,
    TaskRead,
    TaskStatusUpdate,
    TaskUpdate,
    TaskUpdateResponse,
)

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("/user", response_model=list[TaskRead], summary="List tasks assigned to the caller")
async def list_own_tasks(
    identity: Annotated[Identity, Depends(require(Operation.LIST_OWN_TASKS))],
    tasks: TaskRegistryDependency,
) -> list[TaskRead]:
    records = await tasks.list_tasks_for_user(identity.subject_id)
    parties = await tasks.summarise_parties(records)
    return [
        TaskRead.from_document(task, parties=parties, populate=("assigned_by",))
        for task in records
    ]


@router.get("", response_model=list[TaskRead], summary="List every task")
async def list_all_tasks(
    _: Annotated[Identity, Depends(require(Operation.LIST_ALL_TASKS))],
    tasks: TaskRegistryDependency,
) -> list[TaskRead]:
    records = await tasks.list_tasks()
    parties = await tasks.summarise_parties(records)
    return [
        TaskRead.from_document(task, parties=parties, populate=("assigned_to", "assigned_by"))
        for task in records
    ]


@router.post(
    "/assign",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task and assign it to a user",
)
async def assign_task(
    payload: TaskAssignRequest,
    _: Annotated[Identity, Depends(require(Operation.ASSIGN_TASK))],
    tasks: TaskRegistryDependency,
    admin_id: Annotated[str | None, Header(alias="admin-id")] = None,
) -> TaskRead:
    if not admin_id:
        raise BadRequestError("Admin ID is missing in headers")
    task = await tasks.assign_task(
        admin_id=admin_id,
        assigned_to=payload.assigned_to,
        title=payload.title,
        description=payload.description,
        due_date=payload.due_date,
        priority=payload.priority,
    )
    return TaskRead.from_document(task)


@router.patch(
    "/{task_id}/status",
    response_model=MessageResponse,
    summary="Move a task to another status",
)
async def update_task_status(
    task_id: str,
    payload: TaskStatusUpdate,
    _: Annotated[Identity, Depends(require(Operation.UPDATE_TASK_STATUS))],
    tasks: TaskRegistryDependency,
) -> MessageResponse:
    await tasks.update_status(task_id, payload.status)
    return MessageResponse(message="Task status updated successfully")


@router.patch("/{task_id}", response_model=TaskUpdateResponse, summary="Edit task fields")
async def update_task(
    task_id: str,
    payload: TaskUpdate,
    _: Annotated[Identity, Depends(require(Operation.UPDATE_TASK_FIELDS))],
    tasks: TaskRegistryDependency,
) -> TaskUpdateResponse:
    task = await tasks.update_fields(task_id, payload.model_dump())
    return TaskUpdateResponse(task=TaskRead.from_document(task))


@router.delete("/{task_id}", response_model=MessageResponse, summary="Delete a task")
async def delete_task(
    task_id: str,
    _: Annotated[Identity, Depends(require(Operation.DELETE_TASK))],
    tasks: TaskRegistryDependency,
) -> MessageResponse:
    await tasks.delete_task(task_id)
    return MessageResponse(message="Task deleted successfully")
