"""
To-Do List Backend — Task Route Handlers
==========================================

What:  GET /tasks (list), POST /tasks (create), DELETE /tasks/{task_id} (delete).
Why:   The HTTP surface consumed by the client view.
How:   Each handler makes exactly one TaskService call and returns its result.
       Store failures propagate as DatabaseError to the global handler (→ 500).
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from todolist.database import get_db_session
from todolist.schemas.task import ErrorResponse, TaskCreate, TaskResponse
from todolist.services.task_service import task_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["Tasks"])

DELETE_CONFIRMATION = "Task deleted"


@router.get(
    "",
    response_model=List[TaskResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all tasks",
)
async def list_tasks(db: AsyncSession = Depends(get_db_session)) -> List[TaskResponse]:
    """Every stored task, oldest first. An empty store returns `[]`."""
    return await task_service.list_all(db)


@router.post(
    "",
    response_model=TaskResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Create a task",
    description=(
        "Stores a new task and returns it with its assigned `_id`. "
        "`task` must be a string; `completed` must be a boolean and defaults to false."
    ),
)
async def create_task(
    payload: TaskCreate,
    db: AsyncSession = Depends(get_db_session),
) -> TaskResponse:
    return await task_service.insert(db, text=payload.text, completed=payload.completed)


@router.delete(
    "/{task_id}",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Plain text confirmation, also returned for unknown ids"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a task",
)
async def delete_task(
    task_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> PlainTextResponse:
    """
    Delete a task by id.

    Removal is idempotent: an unknown id gets the same confirmation as an
    existing one, so callers can safely repeat a delete.
    """
    await task_service.delete_by_id(db, task_id)
    return PlainTextResponse(DELETE_CONFIRMATION)
