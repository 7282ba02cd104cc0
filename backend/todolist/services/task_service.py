"""
To-Do List Backend — Task Service (Task Store Operations)
===========================================================

What:  The three store operations behind the API: insert, list all, delete by id.
Why:   Keeps persistence logic independent of HTTP concerns.
Who:   Called by route handlers in routes/tasks.py.

Error boundary:
    Every store call is wrapped so that any failure (database unreachable,
    connection dropped, lock timeout) surfaces as DatabaseError. The global
    handler maps that to a 500 response; the original exception is only logged.

Design:
    TaskService is stateless and receives the session for each call, so each
    request works in its own transaction and tests can pass a mock session.
"""

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from todolist.exceptions import DatabaseError
from todolist.models.task import Task
from todolist.schemas.task import TaskResponse

logger = logging.getLogger(__name__)


def _to_response(task: Task) -> TaskResponse:
    return TaskResponse(id=task.id, text=task.text, completed=task.completed)


class TaskService:
    """
    Store operations for tasks.

    Responsibilities:
        - insert(): persist a new task and return it with its assigned id
        - list_all(): every stored task, oldest first
        - delete_by_id(): idempotent removal
    """

    async def insert(self, db: AsyncSession, text: str, completed: bool) -> TaskResponse:
        """
        Persist a new task.

        The id is assigned by the model default during flush, then the
        transaction is committed before returning so the caller only ever
        sees durable records.

        Raises:
            DatabaseError: the insert or commit failed
        """
        task = Task(text=text, completed=completed)
        try:
            db.add(task)
            await db.flush()
            await db.commit()
        except Exception as e:
            logger.error("Database error inserting task: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the task. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Task %s created", task.id)
        return _to_response(task)

    async def list_all(self, db: AsyncSession) -> List[TaskResponse]:
        """
        Return every stored task ordered by creation time (oldest first).
        Rows created in the same instant come back in id order.

        Raises:
            DatabaseError: the query failed
        """
        try:
            result = await db.execute(select(Task).order_by(Task.created_at, Task.id))
            tasks = list(result.scalars().all())
        except Exception as e:
            logger.error("Database error listing tasks: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve tasks. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [_to_response(task) for task in tasks]

    async def delete_by_id(self, db: AsyncSession, task_id: str) -> None:
        """
        Remove the task with the given id if it exists.

        Idempotent: deleting an id that was never stored, or was already
        deleted, succeeds exactly like a real delete.

        Raises:
            DatabaseError: the delete or commit failed
        """
        try:
            result = await db.execute(delete(Task).where(Task.id == task_id))
            await db.commit()
        except Exception as e:
            logger.error("Database error deleting task %s: %s", task_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the task. Please try again.",
                context={"task_id": task_id, "error_type": type(e).__name__},
            )

        if result.rowcount:
            logger.info("Task %s deleted", task_id)
        else:
            logger.debug("Delete for unknown task %s treated as success", task_id)


task_service = TaskService()
