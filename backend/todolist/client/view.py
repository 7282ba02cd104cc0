"""
To-Do List Client — Task List View
====================================

What:  The client's state: the task list it shows and the text being typed.
How:   Local cache plus remote commands. The list only changes after the
       server confirms; the one exception is clearing the input field,
       which happens at submit time.

Consistency:
    The list is refreshed only by mount(). Changes made to the store by
    anyone else are not seen until the next mount.
"""

import logging
from typing import List, Optional

from todolist.client.api import TaskApiClient
from todolist.exceptions import TaskClientError
from todolist.schemas.task import TaskResponse

logger = logging.getLogger(__name__)


class TaskListView:
    """
    State holder for the task list screen.

    Attributes:
        tasks:        ordered tasks from the last fetch plus confirmed local changes
        pending_text: current content of the input field
    """

    def __init__(self, api: TaskApiClient):
        self.api = api
        self.tasks: List[TaskResponse] = []
        self.pending_text = ""

    async def mount(self) -> None:
        """Load the full list. On failure the current list is left as is."""
        try:
            tasks = await self.api.list_tasks()
        except TaskClientError as e:
            logger.warning("Could not load tasks: %s", e.message)
            return
        self.tasks = tasks

    def set_pending_text(self, text: str) -> None:
        self.pending_text = text

    async def add_task(self) -> Optional[TaskResponse]:
        """
        Submit the pending text as a new task.

        The text is captured into the request before the field is cleared,
        so typing into the field while the request is in flight never changes
        what gets saved. Overlapping calls each append their own result to the
        live list, so every confirmed task appears exactly once.
        """
        text = self.pending_text
        self.pending_text = ""

        try:
            task = await self.api.create_task(text, completed=False)
        except TaskClientError as e:
            logger.warning("Could not add task %r: %s", text, e.message)
            return None

        self.tasks.append(task)
        return task

    async def delete_task(self, task_id: str) -> bool:
        """Delete a task; it leaves the list only after the server confirms."""
        try:
            await self.api.delete_task(task_id)
        except TaskClientError as e:
            logger.warning("Could not delete task %s: %s", task_id, e.message)
            return False

        self.tasks = [task for task in self.tasks if task.id != task_id]
        return True

    def render(self) -> str:
        lines = ["To-Do List"]
        if not self.tasks:
            lines.append("  (no tasks)")
        for task in self.tasks:
            mark = "x" if task.completed else " "
            lines.append(f"  [{mark}] {task.text}  ({task.id})")
        return "\n".join(lines)
