"""
To-Do List Client
===================

    - api.py:      TaskApiClient, httpx wrapper for the task endpoints
    - view.py:     TaskListView, task list + pending input kept in sync with the API
    - __main__.py: console front end (`python -m todolist.client`)
"""

from todolist.client.api import TaskApiClient
from todolist.client.view import TaskListView

__all__ = ["TaskApiClient", "TaskListView"]
