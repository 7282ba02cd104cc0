"""
To-Do List — Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the server and the console client.
Why:   Targeted error handling with the right HTTP status and a message that is
       safe to show, instead of generic exceptions leaking internal details.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) turn server-side
       exceptions into JSON error responses.

Exception Hierarchy:
    TodoListError (base)
    ├── DatabaseError     → 500 Internal Server Error
    └── TaskClientError   → raised by the client when a request fails

Deleting a task that does not exist is NOT an error: removal is idempotent,
so tasks have no not-found exception.
"""

from typing import Any, Dict, Optional


class TodoListError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class DatabaseError(TodoListError):
    """
    Raised when a task store operation fails.

    What:    An insert, scan or delete against the task store failed.
    When:    Database unreachable, connection lost mid-query, lock timeout.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. The original
    exception type is kept in `context` and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class TaskClientError(TodoListError):
    """
    Raised by the API client when a request to the task service fails.

    Covers both transport failures (connection refused, timeout) and
    non-success HTTP responses. `status_code` is None for transport failures.
    """

    def __init__(
        self,
        message: str = "Request to the task service failed",
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if status_code is not None:
            ctx["status_code"] = status_code
        super().__init__(message=message, context=ctx)
        self.status_code = status_code
