"""
To-Do List Client — Task API Wrapper
======================================

What:  Async wrapper around the three task endpoints.
How:   One httpx.AsyncClient per TaskApiClient, bounded by `client_timeout`.
       Transport failures and non-2xx responses (redirects included) become
       TaskClientError so the view only has one exception type to handle.
"""

import logging
from typing import Any, List, Optional
from urllib.parse import quote

import httpx

from todolist.config import settings
from todolist.exceptions import TaskClientError
from todolist.schemas.task import TaskResponse

logger = logging.getLogger(__name__)


class TaskApiClient:
    """
    Client for GET /tasks, POST /tasks and DELETE /tasks/{id}.

    Use as an async context manager, or call `aclose()` when done.
    `transport` lets tests route requests straight into the ASGI app.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout if timeout is not None else settings.client_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "TaskApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            raise TaskClientError(
                message=f"{method} {path} timed out",
                context={"error_type": type(e).__name__},
            ) from e
        except httpx.HTTPError as e:
            raise TaskClientError(
                message=f"{method} {path} failed: {e}",
                context={"error_type": type(e).__name__},
            ) from e

        # 3xx counts as failure too: redirects are not followed
        if not response.is_success:
            raise TaskClientError(
                message=f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                context={"request_id": response.headers.get("X-Request-ID", "")},
            )
        return response

    async def list_tasks(self) -> List[TaskResponse]:
        response = await self._request("GET", "/tasks")
        try:
            return [TaskResponse.model_validate(item) for item in response.json()]
        except (TypeError, ValueError) as e:
            raise TaskClientError(
                message="GET /tasks returned an unexpected body",
                context={"error_type": type(e).__name__},
            ) from e

    async def create_task(self, text: str, completed: bool = False) -> TaskResponse:
        response = await self._request(
            "POST", "/tasks", json={"task": text, "completed": completed}
        )
        try:
            return TaskResponse.model_validate(response.json())
        except ValueError as e:
            raise TaskClientError(
                message="POST /tasks returned an unexpected body",
                context={"error_type": type(e).__name__},
            ) from e

    async def delete_task(self, task_id: str) -> str:
        """Returns the server's plain text confirmation."""
        response = await self._request("DELETE", f"/tasks/{quote(task_id, safe='')}")
        return response.text
