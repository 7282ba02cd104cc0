"""
To-Do List Backend — Request Logging Middleware
=================================================

What:  One access log line per task request: method, route, status, duration.
How:   Runs inside RequestIDMiddleware so every line carries the request ID.

The line names the matched route template ("/tasks/{task_id}"), not the raw
path, so task ids stay out of INFO output. The concrete path is only logged
when the request fails, where it is needed to trace the failing task.

Level by status class:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Request bodies (task text) are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from todolist.middleware.request_id import request_id_var

logger = logging.getLogger("todolist.access")

UNMATCHED_ROUTE = "<unmatched>"


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def _route_template(request: Request) -> str:
    # Set by the router once a route matched; missing for 404s and preflights
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ROUTE)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log for the task endpoints."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path == "/health":
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        level = _level_for(status)
        route = _route_template(request)
        rid = request_id_var.get("")

        extra = {
            "request_id": rid,
            "method": request.method,
            "route": route,
            "status": status,
            "duration_ms": round(duration_ms, 2),
        }
        if level > logging.INFO:
            extra["path"] = request.url.path
            logger.log(
                level,
                "%s %s (%s) %d %.1fms [%s]",
                request.method, route, request.url.path, status, duration_ms, rid,
                extra=extra,
            )
        else:
            logger.log(
                level,
                "%s %s %d %.1fms [%s]",
                request.method, route, status, duration_ms, rid,
                extra=extra,
            )

        return response
