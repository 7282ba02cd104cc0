"""
To-Do List — Pydantic Request/Response Schemas
================================================

What:  Pydantic models defining the API contract between client and server.
Why:   Input validation at the API boundary, serialization, OpenAPI docs.
Who:   Used by route handlers and by the console client to parse responses.

Wire format:
    {"_id": "<hex id>", "task": "buy milk", "completed": false}

    `_id` and `task` are the field names the browser client has always used;
    inside Python the fields are `id` and `text`.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class TaskCreate(BaseModel):
    """
    Body of POST /tasks.

    `task` must be present and a string (`text` is accepted as an alias).
    `completed` must be a boolean and defaults to false when omitted.
    Strict types: "yes", 1 or null are rejected instead of coerced.
    Text that cannot be encoded as UTF-8 is rejected too.
    """
    text: StrictStr = Field(
        validation_alias=AliasChoices("task", "text"),
        description="Task display text",
    )
    completed: StrictBool = Field(default=False, description="Completion flag")

    @field_validator("text")
    @classmethod
    def validate_text_encodable(cls, v: str) -> str:
        """JSON strings may hold lone surrogates; the store only takes UTF-8."""
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("task must be valid UTF-8 text")
        return v


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class TaskResponse(BaseModel):
    """
    A stored task as returned by GET /tasks and POST /tasks.

    Built from the ORM row on the server (`from_attributes`) and from the
    JSON payload on the client (by alias).
    """
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(alias="_id", description="Store-assigned unique identifier")
    text: str = Field(alias="task", description="Task display text")
    completed: bool = Field(description="Completion flag")


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "server_error",
            "message": "An internal error occurred. Please try again later.",
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
