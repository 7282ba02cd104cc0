"""
To-Do List Backend — Task SQLAlchemy Model
============================================

What:  ORM model representing the `tasks` table.
Why:   Maps Python objects to rows for type-safe store operations.
Who:   Used by TaskService for insert/list/delete and by Alembic for schema management.

Table Design:
    - id: opaque 32-char hex string assigned on insert; primary key guarantees uniqueness
    - text: display string (column named `text`, exposed as `task` on the wire)
    - completed: flag set once at creation
    - created_at: UTC insert time; defines list ordering, never exposed on the wire

Lifecycle:
    Created by POST /tasks, read by GET /tasks, removed by DELETE /tasks/{id}.
    There is no update path.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Index, String, Text, TIMESTAMP
from sqlalchemy import text as sql_text
from sqlalchemy.orm import Mapped, mapped_column

from todolist.database import Base


def new_task_id() -> str:
    return uuid.uuid4().hex


class Task(Base):
    """A single to-do item."""

    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        default=new_task_id,
        comment="Opaque unique identifier assigned at insert time",
    )

    text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Task display text",
    )

    completed: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=sql_text("false"),
        comment="Completion flag, set at creation",
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=sql_text("CURRENT_TIMESTAMP"),
        comment="When this task was created (UTC)",
    )

    __table_args__ = (
        Index("idx_tasks_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, completed={self.completed})>"
