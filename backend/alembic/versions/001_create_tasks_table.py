"""Create tasks table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

Creates the `tasks` table: opaque string id, text, completed flag and the
creation timestamp that orders GET /tasks.
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "tasks",
        sa.Column(
            "id",
            sa.String(32),
            nullable=False,
            comment="Opaque unique identifier assigned at insert time",
        ),
        sa.Column("text", sa.Text(), nullable=False, comment="Task display text"),
        sa.Column(
            "completed",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("false"),
            comment="Completion flag, set at creation",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this task was created (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index("idx_tasks_created_at", "tasks", ["created_at"])


def downgrade() -> None:
    """Drop the tasks table. Destructive: every task is lost."""
    op.drop_index("idx_tasks_created_at", table_name="tasks")
    op.drop_table("tasks")
