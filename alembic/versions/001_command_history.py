"""Command history table.

Revision ID: 001_command_history
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_command_history"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "command_history",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("raw_command", sa.Text, nullable=False),
        sa.Column("client_identifier", sa.String(64), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "ix_command_history_created_at", "command_history", ["created_at"],
    )


def downgrade() -> None:
    op.drop_index("ix_command_history_created_at", table_name="command_history")
    op.drop_table("command_history")
