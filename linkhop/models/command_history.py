"""CommandHistory ORM: one row per command submitted to the redirect endpoint.

Invariants:
    - Rows are appended, never updated
    - raw_command is the text as typed (before alias expansion)

Design Decisions:
    - Integer autoincrement key: portable across SQLite and PostgreSQL, and gives
      insertion order for pruning
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from linkhop.db.base import Base


class CommandHistory(Base):
    """History entry: what was typed, by whom, when."""
    __tablename__ = "command_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    raw_command: Mapped[str] = mapped_column(Text, nullable=False)
    client_identifier: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )
