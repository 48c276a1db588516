"""History Recorder: best-effort persistence of submitted commands.

Invariants:
    - record() never raises: any failure is logged as a warning and reported as False
    - A recording failure never affects the redirect (callers run it after the response)
    - Table is pruned to max_entries after each insert (oldest rows removed first)
    - recent() lists newest first

Design Decisions:
    - Background-task entrypoint record_command() reads database.db_manager at call
      time, so it works with whatever manager the lifespan (or a test) installed
"""

import logging

from sqlalchemy import delete, select

from linkhop.infrastructure import database
from linkhop.infrastructure.database import DatabaseSessionManager
from linkhop.models.command_history import CommandHistory

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "unknown"


class HistoryRecorder:
    """Appends HistoryEntry rows and reads them back."""

    def __init__(self, manager: DatabaseSessionManager, max_entries: int = 1000):
        self._manager = manager
        self._max_entries = max_entries

    async def record(self, raw_command: str, client_identifier: str | None) -> bool:
        client = (client_identifier or UNKNOWN_CLIENT)[:64]
        try:
            async with self._manager.session() as db:
                db.add(CommandHistory(
                    raw_command=raw_command, client_identifier=client,
                ))
                await db.commit()
                await self._prune(db)
            return True
        except Exception as e:
            logger.warning(
                f"Failed to save command to history: {e}",
                extra={"command": raw_command, "client": client},
            )
            return False

    async def recent(self, limit: int = 50) -> list[CommandHistory]:
        async with self._manager.session() as db:
            result = await db.execute(
                select(CommandHistory)
                .order_by(CommandHistory.id.desc())
                .limit(limit),
            )
            return list(result.scalars().all())

    async def _prune(self, db) -> None:
        """Drop everything older than the newest max_entries rows."""
        result = await db.execute(
            select(CommandHistory.id)
            .order_by(CommandHistory.id.desc())
            .offset(self._max_entries)
            .limit(1),
        )
        cutoff = result.scalar_one_or_none()
        if cutoff is None:
            return
        await db.execute(delete(CommandHistory).where(CommandHistory.id <= cutoff))
        await db.commit()


async def record_command(
    raw_command: str, client_identifier: str | None, max_entries: int = 1000,
) -> None:
    """Background task: record one command if a history store is configured."""
    manager = database.db_manager
    if manager is None:
        logger.warning(
            "History enabled but database not initialized; command not saved",
            extra={"command": raw_command},
        )
        return
    await HistoryRecorder(manager, max_entries).record(raw_command, client_identifier)
