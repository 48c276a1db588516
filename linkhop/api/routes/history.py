"""History API: read-only listing of recently recorded commands.

Invariants:
    - Returns [] when history is disabled (never touches the database)
    - Newest entries first; limit bounded to 1..500
"""

from fastapi import APIRouter, Depends, Query

from linkhop.config import Settings, get_settings
from linkhop.core.errors import DatabaseError
from linkhop.infrastructure import database
from linkhop.schemas.history import HistoryEntryResponse
from linkhop.services.history import HistoryRecorder

router = APIRouter(prefix="/api/v1/history", tags=["history"])


@router.get("", response_model=list[HistoryEntryResponse])
async def list_history(
    limit: int = Query(50, ge=1, le=500),
    settings: Settings = Depends(get_settings),
):
    """Most recent commands, newest first."""
    if not settings.history.enabled:
        return []
    if database.db_manager is None:
        raise DatabaseError("History database not initialized", "connect")
    recorder = HistoryRecorder(database.db_manager, settings.history.max_entries)
    entries = await recorder.recent(limit)
    return [HistoryEntryResponse.model_validate(e) for e in entries]
