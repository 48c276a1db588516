"""History listing schema."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class HistoryEntryResponse(BaseModel):
    """One recorded command, as stored (before alias expansion)."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    raw_command: str
    client_identifier: str
    created_at: datetime
