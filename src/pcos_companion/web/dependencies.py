"""Shared route helpers."""

from datetime import date

from fastapi import HTTPException, Request

from ..models.base import Record
from ..store import (
    DailyLogRepository,
    MentalHealthLogRepository,
    PeriodLogRepository,
    Storage,
)

DatedLogRepository = PeriodLogRepository | DailyLogRepository | MentalHealthLogRepository


def get_storage(request: Request) -> Storage:
    """Get the store from app state."""
    return request.app.state.storage


def found(record: Record | None, entity: str) -> Record:
    """Return the record, or raise 404 if the store reported it absent."""
    if record is None:
        raise HTTPException(status_code=404, detail=f"{entity} not found")
    return record


async def list_user_logs(
    repo: DatedLogRepository, user_id: int, start: date | None, end: date | None
) -> list[dict]:
    """List a user's logs, optionally restricted to [start, end]."""
    if (start is None) != (end is None):
        raise HTTPException(
            status_code=400, detail="start and end must be given together"
        )
    if start is not None:
        logs = await repo.list_for_user_in_range(user_id, start, end)
    else:
        logs = await repo.list_for_user(user_id)
    return [log.to_dict() for log in logs]
