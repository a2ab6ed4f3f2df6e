"""Daily mood and lifestyle log routes."""

from datetime import date

from fastapi import APIRouter, Depends

from ...store import Storage
from ..dependencies import found, get_storage, list_user_logs
from ..schemas import DailyLogCreate, DailyLogUpdate

router = APIRouter(prefix="/api", tags=["daily-logs"])


@router.get("/users/{user_id}/daily-logs")
async def list_daily_logs(
    user_id: int,
    start: date | None = None,
    end: date | None = None,
    storage: Storage = Depends(get_storage),
):
    """List a user's daily logs, newest first."""
    return await list_user_logs(storage.daily_logs, user_id, start, end)


@router.get("/users/{user_id}/daily-logs/{day}")
async def get_daily_log_for_day(
    user_id: int, day: date, storage: Storage = Depends(get_storage)
):
    """Get the daily log a user recorded on a given day."""
    log = found(await storage.daily_logs.get_for_user_on_date(user_id, day), "Daily log")
    return log.to_dict()


@router.post("/daily-logs", status_code=201)
async def create_daily_log(body: DailyLogCreate, storage: Storage = Depends(get_storage)):
    """Record a daily log."""
    log = await storage.daily_logs.create(body.model_dump(mode="json"))
    return log.to_dict()


@router.patch("/daily-logs/{log_id}")
async def update_daily_log(
    log_id: int, body: DailyLogUpdate, storage: Storage = Depends(get_storage)
):
    """Update fields of a daily log."""
    log = found(await storage.daily_logs.update(log_id, body.changes()), "Daily log")
    return log.to_dict()
