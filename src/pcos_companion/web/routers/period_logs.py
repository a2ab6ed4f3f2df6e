"""Period tracking routes."""

from datetime import date

from fastapi import APIRouter, Depends

from ...store import Storage
from ..dependencies import found, get_storage, list_user_logs
from ..schemas import PeriodLogCreate, PeriodLogUpdate

router = APIRouter(prefix="/api", tags=["period-logs"])


@router.get("/users/{user_id}/period-logs")
async def list_period_logs(
    user_id: int,
    start: date | None = None,
    end: date | None = None,
    storage: Storage = Depends(get_storage),
):
    """List a user's period entries, newest first."""
    return await list_user_logs(storage.period_logs, user_id, start, end)


@router.post("/period-logs", status_code=201)
async def create_period_log(
    body: PeriodLogCreate, storage: Storage = Depends(get_storage)
):
    """Log a period entry."""
    log = await storage.period_logs.create(body.model_dump(mode="json"))
    return log.to_dict()


@router.patch("/period-logs/{log_id}")
async def update_period_log(
    log_id: int, body: PeriodLogUpdate, storage: Storage = Depends(get_storage)
):
    """Update fields of a period entry."""
    log = found(await storage.period_logs.update(log_id, body.changes()), "Period log")
    return log.to_dict()
