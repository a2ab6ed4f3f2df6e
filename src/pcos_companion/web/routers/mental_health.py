"""Mental-health journal routes."""

from datetime import date

from fastapi import APIRouter, Depends

from ...store import Storage
from ..dependencies import found, get_storage, list_user_logs
from ..schemas import MentalHealthLogCreate, MentalHealthLogUpdate

router = APIRouter(prefix="/api", tags=["mental-health"])


@router.get("/users/{user_id}/mental-health-logs")
async def list_mental_health_logs(
    user_id: int,
    start: date | None = None,
    end: date | None = None,
    storage: Storage = Depends(get_storage),
):
    """List a user's mental-health entries, newest first."""
    return await list_user_logs(storage.mental_health_logs, user_id, start, end)


@router.get("/users/{user_id}/mental-health-logs/{day}")
async def get_mental_health_log_for_day(
    user_id: int, day: date, storage: Storage = Depends(get_storage)
):
    """Get the mental-health entry a user recorded on a given day."""
    log = await storage.mental_health_logs.get_for_user_on_date(user_id, day)
    return found(log, "Mental health log").to_dict()


@router.post("/mental-health-logs", status_code=201)
async def create_mental_health_log(
    body: MentalHealthLogCreate, storage: Storage = Depends(get_storage)
):
    """Record a mental-health check-in."""
    log = await storage.mental_health_logs.create(body.model_dump(mode="json"))
    return log.to_dict()


@router.patch("/mental-health-logs/{log_id}")
async def update_mental_health_log(
    log_id: int, body: MentalHealthLogUpdate, storage: Storage = Depends(get_storage)
):
    """Update fields of a mental-health entry."""
    log = await storage.mental_health_logs.update(log_id, body.changes())
    return found(log, "Mental health log").to_dict()
