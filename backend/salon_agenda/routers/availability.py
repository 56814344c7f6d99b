from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ..config import settings
from ..core.errors import AgendaError
from ..core.intervals import format_time, to_minutes
from ..database import get_db
from ..deps import collaborator_or_404, to_http
from ..models.collaborator import Collaborator
from ..schemas.availability import AvailableTimesOut, VerdictOut
from ..services import availability as svc

router = APIRouter(prefix="/collaborators/{collaborator_id}", tags=["availability"])


def _hhmm(value: str, field: str) -> str:
    # query strings come from the outside: bad input is a 422, not a crash
    try:
        return format_time(value)
    except ValueError:
        raise HTTPException(422, f"{field} must be HH:MM")


@router.get("/availability", response_model=VerdictOut)
def availability(
    day: date,
    start: str,
    end: str,
    c: Collaborator = Depends(collaborator_or_404),
    db: Session = Depends(get_db),
):
    start, end = _hhmm(start, "start"), _hhmm(end, "end")
    if to_minutes(start) >= to_minutes(end):
        raise HTTPException(422, "end must be after start")

    try:
        verdict = svc.check_availability(db, c.id, day, start, end)
    except AgendaError as e:
        raise to_http(e)
    return VerdictOut(
        collaborator_id=c.id,
        date=day,
        start=start,
        end=end,
        available=verdict.available,
        reason=verdict.reason,
    )


@router.get("/available-times", response_model=AvailableTimesOut)
def available_times(
    day: date,
    duration: int | None = Query(None, ge=5, le=720),
    interval: int | None = Query(None, ge=5, le=240),
    c: Collaborator = Depends(collaborator_or_404),
    db: Session = Depends(get_db),
):
    duration = duration or settings.DEFAULT_SERVICE_DURATION_MINUTES
    interval = interval or settings.SLOT_INTERVAL_MINUTES
    times = svc.list_available_times(db, c.id, day, duration, interval)
    return AvailableTimesOut(
        collaborator_id=c.id,
        date=day,
        duration_minutes=duration,
        interval_minutes=interval,
        times=times,
    )
