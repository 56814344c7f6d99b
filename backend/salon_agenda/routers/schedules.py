from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.errors import AgendaError
from ..core.schedule import WeekDay
from ..database import get_db
from ..deps import collaborator_or_404, to_http
from ..models.collaborator import Collaborator
from ..schemas.schedule import DayToggleIn, ScheduleIn, ScheduleOut
from ..services import schedules as svc

router = APIRouter(prefix="/collaborators/{collaborator_id}/schedule", tags=["schedule"])


@router.get("", response_model=ScheduleOut)
def read_schedule(c: Collaborator = Depends(collaborator_or_404), db: Session = Depends(get_db)):
    schedule, version = svc.get_schedule(db, c.id)
    return ScheduleOut.build(c.id, schedule, version)


@router.put("", response_model=ScheduleOut)
def replace_schedule(
    payload: ScheduleIn,
    c: Collaborator = Depends(collaborator_or_404),
    db: Session = Depends(get_db),
):
    # validated as a whole week, then written in one go
    try:
        schedule, version = svc.replace_schedule(
            db, c.id, payload.to_schedule(), expected_version=payload.expected_version
        )
    except AgendaError as e:
        raise to_http(e)
    return ScheduleOut.build(c.id, schedule, version)


@router.patch("/{day}", response_model=ScheduleOut)
def toggle_day(
    day: WeekDay,
    payload: DayToggleIn,
    c: Collaborator = Depends(collaborator_or_404),
    db: Session = Depends(get_db),
):
    # switching off the last working day is still a 422
    try:
        schedule, version = svc.toggle_day(
            db, c.id, day, payload.enabled, expected_version=payload.expected_version
        )
    except AgendaError as e:
        raise to_http(e)
    return ScheduleOut.build(c.id, schedule, version)
