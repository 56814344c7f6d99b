# backend/salon_agenda/services/availability.py
from datetime import date
import logging
from typing import Iterable

from sqlalchemy.orm import Session

from ..core.availability import (
    AvailabilityQuery,
    AvailabilityVerdict,
    available_start_times,
    resolve,
)
from ..core.errors import InactiveCollaboratorError
from .blocks import list_full_day_blocks, list_time_blocks
from .collaborators import get_collaborator
from .schedules import load_schedule

logger = logging.getLogger(__name__)


def check_availability(
    db: Session, collaborator_id: int, day: date, start: str, end: str
) -> AvailabilityVerdict:
    c = get_collaborator(db, collaborator_id)
    if not c.active:
        raise InactiveCollaboratorError(collaborator_id)
    return resolve(
        AvailabilityQuery(collaborator_id, day, start, end),
        load_schedule(db, collaborator_id),
        list_full_day_blocks(db, collaborator_id, day),
        list_time_blocks(db, collaborator_id, day),
    )


def list_available_times(
    db: Session,
    collaborator_id: int,
    day: date,
    duration_minutes: int,
    interval_minutes: int,
    booked: Iterable[tuple[str, str]] = (),
) -> list[str]:
    c = get_collaborator(db, collaborator_id)
    if not c.active:
        # not offered for booking at all
        logger.info("Collaborator %s is inactive: no start times on %s", collaborator_id, day)
        return []
    return available_start_times(
        load_schedule(db, collaborator_id),
        day,
        list_full_day_blocks(db, collaborator_id, day),
        list_time_blocks(db, collaborator_id, day),
        duration_minutes=duration_minutes,
        interval_minutes=interval_minutes,
        booked=booked,
        collaborator_id=collaborator_id,
    )
