# backend/salon_agenda/services/schedules.py
import logging

from sqlalchemy.orm import Session

from ..config import settings
from ..core.errors import StaleScheduleError
from ..core.intervals import to_time
from ..core.schedule import WeekDay, WeeklySchedule
from ..core.schedule_validator import ensure_valid
from ..models.schedule import CollaboratorSchedule
from .collaborators import get_collaborator, lock_collaborator

logger = logging.getLogger(__name__)


# -----------------------------------------
# Storage operations on collaborator_schedules
# -----------------------------------------
def list_rows(db: Session, collaborator_id: int) -> list[CollaboratorSchedule]:
    return (
        db.query(CollaboratorSchedule)
        .filter(CollaboratorSchedule.collaborator_id == collaborator_id)
        .all()
    )


def insert_row(db: Session, row: CollaboratorSchedule) -> CollaboratorSchedule:
    db.add(row)
    db.flush()
    return row


def delete_by_id(db: Session, row_id: int) -> bool:
    n = (
        db.query(CollaboratorSchedule)
        .filter(CollaboratorSchedule.id == row_id)
        .delete(synchronize_session=False)
    )
    return n > 0


def delete_all_for_collaborator(db: Session, collaborator_id: int) -> int:
    return (
        db.query(CollaboratorSchedule)
        .filter(CollaboratorSchedule.collaborator_id == collaborator_id)
        .delete(synchronize_session=False)
    )


# -----------------------------------------
# Aggregate
# -----------------------------------------
def load_schedule(db: Session, collaborator_id: int) -> WeeklySchedule:
    return WeeklySchedule.from_rows(list_rows(db, collaborator_id))


def get_schedule(db: Session, collaborator_id: int) -> tuple[WeeklySchedule, int]:
    c = get_collaborator(db, collaborator_id)
    return load_schedule(db, collaborator_id), c.schedule_version


def replace_schedule(
    db: Session,
    collaborator_id: int,
    schedule: WeeklySchedule,
    expected_version: int | None = None,
) -> tuple[WeeklySchedule, int]:
    """
    Validate, then replace the 7 days in one transaction:
    lock owner -> version check -> delete all -> insert enabled days -> bump version.
    """
    ensure_valid(schedule)

    try:
        c = lock_collaborator(db, collaborator_id)
        if expected_version is not None and expected_version != c.schedule_version:
            raise StaleScheduleError(expected_version, c.schedule_version)

        delete_all_for_collaborator(db, collaborator_id)
        for r in schedule.to_rows(collaborator_id):
            insert_row(
                db,
                CollaboratorSchedule(
                    collaborator_id=r.collaborator_id,
                    day_of_week=r.day_of_week,
                    start_time=to_time(r.start_time),
                    end_time=to_time(r.end_time),
                ),
            )
        c.schedule_version = (c.schedule_version or 0) + 1
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(
        "Replaced schedule of collaborator %s (version %s): %s",
        collaborator_id, c.schedule_version, schedule.summary(),
    )
    return load_schedule(db, collaborator_id), c.schedule_version


def toggle_day(
    db: Session,
    collaborator_id: int,
    weekday: WeekDay,
    enabled: bool,
    expected_version: int | None = None,
) -> tuple[WeeklySchedule, int]:
    """
    Switch one weekday on or off and save the whole week.
    A day switched on without times gets the configured default window.
    """
    schedule = load_schedule(db, collaborator_id).with_day_enabled(
        weekday,
        enabled,
        default_start=settings.DEFAULT_START_TIME,
        default_end=settings.DEFAULT_END_TIME,
    )
    return replace_schedule(db, collaborator_id, schedule, expected_version=expected_version)
