# backend/salon_agenda/core/schedule_validator.py
from __future__ import annotations

from dataclasses import dataclass, field

from .errors import ScheduleValidationError
from .intervals import to_minutes
from .schedule import WeeklySchedule

GENERAL = "general"

MSG_NO_DAY = "Configure at least one attendance day"
MSG_MISSING_TIMES = "Configure the start and end time for {day}"
MSG_START_AFTER_END = "Start time must be before end time on {day}"


@dataclass(frozen=True)
class ScheduleValidation:
    valid: bool
    errors: dict[str, str] = field(default_factory=dict)


def validate(schedule: WeeklySchedule) -> ScheduleValidation:
    """
    Collects every violation (not fail-fast) so the form can show them all.
    Keys are weekday values ("monday", ...) or "general".
    """
    errors: dict[str, str] = {}

    if not schedule.has_enabled_day():
        errors[GENERAL] = MSG_NO_DAY

    for d in schedule:
        if not d.enabled:
            continue
        if not d.start_time or not d.end_time:
            errors[d.day.value] = MSG_MISSING_TIMES.format(day=d.day.value)
        elif to_minutes(d.start_time) >= to_minutes(d.end_time):
            errors[d.day.value] = MSG_START_AFTER_END.format(day=d.day.value)

    return ScheduleValidation(valid=not errors, errors=errors)


def ensure_valid(schedule: WeeklySchedule) -> None:
    result = validate(schedule)
    if not result.valid:
        raise ScheduleValidationError(result.errors)
