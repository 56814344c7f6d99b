# backend/salon_agenda/core/availability.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
import enum
from typing import Iterable, Sequence

from .block_registry import FullDayBlock, TimeBlock, is_date_fully_blocked, is_range_blocked
from .intervals import MINUTES_PER_DAY, is_within, minutes_to_time, overlaps, to_minutes
from .schedule import WeeklySchedule


class VerdictReason(str, enum.Enum):
    AVAILABLE = "Available"
    WEEKLY_SCHEDULE_DISABLED = "WeeklyScheduleDisabled"
    DAY_FULLY_BLOCKED = "DayFullyBlocked"
    OUTSIDE_WEEKLY_WINDOW = "OutsideWeeklyWindow"
    TIME_RANGE_BLOCKED = "TimeRangeBlocked"


@dataclass(frozen=True)
class AvailabilityQuery:
    collaborator_id: int
    date: date
    requested_start: str  # "HH:MM"
    requested_end: str


@dataclass(frozen=True)
class AvailabilityVerdict:
    available: bool
    reason: VerdictReason

    @classmethod
    def of(cls, reason: VerdictReason) -> "AvailabilityVerdict":
        return cls(available=reason is VerdictReason.AVAILABLE, reason=reason)


def resolve(
    query: AvailabilityQuery,
    schedule: WeeklySchedule,
    full_day_blocks: Iterable[FullDayBlock],
    time_blocks: Iterable[TimeBlock],
) -> AvailabilityVerdict:
    """
    First matching rule wins:
      1. weekday disabled            -> WeeklyScheduleDisabled
      2. date inside full-day block  -> DayFullyBlocked
      3. not inside the weekly window (end inclusive) -> OutsideWeeklyWindow
      4. overlaps a time block       -> TimeRangeBlocked
      5. otherwise                   -> Available

    Appointment double-booking is not checked here.
    """
    start = to_minutes(query.requested_start)
    end = to_minutes(query.requested_end)
    if start >= end:
        raise ValueError(
            f"Requested window {query.requested_start}-{query.requested_end} is empty or reversed"
        )

    day = schedule.for_date(query.date)
    if not day.enabled:
        return AvailabilityVerdict.of(VerdictReason.WEEKLY_SCHEDULE_DISABLED)

    if is_date_fully_blocked(full_day_blocks, query.date):
        return AvailabilityVerdict.of(VerdictReason.DAY_FULLY_BLOCKED)

    if not day.start_time or not day.end_time:
        return AvailabilityVerdict.of(VerdictReason.OUTSIDE_WEEKLY_WINDOW)
    if not is_within(query.requested_start, query.requested_end, day.start_time, day.end_time):
        return AvailabilityVerdict.of(VerdictReason.OUTSIDE_WEEKLY_WINDOW)

    if is_range_blocked(time_blocks, query.date, query.requested_start, query.requested_end):
        return AvailabilityVerdict.of(VerdictReason.TIME_RANGE_BLOCKED)

    return AvailabilityVerdict.of(VerdictReason.AVAILABLE)


def available_start_times(
    schedule: WeeklySchedule,
    day: date,
    full_day_blocks: Sequence[FullDayBlock],
    time_blocks: Sequence[TimeBlock],
    duration_minutes: int,
    interval_minutes: int,
    booked: Iterable[tuple[str, str]] = (),
    collaborator_id: int = 0,
) -> list[str]:
    """
    Start times ("HH:MM") stepping interval_minutes from the window start
    whose [start, start+duration) resolves Available and does not overlap
    any booked (start, end) pair supplied by the caller.
    """
    if duration_minutes <= 0 or interval_minutes <= 0:
        raise ValueError("duration and interval must be positive")

    entry = schedule.for_date(day)
    if not entry.enabled or not entry.start_time or not entry.end_time:
        return []

    booked = list(booked)
    out: list[str] = []
    current = to_minutes(entry.start_time)
    window_end = to_minutes(entry.end_time)

    while current <= window_end:
        slot_end = current + duration_minutes
        if slot_end >= MINUTES_PER_DAY:
            break
        start_s, end_s = minutes_to_time(current), minutes_to_time(slot_end)
        verdict = resolve(
            AvailabilityQuery(collaborator_id, day, start_s, end_s),
            schedule,
            full_day_blocks,
            time_blocks,
        )
        if verdict.available and not any(overlaps(start_s, end_s, bs, be) for bs, be in booked):
            out.append(start_s)
        current += interval_minutes

    return out
