# backend/salon_agenda/core/schedule.py
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
import enum
from typing import Iterable

from .intervals import format_time


class WeekDay(str, enum.Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def from_date(cls, day: date) -> "WeekDay":
        # date.weekday(): Monday == 0, same order as the members
        return WEEK[day.weekday()]

    @property
    def short_label(self) -> str:
        return self.value[:3].capitalize()


WEEK: tuple[WeekDay, ...] = tuple(WeekDay)


@dataclass(frozen=True)
class WorkScheduleDay:
    day: WeekDay
    enabled: bool = False
    start_time: str | None = None  # "HH:MM"
    end_time: str | None = None


@dataclass(frozen=True)
class ScheduleRow:
    """One stored row: exists only for an enabled weekday."""
    collaborator_id: int
    day_of_week: WeekDay
    start_time: str
    end_time: str


class WeeklySchedule:
    """
    Exactly one WorkScheduleDay per WeekDay, looked up by key.
    Immutable: every change returns a new schedule.
    """

    def __init__(self, days: Iterable[WorkScheduleDay] = ()):
        by_day: dict[WeekDay, WorkScheduleDay] = {}
        for d in days:
            wd = WeekDay(d.day)
            if wd in by_day:
                raise ValueError(f"Duplicate entry for {wd.value}")
            by_day[wd] = d if d.day is wd else replace(d, day=wd)
        # missing days are disabled
        self._days = {wd: by_day.get(wd, WorkScheduleDay(day=wd)) for wd in WEEK}

    @classmethod
    def empty(cls) -> "WeeklySchedule":
        return cls()

    @classmethod
    def from_rows(cls, rows: Iterable) -> "WeeklySchedule":
        """
        Rows are anything with day_of_week / start_time / end_time
        (ORM objects or ScheduleRow). A weekday without a row is disabled.
        """
        days = []
        for r in rows:
            days.append(
                WorkScheduleDay(
                    day=WeekDay(r.day_of_week),
                    enabled=True,
                    start_time=format_time(r.start_time),
                    end_time=format_time(r.end_time),
                )
            )
        return cls(days)

    def to_rows(self, collaborator_id: int) -> list[ScheduleRow]:
        return [
            ScheduleRow(
                collaborator_id=collaborator_id,
                day_of_week=d.day,
                start_time=format_time(d.start_time),
                end_time=format_time(d.end_time),
            )
            for d in self
            if d.enabled and d.start_time and d.end_time
        ]

    def day(self, weekday: WeekDay) -> WorkScheduleDay:
        return self._days[WeekDay(weekday)]

    def for_date(self, day: date) -> WorkScheduleDay:
        return self._days[WeekDay.from_date(day)]

    def with_day(self, entry: WorkScheduleDay) -> "WeeklySchedule":
        return WeeklySchedule(entry if d.day == entry.day else d for d in self)

    def with_day_enabled(
        self,
        weekday: WeekDay,
        enabled: bool,
        default_start: str = "09:00",
        default_end: str = "18:00",
    ) -> "WeeklySchedule":
        current = self.day(weekday)
        if enabled:
            entry = replace(
                current,
                enabled=True,
                start_time=current.start_time or default_start,
                end_time=current.end_time or default_end,
            )
        else:
            entry = WorkScheduleDay(day=current.day)
        return self.with_day(entry)

    def has_enabled_day(self) -> bool:
        return any(d.enabled for d in self)

    def summary(self) -> str:
        parts = [
            f"{d.day.short_label}: {d.start_time}-{d.end_time}"
            for d in self
            if d.enabled and d.start_time and d.end_time
        ]
        if not parts:
            return "No working hours configured"
        return " | ".join(parts)

    def __iter__(self):
        # calendar order
        return iter(self._days[wd] for wd in WEEK)

    def __len__(self) -> int:
        return len(self._days)

    def __eq__(self, other) -> bool:
        if not isinstance(other, WeeklySchedule):
            return NotImplemented
        return self._days == other._days

    def __repr__(self) -> str:
        return f"WeeklySchedule({self.summary()!r})"
