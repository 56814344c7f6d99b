# backend/salon_agenda/schemas/schedule.py
from __future__ import annotations
from typing import List, Optional

from pydantic import BaseModel, field_validator

from ..core.intervals import format_time
from ..core.schedule import WeekDay, WeeklySchedule, WorkScheduleDay


def _hhmm_or_none(v):
    # the form sends "" for a disabled day
    if v is None or (isinstance(v, str) and not v.strip()):
        return None
    return format_time(v)  # ValueError -> 422


class WorkScheduleDayIn(BaseModel):
    day: WeekDay
    enabled: bool = False
    start_time: Optional[str] = None  # "HH:MM"
    end_time: Optional[str] = None

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def normalize_times(cls, v):
        return _hhmm_or_none(v)


class ScheduleIn(BaseModel):
    """Whole week from the edit form; days not sent are disabled."""
    days: List[WorkScheduleDayIn]
    expected_version: Optional[int] = None

    @field_validator("days")
    @classmethod
    def one_entry_per_day(cls, v: List[WorkScheduleDayIn]):
        seen = set()
        for d in v:
            if d.day in seen:
                raise ValueError(f"Duplicate entry for {d.day.value}")
            seen.add(d.day)
        return v

    def to_schedule(self) -> WeeklySchedule:
        return WeeklySchedule(
            WorkScheduleDay(
                day=d.day,
                enabled=d.enabled,
                # disabled days: times cleared
                start_time=d.start_time if d.enabled else None,
                end_time=d.end_time if d.enabled else None,
            )
            for d in self.days
        )


class DayToggleIn(BaseModel):
    enabled: bool
    expected_version: Optional[int] = None


class WorkScheduleDayOut(BaseModel):
    day: WeekDay
    enabled: bool
    start_time: Optional[str] = None
    end_time: Optional[str] = None


class ScheduleOut(BaseModel):
    collaborator_id: int
    version: int
    days: List[WorkScheduleDayOut]
    summary: str

    @classmethod
    def build(cls, collaborator_id: int, schedule: WeeklySchedule, version: int) -> "ScheduleOut":
        return cls(
            collaborator_id=collaborator_id,
            version=version,
            days=[
                WorkScheduleDayOut(
                    day=d.day, enabled=d.enabled, start_time=d.start_time, end_time=d.end_time
                )
                for d in schedule
            ],
            summary=schedule.summary(),
        )
