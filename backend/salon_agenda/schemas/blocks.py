# backend/salon_agenda/schemas/blocks.py
from __future__ import annotations
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..core.intervals import format_time, to_minutes


def _strip_reason(v):
    return v.strip() if isinstance(v, str) else v


class FullDayBlockIn(BaseModel):
    start_date: date
    end_date: date
    reason: str = Field(..., min_length=1)  # e.g. vacation, sick leave

    @field_validator("reason", mode="before")
    @classmethod
    def strip_reason(cls, v):
        # stripped before min_length, so a blank reason is a 422
        return _strip_reason(v)


    @model_validator(mode="after")
    def end_not_before_start(self):
        if self.end_date < self.start_date:
            raise ValueError("End date must be on or after the start date")
        return self


class FullDayBlockOut(BaseModel):
    id: int
    collaborator_id: int
    start_date: date
    end_date: date
    reason: str

    class Config:
        from_attributes = True


class TimeBlockIn(BaseModel):
    block_date: date
    start_time: str  # "HH:MM"
    end_time: str
    reason: Optional[str] = None

    @field_validator("reason", mode="before")
    @classmethod
    def strip_reason(cls, v):
        # optional here, so blank means no reason
        return _strip_reason(v) or None

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def normalize_times(cls, v):
        return format_time(v)

    @model_validator(mode="after")
    def start_before_end(self):
        if to_minutes(self.start_time) >= to_minutes(self.end_time):
            raise ValueError("Start time must be before end time")
        return self


class TimeBlockOut(BaseModel):
    id: int
    collaborator_id: int
    block_date: date
    start_time: str
    end_time: str
    reason: Optional[str] = None

    class Config:
        from_attributes = True
