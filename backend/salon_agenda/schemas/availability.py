from datetime import date
from typing import List

from pydantic import BaseModel

from ..core.availability import VerdictReason


class VerdictOut(BaseModel):
    collaborator_id: int
    date: date
    start: str
    end: str
    available: bool
    reason: VerdictReason


class AvailableTimesOut(BaseModel):
    collaborator_id: int
    date: date
    duration_minutes: int
    interval_minutes: int
    times: List[str]
