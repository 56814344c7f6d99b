# backend/salon_agenda/core/block_registry.py
"""
Full-day and time-range blocks of a collaborator.

The guards are the policy only: they see whatever snapshot the caller
fetched. The storage layer re-runs them inside the write transaction
(see services/blocks.py).
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
import enum
import logging
from typing import Iterable, Union

from .intervals import format_time, overlaps, to_minutes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FullDayBlock:
    collaborator_id: int
    start_date: date
    end_date: date
    reason: str = ""
    id: int | None = None

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class TimeBlock:
    collaborator_id: int
    block_date: date
    start_time: str  # "HH:MM"
    end_time: str
    reason: str | None = None
    id: int | None = None

    @property
    def window(self) -> str:
        return f"{format_time(self.start_time)} to {format_time(self.end_time)}"


class ConflictKind(str, enum.Enum):
    INVALID_RANGE = "invalid_range"
    OVERLAP = "overlap"


@dataclass(frozen=True)
class BlockConflict:
    kind: ConflictKind
    message: str
    clashing: Union[FullDayBlock, TimeBlock, None] = None


def can_create_full_day_block(
    existing: Iterable[FullDayBlock], candidate: FullDayBlock
) -> BlockConflict | None:
    """
    Only the date range itself is checked. Overlapping full-day blocks are
    accepted: is_date_fully_blocked treats their union correctly.
    """
    if candidate.end_date < candidate.start_date:
        return BlockConflict(
            ConflictKind.INVALID_RANGE,
            "End date must be on or after the start date",
        )
    return None


def can_create_time_block(
    existing: Iterable[TimeBlock], candidate: TimeBlock
) -> BlockConflict | None:
    if to_minutes(candidate.start_time) >= to_minutes(candidate.end_time):
        return BlockConflict(
            ConflictKind.INVALID_RANGE,
            "Start time must be before end time",
        )

    for b in existing:
        if b.collaborator_id != candidate.collaborator_id or b.block_date != candidate.block_date:
            continue
        if overlaps(candidate.start_time, candidate.end_time, b.start_time, b.end_time):
            logger.info(
                "Time block %s on %s for collaborator %s clashes with block %s (%s)",
                candidate.window, candidate.block_date, candidate.collaborator_id,
                b.id, b.window,
            )
            return BlockConflict(
                ConflictKind.OVERLAP,
                f"There is already a block from {b.window} on {b.block_date.isoformat()}",
                clashing=b,
            )
    return None


def is_date_fully_blocked(full_day_blocks: Iterable[FullDayBlock], day: date) -> bool:
    return any(b.covers(day) for b in full_day_blocks)


def is_range_blocked(time_blocks: Iterable[TimeBlock], day: date, start, end) -> bool:
    return any(
        b.block_date == day and overlaps(start, end, b.start_time, b.end_time)
        for b in time_blocks
    )
