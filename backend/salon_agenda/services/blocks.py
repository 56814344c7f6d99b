# backend/salon_agenda/services/blocks.py
"""
Storage side of the block registry.

The pure guards in core.block_registry run again here, inside the write
transaction and after the owning collaborator row is locked, so two
concurrent requests cannot both pass against a stale snapshot.
"""
from datetime import date
import logging

from sqlalchemy import and_
from sqlalchemy.orm import Session

from ..core.block_registry import (
    FullDayBlock,
    TimeBlock,
    can_create_full_day_block,
    can_create_time_block,
)
from ..core.errors import BlockConflictError, NotFoundError
from ..core.intervals import format_time, to_time
from ..models.block import CollaboratorBlock, CollaboratorTimeBlock
from .collaborators import lock_collaborator

logger = logging.getLogger(__name__)


def to_full_day_block(row: CollaboratorBlock) -> FullDayBlock:
    return FullDayBlock(
        id=row.id,
        collaborator_id=row.collaborator_id,
        start_date=row.start_date,
        end_date=row.end_date,
        reason=row.reason or "",
    )


def to_time_block(row: CollaboratorTimeBlock) -> TimeBlock:
    return TimeBlock(
        id=row.id,
        collaborator_id=row.collaborator_id,
        block_date=row.block_date,
        start_time=format_time(row.start_time),
        end_time=format_time(row.end_time),
        reason=row.reason,
    )


# -----------------------------------------
# collaborator_blocks (full day)
# -----------------------------------------
def list_full_day_blocks(
    db: Session, collaborator_id: int, day: date | None = None
) -> list[FullDayBlock]:
    q = db.query(CollaboratorBlock).filter(CollaboratorBlock.collaborator_id == collaborator_id)
    if day:
        q = q.filter(and_(CollaboratorBlock.start_date <= day, CollaboratorBlock.end_date >= day))
    return [to_full_day_block(r) for r in q.order_by(CollaboratorBlock.start_date.asc()).all()]


def create_full_day_block(db: Session, candidate: FullDayBlock) -> FullDayBlock:
    try:
        lock_collaborator(db, candidate.collaborator_id)
        existing = list_full_day_blocks(db, candidate.collaborator_id)
        conflict = can_create_full_day_block(existing, candidate)
        if conflict:
            raise BlockConflictError(conflict)

        row = CollaboratorBlock(
            collaborator_id=candidate.collaborator_id,
            start_date=candidate.start_date,
            end_date=candidate.end_date,
            reason=candidate.reason,
        )
        db.add(row)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(row)
    logger.info(
        "Full-day block %s for collaborator %s: %s..%s",
        row.id, row.collaborator_id, row.start_date, row.end_date,
    )
    return to_full_day_block(row)


def delete_full_day_block(db: Session, collaborator_id: int, block_id: int) -> None:
    row = db.get(CollaboratorBlock, block_id)
    if not row or row.collaborator_id != collaborator_id:
        raise NotFoundError(f"Block {block_id} not found")
    db.delete(row)
    db.commit()
    logger.info("Deleted full-day block %s of collaborator %s", block_id, collaborator_id)


# -----------------------------------------
# collaborator_time_blocks
# -----------------------------------------
def list_time_blocks(
    db: Session, collaborator_id: int, day: date | None = None
) -> list[TimeBlock]:
    q = db.query(CollaboratorTimeBlock).filter(
        CollaboratorTimeBlock.collaborator_id == collaborator_id
    )
    if day:
        q = q.filter(CollaboratorTimeBlock.block_date == day)
    q = q.order_by(CollaboratorTimeBlock.block_date.asc(), CollaboratorTimeBlock.start_time.asc())
    return [to_time_block(r) for r in q.all()]


def create_time_block(db: Session, candidate: TimeBlock) -> TimeBlock:
    try:
        lock_collaborator(db, candidate.collaborator_id)
        # fresh snapshot, read under the lock
        existing = list_time_blocks(db, candidate.collaborator_id, candidate.block_date)
        conflict = can_create_time_block(existing, candidate)
        if conflict:
            raise BlockConflictError(conflict)

        row = CollaboratorTimeBlock(
            collaborator_id=candidate.collaborator_id,
            block_date=candidate.block_date,
            start_time=to_time(candidate.start_time),
            end_time=to_time(candidate.end_time),
            reason=candidate.reason,
        )
        db.add(row)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(row)
    logger.info(
        "Time block %s for collaborator %s on %s: %s",
        row.id, row.collaborator_id, row.block_date, candidate.window,
    )
    return to_time_block(row)


def delete_time_block(db: Session, collaborator_id: int, block_id: int) -> None:
    row = db.get(CollaboratorTimeBlock, block_id)
    if not row or row.collaborator_id != collaborator_id:
        raise NotFoundError(f"Time block {block_id} not found")
    db.delete(row)
    db.commit()
    logger.info("Deleted time block %s of collaborator %s", block_id, collaborator_id)
