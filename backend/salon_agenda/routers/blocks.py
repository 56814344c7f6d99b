from datetime import date
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.block_registry import FullDayBlock, TimeBlock
from ..core.errors import AgendaError
from ..database import get_db
from ..deps import collaborator_or_404, to_http
from ..models.collaborator import Collaborator
from ..schemas.blocks import FullDayBlockIn, FullDayBlockOut, TimeBlockIn, TimeBlockOut
from ..services import blocks as svc

router = APIRouter(prefix="/collaborators/{collaborator_id}", tags=["blocks"])


# -----------------------------------------------------------------------------
# FULL-DAY BLOCKS (vacation, leave, ...)
# -----------------------------------------------------------------------------
@router.get("/blocks", response_model=List[FullDayBlockOut])
def list_blocks(
    day: date | None = None,
    c: Collaborator = Depends(collaborator_or_404),
    db: Session = Depends(get_db),
):
    return svc.list_full_day_blocks(db, c.id, day)


@router.post("/blocks", response_model=FullDayBlockOut, status_code=201)
def create_block(
    payload: FullDayBlockIn,
    c: Collaborator = Depends(collaborator_or_404),
    db: Session = Depends(get_db),
):
    candidate = FullDayBlock(
        collaborator_id=c.id,
        start_date=payload.start_date,
        end_date=payload.end_date,
        reason=payload.reason,
    )
    try:
        return svc.create_full_day_block(db, candidate)
    except AgendaError as e:
        raise to_http(e)


@router.delete("/blocks/{block_id}")
def delete_block(
    block_id: int,
    c: Collaborator = Depends(collaborator_or_404),
    db: Session = Depends(get_db),
):
    try:
        svc.delete_full_day_block(db, c.id, block_id)
    except AgendaError as e:
        raise to_http(e)
    return {"ok": True}


# -----------------------------------------------------------------------------
# TIME BLOCKS (one date, time range)
# -----------------------------------------------------------------------------
@router.get("/time-blocks", response_model=List[TimeBlockOut])
def list_time_blocks(
    day: date | None = None,
    c: Collaborator = Depends(collaborator_or_404),
    db: Session = Depends(get_db),
):
    return svc.list_time_blocks(db, c.id, day)


@router.post("/time-blocks", response_model=TimeBlockOut, status_code=201)
def create_time_block(
    payload: TimeBlockIn,
    c: Collaborator = Depends(collaborator_or_404),
    db: Session = Depends(get_db),
):
    candidate = TimeBlock(
        collaborator_id=c.id,
        block_date=payload.block_date,
        start_time=payload.start_time,
        end_time=payload.end_time,
        reason=payload.reason,
    )
    try:
        return svc.create_time_block(db, candidate)
    except AgendaError as e:
        raise to_http(e)


@router.delete("/time-blocks/{block_id}")
def delete_time_block(
    block_id: int,
    c: Collaborator = Depends(collaborator_or_404),
    db: Session = Depends(get_db),
):
    try:
        svc.delete_time_block(db, c.id, block_id)
    except AgendaError as e:
        raise to_http(e)
    return {"ok": True}
