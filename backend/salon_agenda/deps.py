import logging

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from .core.errors import (
    AgendaError,
    BlockConflictError,
    InactiveCollaboratorError,
    NotFoundError,
    ScheduleValidationError,
    StaleScheduleError,
)
from .database import get_db
from .models.collaborator import Collaborator
from .services.collaborators import get_collaborator

logger = logging.getLogger(__name__)


def collaborator_or_404(collaborator_id: int, db: Session = Depends(get_db)) -> Collaborator:
    try:
        return get_collaborator(db, collaborator_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


def to_http(exc: AgendaError) -> HTTPException:
    """Business error -> HTTP error the form can display."""
    if isinstance(exc, ScheduleValidationError):
        return HTTPException(status_code=422, detail={"errors": exc.errors})
    if isinstance(exc, BlockConflictError):
        return HTTPException(status_code=409, detail=exc.conflict.message)
    if isinstance(exc, StaleScheduleError):
        return HTTPException(status_code=409, detail=str(exc))
    if isinstance(exc, InactiveCollaboratorError):
        return HTTPException(status_code=409, detail=str(exc))
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    logger.warning("Unmapped agenda error: %s", exc)
    return HTTPException(status_code=400, detail=str(exc))
