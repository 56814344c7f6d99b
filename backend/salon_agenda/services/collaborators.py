# backend/salon_agenda/services/collaborators.py
import logging

from sqlalchemy.orm import Session

from ..core.errors import NotFoundError
from ..models.collaborator import Collaborator

logger = logging.getLogger(__name__)


def get_collaborator(db: Session, collaborator_id: int) -> Collaborator:
    c = db.get(Collaborator, collaborator_id)
    if not c:
        raise NotFoundError(f"Collaborator {collaborator_id} not found")
    return c


def lock_collaborator(db: Session, collaborator_id: int) -> Collaborator:
    """
    SELECT ... FOR UPDATE on the owning row: writers of the same
    collaborator's schedule/blocks queue here until commit/rollback.
    """
    c = (
        db.query(Collaborator)
        .filter(Collaborator.id == collaborator_id)
        .with_for_update()
        .one_or_none()
    )
    if not c:
        raise NotFoundError(f"Collaborator {collaborator_id} not found")
    return c


def create_collaborator(db: Session, name: str, active: bool = True) -> Collaborator:
    # new collaborators start with every day disabled: no schedule rows
    c = Collaborator(name=name.strip(), active=active, schedule_version=0)
    db.add(c)
    db.commit()
    db.refresh(c)
    logger.info("Created collaborator %s (%s)", c.id, c.name)
    return c


def delete_collaborator(db: Session, collaborator_id: int) -> None:
    c = get_collaborator(db, collaborator_id)
    db.delete(c)  # cascades to schedules and blocks
    db.commit()
    logger.info("Deleted collaborator %s with its schedule and blocks", collaborator_id)
