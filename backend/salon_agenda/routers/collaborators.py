from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..deps import collaborator_or_404
from ..models.collaborator import Collaborator
from ..schemas.collaborator import CollaboratorIn, CollaboratorOut
from ..services import collaborators as svc

router = APIRouter(prefix="/collaborators", tags=["collaborators"])


@router.post("", response_model=CollaboratorOut, status_code=201)
def create_collaborator(payload: CollaboratorIn, db: Session = Depends(get_db)):
    return svc.create_collaborator(db, payload.name, payload.active)


@router.get("/{collaborator_id}", response_model=CollaboratorOut)
def read_collaborator(c: Collaborator = Depends(collaborator_or_404)):
    return c


@router.delete("/{collaborator_id}")
def delete_collaborator(
    c: Collaborator = Depends(collaborator_or_404), db: Session = Depends(get_db)
):
    svc.delete_collaborator(db, c.id)
    return {"ok": True}
