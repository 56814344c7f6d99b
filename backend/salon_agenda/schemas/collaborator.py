from pydantic import BaseModel, Field


class CollaboratorIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    active: bool = True


class CollaboratorOut(BaseModel):
    id: int
    name: str
    active: bool
    schedule_version: int

    class Config:
        from_attributes = True
