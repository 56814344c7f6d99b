from sqlalchemy import Column, Integer, String, Boolean
from sqlalchemy.orm import relationship
from ..database import Base


class Collaborator(Base):
    __tablename__ = "collaborators"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    active = Column(Boolean, default=True, nullable=False)
    # bumped on every wholesale schedule replace (optimistic check)
    schedule_version = Column(Integer, default=0, nullable=False)

    schedules = relationship(
        "CollaboratorSchedule", back_populates="collaborator",
        cascade="all, delete-orphan", passive_deletes=True,
    )
    blocks = relationship(
        "CollaboratorBlock", back_populates="collaborator",
        cascade="all, delete-orphan", passive_deletes=True,
    )
    time_blocks = relationship(
        "CollaboratorTimeBlock", back_populates="collaborator",
        cascade="all, delete-orphan", passive_deletes=True,
    )
