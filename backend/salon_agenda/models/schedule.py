from sqlalchemy import Column, Integer, Time, Enum, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from ..core.schedule import WeekDay
from ..database import Base


class CollaboratorSchedule(Base):
    """One row per enabled weekday; a missing row means the day is off."""

    __tablename__ = "collaborator_schedules"

    id = Column(Integer, primary_key=True)
    collaborator_id = Column(
        Integer, ForeignKey("collaborators.id", ondelete="CASCADE"), nullable=False, index=True
    )
    day_of_week = Column(Enum(WeekDay), nullable=False)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)

    collaborator = relationship("Collaborator", back_populates="schedules")
    __table_args__ = (
        UniqueConstraint("collaborator_id", "day_of_week", name="uniq_collaborator_day"),
    )
