from sqlalchemy import Column, Integer, Date, Time, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
from ..database import Base


class CollaboratorBlock(Base):
    """Full-day block: every date in [start_date, end_date] is off."""

    __tablename__ = "collaborator_blocks"

    id = Column(Integer, primary_key=True)
    collaborator_id = Column(
        Integer, ForeignKey("collaborators.id", ondelete="CASCADE"), nullable=False, index=True
    )
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    reason = Column(Text, nullable=False, default="")

    collaborator = relationship("Collaborator", back_populates="blocks")


class CollaboratorTimeBlock(Base):
    """Time-range block on a single date."""

    __tablename__ = "collaborator_time_blocks"

    id = Column(Integer, primary_key=True)
    collaborator_id = Column(
        Integer, ForeignKey("collaborators.id", ondelete="CASCADE"), nullable=False
    )
    block_date = Column(Date, nullable=False)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    reason = Column(Text, nullable=True)

    collaborator = relationship("Collaborator", back_populates="time_blocks")
    __table_args__ = (
        Index("ix_time_blocks_collaborator_date", "collaborator_id", "block_date"),
    )
