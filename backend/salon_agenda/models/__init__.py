# import every model so Base.metadata knows all tables
from .collaborator import Collaborator
from .schedule import CollaboratorSchedule
from .block import CollaboratorBlock, CollaboratorTimeBlock

__all__ = ["Collaborator", "CollaboratorSchedule", "CollaboratorBlock", "CollaboratorTimeBlock"]
