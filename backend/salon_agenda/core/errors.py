# backend/salon_agenda/core/errors.py
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .block_registry import BlockConflict


class AgendaError(Exception):
    """Base for the recoverable business errors of the agenda."""


class ScheduleValidationError(AgendaError):
    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


class BlockConflictError(AgendaError):
    def __init__(self, conflict: "BlockConflict"):
        self.conflict = conflict
        super().__init__(conflict.message)


class StaleScheduleError(AgendaError):
    def __init__(self, expected: int, current: int):
        self.expected = expected
        self.current = current
        super().__init__(
            f"Schedule was changed meanwhile (version {current}, expected {expected})"
        )


class NotFoundError(AgendaError):
    pass


class InactiveCollaboratorError(AgendaError):
    def __init__(self, collaborator_id: int):
        self.collaborator_id = collaborator_id
        super().__init__(f"Collaborator {collaborator_id} is inactive")
