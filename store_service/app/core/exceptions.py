"""
Repository error taxonomy for Store Service.

``NotFound`` is raised by callers that need a row to exist; repositories
themselves report a missing row as ``None``. ``CreationFailure`` and
``UpdateFailure`` mean the store acknowledged a write but the row could not be
read back (or no row was touched), and are never retried.
"""

from typing import Optional


class RepositoryError(Exception):
    """Base class for data-access errors."""

    def __init__(self, message: str, entity: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.entity = entity


class NotFound(RepositoryError):
    """Lookup by id yielded no row."""

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} not found", entity=entity)
        self.entity_id = entity_id


class CreationFailure(RepositoryError):
    """Insert succeeded but the created row could not be re-read."""


class UpdateFailure(RepositoryError):
    """Update touched zero rows, or the updated row could not be re-read."""
