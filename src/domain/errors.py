"""Domain exceptions raised by validation and data-access services.

The request handlers translate these into HTTP status codes; the message of
each exception is the plain-text response body.
"""

from __future__ import annotations


class CrudError(Exception):
    """Base class for all CRUD-layer failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(CrudError):
    """A pending payload failed validation before reaching storage."""

    def __init__(self, messages: list[str]) -> None:
        self.messages = list(messages)
        super().__init__("\n".join(self.messages) or "invalid payload")


class NotFoundError(CrudError):
    """An id-addressed operation matched no row."""

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} with id {identifier} not found")


class StorageError(CrudError):
    """Any other data-access failure (constraint violation, lost connection)."""
