"""User domain models.

These are pure domain objects with no ORM or persistence concerns.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class User(BaseModel):
    """A persisted user.

    id and created_at are storage-assigned.  email is unique across users
    when set.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str | None = None
    created_at: datetime


class PendingUser(BaseModel):
    """Payload required to create a User.  id is never client-supplied."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100)
    email: str | None = Field(default=None, max_length=255, pattern=EMAIL_PATTERN)


class UserUpdate(BaseModel):
    """Partial update: only fields present in the payload are changed."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: str | None = Field(default=None, max_length=255, pattern=EMAIL_PATTERN)

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, v: str | None) -> str:
        # Omitted is fine; an explicit null would clear a NOT NULL column.
        if v is None:
            raise ValueError("name cannot be null")
        return v

    def changes(self) -> dict[str, object]:
        """Fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)
