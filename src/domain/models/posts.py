"""Post domain models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Post(BaseModel):
    """A persisted post.  updated_at moves on every successful update."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    body: str
    published: bool = False
    created_at: datetime
    updated_at: datetime


class PendingPost(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=200)
    body: str = Field(min_length=1)
    published: bool = False

    @field_validator("title")
    @classmethod
    def _title_single_line(cls, v: str) -> str:
        if "\n" in v:
            raise ValueError("title must be a single line")
        return v


class PostUpdate(PendingPost):
    """Full replacement: every field is required."""

    published: bool
