"""
Media entries: Pydantic V2 request/response schemas.
"""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from mediacatalog.media.constants import MAX_TEXT_FIELD_LENGTH, MAX_TITLE_LENGTH, MediaType


class _Base(BaseModel):
    model_config = ConfigDict(
        str_strip_whitespace=True,
        extra="forbid",
    )


# ── Requests ─────────────────────────────────────────────────────────────────

class MediaEntryCreate(_Base):
    """Fields of a new entry, parsed from the multipart form."""
    title: str = Field(min_length=1, max_length=MAX_TITLE_LENGTH)
    type: MediaType
    director: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH)
    budget: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH)
    location: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH)
    duration: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH)
    year: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH)


class MediaEntryUpdate(_Base):
    """Partial update: only fields present in the form are replaced."""
    title: str | None = Field(default=None, min_length=1, max_length=MAX_TITLE_LENGTH)
    type: MediaType | None = None
    director: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH)
    budget: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH)
    location: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH)
    duration: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH)
    year: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH)


# ── Responses ────────────────────────────────────────────────────────────────

class MediaEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: int
    title: str
    type: MediaType
    director: str | None = None
    budget: str | None = None
    location: str | None = None
    duration: str | None = None
    year: str | None = None
    image: str | None = None
    user_id: int
    created_at: datetime
    updated_at: datetime | None = None


class MessageResponse(_Base):
    message: str
