"""
Client-side forms and the media item view model.

Forms are validated before anything is sent, mirroring the server's rules so
obvious mistakes are reported inline instead of as a round-trip 400.
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from mediacatalog.media.constants import MAX_TEXT_FIELD_LENGTH, MAX_TITLE_LENGTH, MediaType


class _Form(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")


class LoginForm(_Form):
    email: EmailStr
    password: str = Field(min_length=1)


class RegisterForm(_Form):
    name: str = Field(min_length=1, max_length=150)
    email: EmailStr
    password: str = Field(min_length=1)


class MediaForm(_Form):
    title: str = Field(min_length=1, max_length=MAX_TITLE_LENGTH)
    type: MediaType = MediaType.MOVIE
    director: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH)
    budget: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH)
    location: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH)
    duration: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH)
    year: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH)
    image: Path | None = None

    def form_data(self) -> dict[str, str]:
        """Multipart text fields; blank optional fields are left out."""
        data = self.model_dump(exclude={"image"}, exclude_none=True, mode="json")
        return {k: v for k, v in data.items() if v != ""}

    @classmethod
    def from_item(cls, item: MediaItem) -> MediaForm:
        """Prefill an edit form from an existing entry."""
        return cls(
            title=item.title,
            type=item.type,
            director=item.director,
            budget=item.budget,
            location=item.location,
            duration=item.duration,
            year=item.year,
        )


class MediaItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    title: str
    type: str
    director: str | None = None
    budget: str | None = None
    location: str | None = None
    duration: str | None = None
    year: str | None = None
    image: str | None = None
    user_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
