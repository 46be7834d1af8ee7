"""
MediaEntry ORM model: SQLAlchemy 2.0 async.

One row per catalogued movie or show. Every row belongs to exactly one user
and every query against this table is filtered by ``user_id``.
"""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    DateTime,
    Enum as SAEnum,
    ForeignKey,
    Index,
    Integer,
    String,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from mediacatalog.media.constants import MAX_TEXT_FIELD_LENGTH, MAX_TITLE_LENGTH, MediaType
from mediacatalog.shared.database import Base


class MediaEntry(Base):
    __tablename__ = "media_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(MAX_TITLE_LENGTH), nullable=False)
    type: Mapped[MediaType] = mapped_column(
        SAEnum(
            MediaType,
            name="mediatype",
            native_enum=False,
            create_constraint=True,
            length=20,
            values_callable=lambda e: [x.value for x in e],
        ),
        nullable=False,
    )

    # Free text as entered by the user ("$165M", "2h 46m", "2021"...)
    director: Mapped[str | None] = mapped_column(String(MAX_TEXT_FIELD_LENGTH), nullable=True)
    budget: Mapped[str | None] = mapped_column(String(MAX_TEXT_FIELD_LENGTH), nullable=True)
    location: Mapped[str | None] = mapped_column(String(MAX_TEXT_FIELD_LENGTH), nullable=True)
    duration: Mapped[str | None] = mapped_column(String(MAX_TEXT_FIELD_LENGTH), nullable=True)
    year: Mapped[str | None] = mapped_column(String(MAX_TEXT_FIELD_LENGTH), nullable=True)

    # Relative path under the public upload prefix, e.g. /uploads/1700000000000-dune.jpg
    image: Mapped[str | None] = mapped_column(String(500), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=True,
    )

    __table_args__ = (
        Index("ix_media_entries_user_created", "user_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<MediaEntry {self.id} {self.title!r} user={self.user_id}>"
