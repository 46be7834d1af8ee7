"""
Media entries: pure business logic.

Every query is filtered by owner: an entry that exists but belongs to someone
else is indistinguishable from one that does not exist.
"""
from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mediacatalog.media.models import MediaEntry


async def create_entry(
    db: AsyncSession,
    *,
    user_id: int,
    fields: dict[str, Any],
    image: str | None = None,
) -> MediaEntry:
    entry = MediaEntry(user_id=user_id, image=image, **fields)
    db.add(entry)
    await db.flush()
    await db.refresh(entry)
    return entry


async def list_entries(db: AsyncSession, user_id: int) -> list[MediaEntry]:
    """All of the owner's entries, newest first."""
    result = await db.execute(
        select(MediaEntry)
        .where(MediaEntry.user_id == user_id)
        .order_by(MediaEntry.created_at.desc(), MediaEntry.id.desc())
    )
    return list(result.scalars().all())


async def get_entry(
    db: AsyncSession,
    entry_id: int,
    user_id: int,
) -> MediaEntry | None:
    result = await db.execute(
        select(MediaEntry).where(
            MediaEntry.id == entry_id,
            MediaEntry.user_id == user_id,
        )
    )
    return result.scalar_one_or_none()


async def update_entry(
    db: AsyncSession,
    entry: MediaEntry,
    *,
    fields: dict[str, Any],
    image: str | None = None,
) -> MediaEntry:
    """Replace the given fields; keep the stored image unless a new one is supplied."""
    for name, value in fields.items():
        setattr(entry, name, value)
    if image is not None:
        entry.image = image
    await db.flush()
    await db.refresh(entry)
    return entry


async def delete_entry(db: AsyncSession, entry_id: int, user_id: int) -> bool:
    entry = await get_entry(db, entry_id, user_id)
    if entry is None:
        return False
    await db.delete(entry)
    await db.flush()
    return True
