"""
Media entries: controller layer.

Receives validated input from the router, calls service functions, composes
the response. Ownership failures are reported as MediaNotFound.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mediacatalog.exceptions import MediaNotFound
from mediacatalog.media import service
from mediacatalog.media.schemas import (
    MediaEntryCreate,
    MediaEntryResponse,
    MediaEntryUpdate,
    MessageResponse,
)
from mediacatalog.storage import save_upload

if TYPE_CHECKING:
    from fastapi import UploadFile
    from sqlalchemy.ext.asyncio import AsyncSession

    from mediacatalog.config import Settings
    from mediacatalog.shared.models.user import CurrentUser

logger = logging.getLogger(__name__)


async def create_entry(
    fields: MediaEntryCreate,
    image: UploadFile | None,
    user: CurrentUser,
    db: AsyncSession,
    settings: Settings,
) -> MediaEntryResponse:
    image_path = await save_upload(image, settings) if image is not None else None
    entry = await service.create_entry(
        db,
        user_id=user.id,
        fields=fields.model_dump(),
        image=image_path,
    )
    logger.info("User %s created media entry %s", user.id, entry.id)
    return MediaEntryResponse.model_validate(entry)


async def list_entries(user: CurrentUser, db: AsyncSession) -> list[MediaEntryResponse]:
    entries = await service.list_entries(db, user.id)
    return [MediaEntryResponse.model_validate(e) for e in entries]


async def get_entry(entry_id: int, user: CurrentUser, db: AsyncSession) -> MediaEntryResponse:
    entry = await service.get_entry(db, entry_id, user.id)
    if entry is None:
        raise MediaNotFound()
    return MediaEntryResponse.model_validate(entry)


async def update_entry(
    entry_id: int,
    fields: MediaEntryUpdate,
    image: UploadFile | None,
    user: CurrentUser,
    db: AsyncSession,
    settings: Settings,
) -> MediaEntryResponse:
    entry = await service.get_entry(db, entry_id, user.id)
    if entry is None:
        raise MediaNotFound()

    image_path = await save_upload(image, settings) if image is not None else None
    entry = await service.update_entry(
        db,
        entry,
        fields=fields.model_dump(exclude_unset=True),
        image=image_path,
    )
    logger.info("User %s updated media entry %s", user.id, entry.id)
    return MediaEntryResponse.model_validate(entry)


async def delete_entry(entry_id: int, user: CurrentUser, db: AsyncSession) -> MessageResponse:
    deleted = await service.delete_entry(db, entry_id, user.id)
    if not deleted:
        raise MediaNotFound()
    logger.info("User %s deleted media entry %s", user.id, entry_id)
    return MessageResponse(message="Media deleted successfully!")
