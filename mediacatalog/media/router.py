"""
Media entries: HTTP routes.

Every endpoint requires a bearer token; results are scoped to its owner.
"""
from fastapi import APIRouter, Depends, Path, Request, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from mediacatalog.config import Settings
from mediacatalog.database import get_db
from mediacatalog.media import controller
from mediacatalog.media.constants import MAX_ENTRY_ID
from mediacatalog.media.dependencies import (
    create_form,
    get_current_user_required,
    optional_image,
    update_form,
)
from mediacatalog.media.schemas import (
    MediaEntryCreate,
    MediaEntryResponse,
    MediaEntryUpdate,
    MessageResponse,
)
from mediacatalog.shared.models.user import CurrentUser

router = APIRouter(prefix="/media", tags=["media"])


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.post(
    "",
    response_model=MediaEntryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a media entry",
    description="Multipart form with the entry fields and an optional `image` file.",
)
async def create_entry(
    user: CurrentUser = Depends(get_current_user_required),
    fields: MediaEntryCreate = Depends(create_form),
    image: UploadFile | None = Depends(optional_image),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(_get_settings),
) -> MediaEntryResponse:
    return await controller.create_entry(fields, image, user, db, settings)


@router.get(
    "",
    response_model=list[MediaEntryResponse],
    summary="List my media entries (newest first)",
)
async def list_entries(
    user: CurrentUser = Depends(get_current_user_required),
    db: AsyncSession = Depends(get_db),
) -> list[MediaEntryResponse]:
    return await controller.list_entries(user, db)


@router.get(
    "/{entry_id}",
    response_model=MediaEntryResponse,
    summary="Get one of my media entries",
)
async def get_entry(
    entry_id: int = Path(ge=1, le=MAX_ENTRY_ID),
    user: CurrentUser = Depends(get_current_user_required),
    db: AsyncSession = Depends(get_db),
) -> MediaEntryResponse:
    return await controller.get_entry(entry_id, user, db)


@router.put(
    "/{entry_id}",
    response_model=MediaEntryResponse,
    summary="Update one of my media entries",
    description="Fields left out of the form keep their value; without `image` the stored image is kept.",
)
async def update_entry(
    entry_id: int = Path(ge=1, le=MAX_ENTRY_ID),
    user: CurrentUser = Depends(get_current_user_required),
    fields: MediaEntryUpdate = Depends(update_form),
    image: UploadFile | None = Depends(optional_image),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(_get_settings),
) -> MediaEntryResponse:
    return await controller.update_entry(entry_id, fields, image, user, db, settings)


@router.delete(
    "/{entry_id}",
    response_model=MessageResponse,
    summary="Delete one of my media entries",
)
async def delete_entry(
    entry_id: int = Path(ge=1, le=MAX_ENTRY_ID),
    user: CurrentUser = Depends(get_current_user_required),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    return await controller.delete_entry(entry_id, user, db)
