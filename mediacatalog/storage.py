"""
Local upload storage for poster images.

Files land in ``Settings.upload_dir`` as ``<epoch-millis>-<original name>``
(whitespace replaced with underscores) and are served back by the static
mount at ``Settings.upload_url_prefix``. Entries store the public relative
path, never the filesystem path.

Files are never removed: replacing an entry's image or deleting the entry
leaves the old file on disk.
"""
from __future__ import annotations

import logging
import re
import shutil
from datetime import datetime, timezone
from pathlib import Path, PurePosixPath
from typing import BinaryIO

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from mediacatalog.config import Settings
from mediacatalog.exceptions import InvalidUpload

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def ensure_upload_dir(settings: Settings) -> Path:
    path = settings.upload_path
    path.mkdir(parents=True, exist_ok=True)
    return path


def build_filename(original_filename: str, now: datetime | None = None) -> str:
    """Timestamp-prefixed, path-free file name for an upload."""
    # Browsers on Windows may send a full path; keep only the last segment.
    name = PurePosixPath(original_filename.replace("\\", "/")).name
    name = _WHITESPACE_RE.sub("_", name.strip())
    if name in ("", ".", ".."):
        raise InvalidUpload("missing file name")
    now = now or datetime.now(timezone.utc)
    return f"{int(now.timestamp() * 1000)}-{name}"


def public_path(settings: Settings, filename: str) -> str:
    return f"{settings.upload_url_prefix.rstrip('/')}/{filename}"


def _write(source: BinaryIO, target: Path) -> None:
    source.seek(0)
    with target.open("wb") as fh:
        shutil.copyfileobj(source, fh)


async def save_upload(upload: UploadFile, settings: Settings) -> str:
    """Persist an uploaded image and return its public relative path."""
    filename = build_filename(upload.filename or "")
    target = ensure_upload_dir(settings) / filename
    await run_in_threadpool(_write, upload.file, target)
    logger.info("Stored upload %s (%s)", filename, upload.content_type)
    return public_path(settings, filename)
