"""
Media entries: request dependencies.

Multipart forms are turned into validated pydantic schemas here, before any
controller code runs. Schema failures surface as RequestValidationError and
are reported as 400 by the shared error handlers.
"""
from typing import Any

from fastapi import File, Form, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from mediacatalog.media.schemas import MediaEntryCreate, MediaEntryUpdate
from mediacatalog.shared.auth.dependencies import get_current_user_required

__all__ = [
    "create_form",
    "get_current_user_required",
    "optional_image",
    "update_form",
]


def _validated(model: type[BaseModel], raw: dict[str, Any]) -> Any:
    # Absent form fields arrive as None; leave them unset so partial updates
    # can tell "not sent" apart from "sent".
    data = {k: v for k, v in raw.items() if v is not None}
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err["loc"])} for err in exc.errors(include_context=False)]
        )


def create_form(
    title: str | None = Form(default=None),
    type: str | None = Form(default=None),
    director: str | None = Form(default=None),
    budget: str | None = Form(default=None),
    location: str | None = Form(default=None),
    duration: str | None = Form(default=None),
    year: str | None = Form(default=None),
) -> MediaEntryCreate:
    return _validated(MediaEntryCreate, {
        "title": title,
        "type": type,
        "director": director,
        "budget": budget,
        "location": location,
        "duration": duration,
        "year": year,
    })


def update_form(
    title: str | None = Form(default=None),
    type: str | None = Form(default=None),
    director: str | None = Form(default=None),
    budget: str | None = Form(default=None),
    location: str | None = Form(default=None),
    duration: str | None = Form(default=None),
    year: str | None = Form(default=None),
) -> MediaEntryUpdate:
    return _validated(MediaEntryUpdate, {
        "title": title,
        "type": type,
        "director": director,
        "budget": budget,
        "location": location,
        "duration": duration,
        "year": year,
    })


def optional_image(image: UploadFile | None = File(default=None)) -> UploadFile | None:
    # An empty file input still posts a part, just without a file name.
    if image is None or not image.filename:
        return None
    return image
