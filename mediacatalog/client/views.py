"""
View models for the catalog client: login/signup, the media list with
search, and the add/edit form.

Views never navigate themselves. They report outcomes through return values,
``message``/``error`` attributes, and two injected callbacks:

  - ``confirm(title, text)`` -> bool (or awaitable bool), asked before
    destructive or navigating actions;
  - ``on_unauthorized()``, called after the session was cleared because the
    server rejected the token, i.e. "redirect to login".
"""
from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import ValidationError

from mediacatalog.client.api import CatalogClient
from mediacatalog.client.debounce import DEFAULT_DELAY_SECONDS, Debouncer
from mediacatalog.client.exceptions import ApiError, Unauthorized
from mediacatalog.client.schemas import LoginForm, MediaForm, MediaItem, RegisterForm
from mediacatalog.client.search import ALL_CATEGORIES, CATEGORIES, DEFAULT_THRESHOLD, apply_filters

logger = logging.getLogger(__name__)

Confirm = Callable[[str, str], "bool | Awaitable[bool]"]


async def _maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"{loc}: {err['msg']}" if loc else err["msg"]


class _View:
    def __init__(
        self,
        client: CatalogClient,
        *,
        on_unauthorized: Callable[[], Any] | None = None,
    ) -> None:
        self.client = client
        self.on_unauthorized = on_unauthorized
        self.error: str | None = None

    async def _unauthorized(self, exc: Unauthorized) -> None:
        self.error = exc.message
        if self.on_unauthorized is not None:
            await _maybe_await(self.on_unauthorized())


class AuthView(_View):
    """Login / signup form."""

    def __init__(self, client: CatalogClient) -> None:
        super().__init__(client)
        self.message: str | None = None

    async def login(self, email: str, password: str) -> bool:
        self.error = self.message = None
        try:
            await self.client.login(LoginForm(email=email, password=password))
        except ValidationError as exc:
            self.error = _first_error(exc)
            return False
        except ApiError as exc:
            self.error = exc.message or "Invalid email or password"
            return False
        self.message = "Login successful!"
        return True

    async def register(self, name: str, email: str, password: str) -> bool:
        self.error = self.message = None
        try:
            await self.client.register(RegisterForm(name=name, email=email, password=password))
        except ValidationError as exc:
            self.error = _first_error(exc)
            return False
        except ApiError as exc:
            self.error = exc.message or "Registration failed"
            return False
        self.message = "Account created! You can now login."
        return True

    def logout(self) -> None:
        self.client.logout()


class MediaListView(_View):
    """The "My Media" list: fetch once, then filter locally as the user types."""

    categories = CATEGORIES

    def __init__(
        self,
        client: CatalogClient,
        *,
        confirm: Confirm,
        on_unauthorized: Callable[[], Any] | None = None,
        debounce_seconds: float = DEFAULT_DELAY_SECONDS,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> None:
        super().__init__(client, on_unauthorized=on_unauthorized)
        self.confirm = confirm
        self.threshold = threshold
        self.items: list[MediaItem] = []
        self.visible: list[MediaItem] = []
        self.query = ""
        self.category = ALL_CATEGORIES
        self.loading = False
        self._debouncer = Debouncer(self.refresh, delay=debounce_seconds)

    async def load(self) -> None:
        self.loading = True
        self.error = None
        try:
            self.items = await self.client.list_media()
        except Unauthorized as exc:
            self.items = []
            await self._unauthorized(exc)
        except ApiError as exc:
            self.error = exc.message
        finally:
            self.loading = False
        self.refresh()

    def set_query(self, query: str) -> None:
        self.query = query
        self._debouncer()

    def set_category(self, category: str) -> None:
        if category not in self.categories:
            raise ValueError(f"Unknown category: {category!r}")
        self.category = category
        self._debouncer()

    def refresh(self) -> None:
        self.visible = apply_filters(
            self.items, self.query, self.category, threshold=self.threshold,
        )

    async def settle(self) -> None:
        """Wait for any pending debounced refresh."""
        await self._debouncer.wait()

    async def delete(self, entry_id: int) -> bool:
        if not await _maybe_await(self.confirm(
            "Delete Media?",
            "Are you sure you want to delete this media? This action cannot be undone.",
        )):
            return False
        try:
            await self.client.delete_media(entry_id)
        except Unauthorized as exc:
            await self._unauthorized(exc)
            return False
        except ApiError as exc:
            self.error = exc.message
            return False
        self.items = [item for item in self.items if item.id != entry_id]
        self.refresh()
        return True

    async def edit(self, entry_id: int) -> MediaEditView | None:
        """Confirm, then open the edit form for ``entry_id``."""
        if not await _maybe_await(self.confirm(
            "Edit Media?",
            "Are you sure you want to edit this media details?",
        )):
            return None
        editor = MediaEditView(self.client, on_unauthorized=self.on_unauthorized)
        if not await editor.load(entry_id):
            self.error = editor.error
            return None
        return editor


class MediaEditView(_View):
    """Add form (no ``entry_id``) or edit form (after ``load``)."""

    def __init__(
        self,
        client: CatalogClient,
        *,
        on_unauthorized: Callable[[], Any] | None = None,
    ) -> None:
        super().__init__(client, on_unauthorized=on_unauthorized)
        self.entry_id: int | None = None
        self.form: MediaForm | None = None

    async def load(self, entry_id: int) -> bool:
        self.error = None
        try:
            item = await self.client.get_media(entry_id)
        except Unauthorized as exc:
            await self._unauthorized(exc)
            return False
        except ApiError as exc:
            self.error = exc.message
            return False
        self.entry_id = item.id
        self.form = MediaForm.from_item(item)
        return True

    async def submit(self, **fields: Any) -> MediaItem | None:
        """Validate ``fields`` (merged over the loaded form) and save."""
        self.error = None
        base = self.form.model_dump() if self.form is not None else {}
        try:
            form = MediaForm(**{**base, **fields})
        except ValidationError as exc:
            self.error = _first_error(exc)
            return None

        try:
            if self.entry_id is None:
                item = await self.client.create_media(form)
            else:
                item = await self.client.update_media(self.entry_id, form)
        except Unauthorized as exc:
            await self._unauthorized(exc)
            return None
        except ApiError as exc:
            self.error = exc.message
            return None

        self.entry_id = item.id
        self.form = MediaForm.from_item(item)
        return item
