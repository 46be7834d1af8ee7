"""
HTTP request layer for the media catalog API.

Every protected call carries ``Authorization: Bearer <token>`` from the
``AuthSession``. A 401 on a protected call clears the session and raises
``Unauthorized``; callers treat that as "go to the login view". Transport
failures (refused connections, timeouts) surface as ``ServiceUnavailable``.
"""
from __future__ import annotations

import logging
import mimetypes
from typing import Any

import httpx

from mediacatalog.client.exceptions import ApiError, ServiceUnavailable, Unauthorized
from mediacatalog.client.schemas import LoginForm, MediaForm, MediaItem, RegisterForm
from mediacatalog.client.session import AuthSession

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        for key in ("error", "message", "detail"):
            if isinstance(body.get(key), str):
                return body[key]
    return response.reason_phrase


class CatalogClient:
    def __init__(
        self,
        base_url: str,
        session: AuthSession,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> CatalogClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # ── Auth ─────────────────────────────────────────────────────────────────

    async def register(self, form: RegisterForm) -> dict[str, Any]:
        body = await self._request(
            "POST", "/api/auth/register", json=form.model_dump(mode="json"),
        )
        return body["user"]

    async def login(self, form: LoginForm) -> str:
        body = await self._request(
            "POST", "/api/auth/login", json=form.model_dump(mode="json"),
        )
        token = body["token"]
        self.session.set_token(token)
        return token

    def logout(self) -> None:
        self.session.clear()

    # ── Media ────────────────────────────────────────────────────────────────

    async def list_media(self) -> list[MediaItem]:
        body = await self._request("GET", "/api/media", protected=True)
        return [MediaItem.model_validate(item) for item in body]

    async def get_media(self, entry_id: int) -> MediaItem:
        body = await self._request("GET", f"/api/media/{entry_id}", protected=True)
        return MediaItem.model_validate(body)

    async def create_media(self, form: MediaForm) -> MediaItem:
        body = await self._request(
            "POST", "/api/media", protected=True, **self._multipart(form),
        )
        return MediaItem.model_validate(body)

    async def update_media(self, entry_id: int, form: MediaForm) -> MediaItem:
        body = await self._request(
            "PUT", f"/api/media/{entry_id}", protected=True, **self._multipart(form),
        )
        return MediaItem.model_validate(body)

    async def delete_media(self, entry_id: int) -> str:
        body = await self._request("DELETE", f"/api/media/{entry_id}", protected=True)
        return body["message"]

    def image_url(self, item: MediaItem) -> str | None:
        if not item.image:
            return None
        return f"{self.base_url}/{item.image.lstrip('/')}"

    # ── internals ────────────────────────────────────────────────────────────

    @staticmethod
    def _multipart(form: MediaForm) -> dict[str, Any]:
        files = None
        if form.image is not None:
            content_type = mimetypes.guess_type(form.image.name)[0] or "application/octet-stream"
            files = {"image": (form.image.name, form.image.read_bytes(), content_type)}
        return {"data": form.form_data(), "files": files}

    async def _request(
        self,
        method: str,
        path: str,
        *,
        protected: bool = False,
        **kwargs: Any,
    ) -> Any:
        headers = {}
        if protected:
            self.session.sync()
            if not self.session.is_authenticated:
                raise Unauthorized("Not logged in")
            headers.update(self.session.auth_headers())

        try:
            response = await self._http.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise ServiceUnavailable(f"Could not reach the server: {exc}") from exc

        if response.status_code == httpx.codes.UNAUTHORIZED and protected:
            message = _error_message(response)
            logger.info("Session rejected by server (%s); clearing token", message)
            self.session.clear()
            raise Unauthorized(message)
        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        return response.json()
