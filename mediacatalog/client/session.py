"""
Client-side auth session.

Holds the bearer token for the request layer and, when given a path,
persists it as JSON so it survives restarts (the browser-storage analogue).
Listeners are notified on every change. ``sync()`` re-reads the file so a
token written or cleared by another process is picked up.
"""
from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

Listener = Callable[[str | None], None]


class AuthSession:
    def __init__(self, storage_path: str | Path | None = None) -> None:
        self._path = Path(storage_path) if storage_path is not None else None
        self._token: str | None = None
        self._listeners: list[Listener] = []
        self._loaded_mtime: int | None = None
        if self._path is not None:
            self._token = self._read()

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return bool(self._token)

    def auth_headers(self) -> dict[str, str]:
        if not self._token:
            return {}
        return {"Authorization": f"Bearer {self._token}"}

    def set_token(self, token: str) -> None:
        self._update(token, persist=True)

    def clear(self) -> None:
        self._update(None, persist=True)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener(token)``; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def sync(self) -> bool:
        """Reload from storage if another writer changed it. Returns True on change."""
        if self._path is None:
            return False
        mtime = self._mtime()
        if mtime == self._loaded_mtime:
            return False
        token = self._read()
        if token == self._token:
            return False
        self._update(token, persist=False)
        return True

    # ── internals ────────────────────────────────────────────────────────────

    def _update(self, token: str | None, *, persist: bool) -> None:
        changed = token != self._token
        self._token = token
        if persist and self._path is not None:
            self._write(token)
        if changed:
            for listener in list(self._listeners):
                listener(token)

    def _mtime(self) -> int | None:
        try:
            return self._path.stat().st_mtime_ns
        except FileNotFoundError:
            return None

    def _read(self) -> str | None:
        self._loaded_mtime = self._mtime()
        if self._loaded_mtime is None:
            return None
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable session file %s", self._path)
            return None
        token = data.get("token") if isinstance(data, dict) else None
        return token if isinstance(token, str) and token else None

    def _write(self, token: str | None) -> None:
        if token is None:
            self._path.unlink(missing_ok=True)
        else:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(self._path.suffix + ".tmp")
            tmp.write_text(json.dumps({"token": token}), encoding="utf-8")
            os.replace(tmp, self._path)
        self._loaded_mtime = self._mtime()
