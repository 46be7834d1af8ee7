"""
Global slowapi rate limiter.

Imported by auth/router.py for per-endpoint limits. Mounted onto app.state in
main.py so slowapi middleware can find it.

Route decorators bind to this module-level instance, so ``create_app`` calls
``configure_limiter`` to apply the app's own settings: the enabled flag, the
storage backend and the register/login limit strings.

Storage defaults to in-memory; point RATE_LIMIT_STORAGE_URI at Redis when
running more than one worker.
"""
import logging

from limits.storage import storage_from_string
from limits.strategies import FixedWindowRateLimiter
from slowapi import Limiter
from slowapi.util import get_remote_address

from mediacatalog.config import Settings, get_settings

logger = logging.getLogger(__name__)

_settings: Settings = get_settings()

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=_settings.rate_limit_storage_uri,
    enabled=_settings.rate_limit_enabled,
)


def configure_limiter(settings: Settings) -> Limiter:
    """Point the shared limiter at ``settings`` and return it."""
    global _settings
    if settings.rate_limit_storage_uri != limiter._storage_uri:
        limiter._storage_uri = settings.rate_limit_storage_uri
        limiter._storage = storage_from_string(settings.rate_limit_storage_uri)
        limiter._limiter = FixedWindowRateLimiter(limiter._storage)
        logger.info("Rate limit storage set to %s", settings.rate_limit_storage_uri)
    limiter.enabled = settings.rate_limit_enabled
    _settings = settings
    return limiter


def register_limit() -> str:
    return _settings.register_rate_limit


def login_limit() -> str:
    return _settings.login_rate_limit
