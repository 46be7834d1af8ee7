from mediacatalog.shared.middleware.error_handler import (
    error_envelope_middleware,
    http_exception_handler,
    rate_limit_exceeded_handler,
    validation_exception_handler,
)
from mediacatalog.shared.middleware.request_id import request_id_middleware

__all__ = [
    "error_envelope_middleware",
    "http_exception_handler",
    "rate_limit_exceeded_handler",
    "request_id_middleware",
    "validation_exception_handler",
]
