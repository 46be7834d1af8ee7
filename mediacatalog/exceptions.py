"""
Media catalog: domain-specific HTTP exceptions.

All exceptions use preset status codes and detail messages so that callers
never need to specify these at the call site. The error handlers in
``mediacatalog.shared.middleware`` render them in the standard envelope.
"""
from fastapi import HTTPException, status


# ── Credentials ──────────────────────────────────────────────────────────────

class InvalidCredentials(HTTPException):
    """Unknown email or wrong password; deliberately the same message for both."""

    def __init__(self) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials",
        )


class UserAlreadyExists(HTTPException):
    def __init__(self) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists",
        )


# ── Media ────────────────────────────────────────────────────────────────────

class MediaNotFound(HTTPException):
    """Absent, or owned by someone else. The two cases are indistinguishable."""

    def __init__(self) -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Media not found.",
        )


class InvalidUpload(HTTPException):
    def __init__(self, reason: str) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid upload: {reason}",
        )
