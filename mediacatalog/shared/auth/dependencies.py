"""
Authorization gate.

Every protected route depends on ``get_current_user_required``. A request
lands in exactly one state:

  - no header / non-Bearer header   -> 401 "Not authorized, token missing"
  - expired token                    -> 401 "Token has expired."
  - bad signature / claims / payload -> 401 "Invalid or expired token."
  - valid token                      -> CurrentUser injected, request continues

There are no retries: a token failure is terminal for the request.
"""
import logging

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt

from mediacatalog.shared.auth.config import AuthSettings
from mediacatalog.shared.models.user import CurrentUser

logger = logging.getLogger(__name__)

http_bearer = HTTPBearer(auto_error=False)


class NotAuthenticated(HTTPException):
    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_auth_settings(request: Request) -> AuthSettings:
    return request.app.state.auth_settings


def decode_token(token: str, settings: AuthSettings) -> dict:
    return jwt.decode(
        token,
        settings.secret,
        algorithms=[settings.algorithm],
        issuer=settings.issuer,
        audience=settings.audience,
    )


def payload_to_user(payload: dict) -> CurrentUser:
    user_id = payload.get("sub")
    email = payload.get("email")
    if not user_id or not email:
        raise ValueError("Missing sub or email in token")
    return CurrentUser(id=int(user_id), email=email)


async def get_current_user_required(
    credentials: HTTPAuthorizationCredentials | None = Depends(http_bearer),
    settings: AuthSettings = Depends(get_auth_settings),
) -> CurrentUser:
    # HTTPBearer(auto_error=False) yields None for both a missing header and
    # a header whose scheme is not "Bearer".
    if credentials is None or not credentials.credentials:
        raise NotAuthenticated("Not authorized, token missing")

    try:
        payload = decode_token(credentials.credentials, settings)
        return payload_to_user(payload)
    except ExpiredSignatureError:
        raise NotAuthenticated("Token has expired.")
    except (JWTError, ValueError) as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise NotAuthenticated("Invalid or expired token.")
