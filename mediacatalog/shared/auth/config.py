from pydantic import BaseModel


class AuthSettings(BaseModel):
    """JWT parameters shared by the token issuer and the authorization gate."""

    secret: str = "change-me"
    algorithm: str = "HS256"
    issuer: str = "mediacatalog"
    audience: str = "mediacatalog-clients"
    expire_seconds: int = 86_400
