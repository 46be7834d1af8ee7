"""
Credential service: Pydantic V2 request/response schemas.

  - *Request  models: input from the client (strict extra="forbid")
  - *Response models: output to the client (the password hash is never exposed)
"""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class _Base(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
    )


class RegisterRequest(_Base):
    """Body for POST /auth/register."""

    name: str = Field(min_length=1, max_length=150)
    email: EmailStr
    password: str = Field(min_length=1, max_length=128)


class LoginRequest(_Base):
    """Body for POST /auth/login."""

    email: EmailStr
    password: str = Field(min_length=1, max_length=128)


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime | None = None


class RegisterResponse(BaseModel):
    message: str
    user: UserResponse


class TokenResponse(BaseModel):
    message: str
    token: str
    token_type: str = "bearer"
    expires_in: int = Field(description="Token lifetime in seconds")
