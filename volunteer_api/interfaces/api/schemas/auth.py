"""Authentication related schemas."""

from datetime import datetime

from pydantic import BaseModel

from .common import CamelModel


class RegisterRequest(BaseModel):
    email: str | None = None
    password: str | None = None
    role: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class UserRead(CamelModel):
    id: int
    email: str
    role: str
    created_at: datetime | None = None


class LoginData(BaseModel):
    token: str
    user: UserRead


__all__ = ["LoginData", "LoginRequest", "RegisterRequest", "UserRead"]
