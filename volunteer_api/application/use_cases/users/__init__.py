"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .get_user import get_user
from .register_user import register_user

__all__ = [
    "AuthenticationStatus",
    "authenticate_user",
    "get_user",
    "register_user",
]
