"""Use case for authenticating a user."""

from enum import Enum, auto

from sqlalchemy.orm import Session

from volunteer_api.infrastructure.repositories import UserRepository
from volunteer_api.infrastructure.security import verify_password

from .validators import normalize_email


class AuthenticationStatus(Enum):
    """Possible outcomes when attempting to authenticate a user."""

    SUCCESS = auto()
    INVALID_CREDENTIALS = auto()


def authenticate_user(session: Session, email: str | None, password: str | None):
    """Return the authentication result along with the user when possible."""

    if not email or not password:
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    user = UserRepository(session).get_by_email(normalize_email(email))
    if not user:
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    if not verify_password(password, user.password_hash):
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    return user, AuthenticationStatus.SUCCESS
