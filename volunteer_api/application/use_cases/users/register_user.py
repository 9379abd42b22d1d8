"""Use case for registering users."""

import logging

from sqlalchemy.orm import Session

from volunteer_api.config import get_settings
from volunteer_api.domain.entities import ROLE_ADMIN, ROLE_VOLUNTEER, ROLES, User
from volunteer_api.domain.exceptions import ConflictError, ValidationError
from volunteer_api.infrastructure.repositories import UserRepository
from volunteer_api.infrastructure.security import get_password_hash
from volunteer_api.utils import now_in_app_naive_datetime

from .validators import collect_credential_errors, normalize_email

logger = logging.getLogger(__name__)


def _resolve_role(requested: str | None) -> str:
    role = (requested or "").strip().lower()
    if role not in ROLES:
        return ROLE_VOLUNTEER
    if role == ROLE_ADMIN and not get_settings().allow_admin_registration:
        return ROLE_VOLUNTEER
    return role


def register_user(
    session: Session,
    *,
    email: str | None,
    password: str | None,
    role: str | None = None,
) -> User:
    """Create a new account ensuring unique, lowercase email addresses."""

    normalized_email = normalize_email(email)
    errors = collect_credential_errors(normalized_email, password)
    if errors:
        raise ValidationError(errors)

    repository = UserRepository(session)
    if repository.get_by_email(normalized_email):
        raise ConflictError("Email already registered")

    user = User(
        id=None,
        email=normalized_email,
        password_hash=get_password_hash(password),
        role=_resolve_role(role),
        created_at=now_in_app_naive_datetime(),
    )
    created = repository.create(user)
    logger.info("Registered user %s with role %s", created.id, created.role)
    return created
