"""Use case for reading a profile."""

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Profile
from volunteer_api.infrastructure.repositories import ProfileRepository


def get_profile(session: Session, user_id: int) -> Profile | None:
    """Return the profile of ``user_id``; ``None`` until one has been saved."""

    return ProfileRepository(session).get(user_id)
