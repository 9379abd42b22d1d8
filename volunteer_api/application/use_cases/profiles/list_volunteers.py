"""Use case for listing volunteer profiles."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import ROLE_VOLUNTEER, Profile
from volunteer_api.infrastructure.repositories import ProfileRepository


def list_volunteers(session: Session) -> Sequence[Profile]:
    """Return the profiles of every volunteer account ordered by user id."""

    return ProfileRepository(session).list_by_role(ROLE_VOLUNTEER)
