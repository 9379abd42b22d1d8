"""Persistence layer for volunteer profiles."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Profile
from volunteer_api.infrastructure.models import ProfileModel, UserModel
from volunteer_api.utils import decode_date_list, decode_string_list, encode_date_list


class ProfileRepository:
    """Provide read and upsert operations for :class:`Profile` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> Profile | None:
        model = self.session.get(ProfileModel, user_id)
        return self._to_entity(model) if model else None

    def list_by_role(self, role: str) -> Sequence[Profile]:
        query = (
            self.session.query(ProfileModel)
            .join(UserModel, ProfileModel.user_id == UserModel.id)
            .filter(UserModel.role == role)
            .order_by(ProfileModel.user_id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def upsert(self, profile: Profile) -> Profile:
        """Replace every field of the user's profile, creating it if needed."""

        model = self.session.get(ProfileModel, profile.user_id)
        if model is None:
            model = ProfileModel(user_id=profile.user_id)
        self._apply_entity_to_model(model, profile)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: ProfileModel, profile: Profile) -> None:
        model.full_name = profile.full_name
        model.address1 = profile.address1
        model.address2 = profile.address2
        model.city = profile.city
        model.state = profile.state
        model.zip = profile.zip
        model.skills = list(profile.skills)
        model.preferences = profile.preferences
        model.availability = encode_date_list(profile.availability)

    @staticmethod
    def _to_entity(model: ProfileModel) -> Profile:
        return Profile(
            user_id=model.user_id,
            full_name=model.full_name,
            address1=model.address1,
            address2=model.address2,
            city=model.city,
            state=model.state,
            zip=model.zip,
            skills=decode_string_list(model.skills),
            preferences=model.preferences,
            availability=decode_date_list(model.availability),
            updated_at=model.updated_at or model.created_at,
        )


__all__ = ["ProfileRepository"]
