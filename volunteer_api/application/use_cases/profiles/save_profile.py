"""Use case for creating or replacing a volunteer profile."""

from __future__ import annotations

import re
from datetime import date
from typing import Any

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import STATE_CODES, Profile
from volunteer_api.domain.exceptions import NotFoundError, ValidationError
from volunteer_api.infrastructure.repositories import ProfileRepository, UserRepository
from volunteer_api.utils import parse_date

from ..validators import as_list, collect_skills, optional_text, required_text

ZIP_PATTERN = re.compile(r"^\d{5}(\d{4})?$")


def _collect_availability(value: Any, errors: list[str]) -> list[date]:
    raw_items = [item for item in as_list(value) if item not in (None, "")]
    if not raw_items:
        errors.append("At least one availability date is required")
        return []
    dates: set[date] = set()
    for item in raw_items:
        parsed = parse_date(item)
        if parsed is None:
            errors.append("Availability dates must be valid dates")
            return []
        dates.add(parsed)
    return sorted(dates)


def save_profile(
    session: Session,
    *,
    user_id: int,
    full_name: Any,
    address1: Any,
    city: Any,
    state: Any,
    zip_code: Any,
    skills: Any,
    availability: Any,
    address2: Any = None,
    preferences: Any = None,
) -> Profile:
    """Validate every field and store the profile, replacing any previous one."""

    if UserRepository(session).get(user_id) is None:
        raise NotFoundError("User not found")

    errors: list[str] = []
    cleaned_name = required_text(
        full_name,
        required_message="Full name is required",
        max_length=50,
        too_long_message="Full name must be at most 50 characters",
        errors=errors,
    )
    cleaned_address1 = required_text(
        address1,
        required_message="Address 1 is required",
        max_length=100,
        too_long_message="Address 1 must be at most 100 characters",
        errors=errors,
    )
    cleaned_address2 = optional_text(
        address2,
        max_length=100,
        too_long_message="Address 2 must be at most 100 characters",
        errors=errors,
    )
    cleaned_city = required_text(
        city,
        required_message="City is required",
        max_length=100,
        too_long_message="City must be at most 100 characters",
        errors=errors,
    )

    cleaned_state = state.strip().upper() if isinstance(state, str) else None
    if cleaned_state not in STATE_CODES:
        errors.append("State must be a valid 2-letter US state code")

    cleaned_zip = zip_code.strip() if isinstance(zip_code, str) else None
    if not cleaned_zip or not ZIP_PATTERN.match(cleaned_zip):
        errors.append("Zip code must be 5 or 9 digits")

    cleaned_skills = collect_skills(
        skills, errors=errors, empty_message="At least one skill must be selected."
    )
    cleaned_preferences = optional_text(
        preferences,
        max_length=1000,
        too_long_message="Preferences must be at most 1000 characters",
        errors=errors,
    )
    cleaned_availability = _collect_availability(availability, errors)

    if errors:
        raise ValidationError(errors)

    profile = Profile(
        user_id=user_id,
        full_name=cleaned_name,
        address1=cleaned_address1,
        address2=cleaned_address2,
        city=cleaned_city,
        state=cleaned_state,
        zip=cleaned_zip,
        skills=cleaned_skills,
        preferences=cleaned_preferences,
        availability=cleaned_availability,
    )
    return ProfileRepository(session).upsert(profile)
