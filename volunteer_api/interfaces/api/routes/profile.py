"""Endpoints for the caller's volunteer profile."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.profiles import (
    get_profile as get_profile_uc,
    save_profile as save_profile_uc,
)
from volunteer_api.domain.entities import Principal
from volunteer_api.infrastructure.database import get_db
from volunteer_api.interfaces.api.dependencies import get_current_principal
from volunteer_api.interfaces.api.schemas import ApiResponse, ProfilePayload, ProfileRead

router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.get("", response_model=ApiResponse[ProfileRead | None])
def read_profile(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """Return the caller's profile, or ``null`` when none was saved yet."""

    profile = get_profile_uc(db, principal.user_id)
    return ApiResponse(data=ProfileRead.model_validate(profile) if profile else None)


@router.post("", response_model=ApiResponse[ProfileRead], response_model_exclude_none=True)
def save_profile(
    payload: ProfilePayload,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """Create or fully replace the caller's profile."""

    profile = save_profile_uc(
        db,
        user_id=principal.user_id,
        full_name=payload.full_name,
        address1=payload.address1,
        address2=payload.address2,
        city=payload.city,
        state=payload.state,
        zip_code=payload.zip,
        skills=payload.skills,
        preferences=payload.preferences,
        availability=payload.availability,
    )
    return ApiResponse(data=ProfileRead.model_validate(profile), message="Profile saved successfully")
