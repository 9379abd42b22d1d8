"""Administrator endpoints for matching volunteers to events."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.matching import (
    assign_volunteer,
    get_suggestions as get_suggestions_uc,
)
from volunteer_api.application.use_cases.profiles import list_volunteers as list_volunteers_uc
from volunteer_api.domain.entities import Principal
from volunteer_api.infrastructure.database import get_db
from volunteer_api.interfaces.api.dependencies import require_admin
from volunteer_api.interfaces.api.schemas import (
    ApiResponse,
    AssignRequest,
    HistoryRecordRead,
    MatchCandidateRead,
    VolunteerRead,
)

router = APIRouter(prefix="/api/matching", tags=["matching"])
logger = logging.getLogger(__name__)

_INVALID_IDS_MESSAGE = "Valid Volunteer ID and Event ID are required"


def _parse_id(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isdigit():
        parsed = int(value.strip())
        return parsed if parsed > 0 else None
    return None


@router.get("/volunteers", response_model=ApiResponse[list[VolunteerRead]])
def list_volunteers(
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
):
    profiles = list_volunteers_uc(db)
    return ApiResponse(data=[VolunteerRead.model_validate(profile) for profile in profiles])


@router.get("/suggestions/{event_id}", response_model=ApiResponse[list[MatchCandidateRead]])
def get_suggestions(
    event_id: int,
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
):
    """Rank every volunteer for ``event_id`` by skill overlap and availability."""

    candidates = get_suggestions_uc(db, event_id)
    return ApiResponse(data=[MatchCandidateRead.model_validate(c) for c in candidates])


@router.post(
    "/assign",
    response_model=ApiResponse[HistoryRecordRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def assign(
    payload: AssignRequest,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_admin),
):
    """Assign a volunteer and notify them. A pair can only be assigned once."""

    volunteer_id = _parse_id(payload.volunteer_id)
    event_id = _parse_id(payload.event_id)
    if volunteer_id is None or event_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=_INVALID_IDS_MESSAGE)

    record = assign_volunteer(db, volunteer_id=volunteer_id, event_id=event_id)
    logger.info(
        "Admin %s assigned volunteer %s to event %s", principal.user_id, volunteer_id, event_id
    )
    return ApiResponse(
        data=HistoryRecordRead.model_validate(record),
        message="Volunteer assigned successfully",
    )
