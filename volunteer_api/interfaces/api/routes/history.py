"""Endpoints for volunteer participation history."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.history import (
    list_history as list_history_uc,
    log_participation as log_participation_uc,
    update_history_status,
)
from volunteer_api.domain.entities import Principal
from volunteer_api.infrastructure.database import get_db
from volunteer_api.interfaces.api.dependencies import (
    get_current_principal,
    require_owner_or_admin,
)
from volunteer_api.interfaces.api.schemas import (
    ApiResponse,
    HistoryCreateRequest,
    HistoryRecordRead,
    HistoryStatusUpdate,
)

router = APIRouter(prefix="/api/history", tags=["history"])


@router.get("", response_model=ApiResponse[list[HistoryRecordRead]])
def list_history(
    user_id: int = Depends(require_owner_or_admin("userId")),
    db: Session = Depends(get_db),
):
    """Return the history of ``userId`` (the caller by default), newest event first."""

    records = list_history_uc(db, user_id)
    return ApiResponse(data=[HistoryRecordRead.model_validate(record) for record in records])


@router.post(
    "",
    response_model=ApiResponse[HistoryRecordRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def log_participation(
    payload: HistoryCreateRequest,
    user_id: int = Depends(require_owner_or_admin("userId")),
    db: Session = Depends(get_db),
):
    try:
        event_id = int(payload.event_id)
    except (TypeError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Valid event ID is required",
        ) from exc

    record = log_participation_uc(db, user_id=user_id, event_id=event_id, status=payload.status)
    return ApiResponse(
        data=HistoryRecordRead.model_validate(record),
        message="Participation recorded successfully",
    )


@router.put(
    "/{record_id}",
    response_model=ApiResponse[HistoryRecordRead],
    response_model_exclude_none=True,
)
def update_status(
    record_id: int,
    payload: HistoryStatusUpdate,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """Change the status of a record. Any status may follow any other."""

    record = update_history_status(db, record_id, status=payload.status, principal=principal)
    return ApiResponse(
        data=HistoryRecordRead.model_validate(record),
        message="Status updated successfully",
    )
