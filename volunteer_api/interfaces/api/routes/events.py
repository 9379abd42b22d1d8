"""Endpoints for browsing and managing events."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.events import (
    create_event as create_event_uc,
    delete_event as delete_event_uc,
    get_event as get_event_uc,
    list_events as list_events_uc,
    update_event as update_event_uc,
)
from volunteer_api.domain.entities import Principal
from volunteer_api.infrastructure.database import get_db
from volunteer_api.interfaces.api.dependencies import get_current_principal, require_admin
from volunteer_api.interfaces.api.schemas import ApiResponse, EventPayload, EventRead

router = APIRouter(prefix="/api/events", tags=["events"])


def _fields(payload: EventPayload) -> dict:
    return payload.model_dump(by_alias=False)


@router.get("", response_model=ApiResponse[list[EventRead]], response_model_exclude_none=True)
def list_events(
    db: Session = Depends(get_db),
    _: Principal = Depends(get_current_principal),
):
    """Return every event ordered by date and start time."""

    events = list_events_uc(db)
    return ApiResponse(data=[EventRead.model_validate(event) for event in events])


@router.get(
    "/{event_id}",
    response_model=ApiResponse[EventRead],
    response_model_exclude_none=True,
)
def read_event(
    event_id: int,
    db: Session = Depends(get_db),
    _: Principal = Depends(get_current_principal),
):
    return ApiResponse(data=EventRead.model_validate(get_event_uc(db, event_id)))


@router.post(
    "",
    response_model=ApiResponse[EventRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_event(
    payload: EventPayload,
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
):
    """Create an event after checking every field."""

    event = create_event_uc(db, **_fields(payload))
    return ApiResponse(data=EventRead.model_validate(event), message="Event created successfully")


@router.put(
    "/{event_id}",
    response_model=ApiResponse[EventRead],
    response_model_exclude_none=True,
)
def update_event(
    event_id: int,
    payload: EventPayload,
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
):
    """Replace every field of an event. History snapshots keep their values."""

    event = update_event_uc(db, event_id, **_fields(payload))
    return ApiResponse(data=EventRead.model_validate(event), message="Event updated successfully")


@router.delete("/{event_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
def delete_event(
    event_id: int,
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
):
    delete_event_uc(db, event_id)
    return ApiResponse(message="Event deleted successfully")
