"""Endpoints for the notifications delivered to users."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.notifications import (
    create_notification as create_notification_uc,
    delete_notification as delete_notification_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_read,
    mark_notification_read,
)
from volunteer_api.domain.entities import Principal
from volunteer_api.infrastructure.database import get_db
from volunteer_api.interfaces.api.dependencies import (
    get_current_principal,
    require_admin,
    require_owner_or_admin,
)
from volunteer_api.interfaces.api.schemas import (
    ApiResponse,
    MarkAllReadResult,
    NotificationCreate,
    NotificationRead,
)

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.get("", response_model=ApiResponse[list[NotificationRead]])
def list_notifications(
    unread_only: bool = Query(False, alias="unreadOnly"),
    user_id: int = Depends(require_owner_or_admin("userId")),
    db: Session = Depends(get_db),
):
    """Return the notifications of ``userId``, newest first."""

    notifications = list_notifications_uc(db, user_id, unread_only=unread_only)
    return ApiResponse(data=[NotificationRead.model_validate(n) for n in notifications])


@router.post(
    "",
    response_model=ApiResponse[NotificationRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_notification(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
):
    try:
        user_id = int(payload.user_id)
    except (TypeError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Valid user ID is required",
        ) from exc

    notification = create_notification_uc(
        db,
        user_id=user_id,
        message=payload.message,
        type=payload.type,
        event_name=payload.event_name,
    )
    return ApiResponse(
        data=NotificationRead.model_validate(notification),
        message="Notification created successfully",
    )


@router.put("/read-all", response_model=ApiResponse[MarkAllReadResult])
def mark_all_read(
    user_id: int = Depends(require_owner_or_admin("userId")),
    db: Session = Depends(get_db),
):
    updated = mark_all_notifications_read(db, user_id)
    return ApiResponse(
        data=MarkAllReadResult(updated=updated),
        message="All notifications marked as read",
    )


@router.put(
    "/{notification_id}/read",
    response_model=ApiResponse[NotificationRead],
    response_model_exclude_none=True,
)
def mark_read(
    notification_id: int,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    notification = mark_notification_read(db, notification_id, principal=principal)
    return ApiResponse(
        data=NotificationRead.model_validate(notification),
        message="Notification marked as read",
    )


@router.delete(
    "/{notification_id}",
    response_model=ApiResponse[None],
    response_model_exclude_none=True,
)
def delete_notification(
    notification_id: int,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    delete_notification_uc(db, notification_id, principal=principal)
    return ApiResponse(message="Notification deleted successfully")
