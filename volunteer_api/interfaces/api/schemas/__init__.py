from .auth import LoginData, LoginRequest, RegisterRequest, UserRead
from .common import ApiResponse, CamelModel, ErrorResponse
from .event import EventPayload, EventRead
from .history import HistoryCreateRequest, HistoryRecordRead, HistoryStatusUpdate
from .matching import AssignRequest, MatchCandidateRead, VolunteerRead
from .notification import MarkAllReadResult, NotificationCreate, NotificationRead
from .profile import ProfilePayload, ProfileRead

__all__ = [
    "ApiResponse",
    "AssignRequest",
    "CamelModel",
    "ErrorResponse",
    "EventPayload",
    "EventRead",
    "HistoryCreateRequest",
    "HistoryRecordRead",
    "HistoryStatusUpdate",
    "LoginData",
    "LoginRequest",
    "MarkAllReadResult",
    "MatchCandidateRead",
    "NotificationCreate",
    "NotificationRead",
    "ProfilePayload",
    "ProfileRead",
    "RegisterRequest",
    "UserRead",
    "VolunteerRead",
]
