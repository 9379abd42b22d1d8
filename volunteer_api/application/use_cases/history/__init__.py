"""Use cases for volunteer participation history."""

from .list_history import list_history
from .log_participation import log_participation
from .update_status import update_history_status, validate_status

__all__ = [
    "list_history",
    "log_participation",
    "update_history_status",
    "validate_status",
]
