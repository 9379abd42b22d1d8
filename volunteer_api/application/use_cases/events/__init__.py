"""Use cases for managing events."""

from .create_event import create_event
from .delete_event import delete_event
from .get_event import get_event, list_events
from .update_event import update_event
from .validators import build_event

__all__ = [
    "build_event",
    "create_event",
    "delete_event",
    "get_event",
    "list_events",
    "update_event",
]
