"""Use cases for volunteer profiles."""

from .get_profile import get_profile
from .list_volunteers import list_volunteers
from .save_profile import save_profile

__all__ = ["get_profile", "list_volunteers", "save_profile"]
