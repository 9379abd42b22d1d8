from fastapi import FastAPI

from .auth import router as auth_router
from .events import router as events_router
from .health import router as health_router
from .history import router as history_router
from .matching import router as matching_router
from .notifications import router as notifications_router
from .profile import router as profile_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(profile_router)
    app.include_router(events_router)
    app.include_router(matching_router)
    app.include_router(history_router)
    app.include_router(notifications_router)
