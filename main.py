import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from volunteer_api.config import get_settings
from volunteer_api.infrastructure.database import engine, initialize_database
from volunteer_api.interfaces.api.errors import register_exception_handlers
from volunteer_api.interfaces.api.routes import register_routes
from volunteer_api.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup and release the pool on shutdown."""

    initialize_database()
    logger.info("Volunteer matching API started")
    yield
    engine.dispose()
    logger.info("Volunteer matching API stopped")


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Volunteer Matching API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()
