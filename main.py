import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from attendance_notifier.infrastructure.database import engine, initialize_database
from attendance_notifier.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup and release pooled connections on shutdown."""

    initialize_database()
    logger.info("Attendance notification service started")
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(title="Attendance Notification Engine", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
