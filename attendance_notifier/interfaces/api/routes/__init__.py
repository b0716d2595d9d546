from fastapi import FastAPI

from .attendance_notifications import router as attendance_notifications_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(attendance_notifications_router)
