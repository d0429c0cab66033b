import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from bank_notifications.config import Settings, get_settings
from bank_notifications.infrastructure.storage import build_notification_service
from bank_notifications.interfaces.api.routes import register_routes


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Build a fresh service on startup and drop it on shutdown."""

        app.state.notification_service = build_notification_service(settings)
        yield
        app.state.notification_service = None

    app = FastAPI(title="Bank Notifications", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
