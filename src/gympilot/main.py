# File: src/gympilot/main.py
"""FastAPI application factory for the gym service."""

import os
from contextlib import asynccontextmanager
from datetime import datetime
from typing import TYPE_CHECKING, AsyncIterator

import uvicorn
from fastapi import FastAPI

from gympilot.core.logging import configure_logging, get_logger

if TYPE_CHECKING:
    from gympilot.models.gym import Gym

configure_logging(os.getenv("LOG_LEVEL", "DEBUG"))
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for startup and shutdown events."""
    start_time = datetime.now()
    logger.info(
        "app.startup",
        message="GymPilot starting up",
        gym=app.state.gym.name,
        timestamp=start_time.isoformat(),
    )

    from gympilot.api.health import set_app_start_time

    set_app_start_time(start_time)

    yield

    logger.info("app.shutdown", message="GymPilot shutting down gracefully")


def _setup_middleware(app: FastAPI) -> None:
    from gympilot.middleware.logging import RequestIDMiddleware

    app.add_middleware(RequestIDMiddleware)


def _register_routers(app: FastAPI) -> None:
    """Register all API routers."""
    from gympilot.api.admin import router as admin_router
    from gympilot.api.clients import router as clients_router
    from gympilot.api.health import router as health_router
    from gympilot.api.instructors import router as instructors_router
    from gympilot.api.notifications import router as notifications_router
    from gympilot.api.sessions import router as sessions_router

    app.include_router(health_router)
    app.include_router(admin_router)
    app.include_router(clients_router)
    app.include_router(instructors_router)
    app.include_router(sessions_router)
    app.include_router(notifications_router)


def create_app(gym: "Gym | None" = None) -> FastAPI:
    """Application factory. One gym per app; pass one in to share state."""
    from gympilot.models.gym import Gym

    environment = os.getenv("ENVIRONMENT", "development")
    app = FastAPI(
        title="GymPilot API",
        description="Gym client registration, session enrollment and notifications",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.gym = gym or Gym(name=os.getenv("GYM_NAME", "GymPilot"))

    from gympilot.core.exception_handlers import register_exception_handlers

    register_exception_handlers(app)
    _setup_middleware(app)
    _register_routers(app)

    logger.info("app.configured", message="FastAPI application created", environment=environment)

    return app


def run() -> None:
    """Development server entrypoint."""
    uvicorn.run(
        "gympilot.main:create_app",
        factory=True,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("ENVIRONMENT", "development") == "development",
    )
