"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lifequest.interface.api.routes import (
    boss,
    health,
    journal,
    notifications,
    rewards,
    sync,
    tasks,
    users,
)
from lifequest.interface.error import register_error_handlers
from lifequest.util.di.container import create_container, setup_di
from lifequest.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container (production container when omitted)
    """
    app_instance = FastAPI(
        title="LifeQuest API",
        description="Progression engine for LifeQuest - quests, levels, bosses and rewards",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Settings are loaded from environment automatically
    container = container or create_container()
    setup_di(app_instance, container)
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(tasks.router)
    app_instance.include_router(boss.router)
    app_instance.include_router(rewards.router)
    app_instance.include_router(journal.router)
    app_instance.include_router(notifications.router)
    app_instance.include_router(sync.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
