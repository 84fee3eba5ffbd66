"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from collab.config import Settings
from collab.interface.api.routes import collaborators, health, invitations, versions
from collab.util.di.container import create_container, setup_di
from collab.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; start_app.py
    does so in production.

    Args:
        container: DI container to use; defaults to the production container
    """
    settings = Settings()
    container = container or create_container()

    instrument_httpx()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # Disposes the engine and closes the shared HTTP client
        await container.close()

    app_instance = FastAPI(
        title="Collaboration Core API",
        description="Collaboration invitations and document version history",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(invitations.router)
    app_instance.include_router(collaborators.router)
    app_instance.include_router(versions.router)

    return app_instance
