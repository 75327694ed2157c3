"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from datespot.application.usecase.spot import SeedSpotsRequest, SeedSpotsUseCase
from datespot.config import Settings
from datespot.domain.error import DomainError
from datespot.interface.api.routes import (
    auth,
    geocode,
    health,
    live,
    ratings,
    spots,
    uploads,
    votes,
)
from datespot.interface.error import register_error_handlers
from datespot.util.di.container import create_container, setup_di
from datespot.util.observability import instrument_fastapi, instrument_httpx


async def seed_spots(container: AsyncContainer) -> None:
    """Load the initial spots if the store is empty.

    A failure is logged and the app keeps starting; the next start retries.
    """
    async with container() as request_container:
        use_case = await request_container.get(SeedSpotsUseCase)
        try:
            result = await use_case.execute(SeedSpotsRequest())
        except DomainError as e:
            logfire.error("Seeding spots failed", error=str(e))
            return
    logfire.info("Startup seeding finished", seeded=result.seeded)


def create_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container by default
    """
    settings = Settings()
    container = container or create_container()

    # Instrument httpx for outbound calls to the external services
    instrument_httpx()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.features.seed_on_startup:
            await seed_spots(container)
        yield
        await container.close()

    app_instance = FastAPI(
        title="Date Spots API",
        description="Backend API for Date Spots - crowdsourced date spot recommendations",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type", "Retry-After"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container)
    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(spots.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(ratings.router)
    app_instance.include_router(geocode.router)
    app_instance.include_router(uploads.router)
    app_instance.include_router(live.router)

    # Uploaded spot images
    app_instance.mount(
        "/media",
        StaticFiles(directory=settings.storage.media_root, check_dir=False),
        name="media",
    )

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
