"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from ..config import Settings
from ..infrastructure.dependency_injection import ApplicationContainer
from ..logging_config import configure_logging
from .controllers import routers
from .middleware import AuthenticationMiddleware, CorrelationIdMiddleware

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger("exemplum.webapi")


def create_app(
    settings: Settings | None = None,
    *,
    container: ApplicationContainer | None = None,
) -> FastAPI:
    """Build the API.

    The container is created eagerly so the middleware can be configured
    with its identity provider; the lifespan creates the schema, seeds
    sample data when configured and closes the container on shutdown.
    """
    settings = settings or (container.settings if container else Settings())
    configure_logging(settings.log_level)
    container = container or ApplicationContainer(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await container.startup()
        logger.info("%s started (%s)", settings.app_name, settings.environment.value)
        try:
            yield
        finally:
            await container.aclose()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.container = container

    # Added last runs first: correlation wraps authentication.
    app.add_middleware(
        AuthenticationMiddleware, identity_provider=container.identity_provider
    )
    app.add_middleware(CorrelationIdMiddleware)

    for router in routers:
        app.include_router(router)

    return app


__all__ = ["create_app"]
