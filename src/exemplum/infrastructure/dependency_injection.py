"""ApplicationContainer: wires infrastructure into the application."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from ..application.dependency_injection import add_application
from ..application.mediator import Mediator
from ..application.registry import RequestRegistry
from ..config import CacheBackend
from ..identity.current_user import ContextCurrentUserService
from ..identity.jwt import JwtIdentityProvider
from .cache.memory import InMemoryCacheService
from .clock import SystemClock
from .events import DomainEventPublisher
from .persistence.db_context import ApplicationDbContext
from .persistence.engine import create_engine, create_schema, create_session_factory
from .persistence.exception_handling import DbExceptionHandler
from .persistence.seed import seed_sample_data
from .weather.client import OpenWeatherMapClient

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

    from ..config import CacheStoreSettings, Settings
    from ..ports.cache import ICacheService
    from ..ports.clock import IClock
    from ..ports.weather import IWeatherForecastClient

logger = logging.getLogger("exemplum.infrastructure")


def build_cache(settings: CacheStoreSettings) -> ICacheService:
    if settings.backend is CacheBackend.REDIS:
        try:
            from redis.asyncio import Redis
        except ImportError as e:
            raise ImportError(
                "redis is required for the Redis cache backend. "
                "Install with: pip install 'exemplum[redis]'"
            ) from e

        from .cache.redis import RedisCacheService

        return RedisCacheService(Redis.from_url(settings.redis_url))
    return InMemoryCacheService()


class ApplicationContainer:
    """
    Composition root: one instance per process.

    Every collaborator can be overridden through the keyword arguments,
    which is how tests swap in an in-memory engine, a fake clock or a
    mock weather client.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        engine: AsyncEngine | None = None,
        clock: IClock | None = None,
        cache: ICacheService | None = None,
        http_client: httpx.AsyncClient | None = None,
        weather_client: IWeatherForecastClient | None = None,
        identity_provider: JwtIdentityProvider | None = None,
    ) -> None:
        self.settings = settings
        self.engine = engine or create_engine(
            settings.database.url, echo=settings.database.echo
        )
        self.session_factory = create_session_factory(self.engine)
        self.clock: IClock = clock or SystemClock()
        self.current_user = ContextCurrentUserService()
        self.event_publisher = DomainEventPublisher()
        self.db_exceptions = DbExceptionHandler()
        self.cache: ICacheService = cache or build_cache(settings.cache)

        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(
            base_url=settings.weather.base_url,
            timeout=settings.weather.timeout_seconds,
        )
        self.weather_client: IWeatherForecastClient = (
            weather_client
            or OpenWeatherMapClient(
                self.http_client,
                api_key=settings.weather.api_key,
                units=settings.weather.units,
            )
        )

        self.identity_provider = identity_provider
        if self.identity_provider is None and settings.auth.enabled:
            self.identity_provider = JwtIdentityProvider.from_settings(settings.auth)

        self.registry = add_application(
            RequestRegistry(),
            db_context_factory=self.db_context,
            weather_client=self.weather_client,
            event_publisher=self.event_publisher,
            weather_cache_ttl=settings.weather.cache_ttl_seconds,
        )
        self.mediator = Mediator(self.registry, self.current_user, self.cache)

    def db_context(self) -> ApplicationDbContext:
        """A fresh context; open it with ``async with``."""
        return ApplicationDbContext(
            self.session_factory,
            clock=self.clock,
            current_user=self.current_user,
            event_publisher=self.event_publisher,
            db_exceptions=self.db_exceptions,
        )

    async def startup(self) -> None:
        await create_schema(self.engine)
        if self.settings.database.seed_on_startup:
            try:
                async with self.db_context() as db:
                    await seed_sample_data(db)
            except Exception:
                logger.exception("An error occurred while seeding the database")
                raise

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self.http_client.aclose()
        close: Any = getattr(self.cache, "aclose", None)
        if close is not None:
            await close()
        await self.engine.dispose()


__all__ = ["ApplicationContainer", "build_cache"]
