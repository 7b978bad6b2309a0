"""Shared fixtures: fake clock and user, in-memory store, signed tokens."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

import pytest
import pytest_asyncio
from joserfc import jwt
from joserfc.jwk import OctKey

from exemplum.application.weather import CurrentWeather, WeatherForecast
from exemplum.config import AuthSettings, DatabaseSettings, Settings
from exemplum.identity import Principal
from exemplum.infrastructure.events import DomainEventPublisher
from exemplum.infrastructure.persistence import (
    ApplicationDbContext,
    DbExceptionHandler,
    create_engine,
    create_schema,
    create_session_factory,
)

SIGNING_KEY = "exemplum-test-signing-key-0123456789abcdef"
ISSUER = "https://exemplum.test/"
AUDIENCE = "https://api.exemplum.test"

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: marks tests that need a real database or network service",
    )


class FakeClock:
    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.now = now


class FakeCurrentUser:
    def __init__(self, principal: Principal | None = None) -> None:
        self.principal = principal

    @property
    def user_id(self) -> str | None:
        return self.principal.user_id if self.principal else None


class RecordingPublisher:
    """Event publisher that keeps every published event."""

    def __init__(self) -> None:
        self.published: list[Any] = []

    async def publish(self, event: Any) -> None:
        self.published.append(event)


class FakeWeatherClient:
    def __init__(self) -> None:
        self.calls: list[tuple[Decimal, Decimal]] = []

    async def get_forecast(self, lat: Decimal, lon: Decimal) -> WeatherForecast:
        self.calls.append((lat, lon))
        return WeatherForecast(
            lat=lat,
            lon=lon,
            timezone="Asia/Ho_Chi_Minh",
            current=CurrentWeather(dt=FIXED_NOW, temp=24.5),
        )


def make_token(
    *,
    sub: str = "auth0|alice",
    permissions: list[str] | None = None,
    expires_in: int = 300,
    issuer: str = ISSUER,
    audience: str = AUDIENCE,
    key: str = SIGNING_KEY,
    **extra: Any,
) -> str:
    now = int(time.time())
    claims: dict[str, Any] = {
        "sub": sub,
        "iss": issuer,
        "aud": audience,
        "iat": now,
        "exp": now + expires_in,
        "permissions": permissions or [],
        **extra,
    }
    return jwt.encode({"alg": "HS256"}, claims, OctKey.import_key(key))


@pytest.fixture
def principal() -> Principal:
    return Principal(
        user_id="auth0|alice",
        name="Alice",
        permissions=frozenset(["write:todo", "delete:todo"]),
    )


@pytest.fixture
def reader() -> Principal:
    """Authenticated principal without any permission."""
    return Principal(user_id="auth0|bob", name="Bob")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def current_user(principal: Principal) -> FakeCurrentUser:
    return FakeCurrentUser(principal)


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def weather_client() -> FakeWeatherClient:
    return FakeWeatherClient()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        database=DatabaseSettings(seed_on_startup=False),
        auth=AuthSettings(
            authority=ISSUER, audience=AUDIENCE, signing_key=SIGNING_KEY
        ),
        log_level="DEBUG",
    )


@pytest_asyncio.fixture
async def engine():
    engine = create_engine()
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def db_factory(engine, clock, current_user, publisher):
    session_factory = create_session_factory(engine)

    def factory() -> ApplicationDbContext:
        return ApplicationDbContext(
            session_factory,
            clock=clock,
            current_user=current_user,
            event_publisher=publisher,
            db_exceptions=DbExceptionHandler(),
        )

    return factory


@pytest.fixture
def event_publisher() -> DomainEventPublisher:
    return DomainEventPublisher()


@pytest.fixture
def anonymous_user() -> FakeCurrentUser:
    return FakeCurrentUser()


@pytest.fixture
def reader_user(reader: Principal) -> FakeCurrentUser:
    return FakeCurrentUser(reader)


@pytest.fixture
def token_factory():
    """Signs HS256 access tokens with the test key (see :func:`make_token`)."""
    return make_token
