"""Tests for settings loading and logging setup."""

from __future__ import annotations

import logging

import pytest

from exemplum.config import AppEnv, CacheBackend, Settings
from exemplum.correlation import reset_correlation_id, set_correlation_id
from exemplum.infrastructure import build_cache
from exemplum.infrastructure.cache import InMemoryCacheService
from exemplum.logging_config import CorrelationIdFilter, configure_logging


def test_defaults(monkeypatch) -> None:
    for name in ("EXEMPLUM_ENVIRONMENT", "EXEMPLUM_DATABASE__URL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.environment is AppEnv.DEVELOPMENT
    assert settings.database.in_memory
    assert settings.database.seed_on_startup
    assert not settings.auth.enabled
    assert settings.cache.backend is CacheBackend.MEMORY
    assert settings.weather.cache_ttl_seconds == 300


def test_nested_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("EXEMPLUM_ENVIRONMENT", "production")
    monkeypatch.setenv("EXEMPLUM_AUTH__SIGNING_KEY", "k" * 32)
    monkeypatch.setenv("EXEMPLUM_AUTH__AUDIENCE", "https://api.exemplum.dev")
    monkeypatch.setenv("EXEMPLUM_WEATHER__CACHE_TTL_SECONDS", "30")
    monkeypatch.setenv(
        "EXEMPLUM_DATABASE__URL", "postgresql+asyncpg://app@db/exemplum"
    )

    settings = Settings(_env_file=None)

    assert settings.environment is AppEnv.PRODUCTION
    assert settings.auth.enabled
    assert settings.auth.audience == "https://api.exemplum.dev"
    assert settings.weather.cache_ttl_seconds == 30
    assert not settings.database.in_memory


def test_build_cache_defaults_to_memory() -> None:
    assert isinstance(build_cache(Settings().cache), InMemoryCacheService)


def test_correlation_filter_stamps_records() -> None:
    record = logging.LogRecord("exemplum", logging.INFO, __file__, 1, "msg", (), None)
    token = set_correlation_id("corr-7")
    try:
        assert CorrelationIdFilter().filter(record)
    finally:
        reset_correlation_id(token)
    assert record.correlation_id == "corr-7"

    CorrelationIdFilter().filter(record)
    assert record.correlation_id == "-"


@pytest.mark.parametrize(
    ("level", "expected"),
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("nonsense", logging.INFO)],
)
def test_configure_logging_sets_level(level: str, expected: int) -> None:
    configure_logging(level)
    assert logging.getLogger("exemplum").level == expected
