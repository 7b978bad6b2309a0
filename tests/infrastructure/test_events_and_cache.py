"""Tests for DomainEventPublisher and the cache stores."""

from __future__ import annotations

import json
import logging
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from exemplum.application.weather import WeatherForecast
from exemplum.domain.events import DomainEvent
from exemplum.domain.todo import TodoItem, TodoItemCompletedEvent
from exemplum.infrastructure.cache import InMemoryCacheService, RedisCacheService


class SpecialCompletedEvent(TodoItemCompletedEvent):
    pass


def _completed() -> TodoItemCompletedEvent:
    return TodoItemCompletedEvent(item=TodoItem(id=1, list_id=1, title="Milk"))


@pytest.mark.asyncio()
class TestDomainEventPublisher:
    async def test_handlers_run_in_subscription_order(self, event_publisher) -> None:
        calls: list[str] = []

        async def first(event) -> None:
            calls.append("first")

        class Second:
            async def handle(self, event) -> None:
                calls.append("second")

        event_publisher.subscribe(TodoItemCompletedEvent, first)
        event_publisher.subscribe(TodoItemCompletedEvent, Second())

        await event_publisher.publish(_completed())

        assert calls == ["first", "second"]

    async def test_sync_handlers_are_supported(self, event_publisher) -> None:
        seen: list[DomainEvent] = []
        event_publisher.subscribe(TodoItemCompletedEvent, seen.append)

        event = _completed()
        await event_publisher.publish(event)

        assert seen == [event]

    async def test_subscribing_twice_delivers_once(self, event_publisher) -> None:
        handler = AsyncMock()
        event_publisher.subscribe(TodoItemCompletedEvent, handler)
        event_publisher.subscribe(TodoItemCompletedEvent, handler)

        await event_publisher.publish(_completed())

        handler.handle.assert_awaited_once()

    async def test_base_type_subscribers_receive_subclass_events(
        self, event_publisher
    ) -> None:
        handler = AsyncMock()
        event_publisher.subscribe(DomainEvent, handler)

        await event_publisher.publish(
            SpecialCompletedEvent(item=TodoItem(id=2, list_id=1, title="Eggs"))
        )

        handler.handle.assert_awaited_once()

    async def test_event_without_subscribers_is_dropped(self, event_publisher) -> None:
        other = AsyncMock()
        event_publisher.subscribe(SpecialCompletedEvent, other)

        await event_publisher.publish(_completed())

        other.handle.assert_not_awaited()

    async def test_handler_error_is_logged_and_propagated(
        self, event_publisher, caplog
    ) -> None:
        later = AsyncMock()
        failing = AsyncMock()
        failing.handle.side_effect = RuntimeError("boom")
        event_publisher.subscribe(TodoItemCompletedEvent, failing)
        event_publisher.subscribe(TodoItemCompletedEvent, later)

        with caplog.at_level(logging.ERROR, logger="exemplum.events"):
            with pytest.raises(RuntimeError):
                await event_publisher.publish(_completed())

        later.handle.assert_not_awaited()
        assert "Error executing handler" in caplog.text

    async def test_completed_handler_logs_item(self, caplog) -> None:
        from exemplum.application.todo import TodoItemCompletedEventHandler

        with caplog.at_level(logging.INFO, logger="exemplum.todo"):
            await TodoItemCompletedEventHandler().handle(_completed())

        assert "Todo item completed: Milk (id=1, list_id=1)" in caplog.text


class ManualClock:
    def __init__(self) -> None:
        self.value = 100.0

    def __call__(self) -> float:
        return self.value


@pytest.mark.asyncio()
class TestInMemoryCacheService:
    async def test_set_get_delete(self) -> None:
        cache = InMemoryCacheService()
        await cache.set("k", {"a": 1})
        assert await cache.get("k") == {"a": 1}
        await cache.delete("k")
        assert await cache.get("k") is None

    async def test_entry_expires_after_ttl(self) -> None:
        clock = ManualClock()
        cache = InMemoryCacheService(clock=clock)
        await cache.set("k", "v", ttl=10)

        clock.value += 9
        assert await cache.get("k") == "v"
        clock.value += 1
        assert await cache.get("k") is None
        assert len(cache) == 0

    async def test_set_replaces_value_and_restarts_ttl(self) -> None:
        clock = ManualClock()
        cache = InMemoryCacheService(clock=clock)
        await cache.set("k", "old", ttl=10)
        clock.value += 8
        await cache.set("k", "new", ttl=10)
        clock.value += 8

        assert await cache.get("k") == "new"
        assert len(cache) == 1

    async def test_set_sweeps_expired_entries_of_other_keys(self) -> None:
        clock = ManualClock()
        cache = InMemoryCacheService(clock=clock)
        await cache.set("GetWeatherForecastQuery:1,1", "a", ttl=5)
        await cache.set("GetWeatherForecastQuery:2,2", "b", ttl=20)
        await cache.set("pinned", "c")

        clock.value += 10
        await cache.set("GetWeatherForecastQuery:3,3", "d", ttl=5)

        assert len(cache) == 3
        assert await cache.get("GetWeatherForecastQuery:1,1") is None
        assert await cache.get("GetWeatherForecastQuery:2,2") == "b"
        assert await cache.get("pinned") == "c"


@pytest.mark.asyncio()
class TestRedisCacheService:
    @pytest_asyncio.fixture
    async def redis_client(self):
        return AsyncMock()

    @pytest_asyncio.fixture
    async def cache_service(self, redis_client):
        return RedisCacheService(redis_client)

    async def test_set_with_ttl_uses_setex(self, cache_service, redis_client) -> None:
        await cache_service.set("k", {"a": 1}, ttl=2.5)
        redis_client.setex.assert_awaited_once_with(
            "exemplum:k", 3, json.dumps({"a": 1})
        )

    async def test_set_without_ttl(self, cache_service, redis_client) -> None:
        await cache_service.set("k", [1, 2])
        redis_client.set.assert_awaited_once_with("exemplum:k", "[1, 2]")

    async def test_pydantic_round_trip(self, cache_service, redis_client) -> None:
        forecast = WeatherForecast(lat="11.96", lon="108.4", timezone="UTC")
        await cache_service.set("w", forecast, ttl=60)
        stored = redis_client.setex.await_args.args[2]
        redis_client.get.return_value = stored

        loaded = await cache_service.get("w", cls=WeatherForecast)

        assert loaded == forecast

    async def test_missing_key(self, cache_service, redis_client) -> None:
        redis_client.get.return_value = None
        assert await cache_service.get("missing") is None

    async def test_errors_degrade_to_miss(
        self, cache_service, redis_client, caplog
    ) -> None:
        redis_client.get.side_effect = ConnectionError("down")
        with caplog.at_level(logging.WARNING, logger="exemplum.cache"):
            assert await cache_service.get("k") is None
        assert "Redis get failed" in caplog.text

    async def test_delete(self, cache_service, redis_client) -> None:
        await cache_service.delete("k")
        redis_client.delete.assert_awaited_once_with("exemplum:k")
