"""Tests for RequestRegistry, request cache keys and Response."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from exemplum.application import (
    Command,
    ErrorEnvelope,
    ErrorKind,
    Query,
    RequestFailedError,
    RequestRegistry,
    Response,
)
from exemplum.application.security import TODO_DELETE_ACCESS, TODO_WRITE_ACCESS
from exemplum.application.weather import GetWeatherForecastQuery
from exemplum.correlation import reset_correlation_id, set_correlation_id
from exemplum.primitives.exceptions import HandlerRegistrationError


class AddNote(Command[str]):
    text: str


class FindNotes(Query[list[str]]):
    tag: str
    limit: int = 10


class TestRequestRegistry:
    def test_register_and_get_handler(self) -> None:
        registry = RequestRegistry()
        handler = MagicMock()

        registry.register_handler(AddNote, handler)

        assert registry.get_handler(AddNote) is handler
        assert registry.get_handler(FindNotes) is None

    def test_second_handler_for_same_request_is_rejected(self) -> None:
        registry = RequestRegistry()
        registry.register_handler(AddNote, MagicMock())

        with pytest.raises(HandlerRegistrationError):
            registry.register_handler(AddNote, MagicMock())

    def test_registering_same_handler_twice_is_idempotent(self) -> None:
        registry = RequestRegistry()
        handler = MagicMock()
        registry.register_handler(AddNote, handler)
        registry.register_handler(AddNote, handler)
        assert registry.get_handler(AddNote) is handler

    def test_validators_and_policies_keep_registration_order(self) -> None:
        registry = RequestRegistry()
        first, second = MagicMock(), MagicMock()
        registry.register_validator(AddNote, first)
        registry.register_validator(AddNote, second)
        registry.register_validator(AddNote, first)
        registry.register_policy(AddNote, TODO_WRITE_ACCESS)
        registry.register_policy(AddNote, TODO_DELETE_ACCESS)

        assert registry.get_validators(AddNote) == [first, second]
        assert registry.get_policies(AddNote) == [TODO_WRITE_ACCESS, TODO_DELETE_ACCESS]
        assert registry.get_validators(FindNotes) == []
        assert registry.get_policies(FindNotes) == []

    def test_cacheable(self) -> None:
        registry = RequestRegistry()
        registry.register_cacheable(FindNotes, 60, result_type=list)

        settings = registry.get_cache_settings(FindNotes)
        assert settings is not None
        assert settings.ttl == 60
        assert settings.result_type is list
        assert registry.is_cacheable(FindNotes)
        assert not registry.is_cacheable(AddNote)

    @pytest.mark.parametrize("ttl", [0, -5])
    def test_cacheable_needs_positive_ttl(self, ttl: float) -> None:
        with pytest.raises(ValueError):
            RequestRegistry().register_cacheable(FindNotes, ttl)


class TestRequests:
    def test_requests_are_frozen(self) -> None:
        note = AddNote(text="hello")
        with pytest.raises(Exception):  # noqa: B017
            note.text = "changed"  # type: ignore[misc]

    def test_cache_key_ignores_correlation_id(self) -> None:
        a = FindNotes(tag="work", correlation_id="one")
        b = FindNotes(tag="work", correlation_id="two")
        assert a.cache_key() == b.cache_key()
        assert a.cache_key().startswith("FindNotes:")

    def test_cache_key_differs_per_parameters(self) -> None:
        assert FindNotes(tag="work").cache_key() != FindNotes(tag="home").cache_key()

    def test_correlation_id_inherited_from_context(self) -> None:
        token = set_correlation_id("abc-123")
        try:
            assert AddNote(text="x").correlation_id == "abc-123"
        finally:
            reset_correlation_id(token)

    def test_weather_cache_key_normalises_coordinates(self) -> None:
        a = GetWeatherForecastQuery(lat=Decimal("11.960"), lon=Decimal("108.4"))
        b = GetWeatherForecastQuery(lat=Decimal("11.96"), lon=Decimal("108.40"))
        assert a.cache_key() == b.cache_key() == "GetWeatherForecastQuery:11.96,108.4"


class TestResponse:
    def test_ok(self) -> None:
        response = Response.ok("done", correlation_id="c1")
        assert response.is_success
        assert response.unwrap() == "done"
        assert response.correlation_id == "c1"

    def test_fail_unwrap_raises(self) -> None:
        response: Response[str] = Response.fail(ErrorEnvelope.not_found("missing"))
        assert not response.is_success
        with pytest.raises(RequestFailedError) as exc_info:
            response.unwrap()
        assert exc_info.value.envelope.kind is ErrorKind.NOT_FOUND

    def test_cannot_carry_result_and_error(self) -> None:
        with pytest.raises(ValueError):
            Response(result="x", error=ErrorEnvelope.internal_error())

    def test_conflict_envelope_names_field(self) -> None:
        envelope = ErrorEnvelope.conflict("title", "Duplicate.")
        assert envelope.to_dict() == {
            "kind": "conflict",
            "message": "Duplicate.",
            "errors": {"title": ["Duplicate."]},
        }
