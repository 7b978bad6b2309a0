"""Request registry: handlers, validators, policies and cache settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import HandlerRegistrationError

if TYPE_CHECKING:
    from ..ports.validation import IValidator
    from .handler import RequestHandler
    from .request import Request
    from .security import PolicyRequirement

logger = logging.getLogger("exemplum.application")

RequestType = type["Request[Any]"]


@dataclass(frozen=True)
class CacheSettings:
    ttl: float
    result_type: type[Any] | None = None


class RequestRegistry:
    """Single source of truth for what happens to each request type.

    Populated once at composition time and read by the mediator's stages:

    - exactly one handler per request type (a second, different handler
      raises :class:`HandlerRegistrationError`);
    - any number of validators and policy requirements, kept in
      registration order;
    - an optional cache TTL, which makes the type cacheable.
    """

    def __init__(self) -> None:
        self._handlers: dict[RequestType, RequestHandler[Any]] = {}
        self._validators: dict[RequestType, list[IValidator]] = {}
        self._policies: dict[RequestType, list[PolicyRequirement]] = {}
        self._cacheable: dict[RequestType, CacheSettings] = {}

    # ── Registration ─────────────────────────────────────────────

    def register_handler(
        self, request_type: RequestType, handler: RequestHandler[Any]
    ) -> None:
        existing = self._handlers.get(request_type)
        if existing is not None and existing is not handler:
            msg = (
                f"Duplicate handler for {request_type.__name__}: "
                f"{type(existing).__name__} already registered, "
                f"cannot register {type(handler).__name__}"
            )
            raise HandlerRegistrationError(msg)
        self._handlers[request_type] = handler
        logger.debug(
            "Registered handler %s -> %s",
            request_type.__name__,
            type(handler).__name__,
        )

    def register_validator(
        self, request_type: RequestType, validator: IValidator
    ) -> None:
        validators = self._validators.setdefault(request_type, [])
        if validator not in validators:
            validators.append(validator)

    def register_policy(
        self, request_type: RequestType, requirement: PolicyRequirement
    ) -> None:
        policies = self._policies.setdefault(request_type, [])
        if requirement not in policies:
            policies.append(requirement)

    def register_cacheable(
        self,
        request_type: RequestType,
        ttl: float,
        result_type: type[Any] | None = None,
    ) -> None:
        """Mark *request_type* cacheable for *ttl* seconds.

        *result_type* lets stores that serialize (Redis) rebuild a pydantic
        result on read.
        """
        if ttl <= 0:
            raise ValueError(f"Cache TTL for {request_type.__name__} must be positive")
        self._cacheable[request_type] = CacheSettings(ttl=ttl, result_type=result_type)

    # ── Lookup ───────────────────────────────────────────────────

    def get_handler(self, request_type: RequestType) -> RequestHandler[Any] | None:
        return self._handlers.get(request_type)

    def get_validators(self, request_type: RequestType) -> list[IValidator]:
        return list(self._validators.get(request_type, []))

    def get_policies(self, request_type: RequestType) -> list[PolicyRequirement]:
        return list(self._policies.get(request_type, []))

    def get_cache_settings(self, request_type: RequestType) -> CacheSettings | None:
        return self._cacheable.get(request_type)

    def is_cacheable(self, request_type: RequestType) -> bool:
        return request_type in self._cacheable


__all__ = ["CacheSettings", "RequestRegistry"]
