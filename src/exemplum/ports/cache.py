"""ICacheService - Protocol for cache operations."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ICacheService(Protocol):
    """
    Abstract interface for caching services.

    Implementations must hold at most one entry per key: ``set`` on an
    existing key replaces the value and restarts its TTL (last writer wins),
    and an expired entry must read as missing.
    """

    async def get(self, key: str, cls: type[Any] | None = None) -> Any | None:
        """
        Retrieve a value by key. Returns None if missing or expired.
        If cls is provided and is a Pydantic model, validation is performed.
        """
        ...

    async def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        """
        Set a value with optional TTL (in seconds).
        Host implementation should handle serialization.
        """
        ...

    async def delete(self, key: str) -> None:
        """Delete a value by key."""
        ...
