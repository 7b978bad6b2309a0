"""InMemoryCacheService: single-process implementation of ICacheService."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("exemplum.cache")


@dataclass
class _Entry:
    value: Any
    expires_at: float | None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


class InMemoryCacheService:
    """
    Dictionary-backed cache with per-entry expiry.

    - One entry per key; ``set`` replaces the value and restarts its TTL.
    - Expired entries read as missing. They are evicted when read, and
      every ``set`` sweeps out the ones that expired since, so keys that are
      never read again do not accumulate.
    - All access is serialised through an ``asyncio.Lock``.

    ``clock`` returns monotonic seconds and can be replaced in tests.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._entries: dict[str, _Entry] = {}
        self._lock = asyncio.Lock()
        self._clock = clock

    async def get(self, key: str, cls: type[Any] | None = None) -> Any | None:
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.is_expired(self._clock()):
                del self._entries[key]
                logger.debug("Evicted expired cache entry %s", key)
                return None
            return entry.value

    async def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        async with self._lock:
            now = self._clock()
            self._evict_expired(now)
            expires_at = now + ttl if ttl else None
            self._entries[key] = _Entry(value=value, expires_at=expires_at)

    async def delete(self, key: str) -> None:
        async with self._lock:
            self._entries.pop(key, None)

    def __len__(self) -> int:
        return len(self._entries)

    def _evict_expired(self, now: float) -> None:
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("Evicted %d expired cache entries", len(expired))


__all__ = ["InMemoryCacheService"]
