"""Redis implementation of ICacheService."""

from __future__ import annotations

import json
import logging
import math
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from redis.asyncio import Redis

logger = logging.getLogger("exemplum.cache")


class RedisCacheService:
    """
    Redis implementation of ICacheService.
    Uses generic JSON serialization; pydantic values round-trip when the
    reader passes their class.

    Redis errors are logged and degrade to a cache miss.
    """

    def __init__(self, redis_client: Redis, *, prefix: str = "exemplum:") -> None:
        self._redis = redis_client
        self._prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get(self, key: str, cls: type[Any] | None = None) -> Any | None:
        try:
            val = await self._redis.get(self._key(key))
            if not val:
                return None

            if cls and hasattr(cls, "model_validate_json"):
                # Pydantic V2 optimized loading
                return cls.model_validate_json(val)
            return json.loads(val)
        except Exception as e:  # noqa: BLE001
            logger.warning("Redis get failed for key %s: %s", key, e)
            return None

    async def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        try:
            if hasattr(value, "model_dump_json"):
                val = value.model_dump_json()
            else:
                val = json.dumps(value, default=str)

            if ttl:
                # SETEX takes whole seconds
                await self._redis.setex(self._key(key), max(1, math.ceil(ttl)), val)
            else:
                await self._redis.set(self._key(key), val)
        except Exception as e:  # noqa: BLE001
            logger.warning("Redis set failed for key %s: %s", key, e)

    async def delete(self, key: str) -> None:
        try:
            await self._redis.delete(self._key(key))
        except Exception as e:  # noqa: BLE001
            logger.warning("Redis delete failed for key %s: %s", key, e)

    async def aclose(self) -> None:
        await self._redis.aclose()


__all__ = ["RedisCacheService"]
