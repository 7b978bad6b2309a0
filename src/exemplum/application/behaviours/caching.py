"""CachingBehaviour: read-through cache for cacheable request types."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..response import Response

if TYPE_CHECKING:
    from ...ports.behaviour import NextStage
    from ...ports.cache import ICacheService
    from ..registry import RequestRegistry
    from ..request import Request

logger = logging.getLogger("exemplum.pipeline")


class CachingBehaviour:
    """Serves live cache entries and stores successful results.

    Only request types registered with
    :meth:`~exemplum.application.registry.RequestRegistry.register_cacheable`
    are looked up. Failed responses and ``None`` results are never stored.
    Cache store errors are logged and treated as a miss.
    """

    def __init__(self, registry: RequestRegistry, cache: ICacheService) -> None:
        self._registry = registry
        self._cache = cache

    async def __call__(
        self,
        request: Request[Any],
        next_stage: NextStage,
    ) -> Response[Any]:
        settings = self._registry.get_cache_settings(type(request))
        if settings is None:
            return await next_stage(request)

        key = request.cache_key()
        try:
            cached = await self._cache.get(key, cls=settings.result_type)
        except Exception as e:  # noqa: BLE001
            logger.warning("Cache read failed for key %s: %s", key, e)
            cached = None

        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return Response.ok(cached, correlation_id=request.correlation_id)

        response = await next_stage(request)
        if response.is_success and response.result is not None:
            try:
                await self._cache.set(key, response.result, ttl=settings.ttl)
            except Exception as e:  # noqa: BLE001
                logger.warning("Cache write failed for key %s: %s", key, e)
        return response
