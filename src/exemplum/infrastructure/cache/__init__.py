from __future__ import annotations

from .memory import InMemoryCacheService
from .redis import RedisCacheService

__all__ = ["InMemoryCacheService", "RedisCacheService"]
