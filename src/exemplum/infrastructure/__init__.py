"""Infrastructure: persistence, events, cache, clock and downstream clients."""

from __future__ import annotations

from .clock import SystemClock
from .dependency_injection import ApplicationContainer, build_cache
from .events import DomainEventPublisher

__all__ = [
    "ApplicationContainer",
    "DomainEventPublisher",
    "SystemClock",
    "build_cache",
]
