"""Ports: protocols the application consumes and infrastructure implements."""

from __future__ import annotations

from .behaviour import IPipelineBehaviour
from .cache import ICacheService
from .clock import IClock
from .current_user import ICurrentUserService
from .db_exceptions import IHandleDbExceptions, IHandlerSpecificDbException
from .events import IPublishDomainEvents, ISubscribeDomainEvents
from .persistence import (
    IApplicationDbContext,
    ITodoItemRepository,
    ITodoListRepository,
)
from .validation import IValidator
from .weather import IWeatherForecastClient

__all__: list[str] = [
    "IApplicationDbContext",
    "ICacheService",
    "IClock",
    "ICurrentUserService",
    "IHandleDbExceptions",
    "IHandlerSpecificDbException",
    "IPipelineBehaviour",
    "IPublishDomainEvents",
    "ITodoItemRepository",
    "ISubscribeDomainEvents",
    "ITodoListRepository",
    "IValidator",
    "IWeatherForecastClient",
]
