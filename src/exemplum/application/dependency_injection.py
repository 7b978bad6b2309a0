"""Registration of the application's requests, validators and policies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..domain.todo import TodoItemCompletedEvent
from .security import TODO_DELETE_ACCESS, TODO_WRITE_ACCESS
from .todo import (
    CreateTodoItemCommand,
    CreateTodoItemCommandHandler,
    CreateTodoItemCommandValidator,
    CreateTodoListCommand,
    CreateTodoListCommandHandler,
    CreateTodoListCommandValidator,
    DeleteTodoItemCommand,
    DeleteTodoItemCommandHandler,
    GetTodoItemsInListQuery,
    GetTodoItemsInListQueryHandler,
    GetTodoListByIdQuery,
    GetTodoListByIdQueryHandler,
    GetTodoListsQuery,
    GetTodoListsQueryHandler,
    MarkTodoItemCompleteCommand,
    MarkTodoItemCompleteCommandHandler,
    TodoItemCompletedEventHandler,
)
from .weather import (
    GetWeatherForecastQuery,
    GetWeatherForecastQueryHandler,
    GetWeatherForecastQueryValidator,
    WeatherForecast,
)

if TYPE_CHECKING:
    from ..ports.events import ISubscribeDomainEvents
    from ..ports.persistence import DbContextFactory
    from ..ports.weather import IWeatherForecastClient
    from .registry import RequestRegistry


def add_application(
    registry: RequestRegistry,
    *,
    db_context_factory: DbContextFactory,
    weather_client: IWeatherForecastClient,
    event_publisher: ISubscribeDomainEvents,
    weather_cache_ttl: float = 300.0,
) -> RequestRegistry:
    """Register every request type with its handler and pipeline settings."""
    # Todo lists
    registry.register_handler(
        CreateTodoListCommand, CreateTodoListCommandHandler(db_context_factory)
    )
    registry.register_validator(CreateTodoListCommand, CreateTodoListCommandValidator())
    registry.register_handler(
        GetTodoListsQuery, GetTodoListsQueryHandler(db_context_factory)
    )
    registry.register_handler(
        GetTodoListByIdQuery, GetTodoListByIdQueryHandler(db_context_factory)
    )

    # Todo items
    registry.register_handler(
        CreateTodoItemCommand, CreateTodoItemCommandHandler(db_context_factory)
    )
    registry.register_validator(CreateTodoItemCommand, CreateTodoItemCommandValidator())
    registry.register_policy(CreateTodoItemCommand, TODO_WRITE_ACCESS)
    registry.register_handler(
        GetTodoItemsInListQuery, GetTodoItemsInListQueryHandler(db_context_factory)
    )
    registry.register_handler(
        MarkTodoItemCompleteCommand,
        MarkTodoItemCompleteCommandHandler(db_context_factory),
    )
    registry.register_policy(MarkTodoItemCompleteCommand, TODO_WRITE_ACCESS)
    registry.register_handler(
        DeleteTodoItemCommand, DeleteTodoItemCommandHandler(db_context_factory)
    )
    registry.register_policy(DeleteTodoItemCommand, TODO_DELETE_ACCESS)

    # Weather forecast
    registry.register_handler(
        GetWeatherForecastQuery, GetWeatherForecastQueryHandler(weather_client)
    )
    registry.register_validator(
        GetWeatherForecastQuery, GetWeatherForecastQueryValidator()
    )
    registry.register_cacheable(
        GetWeatherForecastQuery, weather_cache_ttl, result_type=WeatherForecast
    )

    # Domain events
    event_publisher.subscribe(TodoItemCompletedEvent, TodoItemCompletedEventHandler())

    return registry


__all__ = ["add_application"]
