from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from decimal import Decimal

    from ..application.weather.models import WeatherForecast


@runtime_checkable
class IWeatherForecastClient(Protocol):
    """Downstream weather forecast API."""

    async def get_forecast(self, lat: Decimal, lon: Decimal) -> WeatherForecast: ...
