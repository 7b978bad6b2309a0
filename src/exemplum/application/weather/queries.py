from __future__ import annotations

from decimal import Decimal

from ..request import Query
from .models import WeatherForecast


def _format_coordinate(value: Decimal) -> str:
    return format(value.normalize(), "f")


class GetWeatherForecastQuery(Query[WeatherForecast]):
    """Forecast for a location. Cached per coordinate pair."""

    lat: Decimal
    lon: Decimal

    def cache_key(self) -> str:
        return (
            f"{self.request_name()}:"
            f"{_format_coordinate(self.lat)},{_format_coordinate(self.lon)}"
        )
