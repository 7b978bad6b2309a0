from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..handler import RequestHandler
from .models import WeatherForecast

if TYPE_CHECKING:
    from ...ports.weather import IWeatherForecastClient
    from .queries import GetWeatherForecastQuery

logger = logging.getLogger("exemplum.weather")


class GetWeatherForecastQueryHandler(RequestHandler[WeatherForecast]):
    def __init__(self, client: IWeatherForecastClient) -> None:
        self._client = client

    async def handle(self, request: GetWeatherForecastQuery) -> WeatherForecast:  # type: ignore[override]
        logger.debug("Fetching forecast for %s,%s", request.lat, request.lon)
        return await self._client.get_forecast(request.lat, request.lon)
