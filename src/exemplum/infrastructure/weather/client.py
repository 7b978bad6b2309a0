"""OpenWeatherMap client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...application.weather.models import WeatherForecast
from ...correlation import get_correlation_id

if TYPE_CHECKING:
    from decimal import Decimal

    import httpx

logger = logging.getLogger("exemplum.weather")

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"


class OpenWeatherMapClient:
    """
    Calls the "onecall" endpoint and maps the payload to
    :class:`~exemplum.application.weather.models.WeatherForecast`.

    Non-2xx responses raise ``httpx.HTTPStatusError`` and transport
    failures ``httpx.RequestError``; the pipeline reports both as
    validation failures of the downstream call.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        api_key: str,
        units: str = "metric",
        exclude: str = "minutely,hourly,alerts",
    ) -> None:
        self._http = http_client
        self._api_key = api_key
        self._units = units
        self._exclude = exclude

    async def get_forecast(self, lat: Decimal, lon: Decimal) -> WeatherForecast:
        params = {
            "lat": str(lat),
            "lon": str(lon),
            "units": self._units,
            "exclude": self._exclude,
            "appid": self._api_key,
        }
        headers = {"X-Correlation-ID": get_correlation_id() or ""}
        response = await self._http.get("/onecall", params=params, headers=headers)
        if response.is_error:
            logger.error(
                "Weather API returned %s for %s,%s",
                response.status_code,
                lat,
                lon,
            )
        response.raise_for_status()
        return WeatherForecast.model_validate(response.json())


__all__ = ["DEFAULT_BASE_URL", "OpenWeatherMapClient"]
