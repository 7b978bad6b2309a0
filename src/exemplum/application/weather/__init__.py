from __future__ import annotations

from .handlers import GetWeatherForecastQueryHandler
from .models import (
    CurrentWeather,
    DailyForecast,
    DailyTemperature,
    WeatherDescription,
    WeatherForecast,
)
from .queries import GetWeatherForecastQuery
from .validators import GetWeatherForecastQueryValidator

__all__ = [
    "CurrentWeather",
    "DailyForecast",
    "DailyTemperature",
    "GetWeatherForecastQuery",
    "GetWeatherForecastQueryHandler",
    "GetWeatherForecastQueryValidator",
    "WeatherDescription",
    "WeatherForecast",
]
