"""Weather forecast read models, shaped after the OpenWeatherMap "onecall" payload."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class _ForecastModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class WeatherDescription(_ForecastModel):
    id: int
    main: str
    description: str
    icon: str = ""


class CurrentWeather(_ForecastModel):
    dt: datetime
    temp: float
    feels_like: float | None = None
    pressure: int | None = None
    humidity: int | None = None
    wind_speed: float | None = None
    weather: list[WeatherDescription] = Field(default_factory=list)


class DailyTemperature(_ForecastModel):
    day: float
    min: float
    max: float
    night: float | None = None


class DailyForecast(_ForecastModel):
    dt: datetime
    temp: DailyTemperature
    humidity: int | None = None
    wind_speed: float | None = None
    pop: float | None = None
    weather: list[WeatherDescription] = Field(default_factory=list)


class WeatherForecast(_ForecastModel):
    lat: Decimal
    lon: Decimal
    timezone: str = ""
    current: CurrentWeather | None = None
    daily: list[DailyForecast] = Field(default_factory=list)
