from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from ...validation import SchemaValidator

LATITUDE_MESSAGE = "Latitude must be between -90 and 90."
LONGITUDE_MESSAGE = "Longitude must be between -180 and 180."


class _CoordinatesSchema(BaseModel):
    lat: Decimal = Field(ge=-90, le=90)
    lon: Decimal = Field(ge=-180, le=180)


class GetWeatherForecastQueryValidator(SchemaValidator):
    schema = _CoordinatesSchema
    messages = {
        ("lat", "greater_than_equal"): LATITUDE_MESSAGE,
        ("lat", "less_than_equal"): LATITUDE_MESSAGE,
        ("lon", "greater_than_equal"): LONGITUDE_MESSAGE,
        ("lon", "less_than_equal"): LONGITUDE_MESSAGE,
    }
