from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends
from starlette.responses import Response

from ...application.mediator import Mediator
from ...application.weather import GetWeatherForecastQuery
from ..dependencies import get_mediator
from ..errors import to_http_response

router = APIRouter(prefix="/api", tags=["WeatherForecast"])

MediatorDep = Annotated[Mediator, Depends(get_mediator)]


@router.get("/weatherforecast")
async def get_weather_forecast(lat: Decimal, lon: Decimal, mediator: MediatorDep) -> Response:
    """Weather forecast for a location.

    Sample request: ``GET /api/weatherforecast?lat=11.96&lon=108.4``
    """
    return to_http_response(
        await mediator.send(GetWeatherForecastQuery(lat=lat, lon=lon))
    )
