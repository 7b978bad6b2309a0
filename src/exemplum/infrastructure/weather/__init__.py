from __future__ import annotations

from .client import DEFAULT_BASE_URL, OpenWeatherMapClient

__all__ = ["DEFAULT_BASE_URL", "OpenWeatherMapClient"]
