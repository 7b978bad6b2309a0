from __future__ import annotations

from . import todo_items, todo_lists, weather_forecast

routers = [todo_lists.router, todo_items.router, weather_forecast.router]

__all__ = ["routers"]
