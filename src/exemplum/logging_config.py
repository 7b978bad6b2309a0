"""Logging setup for the Exemplum service.

Typical usage in the app factory::

    from exemplum.logging_config import configure_logging

    configure_logging(settings.log_level)

Every record gets a ``correlation_id`` attribute from
:mod:`exemplum.correlation`, so handlers can print it.
"""

from __future__ import annotations

import logging
import logging.config

from .correlation import get_correlation_id

DEFAULT_FORMAT = (
    "%(asctime)s %(levelname)-8s [%(correlation_id)s] %(name)s: %(message)s"
)


class CorrelationIdFilter(logging.Filter):
    """Stamps each record with the current correlation id ("-" if none)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


def _parse_level(value: str | int) -> int:
    if isinstance(value, int):
        return value
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str | int = "INFO", *, fmt: str = DEFAULT_FORMAT) -> None:
    """Install a console handler for the ``exemplum`` logger tree."""
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "correlation_id": {"()": CorrelationIdFilter},
            },
            "formatters": {
                "default": {"format": fmt},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "filters": ["correlation_id"],
                },
            },
            "loggers": {
                "exemplum": {
                    "handlers": ["console"],
                    "level": _parse_level(level),
                    "propagate": True,
                },
            },
        }
    )


__all__ = ["DEFAULT_FORMAT", "CorrelationIdFilter", "configure_logging"]
