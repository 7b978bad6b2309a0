from __future__ import annotations

from datetime import datetime, timezone


class SystemClock:
    """UTC wall clock."""

    @property
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
