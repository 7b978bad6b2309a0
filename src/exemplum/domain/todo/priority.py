from __future__ import annotations

from enum import Enum


class PriorityLevel(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
