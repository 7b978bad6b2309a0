from __future__ import annotations

from .authorization import AuthorizationBehaviour
from .caching import CachingBehaviour
from .logging import LoggingBehaviour
from .unhandled_exception import UnhandledExceptionBehaviour
from .validation import ValidationBehaviour

__all__ = [
    "AuthorizationBehaviour",
    "CachingBehaviour",
    "LoggingBehaviour",
    "UnhandledExceptionBehaviour",
    "ValidationBehaviour",
]
