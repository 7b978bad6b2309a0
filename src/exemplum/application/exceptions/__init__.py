from __future__ import annotations

from .converter import (
    ExceptionToErrorConverter,
    ICustomExceptionErrorConverter,
    IExceptionToErrorConverter,
)
from .converters import (
    ApiCallExceptionConverter,
    DatabaseValidationExceptionConverter,
    DomainValidationExceptionConverter,
    NotFoundExceptionConverter,
    PermissionExceptionConverter,
    default_converters,
)

__all__ = [
    "ApiCallExceptionConverter",
    "DatabaseValidationExceptionConverter",
    "DomainValidationExceptionConverter",
    "ExceptionToErrorConverter",
    "ICustomExceptionErrorConverter",
    "IExceptionToErrorConverter",
    "NotFoundExceptionConverter",
    "PermissionExceptionConverter",
    "default_converters",
]
