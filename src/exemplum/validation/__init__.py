"""Request validation: pydantic schemas and their results."""

from __future__ import annotations

from .result import ValidationResult
from .schema import SchemaValidator

__all__ = [
    "SchemaValidator",
    "ValidationResult",
]
