"""Application layer: requests, the mediator pipeline and use cases."""

from __future__ import annotations

from .handler import EventHandler, RequestHandler
from .mediator import Mediator
from .pipeline import build_pipeline
from .registry import CacheSettings, RequestRegistry
from .request import Command, Query, Request
from .response import ErrorEnvelope, ErrorKind, RequestFailedError, Response
from .security import PolicyRequirement

__all__ = [
    "CacheSettings",
    "Command",
    "ErrorEnvelope",
    "ErrorKind",
    "EventHandler",
    "Mediator",
    "PolicyRequirement",
    "Query",
    "Request",
    "RequestFailedError",
    "RequestHandler",
    "RequestRegistry",
    "Response",
    "build_pipeline",
]
