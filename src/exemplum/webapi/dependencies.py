"""FastAPI dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from ..application.mediator import Mediator
    from ..infrastructure.dependency_injection import ApplicationContainer


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container  # type: ignore[no-any-return]


def get_mediator(request: Request) -> Mediator:
    return get_container(request).mediator
