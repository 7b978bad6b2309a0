"""Mapping of pipeline responses to HTTP responses."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse, Response

from ..application.response import ErrorKind
from ..identity.context import get_current_principal_or_none

if TYPE_CHECKING:
    from ..application.response import ErrorEnvelope
    from ..application.response import Response as PipelineResponse

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION_FAILED: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INTERNAL_ERROR: 500,
}


def status_for(envelope: ErrorEnvelope, *, authenticated: bool) -> int:
    """HTTP status for an error envelope.

    ``UNAUTHORIZED`` is 401 for anonymous callers and 403 for
    authenticated callers lacking a permission.
    """
    if envelope.kind is ErrorKind.UNAUTHORIZED:
        return 403 if authenticated else 401
    return _STATUS_BY_KIND[envelope.kind]


def to_http_response(
    response: PipelineResponse[Any], *, success_status: int = 200
) -> Response:
    if response.error is not None:
        authenticated = get_current_principal_or_none() is not None
        status = status_for(response.error, authenticated=authenticated)
        headers = {"WWW-Authenticate": "Bearer"} if status == 401 else None
        return JSONResponse(
            status_code=status, content=response.error.to_dict(), headers=headers
        )
    if success_status == 204:
        return Response(status_code=204)
    return JSONResponse(
        status_code=success_status, content=jsonable_encoder(response.result)
    )


__all__ = ["status_for", "to_http_response"]
