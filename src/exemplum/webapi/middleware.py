"""HTTP middleware: correlation id and bearer-token authentication."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from ..application.response import ErrorEnvelope
from ..correlation import (
    generate_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from ..identity.context import authenticated_as
from ..identity.exceptions import AuthenticationError
from ..identity.token import extract_bearer_token

if TYPE_CHECKING:
    from fastapi import Request

    from ..identity.jwt import JwtIdentityProvider

logger = logging.getLogger("exemplum.webapi")

CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Takes ``X-Correlation-ID`` from the request (or generates one),
    makes it the current correlation id and echoes it on the response.
    """

    async def dispatch(self, request: Request, call_next: Any) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or (
            generate_correlation_id()
        )
        token = set_correlation_id(correlation_id)
        try:
            response = cast("Response", await call_next(request))
        finally:
            reset_correlation_id(token)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Resolves the bearer token into the request's principal.

    Order of Operations:
    1. Extraction: Bearer token from the ``Authorization`` header.
    2. Resolution: ``JwtIdentityProvider.resolve(token)``.
    3. Context: ``authenticated_as(principal)`` scopes the caller to the
       rest of the request, so it never leaks into another one.

    Requests without a token continue anonymously; whether that is allowed
    is decided per request type by the authorization stage. An invalid or
    expired token is rejected with 401.
    """

    def __init__(
        self,
        app: Any,
        *,
        identity_provider: JwtIdentityProvider | None,
    ) -> None:
        super().__init__(app)
        self.identity_provider = identity_provider

    async def dispatch(self, request: Request, call_next: Any) -> Response:
        token = extract_bearer_token(request.headers)
        if not token or self.identity_provider is None:
            return cast("Response", await call_next(request))

        try:
            principal = await self.identity_provider.resolve(token)
        except AuthenticationError as e:
            logger.info("Rejected bearer token: %s", e)
            envelope = ErrorEnvelope.unauthorized("Invalid or expired token.")
            return JSONResponse(
                status_code=401,
                content=envelope.to_dict(),
                headers={"WWW-Authenticate": "Bearer"},
            )
        with authenticated_as(principal):
            return cast("Response", await call_next(request))


__all__ = ["CORRELATION_HEADER", "AuthenticationMiddleware", "CorrelationIdMiddleware"]
