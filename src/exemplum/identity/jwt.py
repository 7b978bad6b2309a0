"""JWT bearer-token validation with joserfc.

Resolves a signed access token (HS* shared secret or a JWKS for RS*/ES*)
into a :class:`~exemplum.identity.principal.Principal`, checking the
signature, ``exp``, ``iss`` and ``aud`` claims.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from joserfc import jwt
from joserfc.errors import ExpiredTokenError as JoseExpiredTokenError
from joserfc.errors import JoseError
from joserfc.jwk import KeySet, OctKey

from .exceptions import ExpiredTokenError, InvalidTokenError
from .principal import Principal

if TYPE_CHECKING:
    from ..config import AuthSettings

logger = logging.getLogger("exemplum.identity")


class JwtIdentityProvider:
    """Validates bearer tokens and maps their claims to a Principal.

    Example:
        ```python
        provider = JwtIdentityProvider(
            OctKey.import_key(secret),
            issuer="https://exemplum.eu.auth0.com/",
            audience="https://api.exemplum.dev",
        )
        principal = await provider.resolve(token)
        ```
    """

    def __init__(
        self,
        key: Any,
        *,
        issuer: str | None = None,
        audience: str | None = None,
        algorithms: list[str] | None = None,
        name_claim: str = "name",
        role_claim: str = "roles",
        leeway: int = 0,
    ) -> None:
        self._key = key
        self._issuer = issuer
        self._audience = audience
        self._algorithms = algorithms or ["HS256"]
        self._name_claim = name_claim
        self._role_claim = role_claim
        self._leeway = leeway

    @classmethod
    def from_settings(cls, settings: AuthSettings) -> JwtIdentityProvider:
        """Build a provider from the ``auth`` configuration section."""
        if settings.jwks:
            key: Any = KeySet.import_key_set(json.loads(settings.jwks))
        elif settings.signing_key:
            key = OctKey.import_key(settings.signing_key)
        else:
            raise ValueError(
                "Auth configuration needs either 'signing_key' or 'jwks' to "
                "validate tokens."
            )
        return cls(
            key,
            issuer=settings.authority,
            audience=settings.audience,
            algorithms=list(settings.algorithms),
            name_claim=settings.name_claim,
            role_claim=settings.role_claim,
            leeway=settings.leeway_seconds,
        )

    async def resolve(self, token: str) -> Principal:
        """Resolve a JWT access token to a Principal.

        Raises:
            ExpiredTokenError: If the token's ``exp`` is in the past.
            InvalidTokenError: If the token is malformed, badly signed or
                issued by/for someone else.
        """
        try:
            decoded = jwt.decode(token, self._key, algorithms=self._algorithms)
            claims_options: dict[str, Any] = {"exp": {"essential": True}}
            if self._issuer:
                claims_options["iss"] = {"essential": True, "value": self._issuer}
            registry = jwt.JWTClaimsRegistry(leeway=self._leeway, **claims_options)
            registry.validate(decoded.claims)
        except JoseExpiredTokenError as e:
            raise ExpiredTokenError(str(e)) from e
        except (JoseError, ValueError) as e:
            logger.debug("Rejected bearer token: %s", e)
            raise InvalidTokenError(str(e)) from e

        claims = dict(decoded.claims)
        self._check_audience(claims)
        return Principal.from_claims(
            claims, name_claim=self._name_claim, role_claim=self._role_claim
        )

    def _check_audience(self, claims: dict[str, Any]) -> None:
        if not self._audience:
            return
        aud = claims.get("aud")
        token_auds = [aud] if isinstance(aud, str) else list(aud or [])
        if self._audience not in token_auds:
            raise InvalidTokenError("audience not allowed")


__all__: list[str] = ["JwtIdentityProvider"]
