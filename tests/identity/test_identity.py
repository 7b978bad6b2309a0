"""Tests for Principal, the principal context and JWT validation."""

from __future__ import annotations

import pytest
from joserfc.jwk import OctKey

from exemplum.application.security import TODO_DELETE_ACCESS, TODO_WRITE_ACCESS
from exemplum.config import AuthSettings
from exemplum.identity import (
    ContextCurrentUserService,
    ExpiredTokenError,
    InvalidTokenError,
    JwtIdentityProvider,
    Principal,
    authenticated_as,
    extract_bearer_token,
    get_current_principal,
    get_current_principal_or_none,
    reset_principal,
    set_principal,
)

SIGNING_KEY = "exemplum-test-signing-key-0123456789abcdef"
ISSUER = "https://exemplum.test/"
AUDIENCE = "https://api.exemplum.test"


@pytest.fixture
def provider() -> JwtIdentityProvider:
    return JwtIdentityProvider(
        OctKey.import_key(SIGNING_KEY), issuer=ISSUER, audience=AUDIENCE
    )


class TestPrincipal:
    def test_from_claims(self) -> None:
        principal = Principal.from_claims(
            {
                "sub": "auth0|alice",
                "name": "Alice",
                "roles": ["admin"],
                "permissions": ["write:todo"],
                "scope": "openid delete:todo",
                "exp": 1893456000,
            }
        )

        assert principal.user_id == "auth0|alice"
        assert principal.name == "Alice"
        assert principal.has_role("admin")
        assert principal.permissions == frozenset(
            {"write:todo", "openid", "delete:todo"}
        )
        assert principal.expires_at is not None
        assert not principal.is_expired

    def test_name_falls_back_to_subject(self) -> None:
        assert Principal.from_claims({"sub": "auth0|x"}).name == "auth0|x"

    def test_claim_values(self) -> None:
        principal = Principal.from_claims(
            {"sub": "u", "groups": ["a", "b"], "tenant": "acme"}
        )
        assert principal.claim_values("groups") == frozenset({"a", "b"})
        assert principal.has_claim("tenant", "acme")
        assert not principal.has_claim("missing")

    def test_policies(self, principal, reader) -> None:
        assert TODO_WRITE_ACCESS.is_satisfied_by(principal)
        assert TODO_DELETE_ACCESS.is_satisfied_by(principal)
        assert not TODO_WRITE_ACCESS.is_satisfied_by(reader)

    def test_hashable(self, principal) -> None:
        assert principal in {principal}


class TestPrincipalContext:
    def test_set_and_reset(self, principal) -> None:
        assert get_current_principal_or_none() is None
        token = set_principal(principal)
        try:
            assert get_current_principal() is principal
            service = ContextCurrentUserService()
            assert service.principal is principal
            assert service.user_id == "auth0|alice"
        finally:
            reset_principal(token)
        assert ContextCurrentUserService().user_id is None

    def test_authenticated_as_scopes_the_principal(self, principal, reader) -> None:
        with authenticated_as(reader):
            with authenticated_as(principal) as current:
                assert current is principal
                assert get_current_principal() is principal
            assert get_current_principal() is reader
        assert get_current_principal_or_none() is None

    def test_get_current_principal_without_context_raises(self) -> None:
        with pytest.raises(LookupError):
            get_current_principal()


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("Bearer abc.def.ghi", "abc.def.ghi"),
        ("bearer abc", "abc"),
        ("Basic dXNlcjpwYXNz", None),
        ("Bearer", None),
        ("", None),
    ],
)
def test_extract_bearer_token(header: str, expected: str | None) -> None:
    assert extract_bearer_token({"Authorization": header}) == expected


@pytest.mark.asyncio()
class TestJwtIdentityProvider:
    async def test_valid_token(self, provider, token_factory) -> None:
        token = token_factory(permissions=["write:todo"], name="Alice")

        principal = await provider.resolve(token)

        assert principal.user_id == "auth0|alice"
        assert principal.name == "Alice"
        assert principal.has_permission("write:todo")

    async def test_expired_token(self, provider, token_factory) -> None:
        with pytest.raises(ExpiredTokenError):
            await provider.resolve(token_factory(expires_in=-60))

    async def test_leeway_accepts_recently_expired_token(self, token_factory) -> None:
        provider = JwtIdentityProvider(
            OctKey.import_key(SIGNING_KEY), issuer=ISSUER, leeway=120
        )
        principal = await provider.resolve(token_factory(expires_in=-60))
        assert principal.user_id == "auth0|alice"

    async def test_wrong_signature(self, provider, token_factory) -> None:
        token = token_factory(key="another-signing-key-0123456789abcdefgh")
        with pytest.raises(InvalidTokenError):
            await provider.resolve(token)

    async def test_wrong_issuer(self, provider, token_factory) -> None:
        with pytest.raises(InvalidTokenError):
            await provider.resolve(token_factory(issuer="https://evil.test/"))

    async def test_wrong_audience(self, provider, token_factory) -> None:
        with pytest.raises(InvalidTokenError):
            await provider.resolve(token_factory(audience="https://other.test"))

    async def test_audience_list(self, provider, token_factory) -> None:
        token = token_factory(audience=[AUDIENCE, "https://other.test"])
        assert (await provider.resolve(token)).user_id == "auth0|alice"

    async def test_garbage_token(self, provider) -> None:
        with pytest.raises(InvalidTokenError):
            await provider.resolve("not-a-jwt")


def test_from_settings_requires_key() -> None:
    with pytest.raises(ValueError):
        JwtIdentityProvider.from_settings(AuthSettings())


def test_from_settings_with_signing_key() -> None:
    provider = JwtIdentityProvider.from_settings(
        AuthSettings(authority=ISSUER, audience=AUDIENCE, signing_key=SIGNING_KEY)
    )
    assert isinstance(provider, JwtIdentityProvider)
