"""Bearer token extraction from HTTP headers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


def extract_bearer_token(headers: Mapping[str, str]) -> str | None:
    """Extract Bearer token from Authorization header.

    Args:
        headers: HTTP headers mapping.

    Returns:
        Token string or None if not found.

    Example:
        ```python
        token = extract_bearer_token(request.headers)
        if token:
            principal = await provider.resolve(token)
        ```
    """
    auth_header = headers.get("Authorization") or headers.get("authorization")
    if not auth_header:
        return None

    parts = auth_header.split()
    if len(parts) != 2:
        return None

    scheme, token = parts
    if scheme.lower() != "bearer":
        return None

    return token
