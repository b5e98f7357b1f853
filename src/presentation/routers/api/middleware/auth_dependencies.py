"""Client principal authentication dependencies.

The identity provider in front of the API authenticates the user and
forwards the identity in the ``X-MS-CLIENT-PRINCIPAL`` header: a base64
encoded JSON object with ``userId``, ``userDetails``, ``identityProvider``
and ``userRoles``. The API trusts the header as given; it never sees
credentials.

Usage:
    @router.get("/users/me")
    async def get_me(
        principal: Annotated[ClientPrincipal, Depends(get_current_principal)],
    ):
        return {"auth_id": principal.user_id}
"""

import base64
import binascii
import json
from dataclasses import dataclass, field
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from src.core.config import Settings, get_settings


@dataclass(frozen=True, slots=True, kw_only=True)
class ClientPrincipal:
    """Authenticated caller as described by the identity provider.

    Attributes:
        user_id: Provider user identifier; matched against ``User.auth_id``.
        user_details: Usually the e-mail or username.
        identity_provider: Provider name (aad, github, ...).
        user_roles: Roles granted by the provider.
    """

    user_id: str
    user_details: str | None = None
    identity_provider: str | None = None
    user_roles: list[str] = field(default_factory=list)


def decode_principal(header_value: str) -> ClientPrincipal | None:
    """Decode the principal header, returning None when it is unusable.

    Args:
        header_value: Raw header value (base64 JSON).

    Returns:
        ClientPrincipal, or None if the value is not base64, not a JSON
        object, or has no ``userId``.
    """
    try:
        payload = json.loads(base64.b64decode(header_value, validate=False))
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return None

    if not isinstance(payload, dict) or not payload.get("userId"):
        return None

    roles = payload.get("userRoles") or []
    return ClientPrincipal(
        user_id=str(payload["userId"]),
        user_details=payload.get("userDetails"),
        identity_provider=payload.get("identityProvider"),
        user_roles=[str(role) for role in roles] if isinstance(roles, list) else [],
    )


async def get_current_principal(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ClientPrincipal:
    """Require an authenticated caller.

    Raises:
        HTTPException 401: If the header is missing or cannot be decoded.
    """
    header_value = request.headers.get(settings.auth_principal_header)
    if not header_value:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    principal = decode_principal(header_value)
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid client principal",
        )
    return principal


# Type alias for dependency injection
CurrentPrincipal = Annotated[ClientPrincipal, Depends(get_current_principal)]
