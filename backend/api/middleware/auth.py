"""
Bearer token authentication.

get_optional_principal turns the Authorization header into a Principal or
None and never rejects a request on its own. Routes that need a logged-in
user depend on get_current_principal, which is the authentication gate.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from shared.models import Principal
from modules.auth.exceptions import InvalidTokenError, MissingTokenError
from modules.auth.interfaces import ICredentialStore, ITokenService

from ..dependencies import get_credential_store, get_token_service

logger = logging.getLogger(__name__)

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """The raw bearer token, if the request carries one."""
    if credentials is None:
        return None
    return credentials.credentials


async def get_optional_principal(
    token: Optional[str] = Depends(get_bearer_token),
    store: ICredentialStore = Depends(get_credential_store),
    tokens: ITokenService = Depends(get_token_service),
) -> Optional[Principal]:
    """
    Dependency that optionally extracts the principal.

    Order matters: the active-session check runs before signature
    verification, so a revoked token is rejected even if it still verifies.

    Usage:
        @router.get("/public")
        async def public_route(principal: Optional[Principal] = Depends(get_optional_principal)):
            ...
    """
    if not token:
        return None

    if not await store.is_active(token):
        return None

    try:
        claims = tokens.verify(token)
    except InvalidTokenError:
        return None

    return Principal.from_claims(claims)


async def get_current_principal(
    principal: Optional[Principal] = Depends(get_optional_principal),
) -> Principal:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(principal: Principal = Depends(get_current_principal)):
            return {"user_id": principal.id}
    """
    if principal is None:
        raise MissingTokenError()
    return principal

