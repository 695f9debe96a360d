"""
Session token signing and verification.

Tokens are HS256 JWTs whose payload is the user's claims plus "iat" and a
random "jti", so two tokens issued in the same second still differ.
They carry no expiry: a token stays valid until its signature is removed
from the credential store.
"""

import logging
import time
import uuid
from typing import Any, Optional

import jwt

from .exceptions import InvalidTokenError

logger = logging.getLogger(__name__)


def signature_of(token: Optional[str]) -> str:
    """
    Extract the signature segment of a token.

    Args:
        token: A header.payload.signature string

    Returns:
        The third segment, or "" for malformed tokens
    """
    parts = (token or "").split(".")
    return parts[2] if len(parts) > 2 else ""


class TokenService:
    """Signs and verifies session tokens with a shared secret."""

    ALGORITHM = "HS256"

    def __init__(self, secret: str) -> None:
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret

    def issue(self, claims: dict[str, Any]) -> str:
        payload = {**claims, "iat": int(time.time()), "jti": uuid.uuid4().hex}
        return jwt.encode(payload, self._secret, algorithm=self.ALGORITHM)

    def verify(self, token: str) -> dict[str, Any]:
        try:
            return jwt.decode(token, self._secret, algorithms=[self.ALGORITHM])
        except jwt.InvalidTokenError as e:
            logger.debug("Token verification failed: %s", e)
            raise InvalidTokenError(f"invalid token: {e}")

    def signature_of(self, token: str) -> str:
        return signature_of(token)
