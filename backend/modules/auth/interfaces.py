"""
Authentication module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. The container injects the real token service and
credential store; tests can inject doubles.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from modules.users.models import User

from .models import AuthResponse


@runtime_checkable
class ITokenService(Protocol):
    """Issues and verifies signed session tokens."""

    def issue(self, claims: dict[str, Any]) -> str:
        """
        Sign claims into a token.

        Issuing does not activate the token; see ICredentialStore.activate.
        """
        ...

    def verify(self, token: str) -> dict[str, Any]:
        """
        Verify a token's signature and return its claims.

        Raises:
            InvalidTokenError: If the token is malformed or the signature is wrong
        """
        ...

    def signature_of(self, token: str) -> str:
        """Third dot-segment of the token, or "" if there are fewer than three."""
        ...


@runtime_checkable
class ICredentialStore(Protocol):
    """The set of active sessions, keyed by token signature."""

    async def activate(self, user_id: int, token: str) -> None:
        """Record the token as active for user_id (insert or replace)."""
        ...

    async def is_active(self, token: str) -> bool:
        """True iff the token's signature is active. Never raises."""
        ...

    async def revoke(self, token: str) -> None:
        """Forget the token's signature. Revoking an unknown token is a no-op."""
        ...


@runtime_checkable
class IAuthService(Protocol):
    """Session lifecycle: register, login, logout."""

    async def register(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
    ) -> AuthResponse:
        ...

    async def login(self, email: Optional[str], password: Optional[str]) -> AuthResponse:
        ...

    async def logout(self, token: str) -> None:
        ...

    async def set_auth(self, user: User) -> str:
        """Issue a token for user and activate it."""
        ...
