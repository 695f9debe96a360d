"""
Authentication service implementation.

Drives the session lifecycle: Anonymous -> Authenticated (register/login)
-> Revoked (logout). A token only becomes usable once set_auth has both
issued it and recorded it in the credential store.
"""

import logging
from typing import Optional

from modules.users.models import User
from modules.users.exceptions import UnknownUserError
from modules.users.repository import UserRepository

from .exceptions import MissingFieldsError
from .interfaces import IAuthService, ICredentialStore, ITokenService
from .models import AuthResponse

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Collaborators are injected so tests can swap the credential store or
    token service for doubles.
    """

    def __init__(
        self,
        users: UserRepository,
        tokens: ITokenService,
        credentials: ICredentialStore,
    ):
        self._users = users
        self._tokens = tokens
        self._credentials = credentials

    async def register(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
    ) -> AuthResponse:
        """
        Create a Diner account and log it in.

        Raises:
            MissingFieldsError: If name, email or password is missing
            EmailInUseError: If the email is already registered
        """
        if not name or not email or not password:
            raise MissingFieldsError()

        user = await self._users.add_user(name, email, password)
        token = await self.set_auth(user)
        logger.info("Registered user %s", user.id)
        return AuthResponse(user=user, token=token)

    async def login(self, email: Optional[str], password: Optional[str]) -> AuthResponse:
        """
        Verify credentials and start a new session.

        Raises:
            UnknownUserError: For an unknown email or a wrong password alike,
                or when either is missing
        """
        if not email or password is None:
            raise UnknownUserError()
        user = await self._users.get_user(email, password)
        token = await self.set_auth(user)
        logger.info("User %s logged in", user.id)
        return AuthResponse(user=user, token=token)

    async def logout(self, token: str) -> None:
        """Revoke the session for this token."""
        await self._credentials.revoke(token)
        logger.info("Session revoked")

    async def set_auth(self, user: User) -> str:
        token = self._tokens.issue(user.to_claims())
        await self._credentials.activate(user.id, token)
        return token
