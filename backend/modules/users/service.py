"""
User service implementation.

Applies the permission policy in front of the user repository. Every
check runs before the repository is touched, so a denied request never
mutates anything.
"""

import logging
from typing import TYPE_CHECKING

from shared.config import Settings
from shared.models import Principal, Role, RoleAssignment
from modules.auth.exceptions import PermissionDeniedError
from modules.auth.models import AuthResponse
from modules.auth.policy import is_admin, is_self_or_admin

from .models import UpdateUserRequest, User, UserListResponse
from .repository import UserRepository

if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService

logger = logging.getLogger(__name__)


class UserService:
    """Profile updates and user administration."""

    def __init__(self, repository: UserRepository, auth: "IAuthService"):
        self._repository = repository
        self._auth = auth

    async def update_user(
        self,
        principal: Principal,
        user_id: int,
        request: UpdateUserRequest,
    ) -> AuthResponse:
        """
        Update a user's profile and hand back a fresh session for them.

        Tokens issued before the update stay active until logout.

        Raises:
            PermissionDeniedError: Unless the principal is the user or an Admin
            UnknownUserError: If the user doesn't exist
            EmailInUseError: If the new email belongs to someone else
        """
        if not is_self_or_admin(principal, user_id):
            raise PermissionDeniedError("unauthorized", user_id=principal.id)

        user = await self._repository.update_user(
            user_id,
            name=request.name,
            email=request.email,
            password=request.password,
        )
        token = await self._auth.set_auth(user)
        logger.info("User %s updated by %s", user_id, principal.id)
        return AuthResponse(user=user, token=token)

    async def list_users(
        self,
        principal: Principal,
        page: int = 0,
        limit: int = 10,
        name_filter: str = "*",
    ) -> UserListResponse:
        """
        List users (Admin only).

        Raises:
            PermissionDeniedError: If the principal is not an Admin
        """
        if not is_admin(principal):
            raise PermissionDeniedError("unable to list users", user_id=principal.id)

        users, more = await self._repository.list_users(page, limit, name_filter)
        return UserListResponse(users=users, more=more)

    async def delete_user(self, principal: Principal, user_id: int) -> None:
        """
        Delete a user (Admin only).

        Raises:
            PermissionDeniedError: If the principal is not an Admin
            UnknownUserError: If the user doesn't exist
        """
        if not is_admin(principal):
            raise PermissionDeniedError("unable to delete user", user_id=principal.id)

        await self._repository.delete_user(user_id)
        logger.info("User %s deleted by %s", user_id, principal.id)


async def seed_admin(repository: UserRepository, settings: Settings) -> User | None:
    """
    Create the configured admin account if no user has its email yet.

    Returns:
        The created admin, or None when seeding is disabled or not needed
    """
    if not settings.admin_email:
        return None
    if await repository.get_user_by_email(settings.admin_email) is not None:
        return None

    admin = await repository.add_user(
        settings.admin_name,
        settings.admin_email,
        settings.admin_password,
        roles=[RoleAssignment(role=Role.ADMIN)],
    )
    logger.info("Seeded admin user %s", admin.id)
    return admin
