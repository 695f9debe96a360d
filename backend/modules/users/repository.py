"""
User repository for database access.

Encapsulates all queries and data mapping for user-related tables:
- users
- user_role

Passwords are hashed before they reach the users table and are never
returned from this repository.
"""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from shared.database import Database, Transaction
from shared.models import Role, RoleAssignment
from shared.repository import BaseRepository, like_pattern
from modules.auth.passwords import PasswordHasher

from .exceptions import EmailInUseError, UnknownUserError
from .models import User


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying permissions.
    """

    def __init__(self, db: Database, hasher: PasswordHasher) -> None:
        super().__init__(db)
        self._hasher = hasher

    # -------------------------------------------------------------------------
    # Create / read
    # -------------------------------------------------------------------------

    async def add_user(
        self,
        name: str,
        email: str,
        password: str,
        roles: Optional[Sequence[RoleAssignment]] = None,
    ) -> User:
        """
        Create a user with hashed password and role assignments.

        Args:
            name: Display name
            email: Email address (unique)
            password: Plaintext password
            roles: Role assignments; defaults to a single Diner role

        Returns:
            The created user (without password)

        Raises:
            EmailInUseError: If another user already has this email
        """
        assignments = list(roles) if roles else [RoleAssignment(role=Role.DINER)]
        hashed = await self._hasher.hash_async(password)

        try:
            async with self._db.transaction() as tx:
                if await self._email_taken(tx, email):
                    raise EmailInUseError(email)
                rows = await tx.execute(
                    "INSERT INTO users (name, email, password) "
                    "VALUES (:name, :email, :password) RETURNING id",
                    {"name": name, "email": email, "password": hashed},
                )
                user_id = rows[0]["id"]
                for assignment in assignments:
                    await tx.execute(
                        "INSERT INTO user_role (user_id, role, object_id) "
                        "VALUES (:user_id, :role, :object_id)",
                        {
                            "user_id": user_id,
                            "role": assignment.role.value,
                            "object_id": assignment.object_id,
                        },
                    )
        except IntegrityError as e:
            # Lost a race with a concurrent insert of the same email
            raise EmailInUseError(email) from e

        return User(id=user_id, name=name, email=email, roles=assignments)

    async def get_user(self, email: str, password: Optional[str] = None) -> User:
        """
        Look up a user by email, optionally checking the password.

        Raises:
            UnknownUserError: If the email is unknown or the password doesn't match
        """
        rows = await self._db.execute(
            "SELECT id, name, email, password FROM users WHERE email = :email",
            {"email": email},
        )
        if not rows:
            raise UnknownUserError()

        row = rows[0]
        if password is not None and not await self._hasher.verify_async(password, row["password"]):
            raise UnknownUserError()

        return await self._map_to_user(self._db, row)

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by ID, or None if not found."""
        rows = await self._db.execute(
            "SELECT id, name, email FROM users WHERE id = :id",
            {"id": user_id},
        )
        if not rows:
            return None
        return await self._map_to_user(self._db, rows[0])

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get a user by email, or None if not found."""
        rows = await self._db.execute(
            "SELECT id, name, email FROM users WHERE email = :email",
            {"email": email},
        )
        if not rows:
            return None
        return await self._map_to_user(self._db, rows[0])

    async def list_users(
        self,
        page: int = 0,
        limit: int = 10,
        name_filter: str = "*",
    ) -> tuple[list[User], bool]:
        """
        List users whose name matches a '*' wildcard filter.

        Args:
            page: Page number (0-indexed)
            limit: Users per page
            name_filter: Name filter, '*' matches any run of characters

        Returns:
            (users on this page, whether more pages follow)
        """
        rows = await self._db.execute(
            "SELECT id, name, email FROM users WHERE name LIKE :name "
            "ORDER BY id LIMIT :limit OFFSET :offset",
            {"name": like_pattern(name_filter), "limit": limit + 1, "offset": page * limit},
        )
        more = len(rows) > limit
        users = [await self._map_to_user(self._db, row) for row in rows[:limit]]
        return users, more

    # -------------------------------------------------------------------------
    # Update / delete
    # -------------------------------------------------------------------------

    async def update_user(
        self,
        user_id: int,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
    ) -> User:
        """
        Update the provided fields of a user.

        Raises:
            UnknownUserError: If the user doesn't exist
            EmailInUseError: If the new email belongs to another user
        """
        fields: dict[str, str] = {}
        if name:
            fields["name"] = name
        if email:
            fields["email"] = email
        if password:
            fields["password"] = await self._hasher.hash_async(password)

        try:
            async with self._db.transaction() as tx:
                existing = await tx.execute("SELECT id FROM users WHERE id = :id", {"id": user_id})
                if not existing:
                    raise UnknownUserError()
                if email and await self._email_taken(tx, email, exclude_user_id=user_id):
                    raise EmailInUseError(email)
                if fields:
                    assignments = ", ".join(f"{column} = :{column}" for column in fields)
                    await tx.execute(
                        f"UPDATE users SET {assignments} WHERE id = :id",
                        {**fields, "id": user_id},
                    )
        except IntegrityError as e:
            raise EmailInUseError(email or "") from e

        user = await self.get_user_by_id(user_id)
        if user is None:
            raise UnknownUserError()
        return user

    async def delete_user(self, user_id: int) -> None:
        """
        Delete a user with their sessions and role assignments.

        Orders are kept as history.

        Raises:
            UnknownUserError: If the user doesn't exist
        """
        async with self._db.transaction() as tx:
            existing = await tx.execute("SELECT id FROM users WHERE id = :id", {"id": user_id})
            if not existing:
                raise UnknownUserError()
            await tx.execute("DELETE FROM auth WHERE user_id = :id", {"id": user_id})
            await tx.execute("DELETE FROM user_role WHERE user_id = :id", {"id": user_id})
            await tx.execute("DELETE FROM users WHERE id = :id", {"id": user_id})

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    async def _email_taken(
        self,
        tx: Transaction,
        email: str,
        exclude_user_id: Optional[int] = None,
    ) -> bool:
        rows = await tx.execute(
            "SELECT id FROM users WHERE email = :email",
            {"email": email},
        )
        return any(row["id"] != exclude_user_id for row in rows)

    async def _get_roles(self, executor: Database | Transaction, user_id: int) -> list[RoleAssignment]:
        rows = await executor.execute(
            "SELECT role, object_id FROM user_role WHERE user_id = :user_id ORDER BY id",
            {"user_id": user_id},
        )
        return [RoleAssignment(role=Role(row["role"]), object_id=row["object_id"]) for row in rows]

    async def _map_to_user(self, executor: Database | Transaction, row) -> User:
        return User(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            roles=await self._get_roles(executor, row["id"]),
        )
