import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from shared.models import Role, RoleAssignment
from modules.auth.passwords import PasswordHasher
from modules.users.exceptions import EmailInUseError, UnknownUserError
from modules.users.models import User
from modules.users.repository import UserRepository


class TestUserRepository:
    @pytest.fixture
    def repo(self, database):
        return UserRepository(database, PasswordHasher(rounds=4))

    @pytest.mark.asyncio
    async def test_add_user_defaults_to_diner(self, repo):
        user = await repo.add_user("pizza diner", "d@jwt.com", "diner")
        assert user.id > 0
        assert user.roles == [RoleAssignment(role=Role.DINER)]

    @pytest.mark.asyncio
    async def test_password_is_hashed(self, repo, database):
        await repo.add_user("pizza diner", "d@jwt.com", "diner")
        rows = await database.execute("SELECT password FROM users")
        assert rows[0]["password"] != "diner"

    @pytest.mark.asyncio
    async def test_add_user_with_roles(self, repo):
        user = await repo.add_user(
            "franchisee",
            "f@jwt.com",
            "franchisee",
            roles=[RoleAssignment(role=Role.FRANCHISEE, object_id=3)],
        )
        fetched = await repo.get_user_by_id(user.id)
        assert fetched.roles == [RoleAssignment(role=Role.FRANCHISEE, object_id=3)]

    @pytest.mark.asyncio
    async def test_add_user_duplicate_email(self, repo):
        await repo.add_user("first", "d@jwt.com", "diner")
        with pytest.raises(EmailInUseError):
            await repo.add_user("second", "d@jwt.com", "diner")

    @pytest.mark.asyncio
    async def test_concurrent_registrations_of_one_email(self, repo, database):
        """Only one of several simultaneous inserts wins; the rest see EmailInUseError."""
        results = await asyncio.gather(
            *(repo.add_user(f"diner {i}", "same@jwt.com", "x") for i in range(4)),
            return_exceptions=True,
        )

        assert sum(isinstance(r, User) for r in results) == 1
        assert all(isinstance(r, (User, EmailInUseError)) for r in results)
        assert len(await database.execute("SELECT id FROM users")) == 1

    @pytest.mark.asyncio
    async def test_unique_constraint_maps_to_email_in_use(self, repo):
        """A duplicate that slips past the lookup still fails as EmailInUseError."""
        user = await repo.add_user("a", "a@jwt.com", "a")
        await repo.add_user("b", "b@jwt.com", "b")

        with patch.object(repo, "_email_taken", AsyncMock(return_value=False)):
            with pytest.raises(EmailInUseError):
                await repo.add_user("c", "a@jwt.com", "c")
            with pytest.raises(EmailInUseError):
                await repo.update_user(user.id, email="b@jwt.com")

    @pytest.mark.asyncio
    async def test_get_user_checks_password(self, repo):
        created = await repo.add_user("pizza diner", "d@jwt.com", "diner")
        assert (await repo.get_user("d@jwt.com", "diner")).id == created.id
        assert (await repo.get_user("d@jwt.com")).id == created.id
        with pytest.raises(UnknownUserError):
            await repo.get_user("d@jwt.com", "wrong")
        with pytest.raises(UnknownUserError):
            await repo.get_user("nobody@jwt.com")

    @pytest.mark.asyncio
    async def test_get_user_by_id_missing(self, repo):
        assert await repo.get_user_by_id(999) is None
        assert await repo.get_user_by_email("nobody@jwt.com") is None

    @pytest.mark.asyncio
    async def test_list_users_pages_and_filters(self, repo):
        for i in range(3):
            await repo.add_user(f"pizza {i}", f"p{i}@jwt.com", "x")
        await repo.add_user("burger", "b@jwt.com", "x")

        first, more = await repo.list_users(page=0, limit=2, name_filter="pizza*")
        assert [u.name for u in first] == ["pizza 0", "pizza 1"]
        assert more is True

        second, more = await repo.list_users(page=1, limit=2, name_filter="pizza*")
        assert [u.name for u in second] == ["pizza 2"]
        assert more is False

    @pytest.mark.asyncio
    async def test_update_user(self, repo):
        user = await repo.add_user("pizza diner", "d@jwt.com", "diner")
        updated = await repo.update_user(user.id, name="new name", password="new")
        assert updated.name == "new name"
        assert updated.email == "d@jwt.com"
        assert (await repo.get_user("d@jwt.com", "new")).id == user.id

    @pytest.mark.asyncio
    async def test_update_user_errors(self, repo):
        user = await repo.add_user("a", "a@jwt.com", "a")
        await repo.add_user("b", "b@jwt.com", "b")
        with pytest.raises(UnknownUserError):
            await repo.update_user(999, name="x")
        with pytest.raises(EmailInUseError):
            await repo.update_user(user.id, email="b@jwt.com")
        # Keeping your own email is fine
        assert (await repo.update_user(user.id, email="a@jwt.com")).email == "a@jwt.com"

    @pytest.mark.asyncio
    async def test_delete_user(self, repo, database):
        user = await repo.add_user("pizza diner", "d@jwt.com", "diner")
        await database.execute(
            "INSERT INTO auth (token, user_id) VALUES ('sig', :id)", {"id": user.id}
        )

        await repo.delete_user(user.id)

        assert await repo.get_user_by_id(user.id) is None
        assert await database.execute("SELECT token FROM auth") == []
        assert await database.execute("SELECT id FROM user_role") == []
        with pytest.raises(UnknownUserError):
            await repo.delete_user(user.id)
