import pytest

from shared.models import Principal, Role, RoleAssignment
from modules.auth.policy import is_admin, is_franchise_admin_or_admin, is_self_or_admin
from modules.franchises.models import Franchise, FranchiseAdmin


def make_principal(user_id: int, *roles: Role) -> Principal:
    return Principal(
        id=user_id,
        name=f"user {user_id}",
        email=f"{user_id}@jwt.com",
        roles=tuple(RoleAssignment(role=role) for role in roles),
    )


class TestIsSelfOrAdmin:
    @pytest.mark.parametrize(
        "principal_id, target_id, admin, expected",
        [
            (1, 1, False, True),
            (1, 2, False, False),
            (1, 1, True, True),
            (1, 2, True, True),
        ],
    )
    def test_truth_table(self, principal_id, target_id, admin, expected):
        roles = (Role.ADMIN,) if admin else (Role.DINER,)
        principal = make_principal(principal_id, *roles)
        assert is_self_or_admin(principal, target_id) is expected


class TestIsAdmin:
    def test_admin(self):
        assert is_admin(make_principal(1, Role.ADMIN)) is True

    def test_diner_and_franchisee_are_not_admins(self):
        assert is_admin(make_principal(1, Role.DINER, Role.FRANCHISEE)) is False


class TestIsFranchiseAdminOrAdmin:
    @pytest.fixture
    def franchise(self):
        return Franchise(
            id=3,
            name="pizzaPocket",
            admins=[FranchiseAdmin(id=5, name="f", email="f@jwt.com")],
            stores=[],
        )

    def test_listed_admin(self, franchise):
        assert is_franchise_admin_or_admin(make_principal(5, Role.FRANCHISEE), franchise)

    def test_global_admin(self, franchise):
        assert is_franchise_admin_or_admin(make_principal(9, Role.ADMIN), franchise)

    def test_other_franchisee(self, franchise):
        """A franchisee of some other franchise gets no say here."""
        assert not is_franchise_admin_or_admin(make_principal(6, Role.FRANCHISEE), franchise)
