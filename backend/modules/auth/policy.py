"""
Permission policy.

Stateless predicates over a principal and the identifiers of the resource
being touched. They only answer yes or no; the route decides the message
and raises PermissionDeniedError before any mutation happens.
"""

from typing import Protocol, Sequence

from shared.models import Principal, Role


class _HasId(Protocol):
    id: int


class _HasAdmins(Protocol):
    admins: Sequence[_HasId]


def is_admin(principal: Principal) -> bool:
    """True iff the principal holds the Admin role."""
    return principal.has_role(Role.ADMIN)


def is_self_or_admin(principal: Principal, target_user_id: int) -> bool:
    """True iff the principal is the target user or an Admin."""
    return principal.id == target_user_id or is_admin(principal)


def is_franchise_admin_or_admin(principal: Principal, franchise: _HasAdmins) -> bool:
    """True iff the principal is an Admin or listed among the franchise's admins."""
    if is_admin(principal):
        return True
    return any(admin.id == principal.id for admin in franchise.admins)
