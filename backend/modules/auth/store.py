"""
Credential store: the table of active sessions.

A token is only honoured while its signature has a row in the auth table.
Rows are written at login/registration and deleted at logout. There is no
cache in front of the table, so a completed revoke is visible to the very
next is_active check.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from shared.database import Database

from .tokens import signature_of

logger = logging.getLogger(__name__)


class CredentialStore:
    """
    Active-session set backed by the relational store.

    Each operation touches a single row keyed by token signature, so no
    cross-row transaction is needed.
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    async def activate(self, user_id: int, token: str) -> None:
        """Insert or replace the session row for this token's signature."""
        await self._db.execute(
            "INSERT INTO auth (token, user_id) VALUES (:token, :user_id) "
            "ON CONFLICT (token) DO UPDATE SET user_id = excluded.user_id",
            {"token": signature_of(token), "user_id": user_id},
        )

    async def is_active(self, token: str) -> bool:
        """
        Check whether the token's signature is active.

        Malformed tokens have an empty signature and are simply not active.
        Storage failures are logged and reported as not active.
        """
        signature = signature_of(token)
        if not signature:
            return False
        try:
            rows = await self._db.execute(
                "SELECT user_id FROM auth WHERE token = :token",
                {"token": signature},
            )
        except SQLAlchemyError:
            logger.exception("Active-session lookup failed")
            return False
        return len(rows) > 0

    async def revoke(self, token: str) -> None:
        """Delete the session row if present."""
        await self._db.execute(
            "DELETE FROM auth WHERE token = :token",
            {"token": signature_of(token)},
        )
