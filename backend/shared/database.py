"""
Relational store for the pizza service.

Wraps a SQLAlchemy async engine behind a small interface: execute a
statement, run several statements in one transaction, create the schema,
and dispose of the engine. Repositories are written in terms of this class
only, so the backing database (SQLite for development and tests, PostgreSQL
in production) is a configuration detail.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from sqlalchemy import (
    Column,
    Float,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    text,
)
from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool


logger = logging.getLogger(__name__)

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("password", String(255), nullable=False),
)

menu = Table(
    "menu",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False),
    Column("image", String(1024), nullable=False, default=""),
    Column("price", Float, nullable=False),
    Column("description", String(1024), nullable=False, default=""),
)

franchise = Table(
    "franchise",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False, unique=True),
)

store = Table(
    "store",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("franchise_id", Integer, ForeignKey("franchise.id"), nullable=False, index=True),
    Column("name", String(255), nullable=False),
)

user_role = Table(
    "user_role",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False, index=True),
    Column("role", String(32), nullable=False),
    Column("object_id", Integer, nullable=True, index=True),
)

diner_order = Table(
    "diner_order",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("diner_id", Integer, nullable=False, index=True),
    Column("franchise_id", Integer, nullable=False),
    Column("store_id", Integer, nullable=False, index=True),
    Column("ordered_at", String(32), nullable=False),
)

order_item = Table(
    "order_item",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("order_id", Integer, ForeignKey("diner_order.id"), nullable=False, index=True),
    Column("menu_id", Integer, nullable=False),
    Column("description", String(255), nullable=False),
    Column("price", Float, nullable=False),
)

# Active sessions: one row per token signature.
auth = Table(
    "auth",
    metadata,
    Column("token", String(512), primary_key=True),
    Column("user_id", Integer, nullable=False, index=True),
)


class Transaction:
    """
    A unit of work on a single connection.

    Obtained from Database.transaction(); exposes the same execute() call as
    Database so repository helpers can run inside or outside a transaction.
    """

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def execute(self, sql: str, params: Optional[dict[str, Any]] = None) -> list[RowMapping]:
        result = await self._conn.execute(text(sql), params or {})
        if not result.returns_rows:
            return []
        return list(result.mappings().all())


class Database:
    """
    Async relational store.

    Every call is a suspension point; no request blocks another while a
    statement is in flight.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        """
        Create the engine.

        SQLite files are opened per connection (NullPool): aiosqlite
        connections are bound to the event loop that opened them, and the
        test client runs each request on its own loop.

        Args:
            url: SQLAlchemy async database URL.
            echo: Log every SQL statement.
        """
        kwargs: dict[str, Any] = {"echo": echo}
        if url.startswith("sqlite"):
            kwargs["poolclass"] = NullPool
        self._engine: AsyncEngine = create_async_engine(url, **kwargs)

    async def execute(self, sql: str, params: Optional[dict[str, Any]] = None) -> list[RowMapping]:
        """
        Execute a single statement in its own transaction.

        Args:
            sql: SQL text with :named parameters
            params: Parameter values

        Returns:
            Result rows as mappings (empty for statements without rows)
        """
        async with self._engine.begin() as conn:
            return await Transaction(conn).execute(sql, params)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Transaction]:
        """
        Run several statements atomically.

        Commits when the block exits normally; rolls back everything if the
        block raises, then re-raises.

        Usage:
            async with db.transaction() as tx:
                await tx.execute("DELETE FROM store WHERE ...", {...})
                await tx.execute("DELETE FROM franchise WHERE ...", {...})
        """
        async with self._engine.begin() as conn:
            yield Transaction(conn)

    async def create_schema(self) -> None:
        """Create all tables that don't exist yet."""
        async with self._engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        logger.info("Database schema ready")

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self._engine.dispose()

