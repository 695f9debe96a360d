"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Database access and providing shared utilities for data operations.
"""

from typing import TypeVar, Generic

from .database import Database


T = TypeVar("T")


def get_offset(page: int, per_page: int) -> int:
    """
    Row offset of a 1-indexed page.

    Args:
        page: Page number (1-indexed)
        per_page: Rows per page

    Returns:
        Number of rows to skip
    """
    return (page - 1) * per_page


def like_pattern(name_filter: str) -> str:
    """Turn a user-facing '*' wildcard filter into a SQL LIKE pattern."""
    return name_filter.replace("*", "%")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Database access via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle row-to-Pydantic model mapping internally.

    Example:
        class MenuRepository(BaseRepository[MenuItem]):
            async def get_menu(self) -> list[MenuItem]:
                rows = await self._db.execute("SELECT * FROM menu")
                return [MenuItem(**row) for row in rows]
    """

    def __init__(self, db: Database) -> None:
        """
        Initialize the repository with a Database.

        Args:
            db: Database instance for data operations.
        """
        self._db = db
