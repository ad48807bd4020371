"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating client errors into RecordStoreError.
"""

import logging
from typing import Any, Callable, Generic, TypeVar

import httpx
from pydantic import ValidationError as PydanticValidationError
from supabase import AsyncClient, PostgrestAPIError

from .exceptions import RecordStoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def error_message(error: Exception) -> str:
    """Best human-readable message for a Supabase/HTTP error."""
    message = getattr(error, "message", None)
    return str(message) if message else str(error)


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - `_execute` which runs a built query and wraps client errors
    - `_map` which turns unreadable rows into RecordStoreError
    - Generic type parameter for model type hints

    Subclasses set `table` and handle dict-to-Pydantic model mapping.

    Example:
        class PostRepository(BaseRepository[Post]):
            async def list_posts(self) -> list[Post]:
                query = self._db.table(self.table).select("*")
                rows = await self._execute(query, "select")
                return [self._map(self._map_to_post, row, "select") for row in rows]
    """

    table: str = ""

    def __init__(self, db: AsyncClient, table: str | None = None) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Async Supabase client instance for database operations.
            table: Override for the table name.
        """
        self._db = db
        if table:
            self.table = table

    async def _execute(self, query: Any, operation: str) -> list[dict[str, Any]]:
        """
        Execute a query builder and return its rows.

        Raises:
            RecordStoreError: If the request fails or Postgres rejects it.
        """
        try:
            result = await query.execute()
        except (PostgrestAPIError, httpx.HTTPError) as e:
            logger.error(f"{operation} on {self.table} failed: {error_message(e)}")
            raise RecordStoreError(error_message(e), table=self.table, operation=operation) from e
        return result.data or []

    def _first(self, rows: list[dict[str, Any]], operation: str) -> dict[str, Any]:
        """The single row a write returned; the store must return a representation."""
        if not rows:
            logger.error(f"{operation} on {self.table} returned no row")
            raise RecordStoreError(
                f"{operation} on {self.table} returned no row",
                table=self.table,
                operation=operation,
            )
        return rows[0]

    def _map(
        self,
        mapper: Callable[[dict[str, Any]], T],
        row: dict[str, Any],
        operation: str,
    ) -> T:
        """
        Map a row to its model.

        Raises:
            RecordStoreError: The row is missing columns or holds values the
                model rejects.
        """
        try:
            return mapper(row)
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            reason = f"{field}: {first['msg']}"
            error: Exception = e
        except KeyError as e:
            reason = f"missing {e.args[0]}"
            error = e

        message = f"Unreadable {self.table} row {row.get('id')!r}: {reason}"
        logger.error(message)
        raise RecordStoreError(message, table=self.table, operation=operation) from error
