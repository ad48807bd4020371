"""
Account repository for database access.

Encapsulates all Supabase queries and data mapping for the profiles table.
"""

import asyncio
import logging
from datetime import datetime
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

from supabase import AsyncClient

from shared.repository import BaseRepository
from .models import Account
from .exceptions import AccountNotMaterializedError

logger = logging.getLogger(__name__)


class AccountRepository(BaseRepository[Account]):
    """
    Repository for account data access.

    All methods return Pydantic models mapped from database rows.

    Note: This repository does NOT perform authorization checks.
    Row level security on the Supabase side is responsible for that.
    """

    table = "profiles"

    def __init__(
        self,
        db: AsyncClient,
        table: Optional[str] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        super().__init__(db, table)
        self._sleep = sleep

    async def list_accounts(self) -> list[Account]:
        """All accounts ordered by creation time, newest first."""
        query = self._db.table(self.table).select("*").order("created_at", desc=True)
        rows = await self._execute(query, "select")
        return [self._map(self._map_to_account, row, "select") for row in rows]

    async def get_account(self, account_id: str) -> Optional[Account]:
        """Get a single account, or None if the row does not exist."""
        query = self._db.table(self.table).select("*").eq("id", account_id)
        rows = await self._execute(query, "select")
        if not rows:
            return None
        return self._map(self._map_to_account, rows[0], "select")

    async def update_account(self, account_id: str, patch: dict[str, Any]) -> Optional[Account]:
        """
        Apply a partial update.

        Args:
            account_id: The account UUID.
            patch: Column values; datetimes are sent as ISO strings.

        Returns:
            The updated row, or None if the store returned no row.
        """
        data = {key: self._to_column(value) for key, value in patch.items()}
        query = self._db.table(self.table).update(data).eq("id", account_id)
        rows = await self._execute(query, "update")
        if not rows:
            return None
        return self._map(self._map_to_account, rows[0], "update")

    async def delete_account(self, account_id: str) -> None:
        """Delete a profile row."""
        query = self._db.table(self.table).delete().eq("id", account_id)
        await self._execute(query, "delete")

    async def wait_for_account(
        self,
        account_id: str,
        timeout: float,
        initial_interval: float = 0.25,
        max_interval: float = 2.0,
    ) -> Account:
        """
        Poll until a profile row exists, backing off between attempts.

        The interval doubles after each miss up to `max_interval`; the
        total wait never exceeds `timeout`.

        Raises:
            AccountNotMaterializedError: The row did not appear in time.
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        interval = initial_interval
        attempt = 0

        while True:
            attempt += 1
            account = await self.get_account(account_id)
            if account is not None:
                logger.debug(f"Profile {account_id} found after {attempt} attempt(s)")
                return account

            remaining = deadline - loop.time()
            if remaining <= 0:
                raise AccountNotMaterializedError(account_id, timeout)

            await self._sleep(min(interval, remaining))
            interval = min(interval * 2, max_interval)

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    @staticmethod
    def _to_column(value: Any) -> Any:
        if isinstance(value, datetime):
            return value.isoformat()
        if isinstance(value, Enum):
            return value.value
        return value

    def _map_to_account(self, data: dict[str, Any]) -> Account:
        """Map database row to Account model."""
        return Account(
            id=str(data["id"]),
            email=data["email"],
            full_name=data.get("full_name"),
            subscription_tier=data.get("subscription_tier") or "free",
            subscription_start=data.get("subscription_start"),
            subscription_end=data.get("subscription_end"),
            document_count=data.get("document_count", 0),
            created_at=data["created_at"],
        )
