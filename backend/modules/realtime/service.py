"""
Change feed backed by Supabase Realtime postgres_changes channels.
"""

import asyncio
import logging
import uuid
from typing import Any, Optional

from supabase import AsyncClient

from shared.config import Settings, get_settings
from shared.models import ChangeEventType, Collection
from shared.repository import error_message

from .interfaces import IChangeFeed
from .models import ChangeEvent, ChangeHandler, SubscriptionHandle
from .exceptions import ChangeFeedError

logger = logging.getLogger(__name__)


class SupabaseChangeFeed(IChangeFeed):
    """
    One realtime channel per subscription.

    Realtime invokes callbacks synchronously from its listener task, so
    each event is handed to the async handler as a task on the running loop.
    Those tasks belong to their subscription and are cancelled with it.
    """

    def __init__(self, db: AsyncClient, settings: Optional[Settings] = None):
        self._db = db
        self._settings = settings or get_settings()
        self._channels: dict[str, Any] = {}
        self._tasks: dict[str, set[asyncio.Task]] = {}

    def _table_for(self, collection: Collection) -> str:
        if collection == Collection.ACCOUNTS:
            return self._settings.accounts_table
        return self._settings.posts_table

    def _dispatch(
        self,
        handle: SubscriptionHandle,
        handler: ChangeHandler,
        payload: dict[str, Any],
    ) -> None:
        tasks = self._tasks.get(handle.id)
        if tasks is None:
            # Late delivery on a channel that was already released
            return

        data = payload.get("data", payload) if isinstance(payload, dict) else {}
        raw_type = data.get("type") or data.get("eventType") or ChangeEventType.ALL.value
        try:
            event_type = ChangeEventType(raw_type)
        except ValueError:
            event_type = ChangeEventType.ALL

        logger.debug(f"{handle.collection.value} changed ({event_type.value})")
        task = asyncio.ensure_future(handler(ChangeEvent(handle.collection, event_type, data)))
        tasks.add(task)
        task.add_done_callback(tasks.discard)

    async def _release(self, handle_id: str, channel: Any) -> None:
        tasks = self._tasks.pop(handle_id, set())
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        await self._db.remove_channel(channel)

    async def subscribe(
        self,
        collection: Collection,
        events: ChangeEventType,
        handler: ChangeHandler,
    ) -> SubscriptionHandle:
        handle = SubscriptionHandle(
            id=f"admin-{collection.value}-changes-{uuid.uuid4().hex[:8]}",
            collection=collection,
            events=events,
        )
        self._tasks[handle.id] = set()
        channel = self._db.channel(handle.id)
        channel.on_postgres_changes(
            events.value,
            schema=self._settings.realtime_schema,
            table=self._table_for(collection),
            callback=lambda payload: self._dispatch(handle, handler, payload),
        )
        try:
            await channel.subscribe()
        except Exception as e:
            await self._release(handle.id, channel)
            raise ChangeFeedError(error_message(e), collection.value) from e

        self._channels[handle.id] = channel
        logger.debug(f"Subscribed {handle.id}")
        return handle

    async def unsubscribe(self, handle: SubscriptionHandle) -> None:
        channel = self._channels.pop(handle.id, None)
        if channel is None:
            return
        await self._release(handle.id, channel)
        logger.debug(f"Unsubscribed {handle.id}")
