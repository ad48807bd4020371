"""
Sync controller.

Keeps the local account and post lists in line with the remote store:
fetch on start, fetch on every change notification, fetch on demand, and
in-place reconciliation after single-record mutations.

Every fetch is a full replace. Fetches are never cancelled, so when two
fetches for the same collection overlap, whichever response resolves last
determines the cache.
"""

import asyncio
import logging
from typing import Coroutine, Any, Optional

from shared.exceptions import ConsoleError
from shared.models import ChangeEventType, Collection
from modules.accounts.interfaces import IAccountService
from modules.accounts.models import Account
from modules.posts.interfaces import IPostService
from modules.posts.models import Post
from modules.notifications.interfaces import INotifier
from modules.realtime.interfaces import IChangeFeed
from modules.realtime.models import ChangeEvent, SubscriptionHandle
from modules.realtime.exceptions import ChangeFeedError

from .models import DashboardStats

logger = logging.getLogger(__name__)


class SyncController:
    """
    Owns the cached lists, the change subscriptions and any background
    work started on behalf of the console.
    """

    def __init__(
        self,
        accounts: IAccountService,
        posts: IPostService,
        feed: IChangeFeed,
        notifier: INotifier,
    ):
        self._account_service = accounts
        self._post_service = posts
        self._feed = feed
        self._notifier = notifier

        self.accounts: list[Account] = []
        self.posts: list[Post] = []
        self.loading = False

        self._handles: list[SubscriptionHandle] = []
        self._tasks: set[asyncio.Task] = set()

    # -------------------------------------------------------------------------
    # Fetching
    # -------------------------------------------------------------------------

    async def fetch_all(self) -> None:
        """Fetch both collections in parallel; one failing never stops the other."""
        self.loading = True
        try:
            await asyncio.gather(self.fetch_accounts(), self.fetch_posts())
        finally:
            self.loading = False

    async def fetch_accounts(self) -> bool:
        """Replace the cached accounts. Returns False (cache untouched) on failure."""
        logger.debug("Fetching accounts")
        try:
            accounts = await self._account_service.list_accounts()
        except ConsoleError as e:
            logger.error(f"Error fetching accounts: {e.message}")
            self._notifier.error(f"Failed to fetch users: {e.message}")
            return False
        self.accounts = accounts
        logger.debug(f"Fetched {len(accounts)} accounts")
        return True

    async def fetch_posts(self) -> bool:
        """Replace the cached posts. Returns False (cache untouched) on failure."""
        logger.debug("Fetching posts")
        try:
            posts = await self._post_service.list_posts()
        except ConsoleError as e:
            logger.error(f"Error fetching posts: {e.message}")
            self._notifier.error(f"Failed to fetch blogs: {e.message}")
            return False
        self.posts = posts
        logger.debug(f"Fetched {len(posts)} posts")
        return True

    async def refresh(self) -> None:
        """Manual refresh of everything."""
        await self.fetch_all()

    # -------------------------------------------------------------------------
    # Change listeners
    # -------------------------------------------------------------------------

    @property
    def listening(self) -> bool:
        return bool(self._handles)

    async def _on_accounts_changed(self, event: ChangeEvent) -> None:
        logger.debug(f"Accounts changed: {event.event_type.value}")
        await self.fetch_accounts()

    async def _on_posts_changed(self, event: ChangeEvent) -> None:
        logger.debug(f"Posts changed: {event.event_type.value}")
        await self.fetch_posts()

    async def start_listeners(self) -> None:
        """Subscribe to all changes on both collections. No-op if already listening."""
        if self._handles:
            return

        logger.debug("Setting up change subscriptions")
        for collection, handler in (
            (Collection.ACCOUNTS, self._on_accounts_changed),
            (Collection.POSTS, self._on_posts_changed),
        ):
            try:
                handle = await self._feed.subscribe(collection, ChangeEventType.ALL, handler)
            except ChangeFeedError as e:
                logger.error(f"Could not subscribe to {collection.value} changes: {e.message}")
                continue
            self._handles.append(handle)

    async def stop_listeners(self) -> None:
        """Release every subscription this controller opened."""
        handles, self._handles = self._handles, []
        if handles:
            logger.debug("Cleaning up change subscriptions")
        for handle in handles:
            await self._feed.unsubscribe(handle)

    # -------------------------------------------------------------------------
    # Background work
    # -------------------------------------------------------------------------

    def spawn(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task:
        """Run `coro` in the background, tracked until done or disposed."""
        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait for all background work, including work spawned meanwhile."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def dispose(self) -> None:
        """Stop listening and cancel background work."""
        await self.stop_listeners()
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    # -------------------------------------------------------------------------
    # Local cache reconciliation
    # -------------------------------------------------------------------------

    def get_account(self, account_id: str) -> Optional[Account]:
        return next((a for a in self.accounts if a.id == account_id), None)

    def get_post(self, post_id: str) -> Optional[Post]:
        return next((p for p in self.posts if p.id == post_id), None)

    def replace_account(self, account: Account) -> None:
        self.accounts = [account if a.id == account.id else a for a in self.accounts]

    def replace_post(self, post: Post) -> None:
        self.posts = [post if p.id == post.id else p for p in self.posts]

    def remove_account(self, account_id: str) -> None:
        self.accounts = [a for a in self.accounts if a.id != account_id]

    def remove_post(self, post_id: str) -> None:
        self.posts = [p for p in self.posts if p.id != post_id]

    def stats(self, premium_price: int = 9) -> DashboardStats:
        return DashboardStats.compute(self.accounts, self.posts, premium_price)
