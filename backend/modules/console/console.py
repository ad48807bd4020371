"""
The admin console page object.

Built only from an admitted AdminSession, so holding a console means a
session was admitted. Change subscriptions live exactly as long as the
console: `start()` opens them and `dispose()` (or `sign_out()`) releases them.
"""

import logging
from datetime import datetime
from typing import Optional

from shared.config import Settings, get_settings
from modules.accounts.interfaces import IAccountService
from modules.posts.interfaces import IPostService
from modules.notifications.interfaces import INotifier
from modules.realtime.interfaces import IChangeFeed
from modules.session.models import AdminSession
from modules.session.service import SessionGuard

from .controller import SyncController
from .forms import AccountForms, PostForms
from .models import DashboardStats

logger = logging.getLogger(__name__)


class AdminConsole:
    """
    Ties the session, the sync controller and the mutation forms together.

    Example:
        console = AdminConsole.admit(guard, accounts, posts, feed, notifier)
        await console.start()
        ...
        await console.dispose()
    """

    def __init__(
        self,
        session: AdminSession,
        accounts: IAccountService,
        posts: IPostService,
        feed: IChangeFeed,
        notifier: INotifier,
        settings: Optional[Settings] = None,
    ):
        self.session = session
        self._settings = settings or get_settings()
        self.notifier = notifier
        self.controller = SyncController(accounts, posts, feed, notifier)
        self.accounts = AccountForms(accounts, self.controller, notifier)
        self.posts = PostForms(posts, self.controller, notifier)
        self._started = False
        self._disposed = False

    @classmethod
    def admit(
        cls,
        guard: SessionGuard,
        accounts: IAccountService,
        posts: IPostService,
        feed: IChangeFeed,
        notifier: INotifier,
        settings: Optional[Settings] = None,
        now: Optional[datetime] = None,
    ) -> "AdminConsole":
        """
        Admit the stored session and build a console for it.

        Raises:
            AuthenticationError: The session is missing, invalid or expired
        """
        session = guard.admit(now)
        return cls(session, accounts, posts, feed, notifier, settings)

    @property
    def is_active(self) -> bool:
        return self._started and not self._disposed

    async def start(self) -> None:
        """Initial fetch of both collections, then start listening for changes."""
        if self._started:
            return
        self._started = True
        logger.info(f"Console opened for {self.session.email}")
        await self.controller.fetch_all()
        await self.controller.start_listeners()

    async def refresh(self) -> None:
        await self.controller.refresh()

    async def drain(self) -> None:
        """Wait for background follow-ups (e.g. new account settling)."""
        await self.controller.drain()

    def stats(self) -> DashboardStats:
        return self.controller.stats(self._settings.premium_price)

    async def dispose(self) -> None:
        """Release subscriptions and cancel background work. Idempotent."""
        if self._disposed:
            return
        self._disposed = True
        await self.controller.dispose()
        logger.info(f"Console closed for {self.session.email}")

    async def sign_out(self, guard: SessionGuard) -> None:
        await self.dispose()
        guard.sign_out()
