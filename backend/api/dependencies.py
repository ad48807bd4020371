"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Tests build a container from fakes and override `get_container`.
"""

import logging
from typing import TYPE_CHECKING, Optional

from fastapi import Depends

from shared.config import Settings, get_settings
from shared.exceptions import AuthenticationError
from modules.session.models import AdminSession
from modules.session.service import SessionGuard
from modules.session.store import FileSessionStore
from modules.notifications.service import RecordingNotifier
from modules.console.console import AdminConsole

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.accounts.interfaces import IAccountService
    from modules.posts.interfaces import IPostService
    from modules.realtime.interfaces import IChangeFeed

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for all service instances.

    Services backed by Supabase are created lazily on first access, since
    the async client can only be created inside the running event loop.
    The container also owns the single live AdminConsole; it is rebuilt
    whenever the admitted session changes and disposed on sign-out.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        guard: Optional[SessionGuard] = None,
        notifier: Optional[RecordingNotifier] = None,
        accounts: "IAccountService | None" = None,
        posts: "IPostService | None" = None,
        feed: "IChangeFeed | None" = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.guard = guard or SessionGuard(
            FileSessionStore(self.settings.session_file, self.settings.session_key)
        )
        self.notifier = notifier or RecordingNotifier(self.settings.notification_history)
        self._accounts = accounts
        self._posts = posts
        self._feed = feed
        self._console: Optional[AdminConsole] = None

    async def _build_services(self) -> None:
        from shared.database import get_supabase_client
        from modules.accounts.identity import SupabaseIdentityService
        from modules.accounts.repository import AccountRepository
        from modules.accounts.service import AccountService
        from modules.posts.repository import PostRepository
        from modules.posts.service import PostService
        from modules.realtime.service import SupabaseChangeFeed

        db = await get_supabase_client()
        if self._accounts is None:
            self._accounts = AccountService(
                AccountRepository(db, self.settings.accounts_table),
                SupabaseIdentityService(db),
                self.settings,
            )
        if self._posts is None:
            self._posts = PostService(PostRepository(db, self.settings.posts_table), self.settings)
        if self._feed is None:
            self._feed = SupabaseChangeFeed(db, self.settings)

    async def console_for(self, session: AdminSession) -> AdminConsole:
        """Get the started console for `session`, replacing one for another session."""
        console = self._console
        if console is not None and console.session == session and console.is_active:
            return console

        if console is not None:
            await console.dispose()
            self._console = None

        if self._accounts is None or self._posts is None or self._feed is None:
            await self._build_services()

        console = AdminConsole(
            session,
            self._accounts,
            self._posts,
            self._feed,
            self.notifier,
            self.settings,
        )
        self._console = console
        await console.start()
        return console

    async def sign_out(self) -> None:
        """Close the live console and clear the stored session."""
        if self._console is not None:
            await self._console.sign_out(self.guard)
            self._console = None
        else:
            self.guard.sign_out()

    async def close(self) -> None:
        """Dispose the live console, if any. Called on shutdown."""
        if self._console is not None:
            await self._console.dispose()
            self._console = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


async def require_session(container: ServiceContainer = Depends(get_container)) -> AdminSession:
    """
    FastAPI dependency that admits the stored admin session.

    Raises an AuthenticationError (401) when the session is missing,
    invalid or expired. The live console, if any, is disposed first so
    its change subscriptions end with the session.
    """
    try:
        return container.guard.admit()
    except AuthenticationError:
        await container.close()
        raise


async def get_console(
    session: AdminSession = Depends(require_session),
    container: ServiceContainer = Depends(get_container),
) -> AdminConsole:
    """FastAPI dependency for the started console of the admitted session."""
    return await container.console_for(session)
