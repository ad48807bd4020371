"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
The console runs on the real services with in-memory repositories from
tests/fakes.py in place of Supabase.
"""

import pytest
import pytest_asyncio
from datetime import datetime, timedelta, timezone

from shared.config import Settings, get_settings
from shared.database import reset_client_cache
from modules.accounts.service import AccountService
from modules.posts.service import PostService
from modules.notifications.service import RecordingNotifier
from modules.session.models import AdminSession, SessionToken
from modules.session.service import SessionGuard
from modules.session.store import MemorySessionStore
from modules.console.console import AdminConsole
from modules.console.controller import SyncController

from tests.fakes import (
    FakeAccountRepository,
    FakeChangeFeed,
    FakeIdentityService,
    FakePostRepository,
    account_row,
    post_row,
    BASE_TIME,
)


def create_session_record(
    admin_id: str = "admin-1",
    email: str = "admin@example.com",
    full_name: str = "Admin",
    login_time: datetime | None = None,
) -> str:
    """
    Create a serialized admin session record.

    Args:
        admin_id: Admin account ID
        email: Admin email
        full_name: Admin display name
        login_time: When the admin logged in (defaults to now)

    Returns:
        JSON string as stored under the session key
    """
    token = SessionToken.issue(admin_id, email, full_name, login_time or datetime.now(timezone.utc))
    return token.to_json()


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings and clients before and after each test."""
    get_settings.cache_clear()
    reset_client_cache()
    yield
    get_settings.cache_clear()
    reset_client_cache()


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings with short waits and a temporary session file."""
    return Settings(
        session_file=tmp_path / "session.json",
        profile_wait_timeout=0.05,
        profile_poll_initial=0.001,
        profile_poll_max=0.005,
    )


@pytest.fixture
def admin_session() -> AdminSession:
    return AdminSession(id="admin-1", email="admin@example.com", full_name="Admin")


@pytest.fixture
def session_store() -> MemorySessionStore:
    """Store holding a fresh session record."""
    return MemorySessionStore(create_session_record())


@pytest.fixture
def guard(session_store: MemorySessionStore) -> SessionGuard:
    return SessionGuard(session_store, ttl=timedelta(hours=24))


@pytest.fixture
def account_repository() -> FakeAccountRepository:
    return FakeAccountRepository(
        [
            account_row("acct-1", "old@example.com", "Old User", created_at=BASE_TIME),
            account_row(
                "acct-2",
                "premium@example.com",
                "Premium User",
                tier="premium",
                subscription_end=(BASE_TIME + timedelta(days=30)).isoformat(),
                created_at=BASE_TIME + timedelta(days=1),
            ),
        ]
    )


@pytest.fixture
def identity(account_repository: FakeAccountRepository) -> FakeIdentityService:
    return FakeIdentityService(account_repository)


@pytest.fixture
def post_repository() -> FakePostRepository:
    return FakePostRepository(
        [
            post_row("post-1", "First", created_at=BASE_TIME),
            post_row("post-2", "Second", published=True, created_at=BASE_TIME + timedelta(days=1)),
        ]
    )


@pytest.fixture
def account_service(account_repository, identity, settings) -> AccountService:
    return AccountService(account_repository, identity, settings)


@pytest.fixture
def post_service(post_repository, settings) -> PostService:
    return PostService(post_repository, settings)


@pytest.fixture
def feed() -> FakeChangeFeed:
    return FakeChangeFeed()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier(history=100)


@pytest.fixture
def controller(account_service, post_service, feed, notifier) -> SyncController:
    return SyncController(account_service, post_service, feed, notifier)


@pytest_asyncio.fixture
async def console(admin_session, account_service, post_service, feed, notifier, settings):
    """A started console; disposed after the test."""
    console = AdminConsole(admin_session, account_service, post_service, feed, notifier, settings)
    await console.start()
    yield console
    await console.dispose()
