"""
Session guard implementation.

Reads the locally stored admin session on every protected entry and
decides whether the console may open.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from shared.config import get_settings

from .interfaces import ISessionStore
from .models import AdminSession, SessionToken
from .exceptions import (
    ExpiredSessionError,
    InvalidSessionError,
    MissingSessionError,
)

logger = logging.getLogger(__name__)

SESSION_TTL = timedelta(hours=24)


def is_expired(
    login_time: datetime,
    now: datetime,
    ttl: timedelta = SESSION_TTL,
) -> bool:
    """
    Check whether a session that started at `login_time` is past its TTL.

    A session exactly `ttl` old is still valid.
    """
    return now - login_time > ttl


class SessionGuard:
    """
    Admits, records and ends admin sessions.

    Stale or unreadable records are removed before the guard refuses
    entry, so the next visit starts from a clean login.
    """

    def __init__(
        self,
        store: ISessionStore,
        ttl: Optional[timedelta] = None,
    ):
        self._store = store
        if ttl is None:
            ttl = timedelta(hours=get_settings().session_ttl_hours)
        self._ttl = ttl

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def admit(self, now: Optional[datetime] = None) -> AdminSession:
        """
        Admit the stored session.

        Args:
            now: Current time (defaults to UTC now)

        Returns:
            AdminSession for the logged-in administrator

        Raises:
            MissingSessionError: No session is stored
            InvalidSessionError: The stored record is malformed (removed)
            ExpiredSessionError: The session is older than the TTL (removed)
        """
        raw = self._store.load()
        if not raw:
            raise MissingSessionError()

        try:
            token = SessionToken.model_validate_json(raw)
        except PydanticValidationError as e:
            logger.error(f"Invalid session: {e}")
            self._store.clear()
            raise InvalidSessionError(str(e))

        now = now or datetime.now(timezone.utc)
        if is_expired(token.logged_in_at, now, self._ttl):
            logger.info(f"Admin session for {token.email} expired")
            self._store.clear()
            raise ExpiredSessionError()

        return AdminSession(id=token.id, email=token.email, full_name=token.full_name)

    def record_login(
        self,
        id: str,
        email: str,
        full_name: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> SessionToken:
        """Persist a fresh session after a successful admin login."""
        token = SessionToken.issue(id, email, full_name, now or datetime.now(timezone.utc))
        self._store.save(token.to_json())
        logger.info(f"Admin session recorded for {email}")
        return token

    def sign_out(self) -> None:
        """End the current session."""
        self._store.clear()
        logger.info("Admin session cleared")
