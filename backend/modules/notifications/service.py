"""
Notifier implementation.

Every notification is logged; the most recent ones are kept so the API
can hand them to whichever client renders them.
"""

import logging
from collections import deque
from datetime import datetime, timezone
from typing import Optional

from shared.config import get_settings

from .interfaces import INotifier
from .models import Notification, NotificationLevel

logger = logging.getLogger(__name__)


class RecordingNotifier(INotifier):
    """Logs notifications and keeps a bounded history."""

    def __init__(self, history: Optional[int] = None):
        if history is None:
            history = get_settings().notification_history
        self._history: deque[Notification] = deque(maxlen=history)

    def _emit(self, level: NotificationLevel, message: str) -> None:
        self._history.append(
            Notification(
                level=level,
                message=message,
                created_at=datetime.now(timezone.utc),
            )
        )

    def success(self, message: str) -> None:
        logger.info(f"[toast] {message}")
        self._emit(NotificationLevel.SUCCESS, message)

    def error(self, message: str) -> None:
        logger.warning(f"[toast] {message}")
        self._emit(NotificationLevel.ERROR, message)

    @property
    def history(self) -> list[Notification]:
        """Notifications in the order they were emitted."""
        return list(self._history)

    def messages(self, level: Optional[NotificationLevel] = None) -> list[str]:
        return [n.message for n in self._history if level is None or n.level == level]

    def drain(self) -> list[Notification]:
        """Return and forget the current history."""
        items = list(self._history)
        self._history.clear()
        return items
