"""
Notifications module.

User-facing transient messages ("toasts"). Fire-and-forget: callers never
wait for or depend on delivery.

Public API:
- INotifier: Interface for emitting notifications
- RecordingNotifier: Logs and keeps a bounded history of notifications
- Notification, NotificationLevel: Models
"""

from .interfaces import INotifier
from .models import Notification, NotificationLevel
from .service import RecordingNotifier

__all__ = [
    "INotifier",
    "Notification",
    "NotificationLevel",
    "RecordingNotifier",
]
