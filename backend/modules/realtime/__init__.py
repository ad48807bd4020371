"""
Realtime module.

Change notifications for the remote collections. Events carry no delta
guarantee: consumers treat them as "something changed" and re-fetch.

Public API:
- IChangeFeed: subscribe/unsubscribe interface
- SupabaseChangeFeed: Supabase Realtime implementation
- ChangeEvent, SubscriptionHandle, ChangeHandler: Models
- ChangeFeedError: Raised when a channel cannot be opened
"""

from .interfaces import IChangeFeed
from .models import ChangeEvent, ChangeHandler, SubscriptionHandle
from .exceptions import ChangeFeedError

__all__ = [
    "IChangeFeed",
    "ChangeEvent",
    "ChangeHandler",
    "SubscriptionHandle",
    "ChangeFeedError",
]
