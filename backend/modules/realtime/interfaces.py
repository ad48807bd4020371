"""
Realtime module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import ChangeEventType, Collection

from .models import ChangeHandler, SubscriptionHandle


@runtime_checkable
class IChangeFeed(Protocol):
    """
    Interface for collection change notifications.

    The owner of a handle is responsible for unsubscribing it.
    """

    async def subscribe(
        self,
        collection: Collection,
        events: ChangeEventType,
        handler: ChangeHandler,
    ) -> SubscriptionHandle:
        """
        Start delivering `events` on `collection` to `handler`.

        Raises:
            ChangeFeedError: If the subscription cannot be opened
        """
        ...

    async def unsubscribe(self, handle: SubscriptionHandle) -> None:
        """
        Stop a subscription. Unknown or already-removed handles are ignored.
        """
        ...
