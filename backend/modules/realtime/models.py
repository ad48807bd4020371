"""
Realtime module data models.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

from shared.models import ChangeEventType, Collection


@dataclass(frozen=True)
class ChangeEvent:
    """A change notification for one collection."""

    collection: Collection
    event_type: ChangeEventType
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SubscriptionHandle:
    """Opaque handle returned by `IChangeFeed.subscribe`."""

    id: str
    collection: Collection
    events: ChangeEventType


ChangeHandler = Callable[[ChangeEvent], Awaitable[None]]
