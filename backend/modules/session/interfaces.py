"""
Session module interface.

The guard depends on ISessionStore, not a concrete store, so the console
can run against a file, an in-memory store in tests, or anything else
holding a single serialized record.
"""

from typing import Protocol, Optional, runtime_checkable


@runtime_checkable
class ISessionStore(Protocol):
    """
    Synchronous persistence for a single serialized session record.
    """

    def load(self) -> Optional[str]:
        """
        Read the raw session record.

        Returns:
            The serialized record, or None if nothing is stored
        """
        ...

    def save(self, raw: str) -> None:
        """Store the serialized record, replacing any previous one."""
        ...

    def clear(self) -> None:
        """Remove the record. Clearing an empty store is a no-op."""
        ...
