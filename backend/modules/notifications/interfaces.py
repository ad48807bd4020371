"""
Notifications module interface.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class INotifier(Protocol):
    """
    Interface for user-facing notifications.

    Implementations must not raise: a failed notification never fails
    the operation that emitted it.
    """

    def success(self, message: str) -> None:
        """Show a success message."""
        ...

    def error(self, message: str) -> None:
        """Show an error message."""
        ...
