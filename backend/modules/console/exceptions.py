"""
Console module exceptions.
"""

from shared.exceptions import ConsoleError


class DialogStateError(ConsoleError):
    """Raised when a dialog action does not fit its current state."""

    def __init__(self, dialog: str, state: str, action: str):
        super().__init__(
            f"Cannot {action} dialog '{dialog}' while {state}",
            code="INVALID_DIALOG_STATE",
            details={"dialog": dialog, "state": state, "action": action},
        )
