"""
Session module exceptions.

Each of these means "send the administrator back to the login screen".
API error handlers map them to 401 responses.
"""

from shared.exceptions import AuthenticationError


class MissingSessionError(AuthenticationError):
    """Raised when no admin session record is stored."""

    def __init__(self, message: str = "Admin session required"):
        super().__init__(message, code="MISSING_SESSION")


class ExpiredSessionError(AuthenticationError):
    """Raised when the stored admin session is older than the TTL."""

    def __init__(self, message: str = "Admin session has expired"):
        super().__init__(message, code="SESSION_EXPIRED")


class InvalidSessionError(AuthenticationError):
    """Raised when the stored admin session cannot be parsed."""

    def __init__(self, reason: str):
        super().__init__(
            f"Invalid admin session: {reason}",
            code="INVALID_SESSION",
            details={"reason": reason},
        )
