"""
Error hierarchy for the admin console backend.

Everything the console can recover from is a ConsoleError: forms and the
sync controller catch it and turn it into a toast, and the API maps the
subclass to an HTTP status. Module exceptions subclass the category that
decides that status.
"""

from typing import Optional, Any


class ConsoleError(Exception):
    """
    A failure the console reports to the administrator and survives.

    `message` is what the toast shows; `code` is a stable identifier for
    API clients (defaults to the class name); `details` carries the record
    or resource involved.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Error body as returned by the API."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(ConsoleError):
    """A record is neither in the store nor in the cached list."""


class ValidationError(ConsoleError):
    """A form was submitted with missing or unusable input; nothing was sent."""


class AuthenticationError(ConsoleError):
    """No admitted admin session; the client must log in again."""


class AuthorizationError(ConsoleError):
    """The session is admitted but the store refused the operation."""


class ExternalServiceError(ConsoleError):
    """Supabase (records, auth or realtime) failed or was unreachable."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class RecordStoreError(ExternalServiceError):
    """A query against the record store failed or returned a row the console cannot read."""

    def __init__(self, message: str, table: str, operation: str):
        super().__init__(
            message,
            service="supabase",
            code="RECORD_STORE_ERROR",
            details={"table": table, "operation": operation},
        )
        self.table = table
        self.operation = operation
