"""
Accounts module exceptions.

These exceptions are raised by the accounts module and can be caught
by the console forms (toast) or API error handlers (HTTP response).
"""

from shared.exceptions import (
    ConsoleError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)


class AccountValidationError(ValidationError):
    """Raised when an account form is missing required fields."""

    def __init__(self, message: str = "Please fill in email and password"):
        super().__init__(message, code="ACCOUNT_VALIDATION_FAILED")


class AccountNotFoundError(NotFoundError):
    """Raised when an account is not in the store or the local list."""

    def __init__(self, account_id: str):
        super().__init__(
            f"Account not found: {account_id}",
            code="ACCOUNT_NOT_FOUND",
            details={"account_id": account_id},
        )


class AccountNotMaterializedError(ConsoleError):
    """
    Raised when a newly created identity's profile row never appeared.

    Profiles are created by a database trigger after sign-up; this is
    raised once the bounded wait for that trigger runs out.
    """

    def __init__(self, account_id: str, timeout: float):
        super().__init__(
            f"Profile for account {account_id} did not appear within {timeout:g}s",
            code="ACCOUNT_NOT_MATERIALIZED",
            details={"account_id": account_id, "timeout": timeout},
        )


class IdentityServiceError(ExternalServiceError):
    """Raised when Supabase Auth rejects or fails an identity operation."""

    def __init__(self, message: str, operation: str):
        super().__init__(
            message,
            service="supabase_auth",
            code="IDENTITY_SERVICE_ERROR",
            details={"operation": operation},
        )
        self.operation = operation
