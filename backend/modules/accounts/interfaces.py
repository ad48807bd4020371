"""
Accounts module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with mocks.
"""

from datetime import datetime
from typing import Any, Optional, Protocol, runtime_checkable

from .models import (
    Account,
    AccountDeletion,
    CreateAccountRequest,
    SubscriptionTier,
    UpdateAccountRequest,
)


@runtime_checkable
class IIdentityService(Protocol):
    """
    Interface for the identity provider behind accounts.
    """

    async def create_account(
        self,
        email: str,
        password: str,
        metadata: dict[str, Any],
    ) -> str:
        """
        Create a login identity.

        Args:
            email: Login email
            password: Initial password
            metadata: Profile metadata (e.g. full_name) copied to the profile row

        Returns:
            The new identity ID

        Raises:
            IdentityServiceError: If the provider rejects the request
        """
        ...

    async def delete_identity(self, identity_id: str) -> None:
        """
        Delete a login identity.

        Raises:
            IdentityServiceError: If the provider rejects the request
        """
        ...


@runtime_checkable
class IAccountService(Protocol):
    """
    Interface for account operations used by the console.
    """

    async def list_accounts(self) -> list[Account]:
        """All accounts, newest first."""
        ...

    async def create_account(self, request: CreateAccountRequest) -> str:
        """
        Validate the draft and create the identity.

        The profile row appears asynchronously; call `apply_initial_tier`
        afterwards to wait for it.

        Returns:
            The new account ID

        Raises:
            AccountValidationError: Email or password is empty
            IdentityServiceError: The identity provider failed
        """
        ...

    async def apply_initial_tier(
        self,
        account_id: str,
        tier: SubscriptionTier,
        now: Optional[datetime] = None,
    ) -> Account:
        """
        Wait for a new profile row and apply the tier chosen at creation.

        Raises:
            AccountNotMaterializedError: The profile never appeared
            RecordStoreError: The store failed
        """
        ...

    async def update_account(
        self,
        account: Account,
        request: UpdateAccountRequest,
        now: Optional[datetime] = None,
    ) -> Account:
        """
        Update name and tier; returns the merged, up-to-date account.
        """
        ...

    async def delete_account(self, account_id: str) -> AccountDeletion:
        """
        Delete the profile row, then try to delete the identity.
        """
        ...
