"""
Account service implementation.

Holds the rules behind the account dialogs: required fields, premium
expiry, and the two-step delete across profile row and identity.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from shared.config import Settings, get_settings

from .interfaces import IAccountService, IIdentityService
from .repository import AccountRepository
from .models import (
    Account,
    AccountDeletion,
    CreateAccountRequest,
    SubscriptionTier,
    UpdateAccountRequest,
    premium_expiry,
    resolve_subscription_end,
)
from .exceptions import AccountValidationError, IdentityServiceError

logger = logging.getLogger(__name__)


class AccountService(IAccountService):
    """
    Account service over the profiles repository and the identity provider.
    """

    def __init__(
        self,
        repository: AccountRepository,
        identity: IIdentityService,
        settings: Optional[Settings] = None,
    ):
        self._repository = repository
        self._identity = identity
        self._settings = settings or get_settings()

    async def list_accounts(self) -> list[Account]:
        return await self._repository.list_accounts()

    def validate_new(self, request: CreateAccountRequest) -> None:
        """Raise AccountValidationError unless email and password are filled in."""
        if not request.email.strip() or not request.password.strip():
            raise AccountValidationError()

    async def create_account(self, request: CreateAccountRequest) -> str:
        self.validate_new(request)
        logger.info(f"Creating account {request.email}")
        return await self._identity.create_account(
            request.email,
            request.password,
            {"full_name": request.full_name},
        )

    async def apply_initial_tier(
        self,
        account_id: str,
        tier: SubscriptionTier,
        now: Optional[datetime] = None,
    ) -> Account:
        settings = self._settings
        account = await self._repository.wait_for_account(
            account_id,
            timeout=settings.profile_wait_timeout,
            initial_interval=settings.profile_poll_initial,
            max_interval=settings.profile_poll_max,
        )
        if tier != SubscriptionTier.PREMIUM:
            return account

        now = now or datetime.now(timezone.utc)
        end = premium_expiry(now, settings.premium_period_days)
        updated = await self._repository.update_account(
            account_id,
            {"subscription_tier": SubscriptionTier.PREMIUM, "subscription_end": end},
        )
        logger.info(f"Account {account_id} upgraded to premium until {end.isoformat()}")
        return updated or account.model_copy(
            update={"subscription_tier": SubscriptionTier.PREMIUM, "subscription_end": end}
        )

    async def update_account(
        self,
        account: Account,
        request: UpdateAccountRequest,
        now: Optional[datetime] = None,
    ) -> Account:
        now = now or datetime.now(timezone.utc)
        end = resolve_subscription_end(
            request.subscription_tier,
            request.subscription_end or account.subscription_end,
            now,
            self._settings.premium_period_days,
        )
        submitted = {
            "full_name": request.full_name,
            "subscription_tier": request.subscription_tier,
            "subscription_end": end,
        }

        logger.info(f"Updating account {account.id}")
        stored = await self._repository.update_account(account.id, submitted)

        merged = account.model_copy(update=submitted)
        if stored is not None:
            merged = merged.model_copy(update=stored.model_dump())
        return merged

    async def delete_account(self, account_id: str) -> AccountDeletion:
        logger.info(f"Deleting account {account_id}")
        await self._repository.delete_account(account_id)

        try:
            await self._identity.delete_identity(account_id)
        except IdentityServiceError as e:
            logger.warning(f"Identity delete failed, but profile {account_id} was deleted: {e.message}")
            return AccountDeletion(
                account_id=account_id,
                identity_deleted=False,
                identity_error=e.message,
            )

        return AccountDeletion(account_id=account_id, identity_deleted=True)
