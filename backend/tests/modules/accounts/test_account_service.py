"""Tests for the account service."""

import pytest
from datetime import datetime, timedelta, timezone

from shared.exceptions import RecordStoreError
from modules.accounts.interfaces import IAccountService
from modules.accounts.models import (
    Account,
    CreateAccountRequest,
    SubscriptionTier,
    UpdateAccountRequest,
)
from modules.accounts.service import AccountService
from modules.accounts.exceptions import (
    AccountNotMaterializedError,
    AccountValidationError,
    IdentityServiceError,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestAccountServiceInterface:
    def test_implements_interface(self, account_service):
        assert isinstance(account_service, IAccountService)


class TestCreateAccount:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,password",
        [("", "secret"), ("new@example.com", ""), ("   ", "secret"), ("new@example.com", "  ")],
    )
    async def test_requires_email_and_password(self, account_service, identity, email, password):
        """Validation fails before any identity call."""
        with pytest.raises(AccountValidationError, match="Please fill in email and password"):
            await account_service.create_account(CreateAccountRequest(email=email, password=password))
        assert identity.created == []

    @pytest.mark.asyncio
    async def test_creates_identity_with_metadata(self, account_service, identity):
        account_id = await account_service.create_account(
            CreateAccountRequest(email="new@example.com", password="secret", full_name="New")
        )

        assert account_id == "acct-new-1"
        assert identity.created[0]["metadata"] == {"full_name": "New"}

    @pytest.mark.asyncio
    async def test_identity_failure_propagates(self, account_service, identity):
        identity.fail_create = "User already registered"

        with pytest.raises(IdentityServiceError, match="already registered"):
            await account_service.create_account(
                CreateAccountRequest(email="new@example.com", password="secret")
            )


class TestApplyInitialTier:
    @pytest.mark.asyncio
    async def test_free_tier_only_waits(self, account_service, account_repository, identity):
        account_id = await identity.create_account("new@example.com", "pw", {"full_name": "New"})

        account = await account_service.apply_initial_tier(account_id, SubscriptionTier.FREE, now=NOW)

        assert account.subscription_tier == SubscriptionTier.FREE
        assert account_repository.waits == [account_id]
        assert account_repository.updates == []

    @pytest.mark.asyncio
    async def test_premium_sets_30_day_expiry(self, account_service, account_repository, identity):
        """Premium accounts get tier=premium and an end date 30 days out."""
        account_id = await identity.create_account("new@example.com", "pw", {})

        account = await account_service.apply_initial_tier(account_id, SubscriptionTier.PREMIUM, now=NOW)

        assert account.subscription_tier == SubscriptionTier.PREMIUM
        assert account.subscription_end == NOW + timedelta(days=30)

    @pytest.mark.asyncio
    async def test_profile_never_appears(self, account_service, identity):
        identity.materialize = False
        account_id = await identity.create_account("new@example.com", "pw", {})

        with pytest.raises(AccountNotMaterializedError):
            await account_service.apply_initial_tier(account_id, SubscriptionTier.PREMIUM, now=NOW)


class TestUpdateAccount:
    @pytest.mark.asyncio
    async def test_premium_without_end_gets_30_days(self, account_service, account_repository):
        account = (await account_repository.list_accounts())[-1]  # acct-1, free
        assert account.id == "acct-1"

        updated = await account_service.update_account(
            account,
            UpdateAccountRequest(full_name="Upgraded", subscription_tier=SubscriptionTier.PREMIUM),
            now=NOW,
        )

        assert updated.full_name == "Upgraded"
        assert updated.subscription_tier == SubscriptionTier.PREMIUM
        assert updated.subscription_end == NOW + timedelta(days=30)

    @pytest.mark.asyncio
    async def test_premium_keeps_existing_end(self, account_service, account_repository):
        account = await account_repository.get_account("acct-2")
        existing_end = account.subscription_end

        updated = await account_service.update_account(
            account,
            UpdateAccountRequest(full_name="Still Premium", subscription_tier=SubscriptionTier.PREMIUM),
            now=NOW,
        )

        assert updated.subscription_end == existing_end

    @pytest.mark.asyncio
    async def test_downgrade_clears_end(self, account_service, account_repository):
        """premium -> free clears the stored end date."""
        account = await account_repository.get_account("acct-2")

        updated = await account_service.update_account(
            account,
            UpdateAccountRequest(full_name="Premium User", subscription_tier=SubscriptionTier.FREE),
            now=NOW,
        )

        assert updated.subscription_end is None
        assert account_repository.rows["acct-2"]["subscription_end"] is None
        assert account_repository.updates[-1][1]["subscription_end"] is None

    @pytest.mark.asyncio
    async def test_store_row_wins_over_submitted(self, account_service, account_repository):
        """Values returned by the store override the submitted draft."""
        account = await account_repository.get_account("acct-1")
        account_repository.rows["acct-1"]["document_count"] = 7

        updated = await account_service.update_account(
            account,
            UpdateAccountRequest(full_name="Renamed", subscription_tier=SubscriptionTier.FREE),
            now=NOW,
        )

        assert updated.document_count == 7
        assert updated.full_name == "Renamed"

    @pytest.mark.asyncio
    async def test_no_row_returned_uses_submitted(self, account_service, account_repository):
        account = Account(
            id="ghost",
            email="ghost@example.com",
            created_at=NOW,
        )

        updated = await account_service.update_account(
            account,
            UpdateAccountRequest(full_name="Ghost", subscription_tier=SubscriptionTier.PREMIUM),
            now=NOW,
        )

        assert updated.full_name == "Ghost"
        assert updated.subscription_end == NOW + timedelta(days=30)

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, account_service, account_repository):
        account = await account_repository.get_account("acct-1")
        account_repository.fail("update")

        with pytest.raises(RecordStoreError):
            await account_service.update_account(
                account,
                UpdateAccountRequest(subscription_tier=SubscriptionTier.FREE),
                now=NOW,
            )


class TestDeleteAccount:
    @pytest.mark.asyncio
    async def test_deletes_profile_then_identity(self, account_service, account_repository, identity):
        result = await account_service.delete_account("acct-1")

        assert result.identity_deleted is True
        assert "acct-1" not in account_repository.rows
        assert identity.deleted == ["acct-1"]

    @pytest.mark.asyncio
    async def test_identity_failure_is_not_an_error(self, account_service, account_repository, identity):
        """The profile stays deleted; the failure is only reported in the result."""
        identity.fail_delete = "User not allowed"

        result = await account_service.delete_account("acct-1")

        assert result.identity_deleted is False
        assert result.identity_error == "User not allowed"
        assert "acct-1" not in account_repository.rows

    @pytest.mark.asyncio
    async def test_profile_failure_skips_identity(self, account_service, account_repository, identity):
        account_repository.fail("delete")

        with pytest.raises(RecordStoreError):
            await account_service.delete_account("acct-1")
        assert identity.deleted == []
