"""
Accounts module data models.

These models define the data structures used by the accounts module
and exposed to other modules through the interface.
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


class SubscriptionTier(str, Enum):
    """Account subscription tiers."""

    FREE = "free"
    PREMIUM = "premium"


class Account(BaseModel):
    """
    A user account as stored in the profiles table.

    `subscription_end` only means something for premium accounts.
    """

    id: str = Field(..., description="Account ID (UUID, same as the identity)")
    email: EmailStr = Field(..., description="Email address")
    full_name: Optional[str] = Field(None, description="Display name")
    subscription_tier: SubscriptionTier = Field(
        default=SubscriptionTier.FREE,
        description="Subscription tier",
    )
    subscription_start: Optional[datetime] = Field(None, description="Subscription start")
    subscription_end: Optional[datetime] = Field(None, description="Subscription end")
    document_count: int = Field(default=0, description="Documents owned by the account")
    created_at: datetime = Field(..., description="Account creation time")

    @field_validator("subscription_start", "subscription_end", mode="before")
    @classmethod
    def _blank_is_unset(cls, value):
        # The store may hand back "" for a cleared timestamp
        if value == "":
            return None
        return value

    @field_validator("document_count", mode="before")
    @classmethod
    def _null_count_is_zero(cls, value):
        return 0 if value is None else value

    @property
    def is_premium(self) -> bool:
        return self.subscription_tier == SubscriptionTier.PREMIUM


class CreateAccountRequest(BaseModel):
    """
    Draft of a new account, as held by the create dialog.

    Required fields are checked by the service, not here, so a dialog can
    hold a half-filled draft.
    """

    email: str = Field(default="", description="Email address")
    password: str = Field(default="", description="Initial password")
    full_name: str = Field(default="", description="Display name")
    subscription_tier: SubscriptionTier = Field(
        default=SubscriptionTier.FREE,
        description="Tier to apply once the profile exists",
    )


class UpdateAccountRequest(BaseModel):
    """Editable fields of an existing account."""

    full_name: Optional[str] = Field(None, description="Display name")
    subscription_tier: SubscriptionTier = Field(..., description="Subscription tier")
    subscription_end: Optional[datetime] = Field(
        None,
        description="Current end date; kept when staying premium",
    )


class AccountDeletion(BaseModel):
    """Outcome of deleting an account."""

    account_id: str = Field(..., description="Deleted account ID")
    identity_deleted: bool = Field(..., description="Whether the auth identity was removed too")
    identity_error: Optional[str] = Field(None, description="Why the identity was left behind")


def premium_expiry(now: datetime, period_days: int = 30) -> datetime:
    """End of a premium period starting at `now`."""
    return now + timedelta(days=period_days)


def resolve_subscription_end(
    tier: SubscriptionTier,
    current_end: Optional[datetime],
    now: datetime,
    period_days: int = 30,
) -> Optional[datetime]:
    """
    Work out the end date to store for `tier`.

    Premium keeps an existing end date or starts a new period at `now`;
    free always clears it.
    """
    if tier != SubscriptionTier.PREMIUM:
        return None
    return current_end or premium_expiry(now, period_days)
