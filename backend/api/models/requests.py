"""
Partial-update request bodies.

Only the fields present in the body are applied to the edit dialog draft.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from modules.accounts.models import SubscriptionTier


class AccountPatch(BaseModel):
    """Editable account fields; `subscription_end` only applies to premium accounts."""

    full_name: Optional[str] = None
    subscription_tier: Optional[SubscriptionTier] = None
    subscription_end: Optional[datetime] = None


class PostPatch(BaseModel):
    """Editable post fields."""

    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    published: Optional[bool] = None
