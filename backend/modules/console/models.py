"""
Console module data models.
"""

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, Field

from modules.accounts.models import Account
from modules.posts.models import Post


class DialogState(str, Enum):
    """Lifecycle of a create/edit dialog."""

    CLOSED = "closed"
    OPEN = "open"
    SUBMITTING = "submitting"


class DashboardStats(BaseModel):
    """
    Headline numbers shown above the tables.

    Revenue is a display figure (premium accounts times the monthly price),
    not read from any billing system.
    """

    total_users: int = Field(..., description="Number of accounts")
    premium_users: int = Field(..., description="Accounts on the premium tier")
    total_posts: int = Field(..., description="Number of posts")
    published_posts: int = Field(..., description="Posts marked published")
    total_revenue: int = Field(..., description="Monthly revenue in USD")

    @classmethod
    def compute(
        cls,
        accounts: Iterable[Account],
        posts: Iterable[Post],
        premium_price: int = 9,
    ) -> "DashboardStats":
        accounts = list(accounts)
        posts = list(posts)
        premium = sum(1 for account in accounts if account.is_premium)
        return cls(
            total_users=len(accounts),
            premium_users=premium,
            total_posts=len(posts),
            published_posts=sum(1 for post in posts if post.published),
            total_revenue=premium * premium_price,
        )
