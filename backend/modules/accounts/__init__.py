"""
Accounts module.

User accounts (the `profiles` collection) with subscription tier and expiry,
plus the identity records behind them in Supabase Auth.

Public API:
- IAccountService, IIdentityService: Interfaces
- AccountRepository: Data access for the profiles table
- SupabaseIdentityService: Supabase Auth implementation of IIdentityService
- AccountService: Create/update/delete rules
- Account models and exceptions
"""

from .interfaces import IAccountService, IIdentityService
from .models import (
    Account,
    AccountDeletion,
    CreateAccountRequest,
    SubscriptionTier,
    UpdateAccountRequest,
)
from .exceptions import (
    AccountValidationError,
    AccountNotFoundError,
    AccountNotMaterializedError,
    IdentityServiceError,
)

__all__ = [
    # Interfaces
    "IAccountService",
    "IIdentityService",
    # Models
    "Account",
    "AccountDeletion",
    "CreateAccountRequest",
    "SubscriptionTier",
    "UpdateAccountRequest",
    # Exceptions
    "AccountValidationError",
    "AccountNotFoundError",
    "AccountNotMaterializedError",
    "IdentityServiceError",
]
