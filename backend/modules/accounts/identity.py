"""
Identity service backed by Supabase Auth.
"""

import logging
from typing import Any

import httpx
from supabase import AsyncClient, AuthError

from shared.repository import error_message

from .interfaces import IIdentityService
from .exceptions import IdentityServiceError

logger = logging.getLogger(__name__)


class SupabaseIdentityService(IIdentityService):
    """
    Creates and deletes login identities through the Auth admin API.

    The admin API is used instead of a public sign-up so the service-role
    client never picks up the new user's session.
    """

    def __init__(self, db: AsyncClient):
        self._db = db

    async def create_account(
        self,
        email: str,
        password: str,
        metadata: dict[str, Any],
    ) -> str:
        try:
            response = await self._db.auth.admin.create_user(
                {
                    "email": email,
                    "password": password,
                    "user_metadata": metadata,
                }
            )
        except (AuthError, httpx.HTTPError) as e:
            raise IdentityServiceError(error_message(e), operation="create") from e

        if response.user is None:
            raise IdentityServiceError("Identity provider returned no user", operation="create")

        logger.info(f"Identity created for {email}: {response.user.id}")
        return str(response.user.id)

    async def delete_identity(self, identity_id: str) -> None:
        try:
            await self._db.auth.admin.delete_user(identity_id)
        except (AuthError, httpx.HTTPError) as e:
            raise IdentityServiceError(error_message(e), operation="delete") from e
        logger.info(f"Identity deleted: {identity_id}")
