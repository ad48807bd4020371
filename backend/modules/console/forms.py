"""
Mutation forms for accounts and posts.

Each form owns one create and one edit dialog, submits through the
resource's service, reconciles the controller's cache, and reports the
outcome as a toast. No failure escapes a form: every path leaves the
console interactive.
"""

import logging
from typing import Callable, Optional, Union

from shared.exceptions import ConsoleError, ValidationError
from modules.accounts.interfaces import IAccountService
from modules.accounts.models import (
    Account,
    CreateAccountRequest,
    SubscriptionTier,
    UpdateAccountRequest,
)
from modules.accounts.exceptions import AccountNotFoundError
from modules.posts.interfaces import IPostService
from modules.posts.models import PostDraft
from modules.posts.exceptions import PostNotFoundError
from modules.notifications.interfaces import INotifier

from .controller import SyncController
from .dialogs import FormDialog

logger = logging.getLogger(__name__)

Confirm = Union[bool, Callable[[str], bool]]

DELETE_ACCOUNT_PROMPT = (
    "Are you sure you want to delete this user? This will permanently delete "
    "their account and all associated data."
)
DELETE_POST_PROMPT = "Are you sure you want to delete this blog?"


def _confirmed(confirm: Confirm, prompt: str) -> bool:
    if callable(confirm):
        return bool(confirm(prompt))
    return bool(confirm)


class AccountForms:
    """Create, edit and delete accounts."""

    def __init__(
        self,
        service: IAccountService,
        controller: SyncController,
        notifier: INotifier,
    ):
        self._service = service
        self._controller = controller
        self._notifier = notifier
        self.create_dialog: FormDialog[CreateAccountRequest] = FormDialog(
            "create-account", CreateAccountRequest
        )
        self.edit_dialog: FormDialog[UpdateAccountRequest] = FormDialog(
            "edit-account", lambda: UpdateAccountRequest(subscription_tier=SubscriptionTier.FREE)
        )
        # Accounts whose profile row is gone but whose identity could not be deleted
        self.orphaned_identities: list[str] = []
        # Last failure, for callers that need more than the toast
        self.last_error: Optional[ConsoleError] = None

    # -------------------------------------------------------------------------
    # Create
    # -------------------------------------------------------------------------

    def open_create(self) -> CreateAccountRequest:
        return self.create_dialog.open()

    async def submit_create(self) -> Optional[str]:
        """
        Create the drafted account.

        Success is reported as soon as the identity exists; waiting for the
        profile row, applying a premium tier and re-fetching happen in the
        background.

        Returns:
            The new account ID, or None on failure
        """
        tier = self.create_dialog.draft.subscription_tier if self.create_dialog.draft else None
        try:
            account_id = await self.create_dialog.submit(self._service.create_account)
        except ValidationError as e:
            self.last_error = e
            self._notifier.error(e.message)
            return None
        except ConsoleError as e:
            self.last_error = e
            logger.error(f"Error creating account: {e.message}")
            self._notifier.error(f"Failed to create user: {e.message}")
            return None

        self._notifier.success("User created successfully! They will receive a confirmation email.")
        self._controller.spawn(self._settle_new_account(account_id, tier or SubscriptionTier.FREE))
        return account_id

    async def _settle_new_account(self, account_id: str, tier: SubscriptionTier) -> None:
        try:
            await self._service.apply_initial_tier(account_id, tier)
        except ConsoleError as e:
            logger.error(f"Follow-up for new account {account_id} failed: {e.message}")
            if tier == SubscriptionTier.PREMIUM:
                self._notifier.error(f"User created but subscription update failed: {e.message}")
        await self._controller.fetch_accounts()

    # -------------------------------------------------------------------------
    # Edit
    # -------------------------------------------------------------------------

    def open_edit(self, account_id: str) -> UpdateAccountRequest:
        account = self._controller.get_account(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return self.edit_dialog.open(
            UpdateAccountRequest(
                full_name=account.full_name,
                subscription_tier=account.subscription_tier,
                subscription_end=account.subscription_end,
            ),
            target_id=account_id,
        )

    async def submit_edit(self) -> Optional[Account]:
        """Submit the edit dialog; the cached row is replaced in place on success."""
        account_id = self.edit_dialog.target_id
        account = self._controller.get_account(account_id) if account_id else None
        if account is None:
            self.last_error = AccountNotFoundError(account_id or "")
            self._notifier.error(f"Failed to update user: {self.last_error.message}")
            return None

        try:
            updated = await self.edit_dialog.submit(
                lambda request: self._service.update_account(account, request)
            )
        except ConsoleError as e:
            self.last_error = e
            logger.error(f"Error updating account {account_id}: {e.message}")
            self._notifier.error(f"Failed to update user: {e.message}")
            return None

        self._controller.replace_account(updated)
        self._notifier.success("User updated successfully")
        return updated

    # -------------------------------------------------------------------------
    # Delete
    # -------------------------------------------------------------------------

    async def delete(self, account_id: str, confirm: Confirm) -> bool:
        """
        Delete an account after confirmation.

        A failed identity delete does not fail the operation; the account is
        recorded in `orphaned_identities` instead.
        """
        if not _confirmed(confirm, DELETE_ACCOUNT_PROMPT):
            return False

        try:
            result = await self._service.delete_account(account_id)
        except ConsoleError as e:
            self.last_error = e
            logger.error(f"Error deleting account {account_id}: {e.message}")
            self._notifier.error(f"Failed to delete user profile: {e.message}")
            return False

        if not result.identity_deleted:
            self.orphaned_identities.append(account_id)

        self._controller.remove_account(account_id)
        self._notifier.success("User deleted successfully")
        return True


class PostForms:
    """Create, edit and delete posts."""

    def __init__(
        self,
        service: IPostService,
        controller: SyncController,
        notifier: INotifier,
    ):
        self._service = service
        self._controller = controller
        self._notifier = notifier
        self.create_dialog: FormDialog[PostDraft] = FormDialog("create-post", PostDraft)
        self.edit_dialog: FormDialog[PostDraft] = FormDialog("edit-post", PostDraft)
        self.last_error: Optional[ConsoleError] = None

    def open_create(self) -> PostDraft:
        return self.create_dialog.open()

    def open_edit(self, post_id: str) -> PostDraft:
        post = self._controller.get_post(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return self.edit_dialog.open(PostDraft.from_post(post), target_id=post_id)

    async def submit_create(self) -> bool:
        """Create the drafted post, then re-fetch all posts."""
        try:
            post = await self.create_dialog.submit(self._service.create_post)
        except ValidationError as e:
            self.last_error = e
            self._notifier.error(e.message)
            return False
        except ConsoleError as e:
            self.last_error = e
            logger.error(f"Error creating post: {e.message}")
            self._notifier.error(f"Failed to create blog: {e.message}")
            return False

        logger.info(f"Post created: {post.id}")
        self._notifier.success("Blog created successfully")
        await self._controller.fetch_posts()
        return True

    async def submit_edit(self) -> bool:
        """Submit the edit dialog; the cached row is replaced by the stored one."""
        post_id = self.edit_dialog.target_id
        try:
            post = await self.edit_dialog.submit(
                lambda draft: self._service.update_post(post_id, draft)
            )
        except ValidationError as e:
            self.last_error = e
            self._notifier.error(e.message)
            return False
        except ConsoleError as e:
            self.last_error = e
            logger.error(f"Error updating post {post_id}: {e.message}")
            self._notifier.error(f"Failed to update blog: {e.message}")
            return False

        self._controller.replace_post(post)
        self._notifier.success("Blog updated successfully")
        return True

    async def delete(self, post_id: str, confirm: Confirm) -> bool:
        """Delete a post after confirmation and drop it from the cache."""
        if not _confirmed(confirm, DELETE_POST_PROMPT):
            return False

        try:
            await self._service.delete_post(post_id)
        except ConsoleError as e:
            self.last_error = e
            logger.error(f"Error deleting post {post_id}: {e.message}")
            self._notifier.error(f"Failed to delete blog: {e.message}")
            return False

        self._controller.remove_post(post_id)
        self._notifier.success("Blog deleted successfully")
        return True
