"""
Posts module interface.
"""

from typing import Protocol, runtime_checkable

from .models import Post, PostDraft


@runtime_checkable
class IPostService(Protocol):
    """
    Interface for post operations used by the console.
    """

    async def list_posts(self) -> list[Post]:
        """All posts, newest first."""
        ...

    async def create_post(self, draft: PostDraft) -> Post:
        """
        Validate and insert a new console-authored post.

        Raises:
            PostValidationError: Title or content is empty
            RecordStoreError: The store failed
        """
        ...

    async def update_post(self, post_id: str, draft: PostDraft) -> Post:
        """
        Validate and update a post; returns the stored row.

        Raises:
            PostValidationError: Title or content is empty
            PostNotFoundError: The store returned no row
            RecordStoreError: The store failed
        """
        ...

    async def delete_post(self, post_id: str) -> None:
        """Delete a post."""
        ...
