"""
Post service implementation.
"""

import logging
from typing import Any, Optional

from shared.config import Settings, get_settings

from .interfaces import IPostService
from .repository import PostRepository
from .models import Post, PostDraft, derive_excerpt
from .exceptions import PostNotFoundError, PostValidationError

logger = logging.getLogger(__name__)


class PostService(IPostService):
    """
    Post service over the blogs repository.
    """

    def __init__(self, repository: PostRepository, settings: Optional[Settings] = None):
        self._repository = repository
        self._settings = settings or get_settings()

    def validate(self, draft: PostDraft) -> None:
        """Raise PostValidationError unless title and content are filled in."""
        if not draft.title.strip() or not draft.content.strip():
            raise PostValidationError()

    def _columns(self, draft: PostDraft) -> dict[str, Any]:
        return {
            "title": draft.title,
            "content": draft.content,
            "excerpt": derive_excerpt(draft.content, draft.excerpt, self._settings.excerpt_length),
            "published": draft.published,
        }

    async def list_posts(self) -> list[Post]:
        return await self._repository.list_posts()

    async def create_post(self, draft: PostDraft) -> Post:
        self.validate(draft)
        data = self._columns(draft)
        data["author_id"] = None
        logger.info(f"Creating post {draft.title!r}")
        return await self._repository.create_post(data)

    async def update_post(self, post_id: str, draft: PostDraft) -> Post:
        self.validate(draft)
        logger.info(f"Updating post {post_id}")
        stored = await self._repository.update_post(post_id, self._columns(draft))
        if stored is None:
            raise PostNotFoundError(post_id)
        return stored

    async def delete_post(self, post_id: str) -> None:
        logger.info(f"Deleting post {post_id}")
        await self._repository.delete_post(post_id)
