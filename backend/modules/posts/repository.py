"""
Post repository for database access.

Encapsulates all Supabase queries and data mapping for the blogs table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Post


class PostRepository(BaseRepository[Post]):
    """
    Repository for post data access.

    All methods return Pydantic models mapped from database rows.
    """

    table = "blogs"

    async def list_posts(self) -> list[Post]:
        """All posts ordered by creation time, newest first."""
        query = self._db.table(self.table).select("*").order("created_at", desc=True)
        rows = await self._execute(query, "select")
        return [self._map(self._map_to_post, row, "select") for row in rows]

    async def create_post(self, data: dict[str, Any]) -> Post:
        """
        Insert a post and return the stored row.

        Args:
            data: Column values (title, content, excerpt, published, author_id).

        Raises:
            RecordStoreError: The store returned no row (e.g. a row-level
                security policy hides it).
        """
        query = self._db.table(self.table).insert(data)
        rows = await self._execute(query, "insert")
        return self._map(self._map_to_post, self._first(rows, "insert"), "insert")

    async def update_post(self, post_id: str, data: dict[str, Any]) -> Optional[Post]:
        """
        Update a post.

        Returns:
            The stored row, or None if no row matched.
        """
        query = self._db.table(self.table).update(data).eq("id", post_id)
        rows = await self._execute(query, "update")
        if not rows:
            return None
        return self._map(self._map_to_post, rows[0], "update")

    async def delete_post(self, post_id: str) -> None:
        """Delete a post."""
        query = self._db.table(self.table).delete().eq("id", post_id)
        await self._execute(query, "delete")

    def _map_to_post(self, data: dict[str, Any]) -> Post:
        """Map database row to Post model."""
        author_id = data.get("author_id")
        return Post(
            id=str(data["id"]),
            title=data["title"],
            content=data["content"],
            excerpt=data.get("excerpt"),
            published=bool(data.get("published", False)),
            author_id=str(author_id) if author_id is not None else None,
            created_at=data["created_at"],
        )
