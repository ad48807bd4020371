"""
Posts module data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

EXCERPT_LENGTH = 150
EXCERPT_SUFFIX = "..."


class Post(BaseModel):
    """A blog post as stored in the blogs table."""

    id: str = Field(..., description="Post ID (UUID)")
    title: str = Field(..., description="Title")
    content: str = Field(..., description="Full content")
    excerpt: Optional[str] = Field(None, description="Short excerpt")
    published: bool = Field(default=False, description="Whether the post is public")
    author_id: Optional[str] = Field(None, description="Author; None for console posts")
    created_at: datetime = Field(..., description="Creation time")


class PostDraft(BaseModel):
    """
    Editable copy of a post held by the create/edit dialogs.
    """

    title: str = Field(default="", description="Title")
    content: str = Field(default="", description="Full content")
    excerpt: str = Field(default="", description="Excerpt; derived from content when blank")
    published: bool = Field(default=False, description="Publish state")

    @classmethod
    def from_post(cls, post: Post) -> "PostDraft":
        return cls(
            title=post.title,
            content=post.content,
            excerpt=post.excerpt or "",
            published=post.published,
        )


def derive_excerpt(
    content: str,
    excerpt: Optional[str] = None,
    length: int = EXCERPT_LENGTH,
) -> str:
    """
    Excerpt to store for a post.

    A non-empty `excerpt` is kept as is. Otherwise the first `length`
    characters of the content are used, always followed by "...", even
    when the content is not longer than `length`.
    """
    if excerpt:
        return excerpt
    return content[:length] + EXCERPT_SUFFIX
