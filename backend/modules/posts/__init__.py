"""
Posts module.

Blog posts (the `blogs` collection) with publish state.

Public API:
- IPostService: Interface for post operations
- PostRepository: Data access for the blogs table
- PostService: Create/update/delete rules
- derive_excerpt: Excerpt default
- Post models and exceptions
"""

from .interfaces import IPostService
from .models import Post, PostDraft, derive_excerpt
from .exceptions import PostValidationError, PostNotFoundError

__all__ = [
    "IPostService",
    "Post",
    "PostDraft",
    "derive_excerpt",
    "PostValidationError",
    "PostNotFoundError",
]
