"""
Posts module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class PostValidationError(ValidationError):
    """Raised when a post form is missing its title or content."""

    def __init__(self, message: str = "Please fill in title and content"):
        super().__init__(message, code="POST_VALIDATION_FAILED")


class PostNotFoundError(NotFoundError):
    """Raised when a post is not in the store or the local list."""

    def __init__(self, post_id: str):
        super().__init__(
            f"Post not found: {post_id}",
            code="POST_NOT_FOUND",
            details={"post_id": post_id},
        )
