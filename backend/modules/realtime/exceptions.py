"""
Realtime module exceptions.
"""

from shared.exceptions import ExternalServiceError


class ChangeFeedError(ExternalServiceError):
    """Raised when a change subscription cannot be opened."""

    def __init__(self, message: str, collection: str):
        super().__init__(
            message,
            service="supabase_realtime",
            code="CHANGE_FEED_ERROR",
            details={"collection": collection},
        )
