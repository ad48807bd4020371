"""
Notifications module data models.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class NotificationLevel(str, Enum):
    """Notification severity."""

    SUCCESS = "success"
    ERROR = "error"


class Notification(BaseModel):
    """A single toast shown to the administrator."""

    level: NotificationLevel = Field(..., description="Severity")
    message: str = Field(..., description="Text shown to the user")
    created_at: datetime = Field(..., description="When it was emitted")

    model_config = {"frozen": True}
