"""
Session module data models.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SessionToken(BaseModel):
    """
    The locally persisted admin session record.

    Serialized as `{id, email, full_name, loginTime}` with `loginTime`
    in epoch milliseconds.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Admin account ID")
    email: str = Field(..., description="Admin email")
    full_name: Optional[str] = Field(None, description="Admin display name")
    login_time: int = Field(..., alias="loginTime", description="Login time (epoch ms)")

    @property
    def logged_in_at(self) -> datetime:
        """Login time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.login_time / 1000, tz=timezone.utc)

    @classmethod
    def issue(
        cls,
        id: str,
        email: str,
        full_name: Optional[str],
        now: datetime,
    ) -> "SessionToken":
        """Build a token for a login happening at `now`."""
        return cls(
            id=id,
            email=email,
            full_name=full_name,
            login_time=int(now.timestamp() * 1000),
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class AdminSession(BaseModel):
    """
    An admitted admin session.

    This is what the console and its routes see; it is passed explicitly
    instead of being read from global state.
    """

    id: str = Field(..., description="Admin account ID")
    email: str = Field(..., description="Admin email")
    full_name: Optional[str] = Field(None, description="Admin display name")

    model_config = {"frozen": True}
