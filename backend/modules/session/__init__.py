"""
Session module.

Gates the console behind a locally persisted, time-bounded admin session.
The check is a convenience gate, not a security boundary: authorization is
enforced by the backend.

Public API:
- SessionGuard: admits, records and ends admin sessions
- ISessionStore: Interface for local session persistence
- FileSessionStore: JSON file implementation of ISessionStore
- is_expired: Pure TTL check
- Session models and exceptions
"""

from .interfaces import ISessionStore
from .models import AdminSession, SessionToken
from .store import FileSessionStore, MemorySessionStore
from .service import SessionGuard, is_expired
from .exceptions import (
    MissingSessionError,
    ExpiredSessionError,
    InvalidSessionError,
)

__all__ = [
    # Interface
    "ISessionStore",
    # Implementations
    "FileSessionStore",
    "MemorySessionStore",
    "SessionGuard",
    "is_expired",
    # Models
    "AdminSession",
    "SessionToken",
    # Exceptions
    "MissingSessionError",
    "ExpiredSessionError",
    "InvalidSessionError",
]
