"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum


class Collection(str, Enum):
    """Remote collections the console keeps a local copy of."""

    ACCOUNTS = "accounts"
    POSTS = "posts"


class ChangeEventType(str, Enum):
    """Change notification event types (values match Supabase Realtime)."""

    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    ALL = "*"
