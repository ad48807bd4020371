"""API models package."""

from .errors import ErrorResponse
from .requests import AccountPatch, PostPatch

__all__ = [
    "ErrorResponse",
    "AccountPatch",
    "PostPatch",
]
