"""
Admin console API package.

Provides the FastAPI application exposing the admin console.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
