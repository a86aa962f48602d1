"""
Gatehouse API package.

Provides the FastAPI application for the membership-gated community portal.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
