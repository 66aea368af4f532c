"""HTTP interface for the browser operations."""

from .app import create_app

__all__ = ["create_app"]
