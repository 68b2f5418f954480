"""Web interface for fitgoal."""

from .app import create_app

__all__ = ["create_app"]
