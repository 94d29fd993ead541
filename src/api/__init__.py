"""HTTP surface of the design patterns showcase."""

from .app import create_app

__all__ = ["create_app"]
