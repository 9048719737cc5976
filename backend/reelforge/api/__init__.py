"""HTTP surface for the event producer."""

from .server import create_app

__all__ = ["create_app"]
