"""HTTP interfaces for infix-calc."""

from .server import create_app

__all__ = ["create_app"]
