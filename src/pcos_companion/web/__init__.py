"""HTTP API for pcos-companion."""

from .app import create_app

__all__ = ["create_app"]
