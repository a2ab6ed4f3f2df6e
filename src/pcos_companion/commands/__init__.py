"""CLI commands for pcos-companion."""

from .content import content
from .quotes import quotes
from .serve import serve

__all__ = ["content", "quotes", "serve"]
