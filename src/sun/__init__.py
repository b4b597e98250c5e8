"""
Sun GraphQL backend
Stem player, blog and gallery content served from one GraphQL endpoint
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
