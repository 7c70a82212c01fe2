"""
Models for URL shortener.

URL is the SQLAlchemy row; URLMapping is the plain value handed between
the store, the services and the API layer.
"""

from .mapping import URLMapping
from .url import URL

__all__ = ["URL", "URLMapping"]
