"""
Extract module - MediaWiki API interaction

Components for extracting article data from the Wikipedia API:
- MediawikiClient: search, article, extract and images queries
"""

from .api_client import MediawikiClient

__all__ = [
    "MediawikiClient",
]
