"""
Services Module - Business Logic Layer

Provides the sitemap service used by the MCP tools.
"""

from notion_sitemap.services.sitemap_service import SitemapService

__all__ = [
    "SitemapService",
]
