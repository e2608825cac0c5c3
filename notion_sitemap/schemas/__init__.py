"""
Schemas Module - Pydantic Models

Data models for the sitemap tree.
"""

from notion_sitemap.schemas.page import SitemapNode

__all__ = [
    "SitemapNode",
]
