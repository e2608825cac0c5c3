"""
Pipeline Module - Sitemap Generation

Handles the complete flow from the root page to the sitemap page:
Fetch → Build tree → Render → Publish
"""

from notion_sitemap.pipeline.client import NotionClient
from notion_sitemap.pipeline.fetcher import ContentFetcher
from notion_sitemap.pipeline.tree_builder import SitemapTreeBuilder
from notion_sitemap.pipeline.publisher import SitemapPublisher
from notion_sitemap.pipeline.run_pipeline import SitemapRunner

__all__ = [
    "NotionClient",
    "ContentFetcher",
    "SitemapTreeBuilder",
    "SitemapPublisher",
    "SitemapRunner",
]
