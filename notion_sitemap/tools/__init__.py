"""
Tools Module - MCP Tool Implementations

MCP tools for sitemap inspection and generation.
"""

from notion_sitemap.tools import get_sitemap_tree
from notion_sitemap.tools import generate_sitemap

__all__ = [
    "get_sitemap_tree",
    "generate_sitemap",
]
