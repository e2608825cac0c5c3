"""
MCP Tool - get_sitemap_tree

Get the page hierarchy tree.
"""

from typing import Optional

from fastmcp import FastMCP

from notion_sitemap.services import SitemapService

router = FastMCP("get_sitemap_tree")


@router.tool()
async def get_sitemap_tree(
    page_id: Optional[str] = None,
    max_depth: int = 2,
) -> dict:
    """
    Get the page hierarchy tree starting from a page.

    Shows the child pages and databases under the given page.

    Args:
        page_id: Root page ID (default: the configured root page)
        max_depth: Maximum depth to traverse (default 2)

    Returns:
        Tree structure with titles, URLs and node types
    """
    service = SitemapService()

    return await service.get_tree(page_id=page_id, max_depth=max_depth)
