"""
MCP Tool - generate_sitemap

Rebuild the sitemap page.
"""

from typing import Optional

import httpx
from fastmcp import FastMCP

from notion_sitemap.errors import SitemapError
from notion_sitemap.pipeline.client import error_message
from notion_sitemap.services import SitemapService

router = FastMCP("generate_sitemap")


@router.tool()
async def generate_sitemap(
    root_page_id: Optional[str] = None,
    target_page_id: Optional[str] = None,
) -> dict:
    """
    Regenerate the sitemap page.

    Wipes the target page and rewrites the outline of the root page's
    hierarchy.

    Args:
        root_page_id: Page to mirror (default: the configured root page)
        target_page_id: Page to overwrite (default: the configured sitemap page)

    Returns:
        Run statistics or an error
    """
    service = SitemapService()

    try:
        return await service.generate(
            root_page_id=root_page_id,
            target_page_id=target_page_id,
        )
    except SitemapError as e:
        return {"error": str(e)}
    except httpx.HTTPError as e:
        return {"error": f"Could not update sitemap page: {error_message(e)}"}
