"""
Services - Sitemap Service

Tree inspection and sitemap regeneration for callers outside the CLI.
"""

from typing import Optional, Dict, Any

from notion_sitemap.config import get_settings
from notion_sitemap.pipeline.client import NotionClient
from notion_sitemap.pipeline.run_pipeline import SitemapRunner
from notion_sitemap.pipeline.tree_builder import count_pages
from notion_sitemap.schemas.page import SitemapNode


class SitemapService:
    """Builds and publishes sitemaps."""

    def __init__(self, settings=None, client: Optional[NotionClient] = None):
        self.settings = settings or get_settings()
        self.runner = SitemapRunner(self.settings, client=client)

    async def get_tree(
        self,
        page_id: Optional[str] = None,
        max_depth: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Get the page hierarchy tree.

        Args:
            page_id: Root page ID (default: configured root)
            max_depth: Maximum depth to traverse, capped at the configured maximum

        Returns:
            Tree structure dict
        """
        page_id = page_id or self.settings.notion.root_page_id
        if not page_id:
            return {"error": "No root page given and NOTION_ROOT_PAGE_ID is not set"}

        limit = self.settings.sitemap.max_depth
        depth = limit if max_depth is None else max(0, min(max_depth, limit))

        tree = await self.runner.build_tree(page_id, depth)
        if tree is None:
            return {"id": page_id, "title": "Not Found", "children": []}

        def map_node(node: SitemapNode) -> Dict[str, Any]:
            return {
                "id": node.id,
                "title": node.title,
                "url": node.url,
                "type": node.type,
                "children": [map_node(child) for child in node.children],
            }

        result = map_node(tree)
        result["total"] = count_pages(tree)
        return result

    async def generate(
        self,
        root_page_id: Optional[str] = None,
        target_page_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Rebuild the sitemap page.

        Returns:
            Run statistics without the tree itself
        """
        stats = await self.runner.run(
            root_page_id=root_page_id,
            target_page_id=target_page_id,
        )
        stats.pop("tree", None)
        return stats
