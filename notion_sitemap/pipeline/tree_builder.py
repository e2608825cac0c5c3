"""
Pipeline - Tree Builder

Depth-first sitemap traversal with a visited set and a depth cap.
"""

import logging
from typing import Optional, Set

from notion_sitemap.config import get_settings
from notion_sitemap.pipeline.fetcher import ContentFetcher, page_url
from notion_sitemap.schemas.page import SitemapNode


logger = logging.getLogger(__name__)


class SitemapTreeBuilder:
    """Builds the page/database tree below a root page."""

    def __init__(
        self,
        settings=None,
        fetcher: Optional[ContentFetcher] = None,
        max_depth: Optional[int] = None,
    ):
        self.settings = settings or get_settings()
        self.fetcher = fetcher or ContentFetcher(self.settings)
        self.max_depth = (
            max_depth if max_depth is not None else self.settings.sitemap.max_depth
        )

    async def build(
        self,
        page_id: str,
        depth: int = 0,
        visited: Optional[Set[str]] = None,
    ) -> Optional[SitemapNode]:
        """
        Recursively build the sitemap tree.

        Args:
            page_id: Page to start from
            depth: Depth of ``page_id`` in the tree
            visited: Page IDs already seen in this traversal

        Returns:
            SitemapNode, or None when past the depth cap, already visited,
            or not retrievable
        """
        if visited is None:
            visited = set()

        if depth > self.max_depth or page_id in visited:
            return None

        visited.add(page_id)

        details = await self.fetcher.get_page_details(page_id)
        if details is None:
            return None

        logger.debug(f"{'  ' * depth}{details.title} ({page_id})")

        children = []
        for child in await self.fetcher.get_child_pages(page_id):
            if child.type == "page":
                subtree = await self.build(child.id, depth + 1, visited)
                if subtree is not None:
                    children.append(subtree)
            elif child.type == "database":
                # Databases are leaves; their rows are not traversed
                children.append(SitemapNode(
                    id=child.id,
                    title=child.title or "Untitled Database",
                    url=page_url(child.id),
                    type="database",
                    depth=depth + 1,
                ))

        return SitemapNode(
            id=details.id,
            title=details.title,
            url=details.url,
            type="database" if details.type == "database" else "page",
            last_edited=details.last_edited,
            depth=depth,
            children=children,
        )


def count_pages(tree: Optional[SitemapNode]) -> int:
    """Count nodes (pages and databases) in a tree."""
    if tree is None:
        return 0
    return 1 + sum(count_pages(child) for child in tree.children)
