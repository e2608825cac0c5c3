"""
Pipeline - Sitemap Publisher

Replaces the content of the sitemap page with freshly rendered blocks.
"""

import httpx
import logging
from datetime import datetime
from typing import Optional, List, Dict, Any

from notion_sitemap.config import get_settings
from notion_sitemap.pipeline.client import NotionClient, error_message
from notion_sitemap.pipeline.renderer import metadata_blocks


logger = logging.getLogger(__name__)


def chunked(items: List[Any], size: int) -> List[List[Any]]:
    """Split ``items`` into consecutive chunks of at most ``size``."""
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")
    return [items[i:i + size] for i in range(0, len(items), size)]


class SitemapPublisher:
    """Wipes the target page and appends blocks in batches."""

    def __init__(self, settings=None, client: Optional[NotionClient] = None):
        self.settings = settings or get_settings()
        self.client = client or NotionClient(self.settings)
        self.batch_size = self.settings.sitemap.batch_size
        self.page_size = self.settings.sitemap.page_size

    async def list_existing_blocks(self, page_id: str) -> List[Dict[str, Any]]:
        """All top-level blocks currently on a page."""
        blocks = []
        cursor = None

        while True:
            response = await self.client.list_block_children(
                page_id,
                start_cursor=cursor,
                page_size=self.page_size,
            )
            blocks.extend(response.get("results", []))

            cursor = response.get("next_cursor")
            if not response.get("has_more") or not cursor:
                break

        return blocks

    async def clear(self, page_id: str) -> Dict[str, int]:
        """
        Delete every top-level block of a page.

        Individual delete failures are logged and skipped.
        """
        stats = {"deleted": 0, "delete_failures": 0}

        for block in await self.list_existing_blocks(page_id):
            try:
                await self.client.delete_block(block["id"])
                stats["deleted"] += 1
            except httpx.HTTPError as e:
                logger.warning(f"Could not delete block {block['id']}: {error_message(e)}")
                stats["delete_failures"] += 1

        return stats

    async def publish(
        self,
        page_id: str,
        blocks: List[Dict[str, Any]],
        now: Optional[datetime] = None,
    ) -> Dict[str, int]:
        """
        Replace the page content with a metadata header plus ``blocks``.

        Args:
            page_id: Target sitemap page ID
            blocks: Rendered sitemap blocks
            now: Timestamp shown in the header (default: current time)

        Returns:
            Stats dict with deleted, delete_failures, appended and batches
        """
        try:
            stats = await self.clear(page_id)

            all_blocks = metadata_blocks(now, self.settings.sitemap.timestamp_format) + blocks
            batches = chunked(all_blocks, self.batch_size)
            for batch in batches:
                await self.client.append_block_children(page_id, batch)

        except httpx.HTTPError as e:
            logger.error(f"Error updating sitemap page: {error_message(e)}")
            raise

        stats["appended"] = len(all_blocks)
        stats["batches"] = len(batches)
        logger.info(f"Sitemap updated: {stats}")
        return stats
