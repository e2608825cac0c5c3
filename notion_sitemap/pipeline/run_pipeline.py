"""
Pipeline - Run Pipeline

CLI entry point: build the sitemap tree and publish it to the sitemap page.
"""

import asyncio
import argparse
import httpx
import json
import logging
import sys
from datetime import datetime
from typing import Optional

from notion_sitemap.config import get_settings
from notion_sitemap.errors import ConfigurationError, SitemapError
from notion_sitemap.pipeline.client import NotionClient, error_message
from notion_sitemap.pipeline.fetcher import ContentFetcher
from notion_sitemap.pipeline.tree_builder import SitemapTreeBuilder, count_pages
from notion_sitemap.pipeline.renderer import tree_to_blocks
from notion_sitemap.pipeline.publisher import SitemapPublisher
from notion_sitemap.schemas.page import SitemapNode


logger = logging.getLogger(__name__)


class SitemapRunner:
    """Orchestrates fetch, build, render and publish."""

    def __init__(self, settings=None, client: Optional[NotionClient] = None):
        self.settings = settings or get_settings()
        self.client = client or NotionClient(self.settings)

        self.fetcher = ContentFetcher(self.settings, client=self.client)
        self.publisher = SitemapPublisher(self.settings, client=self.client)

    async def build_tree(
        self,
        root_page_id: str,
        max_depth: Optional[int] = None,
    ) -> Optional[SitemapNode]:
        builder = SitemapTreeBuilder(self.settings, fetcher=self.fetcher, max_depth=max_depth)
        return await builder.build(root_page_id)

    async def run(
        self,
        root_page_id: Optional[str] = None,
        target_page_id: Optional[str] = None,
        max_depth: Optional[int] = None,
        dry_run: bool = False,
        now: Optional[datetime] = None,
    ) -> dict:
        """
        Rebuild the sitemap.

        Args:
            root_page_id: Page whose hierarchy is mirrored (default: from settings)
            target_page_id: Page that receives the sitemap (default: from settings)
            max_depth: Depth cap override
            dry_run: Build and render without touching the target page
            now: Timestamp for the header callout

        Returns:
            Statistics dict
        """
        notion = self.settings.notion
        root_page_id = root_page_id or notion.root_page_id
        target_page_id = target_page_id or notion.sitemap_page_id

        missing = []
        if not notion.token:
            missing.append("NOTION_TOKEN")
        if not root_page_id:
            missing.append("NOTION_ROOT_PAGE_ID")
        if not target_page_id and not dry_run:
            missing.append("NOTION_SITEMAP_PAGE_ID")
        if missing:
            raise ConfigurationError(missing)

        logger.info("Starting sitemap generation...")
        logger.info(f"Root page: {root_page_id}")
        logger.info(f"Sitemap page: {target_page_id}")

        tree = await self.build_tree(root_page_id, max_depth)
        if tree is None:
            raise SitemapError("Failed to build sitemap tree")

        stats = {
            "root_page_id": root_page_id,
            "target_page_id": target_page_id,
            "pages": count_pages(tree),
        }
        logger.info(f"Found {stats['pages']} pages/databases")

        blocks = tree_to_blocks(tree)
        stats["blocks"] = len(blocks)

        if dry_run:
            stats["published"] = False
        else:
            stats.update(await self.publisher.publish(target_page_id, blocks, now=now))
            stats["published"] = True

        stats["tree"] = tree
        logger.info("Done!")
        return stats


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Notion Sitemap Generator")
    parser.add_argument(
        "--root",
        type=str,
        help="Root page ID (default: NOTION_ROOT_PAGE_ID)",
    )
    parser.add_argument(
        "--target",
        type=str,
        help="Sitemap page ID (default: NOTION_SITEMAP_PAGE_ID)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum traversal depth (default: SITEMAP_MAX_DEPTH)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build the tree without updating the sitemap page",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the tree as JSON",
    )

    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(level=settings.log.level)

    runner = SitemapRunner(settings)

    try:
        stats = asyncio.run(runner.run(
            root_page_id=args.root,
            target_page_id=args.target,
            max_depth=args.max_depth,
            dry_run=args.dry_run,
        ))
    except SitemapError as e:
        logger.error(str(e))
        sys.exit(1)
    except httpx.HTTPError as e:
        logger.error(f"Fatal error: {error_message(e)}")
        sys.exit(1)

    if args.json:
        print(json.dumps(stats["tree"].model_dump(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
