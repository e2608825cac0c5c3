"""
Pipeline - Content Fetcher

Page metadata retrieval and paginated child listing.
"""

import httpx
import logging
from typing import Optional, List, Dict, Any
from dataclasses import dataclass

from notion_sitemap.config import get_settings
from notion_sitemap.pipeline.client import NotionClient, error_message


logger = logging.getLogger(__name__)

NOTION_URL = "https://www.notion.so"


def page_url(page_id: str) -> str:
    """Public notion.so URL for a page or database id."""
    return f"{NOTION_URL}/{page_id.replace('-', '')}"


def _first_plain_text(prop: Optional[Dict[str, Any]]) -> Optional[str]:
    if not isinstance(prop, dict):
        return None
    items = prop.get("title") or []
    if items and items[0].get("plain_text"):
        return items[0]["plain_text"]
    return None


def extract_title(page: Dict[str, Any]) -> str:
    """
    Extract a page title from its properties.

    Tries ``title``, then ``Name``, then any property of type ``title``.
    """
    properties = page.get("properties") or {}

    for key in ("title", "Name"):
        title = _first_plain_text(properties.get(key))
        if title:
            return title

    for value in properties.values():
        if isinstance(value, dict) and value.get("type") == "title":
            title = _first_plain_text(value)
            if title:
                return title

    return "Untitled"


@dataclass
class PageDetails:
    """Metadata of a single page."""
    id: str
    title: str
    url: str
    type: str
    last_edited: Optional[str]


@dataclass
class ChildRef:
    """Direct child of a page: a sub-page or an embedded database."""
    id: str
    title: str
    type: str


class ContentFetcher:
    """Fetches page metadata and child listings from Notion."""

    def __init__(self, settings=None, client: Optional[NotionClient] = None):
        self.settings = settings or get_settings()
        self.client = client or NotionClient(self.settings)
        self.page_size = self.settings.sitemap.page_size

    async def get_page_details(self, page_id: str) -> Optional[PageDetails]:
        """
        Fetch a page's title, URL and kind.

        Args:
            page_id: Notion page ID

        Returns:
            PageDetails or None if the page could not be retrieved
        """
        try:
            page = await self.client.retrieve_page(page_id)
        except httpx.HTTPError as e:
            logger.error(f"Error fetching page {page_id}: {error_message(e)}")
            return None

        return PageDetails(
            id=page_id,
            title=extract_title(page),
            url=page_url(page_id),
            type=page.get("object", "page"),
            last_edited=page.get("last_edited_time"),
        )

    async def get_child_pages(self, page_id: str) -> List[ChildRef]:
        """
        List child pages and databases of a page, following pagination.

        A failed request ends the listing; children gathered so far are kept.
        """
        children = []
        cursor = None

        while True:
            try:
                response = await self.client.list_block_children(
                    page_id,
                    start_cursor=cursor,
                    page_size=self.page_size,
                )
            except httpx.HTTPError as e:
                logger.error(f"Error fetching children of {page_id}: {error_message(e)}")
                break

            for block in response.get("results", []):
                block_type = block.get("type")
                if block_type == "child_page":
                    children.append(ChildRef(
                        id=block["id"],
                        title=block["child_page"].get("title", ""),
                        type="page",
                    ))
                elif block_type == "child_database":
                    children.append(ChildRef(
                        id=block["id"],
                        title=block["child_database"].get("title", ""),
                        type="database",
                    ))

            cursor = response.get("next_cursor")
            if not response.get("has_more") or not cursor:
                break

        return children
