"""
Pipeline - Block Renderer

Flattens a sitemap tree into Notion blocks.
"""

from datetime import datetime
from typing import Optional, List, Dict, Any

from notion_sitemap.schemas.page import SitemapNode


DEPTH_EMOJIS = ["🏢", "📁", "📄", "📎", "•"]
DATABASE_EMOJI = "🗃️"
SITEMAP_EMOJI = "🗺️"

# Notion rejects text objects longer than this, counted in UTF-16 code units
MAX_TEXT_LENGTH = 2000


def emoji_for_depth(depth: int, node_type: str = "page") -> str:
    """Hierarchy marker for a node at ``depth``."""
    if node_type == "database":
        return DATABASE_EMOJI
    return DEPTH_EMOJIS[min(depth, len(DEPTH_EMOJIS) - 1)]


def truncate(content: str, limit: int = MAX_TEXT_LENGTH) -> str:
    """Cut ``content`` to at most ``limit`` UTF-16 code units."""
    encoded = content.encode("utf-16-le")
    if len(encoded) <= limit * 2:
        return content
    # A dangling high surrogate at the cut is dropped
    return encoded[:limit * 2].decode("utf-16-le", errors="ignore")


def format_timestamp(moment: datetime) -> str:
    """Day-first timestamp without zero padding, e.g. ``5/3/2026, 9:07:01``."""
    return f"{moment.day}/{moment.month}/{moment.year}, {moment.hour}:{moment:%M:%S}"


def text(
    content: str,
    url: Optional[str] = None,
    **annotations: Any,
) -> Dict[str, Any]:
    """Build a rich text object."""
    item: Dict[str, Any] = {
        "type": "text",
        "text": {"content": truncate(content)},
    }
    if url:
        item["text"]["link"] = {"url": url}
    if annotations:
        item["annotations"] = annotations
    return item


def tree_to_blocks(tree: Optional[SitemapNode], depth: int = 0) -> List[Dict[str, Any]]:
    """
    Convert a sitemap tree to a flat, pre-ordered list of blocks.

    The root becomes a ``heading_1``; every other node becomes a
    ``bulleted_list_item`` whose emoji marks its depth.

    Args:
        tree: Sitemap tree (None renders nothing)
        depth: Depth of ``tree``

    Returns:
        List of block dicts ready to append
    """
    blocks: List[Dict[str, Any]] = []

    if tree is None:
        return blocks

    emoji = emoji_for_depth(depth, tree.type)

    if depth == 0:
        blocks.append({
            "object": "block",
            "type": "heading_1",
            "heading_1": {
                "rich_text": [text(f"{emoji} {tree.title}")],
            },
        })
    else:
        rich_text = [
            text(f"{emoji} "),
            text(tree.title, url=tree.url, bold=depth == 1),
        ]
        if tree.type == "database":
            rich_text.append(text(" [DB]", italic=True, color="gray"))

        blocks.append({
            "object": "block",
            "type": "bulleted_list_item",
            "bulleted_list_item": {"rich_text": rich_text},
        })

    for child in tree.children:
        blocks.extend(tree_to_blocks(child, depth + 1))

    return blocks


def metadata_blocks(
    now: Optional[datetime] = None,
    timestamp_format: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Header callout with the generation time, followed by a divider."""
    now = now or datetime.now()
    stamp = now.strftime(timestamp_format) if timestamp_format else format_timestamp(now)
    return [
        {
            "object": "block",
            "type": "callout",
            "callout": {
                "rich_text": [
                    text(f"Auto-generated sitemap • Last updated: {stamp}"),
                ],
                "icon": {"type": "emoji", "emoji": SITEMAP_EMOJI},
                "color": "blue_background",
            },
        },
        {
            "object": "block",
            "type": "divider",
            "divider": {},
        },
    ]
