"""
Schemas - Page Models

Pydantic models for the sitemap tree.
"""

from pydantic import BaseModel
from typing import List, Literal, Optional


class SitemapNode(BaseModel):
    """Sitemap tree node (page or database)."""
    id: str
    title: str
    url: str
    type: Literal["page", "database"] = "page"
    last_edited: Optional[str] = None
    depth: int = 0
    children: List["SitemapNode"] = []


# Allow recursive model
SitemapNode.model_rebuild()
