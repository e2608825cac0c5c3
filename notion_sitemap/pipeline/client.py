"""
Pipeline - Notion API Client

Thin async wrapper over the Notion REST endpoints used by the sitemap.
"""

import httpx
from typing import Optional, List, Dict, Any

from notion_sitemap.config import get_settings


def error_message(error: Exception) -> str:
    """Best human-readable message for a failed Notion call."""
    if isinstance(error, httpx.HTTPStatusError):
        try:
            body = error.response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return f"{error.response.status_code} {body['message']}"
        return f"{error.response.status_code} {error.response.reason_phrase}"
    return str(error) or error.__class__.__name__


class NotionClient:
    """Issues authenticated requests against the Notion API."""

    def __init__(self, settings=None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings or get_settings()
        self.base_url = self.settings.notion.api_base_url.rstrip("/")
        self.headers = {
            "Notion-Version": self.settings.notion.notion_version,
            "Content-Type": "application/json",
        }
        if self.settings.notion.token:
            self.headers["Authorization"] = f"Bearer {self.settings.notion.token}"
        self.timeout = self.settings.notion.timeout_seconds
        self._transport = transport

    async def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        async with httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            response = await client.request(method, path, **kwargs)
            response.raise_for_status()
            try:
                return response.json()
            except ValueError as e:
                raise httpx.DecodingError(
                    f"Invalid JSON from {method} {path}: {e}",
                    request=response.request,
                ) from e

    async def retrieve_page(self, page_id: str) -> Dict[str, Any]:
        return await self._request("GET", f"/pages/{page_id}")

    async def list_block_children(
        self,
        block_id: str,
        start_cursor: Optional[str] = None,
        page_size: int = 100,
    ) -> Dict[str, Any]:
        """
        List one page of a block's children.

        Returns:
            Raw list response with ``results``, ``has_more`` and ``next_cursor``
        """
        params = {"page_size": page_size}
        if start_cursor:
            params["start_cursor"] = start_cursor
        return await self._request("GET", f"/blocks/{block_id}/children", params=params)

    async def delete_block(self, block_id: str) -> Dict[str, Any]:
        return await self._request("DELETE", f"/blocks/{block_id}")

    async def append_block_children(
        self,
        block_id: str,
        children: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        return await self._request(
            "PATCH",
            f"/blocks/{block_id}/children",
            json={"children": children},
        )
