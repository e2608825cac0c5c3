"""
Shared fixtures: settings and an in-memory Notion workspace.
"""

import json

import httpx
import pytest

from notion_sitemap.config import Settings, NotionSettings, SitemapSettings
from notion_sitemap.pipeline.client import NotionClient


class FakeNotion:
    """Serves a small Notion workspace through httpx.MockTransport."""

    def __init__(self):
        self.pages = {}
        self.children = {}
        self.failures = set()
        self.requests = []
        self.appended_batches = []
        self.deleted = []
        self._next_id = 0

    # Workspace setup

    def add_page(self, page_id, title, parent=None, prop="title"):
        self.pages[page_id] = {
            "object": "page",
            "id": page_id,
            "last_edited_time": "2026-10-01T12:00:00.000Z",
            "properties": {
                prop: {
                    "id": "title",
                    "type": "title",
                    "title": [{"type": "text", "plain_text": title}],
                },
            },
        }
        self.children.setdefault(page_id, [])
        if parent is not None:
            self.add_block(parent, {
                "id": page_id,
                "type": "child_page",
                "child_page": {"title": title},
            })

    def add_database(self, database_id, title, parent):
        self.add_block(parent, {
            "id": database_id,
            "type": "child_database",
            "child_database": {"title": title},
        })

    def add_paragraph(self, parent, content="text"):
        self._next_id += 1
        block_id = f"para-{self._next_id}"
        self.add_block(parent, {
            "id": block_id,
            "type": "paragraph",
            "paragraph": {"rich_text": [{"plain_text": content}]},
        })
        return block_id

    def add_block(self, parent, block):
        block = dict(block, object="block")
        self.children.setdefault(parent, []).append(block)

    def fail(self, method, path):
        """Make ``method path`` (path relative to /v1) answer with a 500."""
        self.failures.add((method, path))

    # Transport

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        method = request.method
        path = request.url.path[len("/v1"):]

        if (method, path) in self.failures:
            return self._error(500, "internal_server_error", "Something went wrong")

        parts = path.strip("/").split("/")

        if method == "GET" and parts[0] == "pages":
            page = self.pages.get(parts[1])
            if page is None:
                return self._error(404, "object_not_found", f"Could not find page with ID: {parts[1]}")
            return httpx.Response(200, json=page)

        if parts[0] == "blocks" and len(parts) == 3 and parts[2] == "children":
            block_id = parts[1]
            if method == "GET":
                return self._list_children(request, block_id)
            if method == "PATCH":
                body = json.loads(request.content)
                self.appended_batches.append(body["children"])
                results = []
                for block in body["children"]:
                    self._next_id += 1
                    created = dict(block, id=f"new-{self._next_id}")
                    self.children.setdefault(block_id, []).append(created)
                    results.append(created)
                return httpx.Response(200, json={"object": "list", "results": results})

        if method == "DELETE" and parts[0] == "blocks" and len(parts) == 2:
            block_id = parts[1]
            for blocks in self.children.values():
                for block in blocks:
                    if block["id"] == block_id:
                        blocks.remove(block)
                        self.deleted.append(block_id)
                        return httpx.Response(200, json=dict(block, archived=True))
            return self._error(404, "object_not_found", f"Could not find block with ID: {block_id}")

        return self._error(400, "invalid_request_url", "Invalid request URL.")

    def _list_children(self, request, block_id):
        blocks = self.children.get(block_id, [])
        page_size = int(request.url.params.get("page_size", 100))
        start = int(request.url.params.get("start_cursor", 0))
        end = start + page_size
        has_more = end < len(blocks)
        return httpx.Response(200, json={
            "object": "list",
            "results": blocks[start:end],
            "has_more": has_more,
            "next_cursor": str(end) if has_more else None,
        })

    def _error(self, status, code, message):
        return httpx.Response(status, json={
            "object": "error",
            "status": status,
            "code": code,
            "message": message,
        })


def make_settings(**sitemap):
    return Settings(
        notion=NotionSettings(
            NOTION_TOKEN="secret-token",
            NOTION_ROOT_PAGE_ID="root",
            NOTION_SITEMAP_PAGE_ID="sitemap",
        ),
        sitemap=SitemapSettings(**sitemap),
    )


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def notion():
    """Workspace: root -> (guides -> setup, faq), plus a tasks database."""
    fake = FakeNotion()
    fake.add_page("root", "Company Wiki")
    fake.add_page("guides", "Guides", parent="root")
    fake.add_page("setup", "Setup", parent="guides")
    fake.add_database("tasks", "Tasks", parent="root")
    fake.add_page("faq", "FAQ", parent="root", prop="Name")
    fake.add_paragraph("root", "Welcome")
    fake.add_page("sitemap", "Sitemap")
    return fake


@pytest.fixture
def client(settings, notion):
    return NotionClient(settings, transport=httpx.MockTransport(notion.handler))


@pytest.fixture
def settings_factory():
    return make_settings
