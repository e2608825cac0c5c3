"""
Notion Sitemap - Configuration

Pydantic Settings for all configuration via environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional, Literal


class NotionSettings(BaseSettings):
    """Notion API configuration."""
    token: Optional[str] = Field(None, alias="NOTION_TOKEN")
    root_page_id: Optional[str] = Field(None, alias="NOTION_ROOT_PAGE_ID")
    sitemap_page_id: Optional[str] = Field(None, alias="NOTION_SITEMAP_PAGE_ID")
    api_base_url: str = Field("https://api.notion.com/v1", alias="NOTION_API_BASE_URL")
    notion_version: str = Field("2022-06-28", alias="NOTION_VERSION")
    timeout_seconds: float = Field(30.0, alias="NOTION_TIMEOUT_SECONDS")

    model_config = {"env_prefix": "", "extra": "ignore", "populate_by_name": True}


class SitemapSettings(BaseSettings):
    """Tree traversal and rendering configuration."""
    max_depth: int = Field(4, alias="SITEMAP_MAX_DEPTH")
    page_size: int = Field(100, alias="SITEMAP_PAGE_SIZE")
    batch_size: int = Field(100, alias="SITEMAP_BATCH_SIZE")
    timestamp_format: Optional[str] = Field(None, alias="SITEMAP_TIMESTAMP_FORMAT")

    model_config = {"env_prefix": "", "extra": "ignore", "populate_by_name": True}


class MCPSettings(BaseSettings):
    """MCP server configuration."""
    transport: Literal["sse", "stdio"] = Field("stdio", alias="MCP_TRANSPORT")
    port: int = Field(8080, alias="MCP_PORT")
    host: str = Field("0.0.0.0", alias="MCP_HOST")

    model_config = {"env_prefix": "", "extra": "ignore", "populate_by_name": True}


class LogSettings(BaseSettings):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", alias="LOG_LEVEL"
    )

    model_config = {"env_prefix": "", "extra": "ignore", "populate_by_name": True}


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""
    notion: NotionSettings = Field(default_factory=NotionSettings)
    sitemap: SitemapSettings = Field(default_factory=SitemapSettings)
    mcp: MCPSettings = Field(default_factory=MCPSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = {"env_prefix": "", "extra": "ignore"}


def get_settings() -> Settings:
    """Load settings from environment variables."""
    from dotenv import load_dotenv
    load_dotenv()
    return Settings()
