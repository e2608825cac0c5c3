"""
Sitemap errors.
"""


class SitemapError(Exception):
    """Raised when a sitemap run cannot complete."""


class ConfigurationError(SitemapError):
    """Required configuration is missing."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(
            "Missing required environment variables: " + ", ".join(self.missing)
        )
