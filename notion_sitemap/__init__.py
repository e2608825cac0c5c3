"""
Notion Sitemap

Mirrors a Notion page hierarchy into an outline on a sitemap page.
"""

__version__ = "0.1.0"
