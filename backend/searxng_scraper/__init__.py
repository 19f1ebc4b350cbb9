"""SearXNG scraper: resilient search over public SearXNG instances."""

__version__ = "1.0.6"
