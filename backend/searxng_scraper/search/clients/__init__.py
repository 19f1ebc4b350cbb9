"""Search clients: SearXNG HTML scraper."""

from .searxng import SearxngClient, build_search_url, find_client_asset

__all__ = ["SearxngClient", "build_search_url", "find_client_asset"]
