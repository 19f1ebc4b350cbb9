"""
Search pipeline: tool arguments → endpoint ordering → standard or detailed
search → JSON text payload.

Single entry point: run_search(arguments).
"""

import json
import random
from typing import Any, Mapping, Optional

from searxng_scraper.config import Settings
from searxng_scraper.search.aggregator import search_detailed
from searxng_scraper.search.clients import SearxngClient
from searxng_scraper.search.endpoints import select_endpoints
from searxng_scraper.search.errors import ConfigurationError
from searxng_scraper.search.retry import search_with_fallback
from searxng_scraper.search.schemas import QueryRequest, SearchResult


def to_query_request(arguments: Mapping[str, Any], settings: Settings) -> QueryRequest:
    """Build a QueryRequest from raw tool arguments; detailed is on only for the string "true"."""
    detailed = arguments.get("detailed")
    if isinstance(detailed, str):
        detailed = detailed.strip().lower() == "true"
    return QueryRequest(
        query=arguments["query"],
        time_range=arguments.get("time_range") or None,
        language=arguments.get("language") or settings.searxng_language or None,
        detailed=bool(detailed),
    )


def serialize_results(results: list[SearchResult]) -> str:
    return json.dumps([{"url": r.url, "summary": r.summary} for r in results])


def run_search(
    arguments: Mapping[str, Any],
    settings: Optional[Settings] = None,
    *,
    client: Optional[SearxngClient] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Run one search call and return the JSON array of {url, summary} objects.

    Args:
        arguments: {query, time_range?, language?, detailed?} as received from the caller.
        settings: Endpoint list, default language and retry tuning (read from env if omitted).
        client: Page fetcher; a SearxngClient built from settings if omitted.
        rng: Entropy source for endpoint shuffling.

    Raises:
        ConfigurationError: no endpoints are configured (raised before any network I/O).
        RetryBudgetExhausted: standard mode never got a results page back.
    """
    settings = settings or Settings()
    request = to_query_request(arguments, settings)

    endpoints = select_endpoints(settings.endpoints(), rng=rng)
    if not endpoints:
        raise ConfigurationError("SEARXNG_BASE_URL environment variable is not set.")

    client = client or SearxngClient(
        user_agent=settings.user_agent,
        timeout=settings.request_timeout_seconds,
    )

    if request.detailed:
        results = search_detailed(
            request,
            endpoints,
            client,
            max_servers=settings.detailed_max_servers,
            max_pages_per_server=settings.detailed_max_pages,
        )
    else:
        results = search_with_fallback(
            request,
            endpoints,
            client,
            max_retries=settings.max_retries,
            backoff_seconds=settings.retry_backoff_seconds,
        )
    return serialize_results(results)
