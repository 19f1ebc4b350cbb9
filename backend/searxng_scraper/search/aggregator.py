"""
Detailed search: several pages from several endpoints, merged and deduplicated.

Endpoints and pages are visited one at a time to stay under per-IP limits on
shared public instances.
"""

import logging
from dataclasses import dataclass, field

from searxng_scraper.search.clients import SearxngClient
from searxng_scraper.search.errors import ConfigurationError
from searxng_scraper.search.extractor import extract_results
from searxng_scraper.search.schemas import QueryRequest, SearchResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_SERVERS = 3
DEFAULT_MAX_PAGES_PER_SERVER = 3


@dataclass
class AggregatedResults:
    """Results in visit order, first occurrence of each URL wins."""

    results: list[SearchResult] = field(default_factory=list)
    _seen_urls: set[str] = field(default_factory=set)

    def merge(self, results: list[SearchResult]) -> int:
        added = 0
        for result in results:
            url = result.url.strip()
            if url and url not in self._seen_urls:
                self._seen_urls.add(url)
                self.results.append(result)
                added += 1
        return added


def _fetch_page(client: SearxngClient, endpoint: str, request: QueryRequest, page: int) -> list[SearchResult]:
    try:
        outcome = client.fetch(
            endpoint,
            request.query,
            page=page,
            time_range=request.time_range,
            language=request.language,
        )
    except Exception as e:
        logger.error("Error fetching page %d from %s: %s", page, endpoint, e)
        return []
    if not outcome.ok:
        logger.error("Error fetching page %d from %s: %s", page, endpoint, outcome.error)
        return []
    return extract_results(outcome.html)


def search_detailed(
    request: QueryRequest,
    endpoints: list[str],
    client: SearxngClient,
    max_servers: int = DEFAULT_MAX_SERVERS,
    max_pages_per_server: int = DEFAULT_MAX_PAGES_PER_SERVER,
) -> list[SearchResult]:
    """Fetch pages 1..max_pages_per_server from endpoints until max_servers have produced results."""
    if not endpoints:
        raise ConfigurationError("SEARXNG_BASE_URL environment variable is not set.")

    aggregate = AggregatedResults()
    successful_servers = 0
    for endpoint in endpoints:
        if successful_servers >= max_servers:
            break
        returned = 0
        for page in range(1, max_pages_per_server + 1):
            page_results = _fetch_page(client, endpoint, request, page)
            returned += len(page_results)
            added = aggregate.merge(page_results)
            logger.debug(
                "Page %d from %s: %d results, %d new", page, endpoint, len(page_results), added
            )
        if returned:
            successful_servers += 1
            logger.info(
                "Server %s contributed %d results (%d/%d servers)",
                endpoint, returned, successful_servers, max_servers,
            )
        else:
            logger.info("Server %s returned no results", endpoint)

    logger.info(
        "Detailed search collected %d unique results from %d servers",
        len(aggregate.results), successful_servers,
    )
    return aggregate.results
