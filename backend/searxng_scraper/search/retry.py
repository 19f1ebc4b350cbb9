"""
Standard-mode search: one results page, rotating through endpoints until one
returns at least one result or the retry budget runs out.
"""

import logging
import time
from typing import Callable, Optional

from searxng_scraper.search.clients import SearxngClient
from searxng_scraper.search.errors import ConfigurationError, RetryBudgetExhausted
from searxng_scraper.search.extractor import extract_results
from searxng_scraper.search.schemas import FetchOutcome, FetchStatus, QueryRequest, SearchResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 5
DEFAULT_BACKOFF_SECONDS = 2.0


def _attempt(client: SearxngClient, endpoint: str, request: QueryRequest) -> FetchOutcome:
    try:
        return client.fetch(
            endpoint,
            request.query,
            page=request.page,
            time_range=request.time_range,
            language=request.language,
        )
    except Exception as e:
        return FetchOutcome(status=FetchStatus.transport_error, endpoint=endpoint, page=request.page, error=e)


def search_with_fallback(
    request: QueryRequest,
    endpoints: list[str],
    client: SearxngClient,
    max_retries: int = DEFAULT_MAX_RETRIES,
    backoff_seconds: float = DEFAULT_BACKOFF_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> list[SearchResult]:
    """
    Try endpoints in the given (already shuffled) order.

    The first attempt is followed by up to max_retries more, each after a
    fixed backoff. The cursor advances to the next endpoint while more remain,
    then keeps retrying the last one. Returns the last extracted result set,
    which may be empty; raises RetryBudgetExhausted only if no attempt ever
    got a results page back.
    """
    if not endpoints:
        raise ConfigurationError("SEARXNG_BASE_URL environment variable is not set.")

    index = 0
    retries = 0
    last_results: Optional[list[SearchResult]] = None
    last_error: Optional[Exception] = None

    while True:
        endpoint = endpoints[index]
        outcome = _attempt(client, endpoint, request)
        if outcome.ok:
            last_results = extract_results(outcome.html)
            if last_results:
                logger.info(
                    "Got %d results from %s after %d retries", len(last_results), endpoint, retries
                )
                return last_results
            logger.info("No results extracted from %s", endpoint)
        else:
            last_error = outcome.error
            logger.error("Error fetching results from %s: %s", endpoint, outcome.error)

        if retries >= max_retries:
            break
        sleep(backoff_seconds)
        if index + 1 < len(endpoints):
            index += 1
            logger.info("Trying next base URL: %s", endpoints[index])
        retries += 1

    if last_results is None:
        raise RetryBudgetExhausted(request.query, retries + 1, last_error)
    logger.warning('Retry budget exhausted for "%s", returning last result set', request.query)
    return last_results
