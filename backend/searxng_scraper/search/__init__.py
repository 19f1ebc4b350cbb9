"""Search over public SearXNG instances: fetch, retry, aggregate, extract."""

from .aggregator import AggregatedResults, search_detailed
from .clients import SearxngClient
from .endpoints import select_endpoints
from .errors import (
    BotRedirectError,
    ConfigurationError,
    RetryBudgetExhausted,
    SearchError,
    TransportError,
)
from .extractor import extract_results
from .pipeline import run_search, serialize_results, to_query_request
from .retry import search_with_fallback
from .schemas import FetchOutcome, FetchStatus, QueryRequest, SearchResult, TimeRange

__all__ = [
    "AggregatedResults",
    "BotRedirectError",
    "ConfigurationError",
    "FetchOutcome",
    "FetchStatus",
    "QueryRequest",
    "RetryBudgetExhausted",
    "SearchError",
    "SearchResult",
    "SearxngClient",
    "TimeRange",
    "TransportError",
    "extract_results",
    "run_search",
    "search_detailed",
    "search_with_fallback",
    "select_endpoints",
    "serialize_results",
    "to_query_request",
]
